"""Slash-command console read from the serial port."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .uart import DELETE, Uart

MAX_COMMANDS = 64
MAX_PARAMS = 8
MAX_NAME_LENGTH = 31
MAX_TOKEN_LENGTH = 32
BUFFER_SIZE = 256


@dataclass(frozen=True)
class _Command:
    name: str
    num_param: int
    function: Callable[[list[str]], None]


def _take(line: str, index: int, stop_at_space: bool) -> tuple[str, int]:
    start = index
    while index < len(line) and index - start < MAX_TOKEN_LENGTH:
        if stop_at_space and line[index] == " ":
            break
        index += 1
    return line[start:index], index


class Console:
    """Collects a line from the serial port and runs the matching command."""

    def __init__(self, uart: Uart):
        self._uart = uart
        self._commands: list[_Command] = []
        self._buffer: list[str] = []
        uart.set_callback(self.receive)
        self.add_command("help", 0, lambda params: self.print_help())
        uart.enable_echo()

    @property
    def commands(self) -> tuple[str, ...]:
        return tuple(command.name for command in self._commands)

    def add_command(self, name: str, num_param: int, function: Callable[[Sequence[str]], None]) -> None:
        """Register ``/name`` taking ``num_param`` parameters."""
        if len(self._commands) >= MAX_COMMANDS:
            raise OverflowError(f"at most {MAX_COMMANDS} commands can be registered")
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(f"command name longer than {MAX_NAME_LENGTH} characters")
        if not 0 <= num_param <= MAX_PARAMS:
            raise ValueError(f"a command takes between 0 and {MAX_PARAMS} parameters")
        self._commands.append(_Command(name, num_param, function))

    def receive(self, c: str) -> None:
        """Handle one received character; a newline runs the buffered line."""
        if c == DELETE:
            if self._buffer:
                self._buffer.pop()
        elif c == "\n":
            line = "".join(self._buffer)
            self._buffer.clear()
            self.parse(line)
        elif len(self._buffer) < BUFFER_SIZE - 1:
            self._buffer.append(c)

    def parse(self, line: str) -> bool:
        """Run the command in ``line``; return True if one was called."""
        for terminator in "\0\n":
            line = line.partition(terminator)[0]
        if not line.startswith("/"):
            self._uart.printf("Invalid.\n")
            return False
        name, index = _take(line, 1, stop_at_space=True)
        matches = [command for command in self._commands if command.name == name]
        if not matches:
            self._uart.printf("Invalid command.\n")
            return False
        command = matches[-1]
        params: list[str] = []
        for i in range(command.num_param):
            if index >= len(line):
                self._uart.printf("Not enough parameters. Expected: %d Got: %d\n", command.num_param, i)
                return False
            last = i == command.num_param - 1
            value, index = _take(line, index + 1, stop_at_space=not last)
            params.append(value)
        command.function(params)
        return True

    def print_help(self) -> None:
        for command in self._commands[1:]:
            self._uart.printf("/%s | num param: %d\n", command.name, command.num_param)