"""Serial port with echo, receive callback and printf output."""

from collections import deque
from collections.abc import Callable

from .interrupts import InterruptController
from .textfmt import format_text

UART_IRQ = 80
DELETE = "\x7f"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError("expected a single character")


class Uart:
    """Serial port; transmitted text accumulates in ``output``."""

    def __init__(self, controller: InterruptController | None = None):
        self.controller = controller
        self.echo = True
        self._callback: Callable[[str], None] | None = None
        self._rx: deque[str] = deque()
        self._tx: list[str] = []
        if controller is not None:
            controller.config_interrupt(UART_IRQ, self._isr)

    @property
    def output(self) -> str:
        return "".join(self._tx)

    def set_callback(self, callback: Callable[[str], None] | None) -> None:
        self._callback = callback

    def put(self, c: str) -> None:
        """Send one character, turning DEL into an erase on the terminal."""
        _check_char(c)
        if c == DELETE:
            self._tx.extend("\b \b")
        else:
            self._tx.append(c)

    def puts(self, s: str) -> None:
        for c in s:
            self.write(c)

    def printf(self, text: str, *args) -> None:
        for c in format_text(text, *args):
            self.put(c)

    def write(self, c: str) -> None:
        _check_char(c)
        self._tx.append(c)

    def enable_echo(self) -> None:
        self.echo = True

    def disable_echo(self) -> None:
        self.echo = False

    def receive(self, c: str) -> None:
        """Characters arrive on the line; each raises a receive interrupt."""
        for ch in c:
            self._rx.append(ch)
            if self.controller is not None:
                self.controller.irq_handler(UART_IRQ)
            else:
                self._isr()

    def _read_char(self) -> str:
        return self._rx.popleft() if self._rx else "\0"

    def _isr(self) -> None:
        c = self._read_char()
        if self.echo:
            self.put(c)
        if self._callback is not None:
            self._callback(c)