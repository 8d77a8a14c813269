"""Blue screen showing the saved registers after a CPU exception."""

from collections.abc import Sequence

from .vga import Screen, get_color

_REGISTER_COUNT = 15


def dump_core(screen: Screen, registers: Sequence[int]) -> None:
    """Draw the crash screen; ``registers`` holds CPSR, R0 to R12, then LR."""
    if len(registers) < _REGISTER_COUNT:
        raise ValueError(f"expected {_REGISTER_COUNT} saved registers, got {len(registers)}")
    screen.vga.fill(get_color(0, 0, 255))
    chars = screen.chars
    chars.clear()
    chars.printf(25, 26, "The Computer Pooped its pants :(")
    chars.printf(25, 28, "Sorry for that.")
    for i, value in enumerate(registers[1:14]):
        chars.printf(4, 16 + i * 2, "R%d: 0x%p", i, value)
    chars.printf(4, 42, "LR: 0x%p", registers[14] - 4)
    chars.printf(4, 44, "CPSR: 0x%p", registers[0])