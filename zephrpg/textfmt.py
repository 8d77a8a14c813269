"""printf-style formatting shared by the serial console and the character display."""

from collections.abc import Iterable, Iterator

_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _decimal_digits(value: int) -> str:
    """Render a 32-bit integer the way the firmware does, digit by truncated digit."""
    value = _to_int32(value)
    digits = []
    while True:
        quotient = abs(value) // 10 * (-1 if value < 0 else 1)
        remainder = value - quotient * 10
        digits.append(chr((0x30 + remainder) & 0xFF))
        value = quotient
        if not value:
            break
    return "".join(reversed(digits))


def _iter_formatted(text: str, args: Iterable) -> Iterator[str]:
    pending = iter(args)

    def next_arg():
        try:
            return next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {text!r}") from None

    chars = iter(text)
    for c in chars:
        if c == "\0":
            return
        if c != "%":
            yield c
            continue
        modifier = next(chars, "\0")
        if modifier == "\0":
            return
        if modifier in "dul":
            yield from _decimal_digits(int(next_arg()))
        elif modifier == "s":
            string = str(next_arg()).partition("\0")[0]
            if string:
                yield from string
                # The firmware emits the terminating NUL after a non-empty string.
                yield "\0"
        elif modifier in "xp":
            digits = f"{int(next_arg()) & _MASK32:08X}"
            if modifier == "x":
                digits = digits.lstrip("0") or "0"
            yield from digits
        elif modifier == "%":
            yield "%"
        # 'f' and unknown modifiers print nothing and consume no argument.


def format_text(text: str, *args) -> str:
    """Format ``text`` with ``%d %u %l %s %x %p %%`` conversions."""
    return "".join(_iter_formatted(text, args))


def parse_int(text: str, max_length: int) -> int:
    """Read a decimal number from the start of ``text``, stopping at a space."""
    total = 0
    for c in text[: max(max_length, 0)]:
        if c in " \0":
            break
        total = total * 10 + ((ord(c) - 0x30) & 0xFF)
    return _to_int32(total)