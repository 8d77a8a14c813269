"""Pixel and character frame buffers of the VGA display."""

from array import array
from dataclasses import dataclass, field

from .textfmt import format_text

VGA_BUFFER_SIZE = 1 << 17
CHAR_BUFFER_SIZE = 1 << 13

_VGA_ROW_SHIFT = 9
_VGA_ROW_STRIDE = 1 << _VGA_ROW_SHIFT
_CHAR_ROW_SHIFT = 7
_CHAR_ROW_STRIDE = 1 << _CHAR_ROW_SHIFT


def get_color(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into an RGB565 colour."""
    return (((r >> 3) << 11) + ((g >> 2) << 5) + (b >> 3)) & 0xFFFF


def _new_pixel_buffer() -> array:
    return array("H", [0]) * VGA_BUFFER_SIZE


class VgaDisplay:
    """Pixel display with a front buffer shown and a back buffer drawn into."""

    def __init__(self, width: int = 320, height: int = 240):
        self.width = width
        self.height = height
        self.front = _new_pixel_buffer()
        self.back = self.front

    def set_backbuffer(self, buffer) -> None:
        if len(buffer) < VGA_BUFFER_SIZE:
            raise ValueError(f"pixel buffer must hold {VGA_BUFFER_SIZE} entries")
        self.back = buffer

    def switch_buffer(self) -> None:
        self.front, self.back = self.back, self.front

    def is_double_buffered(self) -> bool:
        return self.back is not self.front

    def _index(self, x: int, y: int) -> int:
        index = (y << _VGA_ROW_SHIFT) + x if y >= 0 else -1
        if not 0 <= x < _VGA_ROW_STRIDE or not 0 <= index < len(self.back):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        return index

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self.back[self._index(x, y)] = color & 0xFFFF

    def get_pixel(self, x: int, y: int) -> int:
        return self.back[self._index(x, y)]

    def fill(self, color: int) -> None:
        row = [color & 0xFFFF] * self.width
        for y in range(self.height):
            start = y << _VGA_ROW_SHIFT
            self.back[start : start + self.width] = array(self.back.typecode, row) if isinstance(self.back, array) else row


class CharDisplay:
    """Character overlay written through a cursor."""

    def __init__(self, columns: int = 80, rows: int = 60):
        self.columns = columns
        self.rows = rows
        self.front = [" "] * CHAR_BUFFER_SIZE
        self.back = self.front
        self.x = 0
        self.y = 0

    @property
    def cursor(self) -> tuple[int, int]:
        return self.x, self.y

    def set_backbuffer(self, buffer) -> None:
        if len(buffer) < CHAR_BUFFER_SIZE:
            raise ValueError(f"character buffer must hold {CHAR_BUFFER_SIZE} entries")
        self.back = buffer

    def switch_buffer(self) -> None:
        self.front, self.back = self.back, self.front

    def is_double_buffered(self) -> bool:
        return self.back is not self.front

    def set_cursor(self, x: int, y: int) -> None:
        self.x = x & 0xFF
        self.y = y & 0xFF

    def put(self, c: str) -> None:
        if len(c) != 1:
            raise ValueError("put takes a single character")
        index = (self.y << _CHAR_ROW_SHIFT) + self.x
        if index >= len(self.front):
            raise IndexError(f"cursor ({self.x}, {self.y}) is outside the buffer")
        self.front[index] = c
        self.x = (self.x + 1) & 0xFF

    def printf(self, x: int, y: int, text: str, *args) -> None:
        self.set_cursor(x, y)
        for c in format_text(text, *args):
            self.put(c)

    def clear(self) -> None:
        for y in range(self.rows):
            self.set_cursor(0, y)
            for _ in range(self.columns):
                self.put(" ")

    def _index(self, x: int, y: int) -> int:
        index = (y << _CHAR_ROW_SHIFT) + x if y >= 0 else -1
        if not 0 <= x < _CHAR_ROW_STRIDE or not 0 <= index < len(self.front):
            raise IndexError(f"position ({x}, {y}) is outside the buffer")
        return index

    def char_at(self, x: int, y: int) -> str:
        return self.front[self._index(x, y)]

    def row_text(self, y: int) -> str:
        start = self._index(0, y)
        return "".join(self.front[start : start + self.columns])


@dataclass
class Screen:
    """The pixel display together with its character overlay."""

    vga: VgaDisplay = field(default_factory=VgaDisplay)
    chars: CharDisplay = field(default_factory=CharDisplay)