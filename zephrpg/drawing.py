"""Lines, rectangles and bitmaps drawn onto a pixel display."""

import struct

from .mathutil import abs_int
from .vga import get_color


def _plot_line_low(display, x0, y0, x1, y1, color):
    dx = x1 - x0
    dy = y1 - y0
    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy
    d = 2 * dy - dx
    y = y0
    for x in range(x0, x1 + 1):
        display.set_pixel(x, y, color)
        if d > 0:
            y += yi
            d += 2 * (dy - dx)
        else:
            d += 2 * dy


def _plot_line_high(display, x0, y0, x1, y1, color):
    dx = x1 - x0
    dy = y1 - y0
    xi = 1
    if dx < 0:
        xi = -1
        dx = -dx
    d = 2 * dx - dy
    x = x0
    for y in range(y0, y1 + 1):
        display.set_pixel(x, y, color)
        if d > 0:
            x += xi
            d += 2 * (dx - dy)
        else:
            d += 2 * dx


def draw_line(display, x0, y0, x1, y1, color) -> None:
    """Draw a line between two points with Bresenham's algorithm."""
    if abs_int(y1 - y0) < abs_int(x1 - x0):
        if x0 > x1:
            _plot_line_low(display, x1, y1, x0, y0, color)
        else:
            _plot_line_low(display, x0, y0, x1, y1, color)
    elif y0 > y1:
        _plot_line_high(display, x1, y1, x0, y0, color)
    else:
        _plot_line_high(display, x0, y0, x1, y1, color)


def draw_rect(display, x0, y0, width, height, color) -> None:
    """Draw the outline of a rectangle; the far edges are inclusive."""
    draw_line(display, x0, y0, x0 + width, y0, color)
    draw_line(display, x0, y0 + height, x0 + width, y0 + height, color)
    draw_line(display, x0, y0, x0, y0 + height, color)
    draw_line(display, x0 + width, y0, x0 + width, y0 + height, color)


def draw_rect_fill(display, x0, y0, width, height, border_color, border_weight, fill_color) -> None:
    """Fill a rectangle, painting a border of ``border_weight`` pixels."""
    for y in range(y0, y0 + height):
        inner_row = y0 + border_weight <= y < y0 + height - border_weight
        for x in range(x0, x0 + width):
            inner = inner_row and x0 + border_weight <= x < x0 + width - border_weight
            display.set_pixel(x, y, fill_color if inner else border_color)


def draw_image(display, x0, y0, bmp) -> None:
    """Draw a bottom-up 24-bit BMP with its top-left corner at (x0, y0)."""
    try:
        (offset,) = struct.unpack_from("<I", bmp, 10)
        width, height = struct.unpack_from("<ii", bmp, 18)
    except struct.error as exc:
        raise ValueError("bitmap header is truncated") from exc
    data = memoryview(bytes(bmp))
    row_size = 3 * width if width > 0 else 0
    padding = -row_size % 4
    position = offset
    for y in range(height):
        row = data[position : position + row_size]
        if len(row) < row_size:
            raise ValueError("bitmap pixel data is truncated")
        pixels = zip(row[0::3], row[1::3], row[2::3])
        for x, (b, g, r) in enumerate(pixels):
            display.set_pixel(x0 + x, y0 + (height - y) - 1, get_color(r, g, b))
        position += row_size + padding