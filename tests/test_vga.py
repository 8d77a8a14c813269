from array import array

import pytest

from zephrpg.vga import (
    CHAR_BUFFER_SIZE,
    VGA_BUFFER_SIZE,
    CharDisplay,
    Screen,
    VgaDisplay,
    get_color,
)


def test_white_and_black():
    assert get_color(255, 255, 255) == 0xFFFF
    assert get_color(0, 0, 0) == 0


def test_channels_are_disjoint_and_complete():
    red, green, blue = get_color(255, 0, 0), get_color(0, 255, 0), get_color(0, 0, 255)
    assert red & green == 0 and red & blue == 0 and green & blue == 0
    assert red | green | blue == get_color(255, 255, 255)


@pytest.mark.parametrize("channel", [0, 1, 2])
def test_channels_monotonic(channel):
    values = []
    for v in range(256):
        rgb = [0, 0, 0]
        rgb[channel] = v
        values.append(get_color(*rgb))
    assert values == sorted(values)


def test_single_buffered_by_default():
    display = VgaDisplay()
    assert display.is_double_buffered() is False
    display.set_backbuffer(array("H", [0]) * VGA_BUFFER_SIZE)
    assert display.is_double_buffered() is True


def test_switch_buffer_shows_drawn_pixels():
    display = VgaDisplay()
    display.set_backbuffer(array("H", [0]) * VGA_BUFFER_SIZE)
    color = get_color(255, 0, 0)
    display.set_pixel(3, 4, color)
    assert display.get_pixel(3, 4) == color
    display.switch_buffer()
    assert display.front[(4 << 9) + 3] == color
    assert display.get_pixel(3, 4) == 0


def test_fill_covers_visible_area_only():
    display = VgaDisplay(width=20, height=10)
    color = get_color(0, 255, 0)
    display.fill(color)
    assert display.get_pixel(0, 0) == color
    assert display.get_pixel(19, 9) == color
    assert display.get_pixel(20, 0) == 0
    assert display.get_pixel(0, 10) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (512, 0), (0, 256), (0, -1)])
def test_pixel_out_of_buffer(x, y):
    with pytest.raises(IndexError):
        VgaDisplay().set_pixel(x, y, 1)


def test_short_backbuffer_rejected():
    with pytest.raises(ValueError):
        VgaDisplay().set_backbuffer([0] * 10)


def test_printf_writes_row():
    chars = CharDisplay()
    chars.printf(2, 5, "Vida: %d/%d", 50, 100)
    assert chars.row_text(5)[2:].startswith("Vida: 50/100")
    assert chars.char_at(2, 5) == "V"
    assert chars.cursor == (2 + len("Vida: 50/100"), 5)


def test_put_advances_and_wraps_cursor():
    chars = CharDisplay()
    chars.set_cursor(255, 1)
    chars.put("x")
    assert chars.cursor == (0, 1)


def test_put_rejects_long_text():
    with pytest.raises(ValueError):
        CharDisplay().put("ab")


def test_put_outside_buffer():
    chars = CharDisplay()
    chars.set_cursor(0, 100)
    with pytest.raises(IndexError):
        chars.put("a")


def test_clear_blanks_every_row():
    chars = CharDisplay()
    chars.printf(0, 0, "hello")
    chars.printf(10, 59, "end")
    chars.clear()
    blank = " " * chars.columns
    assert all(chars.row_text(y) == blank for y in range(chars.rows))
    assert chars.cursor == (chars.columns, chars.rows - 1)


def test_char_double_buffer():
    chars = CharDisplay()
    assert chars.is_double_buffered() is False
    other = [" "] * CHAR_BUFFER_SIZE
    chars.set_backbuffer(other)
    assert chars.is_double_buffered() is True
    chars.switch_buffer()
    assert chars.front is other


def test_screen_holds_both_displays():
    screen = Screen()
    screen.vga.set_pixel(1, 1, 7)
    screen.chars.printf(0, 0, "ok")
    assert screen.vga.get_pixel(1, 1) == 7
    assert screen.chars.row_text(0).startswith("ok")