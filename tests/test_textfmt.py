import pytest

from zephrpg.textfmt import format_text, parse_int


def test_decimal_arguments():
    assert format_text("%d + %d = %d\n", 1, 2, 3) == "1 + 2 = 3\n"


@pytest.mark.parametrize("modifier", ["d", "u", "l"])
def test_decimal_modifiers(modifier):
    assert format_text("%" + modifier, 123456) == "123456"


def test_decimal_zero():
    assert format_text("<%d>", 0) == "<0>"


@pytest.mark.parametrize("value", [0, 1, 0x1F, 0xABCDEF, 0x7FFFFFFF])
def test_hex_round_trip(value):
    result = format_text("%x", value)
    assert int(result, 16) == value
    assert result == "0" or not result.startswith("0")


@pytest.mark.parametrize("value", [0, 1, 0x1F, 0xABCDEF])
def test_pointer_is_eight_digits(value):
    result = format_text("%p", value)
    assert len(result) == 8
    assert int(result, 16) == value


def test_hex_is_uppercase():
    assert format_text("%x", 0xABC) == "ABC"


def test_hex_of_negative_wraps_to_32_bits():
    assert int(format_text("%x", -1), 16) == 2**32 - 1


def test_string_emits_terminator():
    assert format_text("[%s]", "ab") == "[ab\0]"


def test_empty_string_emits_nothing():
    assert format_text("[%s]", "") == "[]"


def test_percent_and_float():
    assert format_text("100%%") == "100%"
    assert format_text("%f%d", 7) == "7"


def test_unknown_modifier_and_trailing_percent():
    assert format_text("a%qb") == "ab"
    assert format_text("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_text("%d %d", 1)


@pytest.mark.parametrize(
    "text, max_length, expected",
    [("123", 32, 123), ("12 34", 32, 12), ("98765", 3, 987), ("", 32, 0)],
)
def test_parse_int(text, max_length, expected):
    assert parse_int(text, max_length) == expected


def test_parse_int_round_trip():
    for number in range(0, 2000, 37):
        assert parse_int(str(number), 32) == number