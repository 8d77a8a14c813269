"""Integer helpers used by the drawing and HUD code."""


def abs_int(a: int) -> int:
    """Absolute value."""
    return -a if a < 0 else a


def pow_int(base: int, exp: int) -> int:
    """``base`` raised to a non-negative integer ``exp``."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exp):
        result *= base
    return result


def map_int(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly map ``x`` between ranges, truncating toward zero."""
    if in_max == in_min:
        raise ZeroDivisionError("input range is empty")
    numerator = (x - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min