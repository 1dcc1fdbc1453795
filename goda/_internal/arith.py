"""Integer helpers with explicit rounding and overflow semantics.

Python integers never overflow, so signed 64-bit overflow is detected by
range checks against INT64_MIN/INT64_MAX.

This module is not part of the public API.
"""

from __future__ import annotations

from goda._internal.constants import INT64_MAX, INT64_MIN
from goda.errors import ArithmeticOverflowError


def floor_div(x: int, y: int) -> int:
    """Return the quotient rounded toward negative infinity.

    Examples:
        >>> floor_div(-1, 7)
        -1
        >>> floor_div(7, 7)
        1
    """
    return x // y


def floor_mod(x: int, y: int) -> int:
    """Return the remainder with the sign of the divisor.

    Examples:
        >>> floor_mod(-1, 7)
        6
    """
    return x % y


def trunc_div(x: int, y: int) -> int:
    """Return the quotient rounded toward zero.

    Examples:
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(-7, -2)
        3
    """
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def in_int64(value: int) -> bool:
    """Return True if value is representable as a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def add_exact(x: int, y: int) -> int:
    """Add two int64 values, raising on signed overflow.

    Raises:
        ArithmeticOverflowError: If the sum does not fit in 64 bits.

    Examples:
        >>> add_exact(1, 2)
        3
        >>> add_exact(2**63 - 1, 1)
        Traceback (most recent call last):
        ...
        goda.errors.ArithmeticOverflowError: goda: arithmetic overflow
    """
    r = x + y
    if not in_int64(r):
        raise ArithmeticOverflowError()
    return r


def mul_exact(x: int, y: int) -> int:
    """Multiply two int64 values, raising on signed overflow.

    Raises:
        ArithmeticOverflowError: If the product does not fit in 64 bits.
    """
    r = x * y
    if not in_int64(r):
        raise ArithmeticOverflowError()
    return r


def compare_ints(a: int, b: int) -> int:
    """Three-way comparison returning -1, 0 or 1.

    Examples:
        >>> compare_ints(-5, 3), compare_ints(3, 3), compare_ints(7, 3)
        (-1, 0, 1)
    """
    return (a > b) - (a < b)


__all__ = [
    "floor_div",
    "floor_mod",
    "trunc_div",
    "in_int64",
    "add_exact",
    "mul_exact",
    "compare_ints",
]
