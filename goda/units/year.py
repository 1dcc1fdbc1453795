"""Proleptic Gregorian year.

This module provides the Year type, a signed integer with leap-year
logic and ISO-8601 year formatting.
"""

from __future__ import annotations

from goda._internal.calendar import days_in_year, is_leap_year


class Year(int):
    """A proleptic Gregorian year.

    Year is an ``int`` subclass, so it takes part in ordinary integer
    arithmetic (which returns plain ints). Year 0 exists algorithmically
    (it is 1 BCE) but also serves as the "unset" year.

    Examples:
        >>> Year(2024).is_leap_year()
        True
        >>> Year(2023).length()
        365
        >>> str(Year(987))
        '0987'
        >>> str(Year(-44))
        '-0044'
        >>> str(Year(12345))
        '12345'
    """

    __slots__ = ()

    def is_zero(self) -> bool:
        """Return True for the unset year 0."""
        return self == 0

    def is_leap_year(self) -> bool:
        """Return True if this year is a leap year."""
        return is_leap_year(self)

    def length(self) -> int:
        """Return the number of days in this year (365 or 366)."""
        return days_in_year(self)

    def __str__(self) -> str:
        v = int(self)
        if 0 <= v <= 9999:
            return f"{v:04d}"
        if -9999 <= v < 0:
            return f"-{-v:04d}"
        return str(v)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return int.__format__(self, format_spec)

    def __repr__(self) -> str:
        return f"Year({int(self)})"


__all__ = ["Year"]
