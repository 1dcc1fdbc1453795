"""Month-of-year enumeration.

This module provides the Month enum with month-length and
day-of-year helpers for the proleptic Gregorian calendar.
"""

from __future__ import annotations

from enum import IntEnum


class Month(IntEnum):
    """A month-of-year, JANUARY (1) through DECEMBER (12).

    Where a month is optional (the month of a zero date), it is
    represented as None.

    Examples:
        >>> Month.FEBRUARY.length(True)
        29
        >>> Month.MARCH.first_day_of_year(False)
        60
        >>> str(Month.MARCH)
        'March'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def max_days(self) -> int:
        """Return the maximum length of this month, counting February as 29."""
        if self is Month.FEBRUARY:
            return 29
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31

    def min_days(self) -> int:
        """Return the minimum length of this month, counting February as 28."""
        if self is Month.FEBRUARY:
            return 28
        return self.max_days()

    def length(self, is_leap: bool) -> int:
        """Return the length of this month.

        Args:
            is_leap: Whether the year is a leap year.

        Returns:
            28 or 29 for February, otherwise 30 or 31.
        """
        if self is Month.FEBRUARY:
            return 29 if is_leap else 28
        return self.max_days()

    def first_day_of_year(self, is_leap: bool) -> int:
        """Return the day-of-year of the first day of this month.

        Args:
            is_leap: Whether the year is a leap year.

        Returns:
            Day of year (1-336).

        Examples:
            >>> Month.JANUARY.first_day_of_year(True)
            1
            >>> Month.DECEMBER.first_day_of_year(True)
            336
        """
        leap = 1 if is_leap else 0
        return _FIRST_DAY_OF_YEAR[self] + (leap if self > Month.FEBRUARY else 0)

    def plus(self, months: int) -> Month:
        """Return the month that is the given number of months later, wrapping around.

        Examples:
            >>> Month.NOVEMBER.plus(3)
            <Month.FEBRUARY: 2>
        """
        return Month((self - 1 + months) % 12 + 1)

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_FIRST_DAY_OF_YEAR: dict[Month, int] = {
    Month.JANUARY: 1,
    Month.FEBRUARY: 32,
    Month.MARCH: 60,
    Month.APRIL: 91,
    Month.MAY: 121,
    Month.JUNE: 152,
    Month.JULY: 182,
    Month.AUGUST: 213,
    Month.SEPTEMBER: 244,
    Month.OCTOBER: 274,
    Month.NOVEMBER: 305,
    Month.DECEMBER: 335,
}


__all__ = ["Month"]
