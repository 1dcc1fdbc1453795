"""Calendar utilities for Goda.

This module provides internal functions for proleptic-Gregorian calendar
calculations: the leap-year rule, month lengths, and conversion between
(year, month, day) triples and Unix epoch days (days since 1970-01-01).

The epoch-day conversion uses the 400-year-cycle formula with the year
rebased to start on March 1, so that the leap day is the last day of the
shifted year.

This module is not part of the public API.
"""

from __future__ import annotations

from goda._internal.arith import trunc_div
from goda._internal.constants import DAYS_0000_TO_1970, DAYS_IN_MONTH, DAYS_PER_CYCLE


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert a date to days since 1970-01-01.

    Args:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The epoch day; negative for dates before 1970.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2024, 3, 15)
        19797
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    y = year
    total = 365 * y
    if y >= 0:
        total += (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400
    else:
        # Division here truncates toward zero.
        total -= trunc_div(y, -4) - trunc_div(y, -100) + trunc_div(y, -400)
    total += (367 * month - 362) // 12
    total += day - 1
    if month > 2:
        total -= 1
        if not is_leap_year(year):
            total -= 1
    return total - DAYS_0000_TO_1970


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a (year, month, day) triple.

    Args:
        epoch_day: The epoch day.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(19797)
        (2024, 3, 15)
        >>> epoch_day_to_ymd(-719528)
        (0, 1, 1)
    """
    zero_day = epoch_day + DAYS_0000_TO_1970
    # Rebase to 0000-03-01.
    zero_day -= 60
    adjust = 0
    if zero_day < 0:
        adjust_cycles = trunc_div(zero_day + 1, DAYS_PER_CYCLE) - 1
        adjust = adjust_cycles * 400
        zero_day += -adjust_cycles * DAYS_PER_CYCLE
    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - _days_before_march_year(year_est)
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - _days_before_march_year(year_est)
    year_est += adjust

    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    # March-based months 10 and 11 are January and February of the next year.
    year_est += march_month0 // 10
    return year_est, month, day


def _days_before_march_year(year: int) -> int:
    return 365 * year + year // 4 - year // 100 + year // 400


def year_day_to_month_day(year: int, day_of_year: int) -> tuple[int, int]:
    """Split a day-of-year into (month, day) for the given year.

    Args:
        year: The year (for the leap-year rule).
        day_of_year: Day of the year (1-366), already validated.

    Returns:
        Tuple of (month, day).

    Examples:
        >>> year_day_to_month_day(2024, 60)
        (2, 29)
        >>> year_day_to_month_day(2023, 60)
        (3, 1)
    """
    leap = is_leap_year(year)
    month = 1
    while month < 12 and day_of_year > days_before_month(year, month + 1, leap):
        month += 1
    return month, day_of_year - days_before_month(year, month, leap)


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int, leap: bool | None = None) -> int:
    """Return the number of days in the year before the first of the month."""
    if leap is None:
        leap = is_leap_year(year)
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and leap:
        result += 1
    return result


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "year_day_to_month_day",
    "days_before_month",
]
