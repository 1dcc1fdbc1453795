"""Temporal field enumeration.

This module provides the Field enum, the closed set of temporal fields
understood by the field-access protocol, and ValueRange, the inclusive
interval of values each field accepts.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from goda._internal.calendar import ymd_to_epoch_day
from goda._internal.constants import (
    INT64_MAX,
    INT64_MIN,
    MAX_OFFSET_SECONDS,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    SECONDS_PER_DAY,
)


class ValueRange(NamedTuple):
    """An inclusive range of valid field values.

    Examples:
        >>> r = ValueRange(1, 12)
        >>> r.is_valid(12)
        True
        >>> r.is_valid(0)
        False
    """

    min: int
    max: int

    def is_valid(self, value: int) -> bool:
        """Return True if value lies within the range."""
        return self.min <= value <= self.max


class Field(IntEnum):
    """A temporal field, such as month-of-year or hour-of-day.

    Fields are grouped into time-based fields (NANO_OF_SECOND through
    AMPM_OF_DAY), date-based fields (DAY_OF_WEEK through ERA), and the
    instant/offset fields INSTANT_SECONDS and OFFSET_SECONDS.

    Examples:
        >>> str(Field.NANO_OF_SECOND)
        'NanoOfSecond'
        >>> Field.NANO_OF_SECOND.java_name
        'ChronoField.NANO_OF_SECOND'
        >>> Field.YEAR.is_date_based
        True
        >>> Field.MONTH_OF_YEAR.range
        ValueRange(min=1, max=12)
    """

    NANO_OF_SECOND = 1
    NANO_OF_DAY = 2
    MICRO_OF_SECOND = 3
    MICRO_OF_DAY = 4
    MILLI_OF_SECOND = 5
    MILLI_OF_DAY = 6
    SECOND_OF_MINUTE = 7
    SECOND_OF_DAY = 8
    MINUTE_OF_HOUR = 9
    MINUTE_OF_DAY = 10
    HOUR_OF_AMPM = 11
    CLOCK_HOUR_OF_AMPM = 12
    HOUR_OF_DAY = 13
    CLOCK_HOUR_OF_DAY = 14
    AMPM_OF_DAY = 15
    DAY_OF_WEEK = 16
    ALIGNED_DAY_OF_WEEK_IN_MONTH = 17
    ALIGNED_DAY_OF_WEEK_IN_YEAR = 18
    DAY_OF_MONTH = 19
    DAY_OF_YEAR = 20
    EPOCH_DAY = 21
    ALIGNED_WEEK_OF_MONTH = 22
    ALIGNED_WEEK_OF_YEAR = 23
    MONTH_OF_YEAR = 24
    PROLEPTIC_MONTH = 25
    YEAR_OF_ERA = 26
    YEAR = 27
    ERA = 28
    INSTANT_SECONDS = 29
    OFFSET_SECONDS = 30

    @classmethod
    def all_fields(cls) -> list[Field]:
        """Return every field in id order."""
        return list(cls)

    @property
    def is_time_based(self) -> bool:
        """Return True for fields that describe a time of day."""
        return Field.NANO_OF_SECOND <= self <= Field.AMPM_OF_DAY

    @property
    def is_date_based(self) -> bool:
        """Return True for fields that describe a calendar date."""
        return Field.DAY_OF_WEEK <= self <= Field.ERA

    @property
    def java_name(self) -> str:
        """Return the matching java.time ChronoField constant name."""
        return "ChronoField." + self.name

    @property
    def range(self) -> ValueRange:
        """Return the inclusive range of valid values."""
        return _RANGES[self]

    def check(self, value: int) -> int:
        """Validate value against this field's range.

        Raises:
            OutOfRangeError: If the value is outside the range.
        """
        from goda._internal.validation import check_field

        return check_field(self, value)

    def __str__(self) -> str:
        return "".join("AmPm" if part == "AMPM" else part.capitalize() for part in self.name.split("_"))

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_RANGES: dict[Field, ValueRange] = {
    Field.NANO_OF_SECOND: ValueRange(0, 999_999_999),
    Field.NANO_OF_DAY: ValueRange(0, NANOS_PER_DAY - 1),
    Field.MICRO_OF_SECOND: ValueRange(0, 999_999),
    Field.MICRO_OF_DAY: ValueRange(0, NANOS_PER_DAY // 1_000 - 1),
    Field.MILLI_OF_SECOND: ValueRange(0, 999),
    Field.MILLI_OF_DAY: ValueRange(0, NANOS_PER_DAY // 1_000_000 - 1),
    Field.SECOND_OF_MINUTE: ValueRange(0, 59),
    Field.SECOND_OF_DAY: ValueRange(0, SECONDS_PER_DAY - 1),
    Field.MINUTE_OF_HOUR: ValueRange(0, 59),
    Field.MINUTE_OF_DAY: ValueRange(0, 24 * 60 - 1),
    Field.HOUR_OF_AMPM: ValueRange(0, 11),
    Field.CLOCK_HOUR_OF_AMPM: ValueRange(1, 12),
    Field.HOUR_OF_DAY: ValueRange(0, 23),
    Field.CLOCK_HOUR_OF_DAY: ValueRange(1, 24),
    Field.AMPM_OF_DAY: ValueRange(0, 1),
    Field.DAY_OF_WEEK: ValueRange(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange(1, 7),
    Field.DAY_OF_MONTH: ValueRange(1, 31),
    Field.DAY_OF_YEAR: ValueRange(1, 366),
    Field.EPOCH_DAY: ValueRange(ymd_to_epoch_day(MIN_YEAR, 1, 1), ymd_to_epoch_day(MAX_YEAR, 12, 31)),
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange(1, 5),
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange(1, 53),
    Field.MONTH_OF_YEAR: ValueRange(1, 12),
    Field.PROLEPTIC_MONTH: ValueRange(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    Field.YEAR_OF_ERA: ValueRange(1, MAX_YEAR + 1),
    Field.YEAR: ValueRange(MIN_YEAR, MAX_YEAR),
    Field.ERA: ValueRange(0, 1),
    Field.INSTANT_SECONDS: ValueRange(INT64_MIN, INT64_MAX),
    Field.OFFSET_SECONDS: ValueRange(-MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS),
}


__all__ = ["Field", "ValueRange"]
