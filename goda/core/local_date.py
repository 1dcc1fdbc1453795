"""LocalDate class representing a calendar date.

This module provides the LocalDate class for representing dates without
a time or zone in the proleptic Gregorian calendar, including BCE dates.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from goda._internal.arith import add_exact, compare_ints, floor_div, floor_mod, mul_exact
from goda._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    is_leap_year,
    year_day_to_month_day,
    ymd_to_epoch_day,
)
from goda._internal.constants import MAX_YEAR, MIN_YEAR
from goda._internal.validation import check_field, validate_fields
from goda.core.temporal import TemporalValue, field_value
from goda.errors import ArithmeticOverflowError, OutOfRangeError, UnsupportedFieldError
from goda.units.day_of_week import DayOfWeek
from goda.units.era import Era
from goda.units.field import Field
from goda.units.month import Month
from goda.units.year import Year

if TYPE_CHECKING:
    from goda.arithmetic.chain import LocalDateChain
    from goda.core.local_date_time import LocalDateTime
    from goda.core.local_time import LocalTime
    from goda.core.year_month import YearMonth
    from goda.core.zone_id import ZoneId


class LocalDate:
    """A date without a time or zone, such as 2024-03-15.

    LocalDate uses the proleptic Gregorian calendar with astronomical
    year numbering: year 0 exists and equals 1 BCE. Years range from
    -(2**47 - 1) to 2**47 - 1.

    The date is packed into one integer as ``year << 16 | month << 8 | day``.
    The zero date (all components 0) means "no date": it renders as "",
    its accessors return zero or None, and arithmetic on it returns it
    unchanged.

    Attributes:
        year: The year (can be zero or negative).
        month: The month, or None for the zero date.
        day_of_month: The day of the month (1-31).

    Examples:
        >>> d = LocalDate(2024, 3, 15)
        >>> d.day_of_week
        <DayOfWeek.FRIDAY: 5>
        >>> d.day_of_year
        75
        >>> d.unix_epoch_days()
        19797
        >>> str(d)
        '2024-03-15'

        >>> LocalDate(2024, 1, 31).plus_months(1)
        LocalDate(2024, 2, 29)
    """

    __slots__ = ("_packed",)

    _EMPTY_TEXT_IS_ZERO = True

    @validate_fields(year=Field.YEAR, month=Field.MONTH_OF_YEAR, day_of_month=Field.DAY_OF_MONTH)
    def __init__(self, year: int, month: int, day_of_month: int) -> None:
        """Create a LocalDate from year, month and day-of-month.

        Args:
            year: The proleptic year.
            month: The month (1-12), as an int or Month.
            day_of_month: The day of the month.

        Raises:
            OutOfRangeError: If a component is out of range, or the day
                does not exist in the month.

        Examples:
            >>> LocalDate(2023, 2, 29)
            Traceback (most recent call last):
            ...
            goda.errors.OutOfRangeError: goda: invalid date February 29 in non-leap year
        """
        year, month, day_of_month = int(year), int(month), int(day_of_month)
        if day_of_month > 28 and day_of_month > days_in_month(year, month):
            if day_of_month == 29:
                raise OutOfRangeError("invalid date February 29 in non-leap year")
            raise OutOfRangeError(f"invalid date {Month(month)} {day_of_month}")
        self._packed = _pack(year, month, day_of_month)

    @classmethod
    def _from_packed(cls, packed: int) -> LocalDate:
        date = object.__new__(cls)
        date._packed = packed
        return date

    @classmethod
    def _of_valid(cls, year: int, month: int, day_of_month: int) -> LocalDate:
        """Create a LocalDate from components already known to be valid."""
        return cls._from_packed(_pack(year, month, day_of_month))

    @classmethod
    def _clamped(cls, year: int, month: int, day_of_month: int) -> LocalDate:
        """Create a LocalDate, moving an overlong day back to the month's end."""
        return cls._of_valid(year, month, min(day_of_month, days_in_month(year, month)))

    # =========================================================================
    # Factory methods
    # =========================================================================

    @classmethod
    def zero(cls) -> LocalDate:
        """Return the zero date."""
        return cls._from_packed(0)

    @classmethod
    def min(cls) -> LocalDate:
        """Return the earliest supported date."""
        return cls._of_valid(MIN_YEAR, 1, 1)

    @classmethod
    def max(cls) -> LocalDate:
        """Return the latest supported date."""
        return cls._of_valid(MAX_YEAR, 12, 31)

    @classmethod
    def of_epoch_day(cls, days: int) -> LocalDate:
        """Create a LocalDate from days since 1970-01-01.

        Raises:
            OutOfRangeError: If the day is outside the supported range.

        Examples:
            >>> LocalDate.of_epoch_day(0)
            LocalDate(1970, 1, 1)
            >>> LocalDate.of_epoch_day(-1)
            LocalDate(1969, 12, 31)
        """
        check_field(Field.EPOCH_DAY, days)
        return cls._of_valid(*epoch_day_to_ymd(days))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and day-of-year.

        Raises:
            OutOfRangeError: If the year or day is out of range, including
                day 366 of a non-leap year.

        Examples:
            >>> LocalDate.of_year_day(2024, 60)
            LocalDate(2024, 2, 29)
        """
        year = check_field(Field.YEAR, int(year))
        check_field(Field.DAY_OF_YEAR, day_of_year)
        if day_of_year == 366 and not is_leap_year(year):
            raise OutOfRangeError(f"invalid day of year 366 in non-leap year {Year(year)}")
        month, day = year_day_to_month_day(year, day_of_year)
        return cls._of_valid(year, month, day)

    @classmethod
    def from_date(cls, date: datetime.date) -> LocalDate:
        """Create a LocalDate from a ``datetime.date`` (or ``datetime``)."""
        return cls._of_valid(date.year, date.month, date.day)

    @classmethod
    def now(cls) -> LocalDate:
        """Return today's date in the system default zone."""
        return cls.from_date(datetime.date.today())

    @classmethod
    def now_utc(cls) -> LocalDate:
        """Return today's date in UTC."""
        return cls.from_date(datetime.datetime.now(datetime.timezone.utc))

    @classmethod
    def now_in(cls, zone: ZoneId) -> LocalDate:
        """Return today's date in the given zone."""
        return cls.from_date(datetime.datetime.now(zone.to_tzinfo()))

    def to_date(self) -> datetime.date:
        """Convert to a ``datetime.date``.

        Raises:
            OutOfRangeError: If the year is outside 1-9999, including the
                zero date.
        """
        year = int(self.year)
        if self.is_zero() or not datetime.MINYEAR <= year <= datetime.MAXYEAR:
            raise OutOfRangeError(f"year {year} is out of range for datetime.date")
        return datetime.date(year, self._packed >> 8 & 0xFF, self._packed & 0xFF)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def year(self) -> Year:
        return Year(self._packed >> 16)

    @property
    def month(self) -> Month | None:
        """Return the month, or None for the zero date."""
        value = self._packed >> 8 & 0xFF
        return Month(value) if value else None

    @property
    def day_of_month(self) -> int:
        return self._packed & 0xFF

    @property
    def day_of_week(self) -> DayOfWeek | None:
        """Return the ISO day-of-week, or None for the zero date."""
        if self.is_zero():
            return None
        return DayOfWeek(floor_mod(self.unix_epoch_days() + 3, 7) + 1)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366), or 0 for the zero date."""
        month = self.month
        if month is None:
            return 0
        return month.first_day_of_year(self.is_leap_year()) + self.day_of_month - 1

    @property
    def year_month(self) -> YearMonth:
        """Return the year and month of this date."""
        from goda.core.year_month import YearMonth

        if self.is_zero():
            return YearMonth.zero()
        return YearMonth(self.year, self._packed >> 8 & 0xFF)

    @property
    def era(self) -> Era | None:
        """Return the era, or None for the zero date."""
        if self.is_zero():
            return None
        return Era.of_year(self.year)

    def is_zero(self) -> bool:
        return self._packed == 0

    def is_leap_year(self) -> bool:
        return self.year.is_leap_year()

    def length_of_month(self) -> int:
        """Return the number of days in this date's month, or 0 for zero."""
        month = self.month
        if month is None:
            return 0
        return month.length(self.is_leap_year())

    def length_of_year(self) -> int:
        return self.year.length()

    def unix_epoch_days(self) -> int:
        """Return the number of days since 1970-01-01, or 0 for the zero date."""
        if self.is_zero():
            return 0
        return ymd_to_epoch_day(self.year, self._packed >> 8 & 0xFF, self._packed & 0xFF)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy with days added.

        Raises:
            ArithmeticOverflowError: If the result is outside the supported range.

        Examples:
            >>> LocalDate(2024, 2, 28).plus_days(2)
            LocalDate(2024, 3, 1)
        """
        if self.is_zero() or days == 0:
            return self
        epoch_day = add_exact(self.unix_epoch_days(), days)
        if not Field.EPOCH_DAY.range.is_valid(epoch_day):
            raise ArithmeticOverflowError()
        return self._of_valid(*epoch_day_to_ymd(epoch_day))

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def plus_weeks(self, weeks: int) -> LocalDate:
        """Return a copy with weeks added."""
        return self.plus_days(mul_exact(weeks, 7))

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def plus_months(self, months: int) -> LocalDate:
        """Return a copy with months added.

        The day-of-month is clamped to the length of the resulting month.

        Raises:
            ArithmeticOverflowError: If the result is outside the supported range.

        Examples:
            >>> LocalDate(2023, 1, 31).plus_months(1)
            LocalDate(2023, 2, 28)
            >>> LocalDate(2024, 1, 15).plus_months(-13)
            LocalDate(2022, 12, 15)
        """
        if self.is_zero() or months == 0:
            return self
        calc = self.year * 12 + (self._packed >> 8 & 0xFF) - 1 + months
        if not Field.PROLEPTIC_MONTH.range.is_valid(calc):
            raise ArithmeticOverflowError()
        return self._clamped(floor_div(calc, 12), floor_mod(calc, 12) + 1, self.day_of_month)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def plus_years(self, years: int) -> LocalDate:
        """Return a copy with years added, clamping February 29.

        Examples:
            >>> LocalDate(2024, 2, 29).plus_years(1)
            LocalDate(2025, 2, 28)
        """
        if self.is_zero() or years == 0:
            return self
        year = add_exact(self.year, years)
        if not Field.YEAR.range.is_valid(year):
            raise ArithmeticOverflowError()
        return self._clamped(year, self._packed >> 8 & 0xFF, self.day_of_month)

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def with_day_of_month(self, day_of_month: int) -> LocalDate:
        """Return a copy with the day-of-month replaced.

        Raises:
            OutOfRangeError: If the day does not exist in the month.
        """
        if self.is_zero():
            return self
        return LocalDate(self.year, self._packed >> 8 & 0xFF, day_of_month)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        """Return a copy with the day-of-year replaced."""
        if self.is_zero():
            return self
        return LocalDate.of_year_day(self.year, day_of_year)

    def with_month(self, month: int) -> LocalDate:
        """Return a copy with the month replaced, clamping the day."""
        check_field(Field.MONTH_OF_YEAR, int(month))
        if self.is_zero():
            return self
        return self._clamped(self.year, int(month), self.day_of_month)

    def with_year(self, year: int) -> LocalDate:
        """Return a copy with the year replaced, clamping February 29."""
        check_field(Field.YEAR, int(year))
        if self.is_zero():
            return self
        return self._clamped(int(year), self._packed >> 8 & 0xFF, self.day_of_month)

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a time.

        Examples:
            >>> from goda import LocalTime
            >>> str(LocalDate(2024, 3, 15).at_time(LocalTime(9, 30)))
            '2024-03-15T09:30:00'
        """
        from goda.core.local_date_time import LocalDateTime

        return LocalDateTime.of(self, time)

    def chain(self) -> LocalDateChain:
        """Return a chain for error-accumulating arithmetic.

        Examples:
            >>> LocalDate(2024, 1, 31).chain().plus_months(1).plus_days(1).must_get()
            LocalDate(2024, 3, 1)
        """
        from goda.arithmetic.chain import LocalDateChain

        return LocalDateChain(self)

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported_field(self, field: Field) -> bool:
        """Return True for the date-based fields."""
        return field.is_date_based

    def get_field(self, field: Field) -> TemporalValue:
        """Return the value of a date-based field.

        Examples:
            >>> LocalDate(2024, 3, 15).get_field(Field.ALIGNED_WEEK_OF_MONTH)
            TemporalValue(3)
            >>> LocalDate.zero().get_field(Field.YEAR).unsupported
            True
        """
        if self.is_zero() or not field.is_date_based:
            return TemporalValue.unsupported_value()
        year = int(self.year)
        dom = self.day_of_month
        if field == Field.DAY_OF_WEEK:
            value = int(self.day_of_week)  # type: ignore[arg-type]
        elif field == Field.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            value = (dom - 1) % 7 + 1
        elif field == Field.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            value = (self.day_of_year - 1) % 7 + 1
        elif field == Field.DAY_OF_MONTH:
            value = dom
        elif field == Field.DAY_OF_YEAR:
            value = self.day_of_year
        elif field == Field.EPOCH_DAY:
            value = self.unix_epoch_days()
        elif field == Field.ALIGNED_WEEK_OF_MONTH:
            value = (dom - 1) // 7 + 1
        elif field == Field.ALIGNED_WEEK_OF_YEAR:
            value = (self.day_of_year - 1) // 7 + 1
        elif field == Field.MONTH_OF_YEAR:
            value = self._packed >> 8 & 0xFF
        elif field == Field.PROLEPTIC_MONTH:
            value = year * 12 + (self._packed >> 8 & 0xFF) - 1
        elif field == Field.YEAR_OF_ERA:
            value = year if year >= 1 else 1 - year
        elif field == Field.YEAR:
            value = year
        else:
            value = Era.of_year(year).value
        return TemporalValue.of(value)

    def with_field(self, field: Field, value: TemporalValue | int) -> LocalDate:
        """Return a copy with a date-based field replaced.

        Week and day-of-week fields move the date relative to its current
        value; MONTH_OF_YEAR and YEAR clamp the day-of-month. On a date in
        year 0 or earlier, YEAR_OF_ERA counts backwards: the year becomes
        ``1 - value``.

        Raises:
            OutOfRangeError: If the value is outside the field's range.
            UnsupportedFieldError: If the field is not date-based.

        Examples:
            >>> LocalDate(2024, 3, 15).with_field(Field.DAY_OF_WEEK, 1)
            LocalDate(2024, 3, 11)
            >>> LocalDate(2024, 3, 15).with_field(Field.ERA, 0)
            LocalDate(-2023, 3, 15)
        """
        v = field.check(field_value(value))
        if self.is_zero():
            return self
        if field == Field.DAY_OF_WEEK:
            return self.plus_days(v - int(self.day_of_week))  # type: ignore[arg-type]
        if field in (Field.ALIGNED_DAY_OF_WEEK_IN_MONTH, Field.ALIGNED_DAY_OF_WEEK_IN_YEAR):
            return self.plus_days(v - self.get_field(field).value)
        if field == Field.DAY_OF_MONTH:
            return self.with_day_of_month(v)
        if field == Field.DAY_OF_YEAR:
            return self.with_day_of_year(v)
        if field == Field.EPOCH_DAY:
            return LocalDate.of_epoch_day(v)
        if field in (Field.ALIGNED_WEEK_OF_MONTH, Field.ALIGNED_WEEK_OF_YEAR):
            return self.plus_weeks(v - self.get_field(field).value)
        if field == Field.MONTH_OF_YEAR:
            return self.with_month(v)
        if field == Field.PROLEPTIC_MONTH:
            return self.plus_months(v - self.get_field(field).value)
        if field == Field.YEAR_OF_ERA:
            return self.with_year(v if self.year >= 1 else 1 - v)
        if field == Field.YEAR:
            return self.with_year(v)
        if field == Field.ERA:
            if self.get_field(Field.ERA).value == v:
                return self
            return self.with_year(1 - self.year)
        raise UnsupportedFieldError(field)

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: LocalDate) -> int:
        """Compare chronologically, with the zero date before every other date.

        Returns:
            -1, 0 or 1.
        """
        if self.is_zero() or other.is_zero():
            return other.is_zero() - self.is_zero()
        return compare_ints(self._packed, other._packed)

    def is_before(self, other: LocalDate) -> bool:
        return self.compare(other) < 0

    def is_after(self, other: LocalDate) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._packed == other._packed

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self._packed)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        if self.is_zero():
            return "LocalDate.zero()"
        return f"LocalDate({int(self.year)}, {self._packed >> 8 & 0xFF}, {self.day_of_month})"

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_local_date

        return format_local_date(self)

    @classmethod
    def parse(cls, text: str) -> LocalDate:
        """Parse a yyyy-MM-dd date.

        Raises:
            ParseError: If the text does not follow the grammar.
            OutOfRangeError: If the date is invalid.

        Examples:
            >>> LocalDate.parse("-0044-03-15")
            LocalDate(-44, 3, 15)
        """
        from goda.format.iso8601 import parse_local_date

        return parse_local_date(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> LocalDate:
        """Unmarshal text; empty text yields the zero date."""
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> LocalDate:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> LocalDate:
        """Scan a SQL value: None, text, ``datetime.date`` or ``datetime``."""
        from goda.convert.sql import from_sql

        if isinstance(value, datetime.date):
            return cls.from_date(value)
        return from_sql(cls, value)


def _pack(year: int, month: int, day_of_month: int) -> int:
    return year << 16 | month << 8 | day_of_month


__all__ = ["LocalDate"]
