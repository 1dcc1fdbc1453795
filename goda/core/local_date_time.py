"""LocalDateTime class combining a date and a time.

This module provides the LocalDateTime class for representing a date
and wall-clock time without a zone.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from goda._internal.arith import floor_div, floor_mod
from goda._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from goda._internal.validation import check_field
from goda.core.duration import Duration
from goda.core.local_date import LocalDate
from goda.core.local_time import LocalTime
from goda.core.temporal import TemporalValue, field_value
from goda.errors import UnsupportedFieldError
from goda.units.field import Field

if TYPE_CHECKING:
    from goda.arithmetic.chain import LocalDateTimeChain
    from goda.core.offset_date_time import OffsetDateTime
    from goda.core.zone_id import ZoneId
    from goda.core.zone_offset import ZoneOffset
    from goda.units.day_of_week import DayOfWeek
    from goda.units.month import Month
    from goda.units.year import Year


class LocalDateTime:
    """A date and time without a zone, such as 2024-03-15T14:30:45.

    LocalDateTime pairs a LocalDate with a LocalTime. It is zero only
    when both parts are zero. Date arithmetic goes to the date; time
    arithmetic carries whole days into the date.

    Attributes:
        local_date: The date part.
        local_time: The time part.

    Examples:
        >>> dt = LocalDateTime(2024, 3, 15, 14, 30, 45, 123_456_789)
        >>> str(dt)
        '2024-03-15T14:30:45.123456789'
        >>> dt.to_json()
        '"2024-03-15T14:30:45.123456789"'

        >>> LocalDateTime(2024, 12, 31, 23, 0).plus_hours(2)
        LocalDateTime(2025, 1, 1, 1, 0, 0, 0)
    """

    __slots__ = ("_date", "_time")

    _EMPTY_TEXT_IS_ZERO = True

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from its components.

        Raises:
            OutOfRangeError: If any component is out of range.
        """
        self._date = LocalDate(year, month, day)
        self._time = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a date and a time.

        The result is zero only when both parts are zero. A half-zero
        value formats with an empty part (``"2024-01-01T"``) and does not
        parse back.
        """
        ldt = object.__new__(cls)
        ldt._date = date
        ldt._time = time
        return ldt

    # =========================================================================
    # Factory methods
    # =========================================================================

    @classmethod
    def zero(cls) -> LocalDateTime:
        """Return the zero date-time."""
        return cls.of(LocalDate.zero(), LocalTime.zero())

    @classmethod
    def min(cls) -> LocalDateTime:
        """Return the earliest supported date-time."""
        return cls.of(LocalDate.min(), LocalTime.min())

    @classmethod
    def max(cls) -> LocalDateTime:
        """Return the latest supported date-time."""
        return cls.of(LocalDate.max(), LocalTime.max())

    @classmethod
    def from_datetime(cls, dt: datetime.datetime) -> LocalDateTime:
        """Create a LocalDateTime from a ``datetime``, ignoring its tzinfo."""
        return cls.of(LocalDate.from_date(dt), LocalTime.from_time(dt))

    @classmethod
    def now(cls) -> LocalDateTime:
        """Return the current date-time in the system default zone."""
        return cls.from_datetime(datetime.datetime.now())

    @classmethod
    def now_utc(cls) -> LocalDateTime:
        """Return the current date-time in UTC."""
        return cls.from_datetime(datetime.datetime.now(datetime.timezone.utc))

    @classmethod
    def now_in(cls, zone: ZoneId) -> LocalDateTime:
        """Return the current date-time in the given zone."""
        return cls.from_datetime(datetime.datetime.now(zone.to_tzinfo()))

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano: int, offset: ZoneOffset) -> LocalDateTime:
        """Create the local date-time of an instant seen at an offset.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.
            nano: Nanosecond within the second.
            offset: The offset to view the instant at.

        Raises:
            OutOfRangeError: If the nano or the resulting date is out of range.

        Examples:
            >>> from goda import ZoneOffset
            >>> LocalDateTime.of_epoch_second(0, 0, ZoneOffset.of(-1))
            LocalDateTime(1969, 12, 31, 23, 0, 0, 0)
        """
        check_field(Field.NANO_OF_SECOND, nano)
        local_second = epoch_second + offset.total_seconds
        date = LocalDate.of_epoch_day(floor_div(local_second, SECONDS_PER_DAY))
        second_of_day = floor_mod(local_second, SECONDS_PER_DAY)
        return cls.of(date, LocalTime._from_nanos(second_of_day * NANOS_PER_SECOND + nano))

    def to_datetime(self, tzinfo: datetime.tzinfo | None = None) -> datetime.datetime:
        """Convert to a ``datetime``, truncating to microseconds.

        Args:
            tzinfo: Optional tzinfo to attach.

        Raises:
            OutOfRangeError: If the date is outside the range of ``datetime``.
        """
        return datetime.datetime.combine(self._date.to_date(), self._time.to_time(), tzinfo)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def local_date(self) -> LocalDate:
        return self._date

    @property
    def local_time(self) -> LocalTime:
        return self._time

    @property
    def year(self) -> Year:
        return self._date.year

    @property
    def month(self) -> Month | None:
        return self._date.month

    @property
    def day_of_month(self) -> int:
        return self._date.day_of_month

    @property
    def day_of_week(self) -> DayOfWeek | None:
        return self._date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def millisecond(self) -> int:
        return self._time.millisecond

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def is_zero(self) -> bool:
        return self._date.is_zero() and self._time.is_zero()

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Return seconds since the epoch of this date-time at an offset."""
        return self._date.unix_epoch_days() * SECONDS_PER_DAY + self._time.second_of_day - offset.total_seconds

    # =========================================================================
    # Date arithmetic
    # =========================================================================

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date is self._date and time is self._time:
            return self
        return LocalDateTime.of(date, time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def minus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.minus_days(days), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.minus_weeks(weeks), self._time)

    def plus_months(self, months: int) -> LocalDateTime:
        """Return a copy with months added, clamping the day-of-month."""
        return self._with(self._date.plus_months(months), self._time)

    def minus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.minus_months(months), self._time)

    def plus_years(self, years: int) -> LocalDateTime:
        """Return a copy with years added, clamping February 29."""
        return self._with(self._date.plus_years(years), self._time)

    def minus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.minus_years(years), self._time)

    # =========================================================================
    # Time arithmetic
    # =========================================================================

    def _plus_nanos_with_carry(self, nanos: int) -> LocalDateTime:
        if self.is_zero() or nanos == 0:
            return self
        total = self._time.nano_of_day + nanos
        carry = floor_div(total, NANOS_PER_DAY)
        time = LocalTime._from_nanos(floor_mod(total, NANOS_PER_DAY))
        return LocalDateTime.of(self._date.plus_days(carry), time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        """Return a copy with hours added, carrying into the date."""
        return self._plus_nanos_with_carry(hours * NANOS_PER_HOUR)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_hours(-hours)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_nanos_with_carry(minutes * NANOS_PER_MINUTE)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_minutes(-minutes)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_nanos_with_carry(seconds * NANOS_PER_SECOND)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_seconds(-seconds)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_nanos_with_carry(nanos)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self.plus_nanos(-nanos)

    def plus_duration(self, duration: Duration) -> LocalDateTime:
        """Return a copy with a Duration added.

        Examples:
            >>> LocalDateTime(2024, 3, 15, 23, 0).plus_duration(Duration.parse("PT1H30M"))
            LocalDateTime(2024, 3, 16, 0, 30, 0, 0)
        """
        return self._plus_nanos_with_carry(duration.to_nanos())

    def minus_duration(self, duration: Duration) -> LocalDateTime:
        return self._plus_nanos_with_carry(-duration.to_nanos())

    def between(self, other: LocalDateTime) -> Duration:
        """Return the Duration from this date-time to other.

        Two zero values are zero apart. When only one side is zero, that
        side is measured as 1970-01-01T00:00.

        Examples:
            >>> a = LocalDateTime(2024, 3, 15, 12, 0)
            >>> str(a.between(LocalDateTime(2024, 3, 16, 13, 30)))
            'PT25H30M'
        """
        if self.is_zero() and other.is_zero():
            return Duration.zero()
        return Duration.of_nanos(other._epoch_nanos() - self._epoch_nanos())

    def _epoch_nanos(self) -> int:
        return self._date.unix_epoch_days() * NANOS_PER_DAY + self._time.nano_of_day

    # =========================================================================
    # Component replacement
    # =========================================================================

    def with_day_of_month(self, day_of_month: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day_of_month), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_month(self, month: int) -> LocalDateTime:
        return self._with(self._date.with_month(month), self._time)

    def with_year(self, year: int) -> LocalDateTime:
        return self._with(self._date.with_year(year), self._time)

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nanosecond: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nano(nanosecond))

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        """Combine with an offset to form an OffsetDateTime."""
        from goda.core.offset_date_time import OffsetDateTime

        return OffsetDateTime.of(self, offset)

    def chain(self) -> LocalDateTimeChain:
        """Return a chain for error-accumulating arithmetic."""
        from goda.arithmetic.chain import LocalDateTimeChain

        return LocalDateTimeChain(self)

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported_field(self, field: Field) -> bool:
        """Return True for date-based and time-based fields."""
        return field.is_time_based or field.is_date_based

    def get_field(self, field: Field) -> TemporalValue:
        """Return a field value from the time or the date."""
        if self.is_zero():
            return TemporalValue.unsupported_value()
        if field.is_time_based:
            return self._time.get_field(field)
        if field.is_date_based:
            return self._date.get_field(field)
        return TemporalValue.unsupported_value()

    def with_field(self, field: Field, value: TemporalValue | int) -> LocalDateTime:
        """Return a copy with a date-based or time-based field replaced.

        Raises:
            OutOfRangeError: If the value is outside the field's range.
            UnsupportedFieldError: If the field is neither date- nor time-based.
        """
        v = field.check(field_value(value))
        if self.is_zero():
            return self
        if field.is_time_based:
            return self._with(self._date, self._time.with_field(field, v))
        if field.is_date_based:
            return self._with(self._date.with_field(field, v), self._time)
        raise UnsupportedFieldError(field)

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: LocalDateTime) -> int:
        """Compare by date and then time, with the zero value first."""
        if self.is_zero() or other.is_zero():
            return other.is_zero() - self.is_zero()
        return self._date.compare(other._date) or self._time.compare(other._time)

    def is_before(self, other: LocalDateTime) -> bool:
        return self.compare(other) < 0

    def is_after(self, other: LocalDateTime) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        if self.is_zero():
            return "LocalDateTime.zero()"
        return (
            f"LocalDateTime({int(self.year)}, {int(self.month or 0)}, "
            f"{self.day_of_month}, {self.hour}, {self.minute}, {self.second}, {self.nanosecond})"
        )

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_local_date_time

        return format_local_date_time(self)

    @classmethod
    def parse(cls, text: str) -> LocalDateTime:
        """Parse a <date>T<time> date-time."""
        from goda.format.iso8601 import parse_local_date_time

        return parse_local_date_time(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> LocalDateTime:
        """Unmarshal text; empty text yields the zero date-time."""
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> LocalDateTime:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> LocalDateTime:
        """Scan a SQL value: None, text or ``datetime`` (tzinfo ignored)."""
        from goda.convert.sql import from_sql

        if isinstance(value, datetime.datetime):
            return cls.from_datetime(value)
        return from_sql(cls, value)


__all__ = ["LocalDateTime"]
