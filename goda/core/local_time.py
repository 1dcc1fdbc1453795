"""LocalTime class representing a time of day.

This module provides the LocalTime class for representing wall-clock
times without a date or zone, with nanosecond precision.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from goda._internal.arith import compare_ints
from goda._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from goda._internal.validation import check_field, validate_fields
from goda.core.temporal import TemporalValue, field_value
from goda.errors import OutOfRangeError, UnsupportedFieldError
from goda.units.field import Field

if TYPE_CHECKING:
    from goda.arithmetic.chain import LocalTimeChain
    from goda.core.local_date import LocalDate
    from goda.core.local_date_time import LocalDateTime
    from goda.core.zone_id import ZoneId

# Marks the zero time, which is distinct from midnight.
_ZERO = -1


class LocalTime:
    """A time of day without a date or zone, such as 14:30:45.123456789.

    LocalTime is stored as a nanosecond-of-day. The zero time means "no
    time": it is distinct from midnight, renders as "", and is left
    unchanged by arithmetic.

    Attributes:
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: The nanosecond within the second (0-999,999,999).

    Examples:
        >>> t = LocalTime(14, 30, 45, 123_456_789)
        >>> str(t)
        '14:30:45.123456789'
        >>> t.get_field(Field.NANO_OF_DAY).value
        52245123456789

        >>> LocalTime(23, 30).plus_hours(2)
        LocalTime(1, 30, 0, 0)
        >>> LocalTime.midnight().is_zero()
        False
    """

    __slots__ = ("_nano_of_day",)

    _EMPTY_TEXT_IS_ZERO = True

    @validate_fields(
        hour=Field.HOUR_OF_DAY,
        minute=Field.MINUTE_OF_HOUR,
        second=Field.SECOND_OF_MINUTE,
        nanosecond=Field.NANO_OF_SECOND,
    )
    def __init__(self, hour: int, minute: int, second: int = 0, nanosecond: int = 0) -> None:
        """Create a LocalTime.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The nanosecond (0-999,999,999).

        Raises:
            OutOfRangeError: If a component is out of range.

        Examples:
            >>> LocalTime(24, 0)
            Traceback (most recent call last):
            ...
            goda.errors.OutOfRangeError: goda: invalid value of HourOfDay (valid range 0 - 23): 24
        """
        self._nano_of_day = hour * NANOS_PER_HOUR + minute * NANOS_PER_MINUTE + second * NANOS_PER_SECOND + nanosecond

    @classmethod
    def _from_nanos(cls, nano_of_day: int) -> LocalTime:
        time = object.__new__(cls)
        time._nano_of_day = nano_of_day
        return time

    # =========================================================================
    # Factory methods
    # =========================================================================

    @classmethod
    def zero(cls) -> LocalTime:
        """Return the zero time."""
        return cls._from_nanos(_ZERO)

    @classmethod
    def midnight(cls) -> LocalTime:
        """Return 00:00:00."""
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> LocalTime:
        """Return 12:00:00."""
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @classmethod
    def min(cls) -> LocalTime:
        """Return the earliest time, 00:00:00."""
        return cls._from_nanos(0)

    @classmethod
    def max(cls) -> LocalTime:
        """Return the latest time, 23:59:59.999999999."""
        return cls._from_nanos(NANOS_PER_DAY - 1)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        Raises:
            OutOfRangeError: If the value is outside one day.
        """
        check_field(Field.NANO_OF_DAY, nano_of_day)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> LocalTime:
        """Create a LocalTime from seconds since midnight.

        Examples:
            >>> LocalTime.of_second_of_day(3661)
            LocalTime(1, 1, 1, 0)
        """
        check_field(Field.SECOND_OF_DAY, second_of_day)
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND)

    @classmethod
    def from_time(cls, time: datetime.time | datetime.datetime) -> LocalTime:
        """Create a LocalTime from a ``datetime.time`` or ``datetime``.

        The tzinfo, if any, is ignored.
        """
        return cls(time.hour, time.minute, time.second, time.microsecond * NANOS_PER_MICROSECOND)

    @classmethod
    def now(cls) -> LocalTime:
        """Return the current time in the system default zone."""
        return cls.from_time(datetime.datetime.now())

    @classmethod
    def now_utc(cls) -> LocalTime:
        """Return the current time in UTC."""
        return cls.from_time(datetime.datetime.now(datetime.timezone.utc))

    @classmethod
    def now_in(cls, zone: ZoneId) -> LocalTime:
        """Return the current time in the given zone."""
        return cls.from_time(datetime.datetime.now(zone.to_tzinfo()))

    def to_time(self) -> datetime.time:
        """Convert to a ``datetime.time``, truncating to microseconds.

        Raises:
            OutOfRangeError: If this is the zero time.
        """
        if self.is_zero():
            raise OutOfRangeError("zero LocalTime has no datetime.time equivalent")
        return datetime.time(self.hour, self.minute, self.second, self.nanosecond // NANOS_PER_MICROSECOND)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def hour(self) -> int:
        return self.nano_of_day // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return self.nano_of_day // NANOS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self.nano_of_day // NANOS_PER_SECOND % 60

    @property
    def millisecond(self) -> int:
        return self.nanosecond // NANOS_PER_MILLISECOND

    @property
    def nanosecond(self) -> int:
        return self.nano_of_day % NANOS_PER_SECOND

    @property
    def nano_of_day(self) -> int:
        """Return nanoseconds since midnight, or 0 for the zero time."""
        return max(self._nano_of_day, 0)

    @property
    def second_of_day(self) -> int:
        return self.nano_of_day // NANOS_PER_SECOND

    def is_zero(self) -> bool:
        return self._nano_of_day == _ZERO

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy with nanoseconds added, wrapping around midnight."""
        if self.is_zero() or nanos == 0:
            return self
        return self._from_nanos((self._nano_of_day + nanos) % NANOS_PER_DAY)

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-nanos)

    def plus_seconds(self, seconds: int) -> LocalTime:
        """Return a copy with seconds added, wrapping around midnight."""
        return self.plus_nanos(seconds % 86_400 * NANOS_PER_SECOND)

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-seconds)

    def plus_minutes(self, minutes: int) -> LocalTime:
        """Return a copy with minutes added, wrapping around midnight."""
        return self.plus_nanos(minutes % 1_440 * NANOS_PER_MINUTE)

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-minutes)

    def plus_hours(self, hours: int) -> LocalTime:
        """Return a copy with hours added, wrapping around midnight.

        Examples:
            >>> LocalTime(1, 0).minus_hours(3)
            LocalTime(22, 0, 0, 0)
        """
        return self.plus_nanos(hours % 24 * NANOS_PER_HOUR)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-hours)

    def with_hour(self, hour: int) -> LocalTime:
        """Return a copy with the hour replaced."""
        check_field(Field.HOUR_OF_DAY, hour)
        if self.is_zero():
            return self
        return self._from_nanos(self._nano_of_day + (hour - self.hour) * NANOS_PER_HOUR)

    def with_minute(self, minute: int) -> LocalTime:
        """Return a copy with the minute replaced."""
        check_field(Field.MINUTE_OF_HOUR, minute)
        if self.is_zero():
            return self
        return self._from_nanos(self._nano_of_day + (minute - self.minute) * NANOS_PER_MINUTE)

    def with_second(self, second: int) -> LocalTime:
        """Return a copy with the second replaced."""
        check_field(Field.SECOND_OF_MINUTE, second)
        if self.is_zero():
            return self
        return self._from_nanos(self._nano_of_day + (second - self.second) * NANOS_PER_SECOND)

    def with_nano(self, nanosecond: int) -> LocalTime:
        """Return a copy with the nanosecond-of-second replaced."""
        check_field(Field.NANO_OF_SECOND, nanosecond)
        if self.is_zero():
            return self
        return self._from_nanos(self._nano_of_day + nanosecond - self.nanosecond)

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine this time with a date."""
        from goda.core.local_date_time import LocalDateTime

        return LocalDateTime.of(date, self)

    def chain(self) -> LocalTimeChain:
        """Return a chain for error-accumulating arithmetic."""
        from goda.arithmetic.chain import LocalTimeChain

        return LocalTimeChain(self)

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported_field(self, field: Field) -> bool:
        """Return True for the time-based fields."""
        return field.is_time_based

    def get_field(self, field: Field) -> TemporalValue:
        """Return the value of a time-based field.

        Examples:
            >>> LocalTime(0, 15).get_field(Field.CLOCK_HOUR_OF_DAY)
            TemporalValue(24)
            >>> LocalTime(13, 0).get_field(Field.CLOCK_HOUR_OF_AMPM)
            TemporalValue(1)
        """
        if self.is_zero() or not field.is_time_based:
            return TemporalValue.unsupported_value()
        n = self._nano_of_day
        hour = n // NANOS_PER_HOUR
        if field == Field.NANO_OF_SECOND:
            value = n % NANOS_PER_SECOND
        elif field == Field.NANO_OF_DAY:
            value = n
        elif field == Field.MICRO_OF_SECOND:
            value = n % NANOS_PER_SECOND // NANOS_PER_MICROSECOND
        elif field == Field.MICRO_OF_DAY:
            value = n // NANOS_PER_MICROSECOND
        elif field == Field.MILLI_OF_SECOND:
            value = n % NANOS_PER_SECOND // NANOS_PER_MILLISECOND
        elif field == Field.MILLI_OF_DAY:
            value = n // NANOS_PER_MILLISECOND
        elif field == Field.SECOND_OF_MINUTE:
            value = n // NANOS_PER_SECOND % 60
        elif field == Field.SECOND_OF_DAY:
            value = n // NANOS_PER_SECOND
        elif field == Field.MINUTE_OF_HOUR:
            value = n // NANOS_PER_MINUTE % 60
        elif field == Field.MINUTE_OF_DAY:
            value = n // NANOS_PER_MINUTE
        elif field == Field.HOUR_OF_AMPM:
            value = hour % 12
        elif field == Field.CLOCK_HOUR_OF_AMPM:
            value = hour % 12 or 12
        elif field == Field.HOUR_OF_DAY:
            value = hour
        elif field == Field.CLOCK_HOUR_OF_DAY:
            value = hour or 24
        else:
            value = 0 if hour < 12 else 1
        return TemporalValue.of(value)

    def with_field(self, field: Field, value: TemporalValue | int) -> LocalTime:
        """Return a copy with a time-based field replaced.

        The *_OF_DAY fields for seconds and minutes, and the AM/PM fields,
        move the time relative to its current value. CLOCK_HOUR_OF_DAY 24
        means hour 0.

        Raises:
            OutOfRangeError: If the value is outside the field's range.
            UnsupportedFieldError: If the field is not time-based.

        Examples:
            >>> LocalTime(9, 15).with_field(Field.AMPM_OF_DAY, 1)
            LocalTime(21, 15, 0, 0)
            >>> LocalTime(9, 15).with_field(Field.CLOCK_HOUR_OF_DAY, 24)
            LocalTime(0, 15, 0, 0)
        """
        v = field.check(field_value(value))
        if self.is_zero():
            return self
        hour = self.hour
        if field == Field.NANO_OF_SECOND:
            return self.with_nano(v)
        if field == Field.NANO_OF_DAY:
            return LocalTime.of_nano_of_day(v)
        if field == Field.MICRO_OF_SECOND:
            return self.with_nano(v * NANOS_PER_MICROSECOND)
        if field == Field.MICRO_OF_DAY:
            return LocalTime.of_nano_of_day(v * NANOS_PER_MICROSECOND)
        if field == Field.MILLI_OF_SECOND:
            return self.with_nano(v * NANOS_PER_MILLISECOND)
        if field == Field.MILLI_OF_DAY:
            return LocalTime.of_nano_of_day(v * NANOS_PER_MILLISECOND)
        if field == Field.SECOND_OF_MINUTE:
            return self.with_second(v)
        if field == Field.SECOND_OF_DAY:
            return self.plus_seconds(v - self.second_of_day)
        if field == Field.MINUTE_OF_HOUR:
            return self.with_minute(v)
        if field == Field.MINUTE_OF_DAY:
            return self.plus_minutes(v - self._nano_of_day // NANOS_PER_MINUTE)
        if field == Field.HOUR_OF_AMPM:
            return self.plus_hours(v - hour % 12)
        if field == Field.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours((0 if v == 12 else v) - hour % 12)
        if field == Field.HOUR_OF_DAY:
            return self.with_hour(v)
        if field == Field.CLOCK_HOUR_OF_DAY:
            return self.with_hour(0 if v == 24 else v)
        if field == Field.AMPM_OF_DAY:
            return self.plus_hours((v - hour // 12) * 12)
        raise UnsupportedFieldError(field)

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: LocalTime) -> int:
        """Compare by time of day, with the zero time first.

        Returns:
            -1, 0 or 1.
        """
        return compare_ints(self._nano_of_day, other._nano_of_day)

    def is_before(self, other: LocalTime) -> bool:
        return self.compare(other) < 0

    def is_after(self, other: LocalTime) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day == other._nano_of_day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day < other._nano_of_day

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day <= other._nano_of_day

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day > other._nano_of_day

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nano_of_day >= other._nano_of_day

    def __hash__(self) -> int:
        return hash(self._nano_of_day)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        if self.is_zero():
            return "LocalTime.zero()"
        return f"LocalTime({self.hour}, {self.minute}, {self.second}, {self.nanosecond})"

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_local_time

        return format_local_time(self)

    @classmethod
    def parse(cls, text: str) -> LocalTime:
        """Parse an HH:mm:ss[.fffffffff] time."""
        from goda.format.iso8601 import parse_local_time

        return parse_local_time(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> LocalTime:
        """Unmarshal text; empty text yields the zero time."""
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> LocalTime:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> LocalTime:
        """Scan a SQL value: None, text, ``datetime.time`` or ``datetime``."""
        from goda.convert.sql import from_sql

        if isinstance(value, (datetime.time, datetime.datetime)):
            return cls.from_time(value)
        return from_sql(cls, value)


__all__ = ["LocalTime"]
