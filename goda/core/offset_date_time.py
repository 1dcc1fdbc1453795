"""OffsetDateTime class representing a date-time at a fixed UTC offset.

This module provides the OffsetDateTime class, a LocalDateTime paired
with a ZoneOffset, which identifies an instant on the time-line.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from goda._internal.arith import compare_ints, in_int64
from goda.core.duration import Duration
from goda.core.local_date_time import LocalDateTime
from goda.core.temporal import TemporalValue, field_value
from goda.core.zone_offset import ZoneOffset
from goda.units.field import Field

if TYPE_CHECKING:
    from goda.arithmetic.chain import OffsetDateTimeChain
    from goda.core.local_date import LocalDate
    from goda.core.local_time import LocalTime
    from goda.core.zone_id import ZoneId
    from goda.units.day_of_week import DayOfWeek
    from goda.units.month import Month
    from goda.units.year import Year


class OffsetDateTime:
    """A date-time with an offset from UTC, such as 2024-03-15T14:30:00+05:30.

    Equality compares the local date-time and the offset, so the same
    instant at two offsets is not equal; ``is_before``, ``is_after`` and
    ``compare`` order by instant first.

    Examples:
        >>> odt = OffsetDateTime(2024, 3, 15, 14, 30, 0, 0, ZoneOffset.of(5, 30))
        >>> str(odt)
        '2024-03-15T14:30:00+05:30'
        >>> odt.to_epoch_second()
        1710493200
        >>> str(odt.with_offset_same_instant(ZoneOffset.utc()))
        '2024-03-15T09:00:00Z'
    """

    __slots__ = ("_ldt", "_offset")

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
        offset: ZoneOffset | None = None,
    ) -> None:
        """Create an OffsetDateTime from its components.

        Args:
            offset: The offset from UTC; defaults to UTC.

        Raises:
            OutOfRangeError: If any component is out of range.
        """
        self._ldt = LocalDateTime(year, month, day, hour, minute, second, nanosecond)
        self._offset = offset if offset is not None else ZoneOffset.utc()

    @classmethod
    def of(cls, local_date_time: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        """Combine a local date-time with an offset."""
        odt = object.__new__(cls)
        odt._ldt = local_date_time
        odt._offset = offset
        return odt

    # =========================================================================
    # Factory methods
    # =========================================================================

    @classmethod
    def zero(cls) -> OffsetDateTime:
        """Return the zero OffsetDateTime."""
        return cls.of(LocalDateTime.zero(), ZoneOffset.utc())

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano: int, offset: ZoneOffset) -> OffsetDateTime:
        """Create an OffsetDateTime from an instant and an offset.

        Examples:
            >>> str(OffsetDateTime.of_epoch_second(0, 0, ZoneOffset.of(2)))
            '1970-01-01T02:00:00+02:00'
        """
        return cls.of(LocalDateTime.of_epoch_second(epoch_second, nano, offset), offset)

    @classmethod
    def from_datetime(cls, dt: datetime.datetime) -> OffsetDateTime:
        """Create an OffsetDateTime from a ``datetime``.

        An aware datetime keeps its UTC offset; a naive one is taken as UTC.
        """
        delta = dt.utcoffset()
        offset = ZoneOffset.from_timedelta(delta) if delta is not None else ZoneOffset.utc()
        return cls.of(LocalDateTime.from_datetime(dt), offset)

    @classmethod
    def now(cls) -> OffsetDateTime:
        """Return the current date-time at the host's local offset."""
        return cls.from_datetime(datetime.datetime.now().astimezone())

    @classmethod
    def now_utc(cls) -> OffsetDateTime:
        """Return the current date-time in UTC."""
        return cls.from_datetime(datetime.datetime.now(datetime.timezone.utc))

    @classmethod
    def now_in(cls, zone: ZoneId) -> OffsetDateTime:
        """Return the current date-time at the offset in effect in a zone."""
        return cls.from_datetime(datetime.datetime.now(zone.to_tzinfo()))

    def to_datetime(self) -> datetime.datetime:
        """Convert to an aware ``datetime``, truncating to microseconds."""
        return self._ldt.to_datetime(self._offset.to_timezone())

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def local_date_time(self) -> LocalDateTime:
        return self._ldt

    @property
    def local_date(self) -> LocalDate:
        return self._ldt.local_date

    @property
    def local_time(self) -> LocalTime:
        return self._ldt.local_time

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def year(self) -> Year:
        return self._ldt.year

    @property
    def month(self) -> Month | None:
        return self._ldt.month

    @property
    def day_of_month(self) -> int:
        return self._ldt.day_of_month

    @property
    def day_of_week(self) -> DayOfWeek | None:
        return self._ldt.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._ldt.day_of_year

    @property
    def hour(self) -> int:
        return self._ldt.hour

    @property
    def minute(self) -> int:
        return self._ldt.minute

    @property
    def second(self) -> int:
        return self._ldt.second

    @property
    def millisecond(self) -> int:
        return self._ldt.millisecond

    @property
    def nanosecond(self) -> int:
        return self._ldt.nanosecond

    def is_zero(self) -> bool:
        return self._ldt.is_zero()

    def to_epoch_second(self) -> int:
        """Return seconds since 1970-01-01T00:00:00Z."""
        return self._ldt.to_epoch_second(self._offset)

    # =========================================================================
    # Offset changes
    # =========================================================================

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return a copy with the offset replaced and the local date-time kept."""
        if self.is_zero():
            return self
        return OffsetDateTime.of(self._ldt, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return the same instant seen at another offset."""
        if self.is_zero() or offset == self._offset:
            return self
        ldt = self._ldt.plus_seconds(offset.total_seconds - self._offset.total_seconds)
        return OffsetDateTime.of(ldt, offset)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _with(self, ldt: LocalDateTime) -> OffsetDateTime:
        if ldt is self._ldt:
            return self
        return OffsetDateTime.of(ldt, self._offset)

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_days(days))

    def minus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_days(days))

    def plus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_weeks(weeks))

    def minus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_weeks(weeks))

    def plus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_months(months))

    def minus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_months(months))

    def plus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_years(years))

    def minus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_years(years))

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_hours(hours))

    def minus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_hours(hours))

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_minutes(minutes))

    def minus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_seconds(seconds))

    def minus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._ldt.plus_nanos(nanos))

    def minus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._ldt.minus_nanos(nanos))

    def plus_duration(self, duration: Duration) -> OffsetDateTime:
        return self._with(self._ldt.plus_duration(duration))

    def minus_duration(self, duration: Duration) -> OffsetDateTime:
        return self._with(self._ldt.minus_duration(duration))

    def with_day_of_month(self, day_of_month: int) -> OffsetDateTime:
        return self._with(self._ldt.with_day_of_month(day_of_month))

    def with_day_of_year(self, day_of_year: int) -> OffsetDateTime:
        return self._with(self._ldt.with_day_of_year(day_of_year))

    def with_month(self, month: int) -> OffsetDateTime:
        return self._with(self._ldt.with_month(month))

    def with_year(self, year: int) -> OffsetDateTime:
        return self._with(self._ldt.with_year(year))

    def with_hour(self, hour: int) -> OffsetDateTime:
        return self._with(self._ldt.with_hour(hour))

    def with_minute(self, minute: int) -> OffsetDateTime:
        return self._with(self._ldt.with_minute(minute))

    def with_second(self, second: int) -> OffsetDateTime:
        return self._with(self._ldt.with_second(second))

    def with_nano(self, nanosecond: int) -> OffsetDateTime:
        return self._with(self._ldt.with_nano(nanosecond))

    def chain(self) -> OffsetDateTimeChain:
        """Return a chain for error-accumulating arithmetic."""
        from goda.arithmetic.chain import OffsetDateTimeChain

        return OffsetDateTimeChain(self)

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported_field(self, field: Field) -> bool:
        """Return True for date, time, INSTANT_SECONDS and OFFSET_SECONDS fields."""
        return True

    def get_field(self, field: Field) -> TemporalValue:
        """Return a field value.

        INSTANT_SECONDS is flagged as overflowed when it does not fit in
        a signed 64-bit integer.
        """
        if self.is_zero():
            return TemporalValue.unsupported_value()
        if field == Field.INSTANT_SECONDS:
            epoch_second = self.to_epoch_second()
            return TemporalValue(epoch_second, overflow=not in_int64(epoch_second))
        if field == Field.OFFSET_SECONDS:
            return TemporalValue.of(self._offset.total_seconds)
        return self._ldt.get_field(field)

    def with_field(self, field: Field, value: TemporalValue | int) -> OffsetDateTime:
        """Return a copy with a field replaced.

        INSTANT_SECONDS moves to another instant at the same offset;
        OFFSET_SECONDS replaces the offset and keeps the local date-time.

        Examples:
            >>> odt = OffsetDateTime(2024, 3, 15, 12, 0, offset=ZoneOffset.of(1))
            >>> str(odt.with_field(Field.INSTANT_SECONDS, 0))
            '1970-01-01T01:00:00+01:00'
        """
        v = field.check(field_value(value))
        if self.is_zero():
            return self
        if field == Field.INSTANT_SECONDS:
            return OffsetDateTime.of_epoch_second(v, self.nanosecond, self._offset)
        if field == Field.OFFSET_SECONDS:
            return self.with_offset_same_local(ZoneOffset.of_total_seconds(v))
        return self._with(self._ldt.with_field(field, v))

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: OffsetDateTime) -> int:
        """Compare by instant, then by local date-time, with zero first."""
        return self._compare_instant(other) or self._ldt.compare(other._ldt)

    def _compare_instant(self, other: OffsetDateTime) -> int:
        # The zero value sits before every instant, including those before 1970.
        if self.is_zero() or other.is_zero():
            return other.is_zero() - self.is_zero()
        return compare_ints(self.to_epoch_second(), other.to_epoch_second()) or compare_ints(
            self.nanosecond, other.nanosecond
        )

    def is_before(self, other: OffsetDateTime) -> bool:
        """Return True if this instant is earlier than other's, with zero first."""
        return self._compare_instant(other) < 0

    def is_after(self, other: OffsetDateTime) -> bool:
        """Return True if this instant is later than other's, with zero first."""
        return self._compare_instant(other) > 0

    def is_equal(self, other: OffsetDateTime) -> bool:
        """Return True if both denote the same instant, or both are zero."""
        return self._compare_instant(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._ldt == other._ldt and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._ldt, self._offset))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        if self.is_zero():
            return "OffsetDateTime.zero()"
        return f"OffsetDateTime.parse('{self}')"

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_offset_date_time

        return format_offset_date_time(self)

    @classmethod
    def parse(cls, text: str) -> OffsetDateTime:
        """Parse a <date>T<time><offset> value."""
        from goda.format.iso8601 import parse_offset_date_time

        return parse_offset_date_time(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> OffsetDateTime:
        """Unmarshal text; empty text yields the zero value."""
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> OffsetDateTime:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> OffsetDateTime:
        """Scan a SQL value: None, text or ``datetime`` (naive means UTC)."""
        from goda.convert.sql import from_sql

        if isinstance(value, datetime.datetime):
            return cls.from_datetime(value)
        return from_sql(cls, value)


__all__ = ["OffsetDateTime"]
