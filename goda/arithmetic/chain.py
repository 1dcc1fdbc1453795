"""Chainable arithmetic with a sticky error.

A chain wraps a value together with the first error raised while
transforming it. Every operation returns a new chain; once an error is
held, later operations are skipped and the error is kept as is.

The held error records the chain operation that raised it, so its
message ends with `` at <Type>/<operation>``.

Examples:
    >>> from goda import LocalDate
    >>> LocalDate(2024, 1, 31).chain().plus_months(1).plus_days(1).must_get()
    LocalDate(2024, 3, 1)
    >>> c = LocalDate(2024, 1, 31).chain().with_month(13).plus_days(1)
    >>> str(c.get_error())
    'goda: invalid value of MonthOfYear (valid range 1 - 12): 13 at LocalDate/with_month'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from goda.errors import GodaError

if TYPE_CHECKING:
    from goda.core.duration import Duration
    from goda.core.local_date import LocalDate
    from goda.core.local_date_time import LocalDateTime
    from goda.core.local_time import LocalTime
    from goda.core.offset_date_time import OffsetDateTime
    from goda.core.temporal import TemporalValue
    from goda.core.year_month import YearMonth
    from goda.core.zone_offset import ZoneOffset
    from goda.units.field import Field

V = TypeVar("V")
C = TypeVar("C", bound="Chain[Any]")


class Chain(Generic[V]):
    """A value paired with the first error raised while transforming it.

    Subclasses set ``_type_name`` to the name used when annotating errors.
    """

    __slots__ = ("_value", "_error")

    _type_name: str = ""

    def __init__(self, value: V, error: GodaError | None = None) -> None:
        self._value = value
        self._error = error

    def _apply(self: C, op_name: str, *args: object) -> C:
        if self._error is not None:
            return self
        try:
            value = getattr(self._value, op_name)(*args)
        except GodaError as e:
            e.annotate(self._type_name, op_name)
            return type(self)(self._value, e)
        return type(self)(value)

    # =========================================================================
    # Results
    # =========================================================================

    def must_get(self) -> V:
        """Return the value, raising the held error if there is one."""
        if self._error is not None:
            raise self._error
        return self._value

    def get_error(self) -> GodaError | None:
        """Return the held error, or None."""
        return self._error

    def get_or_else(self, other: V) -> V:
        """Return the value, or ``other`` if an error is held."""
        if self._error is not None:
            return other
        return self._value

    def get_or_else_get(self, supplier: Callable[[], V]) -> V:
        """Return the value, or the result of ``supplier()`` if an error is held."""
        if self._error is not None:
            return supplier()
        return self._value

    def get_result(self) -> tuple[V, GodaError | None]:
        """Return the ``(value, error)`` pair.

        When an error is held, the value is the last one computed before it.
        """
        return self._value, self._error

    def is_zero(self) -> bool:
        """Return True if no error is held and the value is the zero value."""
        return self._error is None and self._value.is_zero()  # type: ignore[attr-defined]

    def with_field(self: C, field: Field, value: TemporalValue | int) -> C:
        return self._apply("with_field", field, value)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"{type(self).__name__}(error={self._error!s})"
        return f"{type(self).__name__}({self._value!r})"


class _DateOps(Chain[V]):
    __slots__ = ()

    def plus_days(self: C, days: int) -> C:
        return self._apply("plus_days", days)

    def minus_days(self: C, days: int) -> C:
        return self._apply("minus_days", days)

    def plus_weeks(self: C, weeks: int) -> C:
        return self._apply("plus_weeks", weeks)

    def minus_weeks(self: C, weeks: int) -> C:
        return self._apply("minus_weeks", weeks)

    def plus_months(self: C, months: int) -> C:
        return self._apply("plus_months", months)

    def minus_months(self: C, months: int) -> C:
        return self._apply("minus_months", months)

    def plus_years(self: C, years: int) -> C:
        return self._apply("plus_years", years)

    def minus_years(self: C, years: int) -> C:
        return self._apply("minus_years", years)

    def with_day_of_month(self: C, day_of_month: int) -> C:
        return self._apply("with_day_of_month", day_of_month)

    def with_day_of_year(self: C, day_of_year: int) -> C:
        return self._apply("with_day_of_year", day_of_year)

    def with_month(self: C, month: int) -> C:
        return self._apply("with_month", month)

    def with_year(self: C, year: int) -> C:
        return self._apply("with_year", year)


class _TimeOps(Chain[V]):
    __slots__ = ()

    def plus_hours(self: C, hours: int) -> C:
        return self._apply("plus_hours", hours)

    def minus_hours(self: C, hours: int) -> C:
        return self._apply("minus_hours", hours)

    def plus_minutes(self: C, minutes: int) -> C:
        return self._apply("plus_minutes", minutes)

    def minus_minutes(self: C, minutes: int) -> C:
        return self._apply("minus_minutes", minutes)

    def plus_seconds(self: C, seconds: int) -> C:
        return self._apply("plus_seconds", seconds)

    def minus_seconds(self: C, seconds: int) -> C:
        return self._apply("minus_seconds", seconds)

    def plus_nanos(self: C, nanos: int) -> C:
        return self._apply("plus_nanos", nanos)

    def minus_nanos(self: C, nanos: int) -> C:
        return self._apply("minus_nanos", nanos)

    def with_hour(self: C, hour: int) -> C:
        return self._apply("with_hour", hour)

    def with_minute(self: C, minute: int) -> C:
        return self._apply("with_minute", minute)

    def with_second(self: C, second: int) -> C:
        return self._apply("with_second", second)

    def with_nano(self: C, nanosecond: int) -> C:
        return self._apply("with_nano", nanosecond)


class LocalDateChain(_DateOps["LocalDate"]):
    """Chain over LocalDate."""

    __slots__ = ()
    _type_name = "LocalDate"


class LocalTimeChain(_TimeOps["LocalTime"]):
    """Chain over LocalTime. Time arithmetic wraps around midnight."""

    __slots__ = ()
    _type_name = "LocalTime"


class LocalDateTimeChain(_DateOps["LocalDateTime"], _TimeOps["LocalDateTime"]):
    """Chain over LocalDateTime. Time arithmetic carries into the date."""

    __slots__ = ()
    _type_name = "LocalDateTime"

    def plus_duration(self: C, duration: Duration) -> C:
        return self._apply("plus_duration", duration)

    def minus_duration(self: C, duration: Duration) -> C:
        return self._apply("minus_duration", duration)


class OffsetDateTimeChain(_DateOps["OffsetDateTime"], _TimeOps["OffsetDateTime"]):
    """Chain over OffsetDateTime.

    Examples:
        >>> from goda import OffsetDateTime, ZoneOffset
        >>> odt = OffsetDateTime.parse("2024-03-15T23:30:00Z")
        >>> str(odt.chain().with_offset_same_instant(ZoneOffset.of_hours(2)).must_get())
        '2024-03-16T01:30:00+02:00'
    """

    __slots__ = ()
    _type_name = "OffsetDateTime"

    def plus_duration(self: C, duration: Duration) -> C:
        return self._apply("plus_duration", duration)

    def minus_duration(self: C, duration: Duration) -> C:
        return self._apply("minus_duration", duration)

    def with_offset_same_local(self: C, offset: ZoneOffset) -> C:
        return self._apply("with_offset_same_local", offset)

    def with_offset_same_instant(self: C, offset: ZoneOffset) -> C:
        return self._apply("with_offset_same_instant", offset)


class YearMonthChain(Chain["YearMonth"]):
    """Chain over YearMonth."""

    __slots__ = ()
    _type_name = "YearMonth"

    def plus_months(self: C, months: int) -> C:
        return self._apply("plus_months", months)

    def minus_months(self: C, months: int) -> C:
        return self._apply("minus_months", months)

    def plus_years(self: C, years: int) -> C:
        return self._apply("plus_years", years)

    def minus_years(self: C, years: int) -> C:
        return self._apply("minus_years", years)

    def with_month(self: C, month: int) -> C:
        return self._apply("with_month", month)

    def with_year(self: C, year: int) -> C:
        return self._apply("with_year", year)


__all__ = [
    "Chain",
    "LocalDateChain",
    "LocalTimeChain",
    "LocalDateTimeChain",
    "OffsetDateTimeChain",
    "YearMonthChain",
]
