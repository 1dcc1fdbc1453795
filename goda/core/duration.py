"""Duration class representing a span of time.

This module provides the Duration class, a (seconds, nanos) pair with
nanosecond precision and the ISO 8601 ``PT...`` text form.
"""

from __future__ import annotations

import datetime

from goda._internal.arith import compare_ints, floor_div, floor_mod, in_int64
from goda._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from goda.errors import ArithmeticOverflowError


class Duration:
    """A span of time with nanosecond precision.

    Duration stores whole seconds and a nanosecond adjustment. The
    representation is normalized with floor division, so that
    ``0 <= nanos < 1_000_000_000`` and the sign lives in ``seconds``:
    -0.5s is stored as ``seconds=-1, nanos=500_000_000``.

    Unlike the other goda types, the zero duration is a meaningful value
    (it renders as "PT0S"), and ``bool(duration)`` follows its length.

    Attributes:
        seconds: Whole seconds, signed.
        nanos: Nanosecond adjustment in [0, 1e9).

    Examples:
        >>> d = Duration.of_seconds(5, -1_500_000_000)
        >>> d
        Duration(seconds=3, nanos=500000000)
        >>> str(d)
        'PT3.5S'
        >>> d.is_positive()
        True

        >>> str(Duration.parse("PT8H6M12.345S"))
        'PT8H6M12.345S'
    """

    __slots__ = ("_seconds", "_nanos")

    _EMPTY_TEXT_IS_ZERO = False

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Duration from seconds and a nanosecond adjustment.

        The nanosecond adjustment may be any value, including negative or
        larger than a second; it is folded into the seconds.

        Args:
            seconds: Number of seconds.
            nanos: Nanosecond adjustment.

        Raises:
            ArithmeticOverflowError: If the normalized seconds do not fit
                in a signed 64-bit integer.

        Examples:
            >>> Duration(1, 1_500_000_000)
            Duration(seconds=2, nanos=500000000)
        """
        total_seconds = seconds + floor_div(nanos, NANOS_PER_SECOND)
        if not in_int64(total_seconds):
            raise ArithmeticOverflowError()
        self._seconds = total_seconds
        self._nanos = floor_mod(nanos, NANOS_PER_SECOND)

    @classmethod
    def zero(cls) -> Duration:
        """Return the zero duration."""
        return cls(0, 0)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds and a nanosecond adjustment.

        Args:
            seconds: Number of seconds.
            nano_adjustment: Nanoseconds to add, any sign or magnitude.

        Returns:
            The normalized Duration.

        Examples:
            >>> Duration.of_seconds(5, -1_500_000_000) == Duration.of_seconds(3, 500_000_000)
            True
        """
        return cls(seconds, nano_adjustment)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a total number of nanoseconds."""
        return cls(0, nanos)

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        """Create a Duration from milliseconds."""
        return cls(0, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from minutes."""
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        """Create a Duration from hours."""
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration from standard 24-hour days."""
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def from_timedelta(cls, delta: datetime.timedelta) -> Duration:
        """Create a Duration from a ``datetime.timedelta``.

        Examples:
            >>> Duration.from_timedelta(datetime.timedelta(minutes=1, microseconds=5))
            Duration(seconds=60, nanos=5000)
        """
        return cls(
            delta.days * SECONDS_PER_DAY + delta.seconds,
            delta.microseconds * NANOS_PER_MICROSECOND,
        )

    def to_timedelta(self) -> datetime.timedelta:
        """Convert to a ``datetime.timedelta``, truncating to microseconds.

        Raises:
            OverflowError: If the duration exceeds the timedelta range.
        """
        return datetime.timedelta(seconds=self._seconds, microseconds=self._nanos // NANOS_PER_MICROSECOND)

    @property
    def seconds(self) -> int:
        """Return the whole-seconds component (signed)."""
        return self._seconds

    @property
    def nanos(self) -> int:
        """Return the nanosecond component, always in [0, 1e9)."""
        return self._nanos

    def to_nanos(self) -> int:
        """Return the total length in nanoseconds.

        Examples:
            >>> Duration.of_seconds(-1, 500_000_000).to_nanos()
            -500000000
        """
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    def is_positive(self) -> bool:
        """Return True if the duration is longer than zero."""
        return self._seconds > 0 or (self._seconds == 0 and self._nanos > 0)

    def is_negative(self) -> bool:
        """Return True if the duration is shorter than zero."""
        return self._seconds < 0

    def plus(self, other: Duration) -> Duration:
        """Return the sum of two durations.

        Raises:
            ArithmeticOverflowError: If the result overflows.
        """
        return Duration(self._seconds + other._seconds, self._nanos + other._nanos)

    def minus(self, other: Duration) -> Duration:
        """Return this duration minus another."""
        return Duration(self._seconds - other._seconds, self._nanos - other._nanos)

    def negated(self) -> Duration:
        """Return the duration with the opposite sign.

        Examples:
            >>> Duration.of_seconds(1, 250_000_000).negated()
            Duration(seconds=-2, nanos=750000000)
        """
        return Duration(-self._seconds, -self._nanos)

    def abs(self) -> Duration:
        """Return the absolute length of this duration."""
        if self.is_negative():
            return self.negated()
        return self

    def compare(self, other: Duration) -> int:
        """Compare lexicographically on (seconds, nanos), returning -1, 0 or 1."""
        return compare_ints(self._seconds, other._seconds) or compare_ints(self._nanos, other._nanos)

    # =========================================================================
    # Operators
    # =========================================================================

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_duration

        return format_duration(self)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse an ISO 8601 PT duration, such as "PT8H6M12.345S".

        Raises:
            ParseError: If the text is not a valid duration.
        """
        from goda.format.iso8601 import parse_duration

        return parse_duration(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> Duration:
        """Unmarshal text; empty text is rejected."""
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> Duration:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        """Return the SQL bind value: None for zero, else the text form."""
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> Duration:
        """Scan a SQL value.

        Accepts None, text, integer nanoseconds and ``datetime.timedelta``.
        """
        from goda.convert.sql import from_sql

        if isinstance(value, int) and not isinstance(value, bool):
            return cls.of_nanos(value)
        if isinstance(value, datetime.timedelta):
            return cls.from_timedelta(value)
        return from_sql(cls, value)


__all__ = ["Duration"]
