"""ZoneOffset class representing a fixed offset from UTC.

This module provides the ZoneOffset class, a whole number of seconds
between -18:00 and +18:00.
"""

from __future__ import annotations

import datetime

from goda._internal.arith import compare_ints
from goda._internal.constants import MAX_OFFSET_SECONDS, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from goda._internal.validation import check_field
from goda.core.temporal import TemporalValue
from goda.errors import OutOfRangeError
from goda.units.field import Field


class ZoneOffset:
    """A fixed offset from UTC, such as +05:30.

    The offset is stored as total seconds in [-64800, 64800]. The zero
    offset is UTC and renders as "Z".

    Examples:
        >>> ZoneOffset.of(5, 30)
        ZoneOffset('+05:30')
        >>> ZoneOffset.parse("+05:30").total_seconds
        19800
        >>> str(ZoneOffset.utc())
        'Z'
    """

    __slots__ = ("_total_seconds",)

    _EMPTY_TEXT_IS_ZERO = False

    def __init__(self, total_seconds: int = 0) -> None:
        """Create a ZoneOffset from total seconds.

        Raises:
            OutOfRangeError: If the offset is beyond +/-18 hours.
        """
        check_field(Field.OFFSET_SECONDS, total_seconds)
        self._total_seconds = total_seconds

    @classmethod
    def of_total_seconds(cls, seconds: int) -> ZoneOffset:
        """Create a ZoneOffset from total seconds.

        Raises:
            OutOfRangeError: If the offset is beyond +/-18 hours.

        Examples:
            >>> ZoneOffset.of_total_seconds(-3600)
            ZoneOffset('-01:00')
        """
        return cls(seconds)

    @classmethod
    def of(cls, hours: int, minutes: int = 0, seconds: int = 0) -> ZoneOffset:
        """Create a ZoneOffset from hours, minutes and seconds.

        All components must share the same sign; a component that is
        zero matches either sign.

        Args:
            hours: Offset hours, -18 to +18.
            minutes: Offset minutes, -59 to +59.
            seconds: Offset seconds, -59 to +59.

        Raises:
            OutOfRangeError: If the signs are mixed or a component is
                out of range.

        Examples:
            >>> ZoneOffset.of(-3, -30).total_seconds
            -12600
            >>> ZoneOffset.of(-3, 30)
            Traceback (most recent call last):
            ...
            goda.errors.OutOfRangeError: goda: zone offset minutes and seconds must not be positive when hours is negative
        """
        if hours < 0:
            if minutes > 0 or seconds > 0:
                raise OutOfRangeError("zone offset minutes and seconds must not be positive when hours is negative")
        elif hours > 0:
            if minutes < 0 or seconds < 0:
                raise OutOfRangeError("zone offset minutes and seconds must not be negative when hours is positive")
        elif minutes < 0 and seconds > 0:
            raise OutOfRangeError("zone offset seconds must not be positive when minutes is negative")
        elif minutes > 0 and seconds < 0:
            raise OutOfRangeError("zone offset seconds must not be negative when minutes is positive")
        if not -18 <= hours <= 18:
            raise OutOfRangeError(f"zone offset hours must be in range -18 to +18, got {hours}")
        if not -59 <= minutes <= 59:
            raise OutOfRangeError(f"zone offset minutes must be in range -59 to +59, got {minutes}")
        if not -59 <= seconds <= 59:
            raise OutOfRangeError(f"zone offset seconds must be in range -59 to +59, got {seconds}")
        return cls(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        """Create a ZoneOffset from whole hours."""
        return cls.of(hours)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        """Create a ZoneOffset from hours and minutes of the same sign."""
        return cls.of(hours, minutes)

    @classmethod
    def utc(cls) -> ZoneOffset:
        """Return the UTC offset (+00:00)."""
        return cls(0)

    @classmethod
    def zero(cls) -> ZoneOffset:
        """Return the zero offset, which is UTC."""
        return cls(0)

    @classmethod
    def min(cls) -> ZoneOffset:
        """Return the smallest offset, -18:00."""
        return cls(-MAX_OFFSET_SECONDS)

    @classmethod
    def max(cls) -> ZoneOffset:
        """Return the largest offset, +18:00."""
        return cls(MAX_OFFSET_SECONDS)

    @classmethod
    def from_timedelta(cls, delta: datetime.timedelta) -> ZoneOffset:
        """Create a ZoneOffset from a ``datetime.timedelta``, such as ``utcoffset()``.

        Sub-second parts are dropped.
        """
        return cls(delta.days * 86_400 + delta.seconds)

    @property
    def total_seconds(self) -> int:
        """Return the offset in seconds, positive east of Greenwich."""
        return self._total_seconds

    @property
    def hours(self) -> int:
        """Return the hours component, truncated toward zero."""
        return self._split()[0]

    @property
    def minutes(self) -> int:
        """Return the minutes component, with the sign of the offset."""
        return self._split()[1]

    @property
    def seconds(self) -> int:
        """Return the seconds component, with the sign of the offset."""
        return self._split()[2]

    def _split(self) -> tuple[int, int, int]:
        sign = -1 if self._total_seconds < 0 else 1
        total = abs(self._total_seconds)
        return (
            sign * (total // SECONDS_PER_HOUR),
            sign * (total // SECONDS_PER_MINUTE % 60),
            sign * (total % SECONDS_PER_MINUTE),
        )

    def is_zero(self) -> bool:
        """Return True for UTC."""
        return self._total_seconds == 0

    def compare(self, other: ZoneOffset) -> int:
        """Compare by total seconds, returning -1, 0 or 1."""
        return compare_ints(self._total_seconds, other._total_seconds)

    def to_timezone(self) -> datetime.timezone:
        """Convert to a fixed ``datetime.timezone``.

        Examples:
            >>> ZoneOffset.of(1).to_timezone()
            datetime.timezone(datetime.timedelta(seconds=3600))
        """
        if self._total_seconds == 0:
            return datetime.timezone.utc
        return datetime.timezone(datetime.timedelta(seconds=self._total_seconds))

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported_field(self, field: Field) -> bool:
        return field == Field.OFFSET_SECONDS

    def get_field(self, field: Field) -> TemporalValue:
        """Return OFFSET_SECONDS; every other field is unsupported."""
        if field == Field.OFFSET_SECONDS:
            return TemporalValue.of(self._total_seconds)
        return TemporalValue.unsupported_value()

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds == other._total_seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds < other._total_seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds <= other._total_seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds > other._total_seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds >= other._total_seconds

    def __hash__(self) -> int:
        return hash(self._total_seconds)

    def __bool__(self) -> bool:
        return self._total_seconds != 0

    def __repr__(self) -> str:
        return f"ZoneOffset('{self}')"

    # =========================================================================
    # Text / JSON
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_zone_offset

        return format_zone_offset(self)

    @classmethod
    def parse(cls, text: str) -> ZoneOffset:
        """Parse Z, +H, +HH, +HHMM, +HH:MM, +HHMMSS or +HH:MM:SS.

        Raises:
            ParseError: If the text does not follow the grammar.
            OutOfRangeError: If a component is out of range.
        """
        from goda.format.iso8601 import parse_zone_offset

        return parse_zone_offset(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> ZoneOffset:
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> ZoneOffset:
        from goda.convert.json import from_json

        return from_json(cls, data)


__all__ = ["ZoneOffset"]
