"""Day-of-week enumeration.

This module provides the DayOfWeek enum, numbered 1 (Monday) to
7 (Sunday) following ISO-8601, with conversions to and from the
standard library's weekday numbering.
"""

from __future__ import annotations

from enum import IntEnum


class DayOfWeek(IntEnum):
    """A day-of-week, MONDAY (1) through SUNDAY (7).

    The value equals ``datetime.date.isoweekday()``. The standard
    library's ``weekday()`` numbers Monday as 0, so a remap is needed in
    that direction.

    Examples:
        >>> DayOfWeek.SUNDAY.python_weekday()
        6
        >>> DayOfWeek.from_python_weekday(0)
        <DayOfWeek.MONDAY: 1>
        >>> str(DayOfWeek.FRIDAY)
        'Friday'
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_python_weekday(cls, weekday: int) -> DayOfWeek:
        """Create a DayOfWeek from ``datetime.date.weekday()`` numbering.

        Args:
            weekday: Day of week with Monday as 0 and Sunday as 6.

        Returns:
            The matching DayOfWeek.
        """
        return cls(weekday % 7 + 1)

    def python_weekday(self) -> int:
        """Return the day in ``datetime.date.weekday()`` numbering (Monday is 0)."""
        return self.value - 1

    def plus(self, days: int) -> DayOfWeek:
        """Return the day that is the given number of days later, wrapping around.

        Examples:
            >>> DayOfWeek.SATURDAY.plus(2)
            <DayOfWeek.MONDAY: 1>
        """
        return DayOfWeek((self - 1 + days) % 7 + 1)

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


__all__ = ["DayOfWeek"]
