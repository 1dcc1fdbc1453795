"""Era enumeration for BCE/CE designation.

This module provides the Era enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) dates.
"""

from __future__ import annotations

from enum import IntEnum


class Era(IntEnum):
    """Historical era designation.

    The Era enum represents whether a date is in the Common Era (CE)
    or Before Common Era (BCE). Year 0 exists (astronomical convention)
    and is considered BCE. The values match the ERA field: 0 for BCE,
    1 for CE.

    Examples:
        >>> Era.of_year(2024)
        <Era.CE: 1>
        >>> Era.of_year(0).is_before_common_era
        True
    """

    BCE = 0  # Before Common Era
    CE = 1  # Common Era

    @classmethod
    def of_year(cls, year: int) -> Era:
        """Return the era of a proleptic year."""
        return cls.CE if year >= 1 else cls.BCE

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era.

        Returns:
            True if this is Era.BCE, False if Era.CE.
        """
        return self == Era.BCE

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


__all__ = ["Era"]
