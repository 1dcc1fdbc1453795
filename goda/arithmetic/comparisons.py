"""Comparison operations for goda values.

This module provides ordering helpers over any goda value that exposes a
``compare`` method. Ordering follows each type's ``compare``:

Comparison Rules:
    - Zero values sort before every non-zero value of the same type
    - LocalDate, YearMonth: chronological ordering
    - LocalTime: earlier/later in day
    - LocalDateTime: date first, then time
    - OffsetDateTime: by instant, ties broken by local date-time
    - Duration: by signed length
    - ZoneOffset: by total seconds

Values of different types are never ordered against each other.

Supported Operations:
    - compare: Return -1, 0 or 1
    - min_value: Smallest of several values
    - max_value: Largest of several values
    - clamp: Restrict a value to a closed range
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from goda.core.duration import Duration
    from goda.core.local_date import LocalDate
    from goda.core.local_date_time import LocalDateTime
    from goda.core.local_time import LocalTime
    from goda.core.offset_date_time import OffsetDateTime
    from goda.core.year_month import YearMonth
    from goda.core.zone_offset import ZoneOffset

# Type alias for comparable goda types
ComparableType = Union[
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "OffsetDateTime",
    "YearMonth",
    "Duration",
    "ZoneOffset",
]


def _check_same_type(left: ComparableType, right: ComparableType) -> None:
    if type(left) is not type(right):
        raise TypeError(f"cannot compare {type(left).__name__} with {type(right).__name__}")


def compare(left: ComparableType, right: ComparableType) -> int:
    """Compare two goda values, returning -1, 0, or 1.

    Args:
        left: First value.
        right: Second value of the same type.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right.

    Raises:
        TypeError: If the values have different types.

    Examples:
        >>> from goda import LocalDate
        >>> compare(LocalDate(2024, 1, 15), LocalDate(2024, 1, 20))
        -1
        >>> compare(LocalDate.zero(), LocalDate.min())
        -1
    """
    _check_same_type(left, right)
    return left.compare(right)  # type: ignore[arg-type]


def min_value(*values: ComparableType) -> ComparableType:
    """Return the minimum of the given values.

    Raises:
        ValueError: If no values are provided.
        TypeError: If the values have different types.

    Examples:
        >>> from goda import LocalTime
        >>> min_value(LocalTime(12, 0), LocalTime(9, 30), LocalTime(18, 0))
        LocalTime(9, 30, 0, 0)
    """
    if not values:
        raise ValueError("min_value requires at least one argument")
    result = values[0]
    for v in values[1:]:
        if compare(v, result) < 0:
            result = v
    return result


def max_value(*values: ComparableType) -> ComparableType:
    """Return the maximum of the given values.

    Raises:
        ValueError: If no values are provided.
        TypeError: If the values have different types.
    """
    if not values:
        raise ValueError("max_value requires at least one argument")
    result = values[0]
    for v in values[1:]:
        if compare(v, result) > 0:
            result = v
    return result


def clamp(
    value: ComparableType,
    min_val: ComparableType,
    max_val: ComparableType,
) -> ComparableType:
    """Clamp a value to be within a range.

    Args:
        value: The value to clamp.
        min_val: The minimum allowed value.
        max_val: The maximum allowed value.

    Returns:
        value if min_val <= value <= max_val,
        min_val if value < min_val,
        max_val if value > max_val.

    Raises:
        TypeError: If types are not compatible.
        ValueError: If min_val > max_val.

    Examples:
        >>> from goda import YearMonth
        >>> low = YearMonth(2024, 1)
        >>> high = YearMonth(2024, 6)
        >>> clamp(YearMonth(2024, 3), low, high)
        YearMonth(2024, 3)
        >>> clamp(YearMonth(2023, 12), low, high)
        YearMonth(2024, 1)
    """
    if compare(min_val, max_val) > 0:
        raise ValueError("min_val must be less than or equal to max_val")

    if compare(value, min_val) < 0:
        return min_val
    elif compare(value, max_val) > 0:
        return max_val
    else:
        return value


__all__ = [
    "ComparableType",
    "compare",
    "min_value",
    "max_value",
    "clamp",
]
