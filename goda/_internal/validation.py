"""Validation utilities for Goda.

This module provides the field-range check used by every validating
constructor, and a decorator that applies it to named parameters.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

from goda.errors import OutOfRangeError

if TYPE_CHECKING:
    from goda.units.field import Field

P = ParamSpec("P")
T = TypeVar("T")


def check_field(field: Field, value: int) -> int:
    """Validate that value lies within the field's range.

    Args:
        field: The field whose range applies.
        value: The candidate value.

    Returns:
        The value, unchanged.

    Raises:
        OutOfRangeError: If the value is outside the field's range.

    Examples:
        >>> from goda.units.field import Field
        >>> check_field(Field.MONTH_OF_YEAR, 12)
        12
        >>> check_field(Field.MONTH_OF_YEAR, 13)
        Traceback (most recent call last):
        ...
        OutOfRangeError: goda: invalid value of MonthOfYear (valid range 1 - 12): 13
    """
    r = field.range
    if value < r.min or value > r.max:
        raise OutOfRangeError(field=field, value=value)
    return value


def validate_fields(
    **fields: Field,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within field ranges.

    Each keyword maps a parameter name to the Field whose range the
    argument must satisfy. Parameters are checked in declaration order,
    so the first offending argument is reported.

    Args:
        **fields: Mapping of parameter names to fields.

    Returns:
        A decorator function.

    Examples:
        >>> from goda.units.field import Field
        >>> @validate_fields(hour=Field.HOUR_OF_DAY)
        ... def at(hour: int) -> int:
        ...     return hour

        >>> at(24)
        Traceback (most recent call last):
        ...
        OutOfRangeError: goda: invalid value of HourOfDay (valid range 0 - 23): 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)
        checked = [name for name in sig.parameters if name in fields]

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            for name in checked:
                check_field(fields[name], int(bound.arguments[name]))
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "check_field",
    "validate_fields",
]
