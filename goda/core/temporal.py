"""Field-access protocol.

This module provides TemporalValue, the carrier returned by
``get_field`` and accepted by ``with_field``, and the TemporalAccessor
protocol implemented by every value type that exposes fields.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from goda.units.field import Field


class TemporalValue:
    """The value of a field, or a marker that the field could not be read.

    A TemporalValue is ``unsupported`` when the queried value is zero or
    does not handle the field, and ``overflow`` when the value exists but
    does not fit in a signed 64-bit integer.

    Attributes:
        value: The field value (0 when unsupported).
        unsupported: True if the field could not be read.
        overflow: True if the value overflowed int64.

    Examples:
        >>> tv = TemporalValue.of(42)
        >>> tv.value, tv.valid
        (42, True)
        >>> TemporalValue.unsupported_value().valid
        False
    """

    __slots__ = ("_value", "_unsupported", "_overflow")

    def __init__(self, value: int = 0, *, unsupported: bool = False, overflow: bool = False) -> None:
        self._value = 0 if unsupported else int(value)
        self._unsupported = unsupported
        self._overflow = overflow

    @classmethod
    def of(cls, value: int) -> TemporalValue:
        """Wrap a plain integer."""
        return cls(value)

    @classmethod
    def unsupported_value(cls) -> TemporalValue:
        """Return the marker for an unreadable field."""
        return cls(unsupported=True)

    @property
    def value(self) -> int:
        return self._value

    @property
    def unsupported(self) -> bool:
        return self._unsupported

    @property
    def overflow(self) -> bool:
        return self._overflow

    @property
    def valid(self) -> bool:
        """Return True if the value is neither unsupported nor overflowed."""
        return not self._unsupported and not self._overflow

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TemporalValue):
            return (self._value, self._unsupported, self._overflow) == (
                other._value,
                other._unsupported,
                other._overflow,
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self.valid and self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._value, self._unsupported, self._overflow))

    def __repr__(self) -> str:
        if self._unsupported:
            return "TemporalValue(unsupported=True)"
        if self._overflow:
            return f"TemporalValue({self._value}, overflow=True)"
        return f"TemporalValue({self._value})"


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read access to temporal fields."""

    def is_supported_field(self, field: Field) -> bool: ...

    def get_field(self, field: Field) -> TemporalValue: ...


def field_value(value: TemporalValue | int) -> int:
    """Return the integer carried by a TemporalValue or a plain int."""
    if isinstance(value, TemporalValue):
        return value.value
    return int(value)


__all__ = ["TemporalValue", "TemporalAccessor", "field_value"]
