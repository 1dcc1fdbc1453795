"""Goda exception hierarchy.

All Goda-specific exceptions inherit from GodaError. Every error carries
an ErrorReason and renders with the ``goda: `` prefix, optionally
followed by the chain operation that failed (`` at LocalDate/plus_days``)
and the underlying cause (``, caused by: ...``).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from goda.units.field import Field


class ErrorReason(Enum):
    """Structured sub-reason of a GodaError."""

    EMPTY_INPUT = "empty input"
    BAD_FORMAT = "bad format"
    PARSE_NUMBER = "parse number"
    OUT_OF_RANGE = "out of range"
    UNSUPPORTED_FIELD = "unsupported field"
    OVERFLOW = "arithmetic overflow"
    UNSUPPORTED_SQL_TYPE = "unsupported sql type"
    INVALID_ZONE_ID = "invalid zone id"


class GodaError(Exception):
    """Base exception for all Goda errors.

    Attributes:
        reason: The structured sub-reason.
        input: The user input being parsed when the error was raised, if any.
        type_name: Name of the value type of the failing chain operation.
        op_name: Name of the failing chain operation.

    Examples:
        >>> str(GodaError("something went wrong"))
        'goda: something went wrong'
    """

    default_reason: ErrorReason = ErrorReason.BAD_FORMAT

    def __init__(self, message: str = "", *, reason: ErrorReason | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.reason: ErrorReason = reason if reason is not None else self.default_reason
        self.input: str | None = None
        self.type_name: str | None = None
        self.op_name: str | None = None

    def annotate(self, type_name: str, op_name: str) -> None:
        """Record the chain operation this error escaped from."""
        self.type_name = type_name
        self.op_name = op_name

    def _describe(self) -> str:
        return self.message

    def __str__(self) -> str:
        text = "goda: "
        if self.input is not None:
            text += f'parse "{self.input}": '
        text += self._describe()
        if self.type_name is not None:
            text += f" at {self.type_name}/{self.op_name}"
        if self.__cause__ is not None:
            text += f", caused by: {self.__cause__}"
        return text


class ParseError(GodaError):
    """Failed to parse a string representation.

    The reason tells which step failed:

    Examples:
        - EMPTY_INPUT: empty text where a value was required
        - BAD_FORMAT: missing separators, wrong length, trailing input
        - PARSE_NUMBER: a numeric component is not a number
    """

    default_reason = ErrorReason.BAD_FORMAT


class OutOfRangeError(GodaError):
    """A value lies outside the permitted interval.

    When raised for a field, the message names the field, its valid
    range, and the rejected value.

    Examples:
        - Month value outside 1-12
        - February 29 in a non-leap year
        - Zone offset beyond +/-18 hours
    """

    default_reason = ErrorReason.OUT_OF_RANGE

    def __init__(self, message: str = "", *, field: Field | None = None, value: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def _describe(self) -> str:
        if self.field is not None and not self.message:
            r = self.field.range
            return f"invalid value of {self.field} (valid range {r.min} - {r.max}): {self.value}"
        return self.message


class UnsupportedFieldError(GodaError):
    """A field is not handled by the value it was used with."""

    default_reason = ErrorReason.UNSUPPORTED_FIELD

    def __init__(self, field: Field) -> None:
        super().__init__()
        self.field = field

    def _describe(self) -> str:
        return f"unsupported field {self.field}"


class ArithmeticOverflowError(GodaError):
    """Arithmetic exceeded the representable range.

    Raised for signed 64-bit overflow and for results outside the
    supported date range.
    """

    default_reason = ErrorReason.OVERFLOW

    def _describe(self) -> str:
        return "arithmetic overflow"


class UnsupportedSqlTypeError(GodaError):
    """The SQL scanner received a value of an unexpected type."""

    default_reason = ErrorReason.UNSUPPORTED_SQL_TYPE

    def __init__(self, value: object) -> None:
        super().__init__()
        self.value_type = type(value)

    def _describe(self) -> str:
        return f"cannot scan value of type {self.value_type.__name__}"


class InvalidZoneIdError(GodaError):
    """A zone id could not be resolved to an offset or region."""

    default_reason = ErrorReason.INVALID_ZONE_ID

    def __init__(self, zone_id: str) -> None:
        super().__init__()
        self.zone_id = zone_id

    def _describe(self) -> str:
        return "invalid zone id"


__all__ = [
    "ErrorReason",
    "GodaError",
    "ParseError",
    "OutOfRangeError",
    "UnsupportedFieldError",
    "ArithmeticOverflowError",
    "UnsupportedSqlTypeError",
    "InvalidZoneIdError",
]
