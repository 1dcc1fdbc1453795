"""JSON serialization and deserialization for goda values.

This module provides the JSON codec behind every type's ``to_json`` and
``from_json``. The JSON form of a value is its canonical text as a JSON
string literal.

Functions:
    to_json: Render a value as a JSON string literal.
    from_json: Parse a JSON string literal into an instance of a type.

JSON ``null`` decodes to the zero value of any type. The empty string
``""`` decodes to the zero value for the types whose zero renders as
"" (LocalDate, LocalTime, LocalDateTime, OffsetDateTime, YearMonth and
ZoneId).

Examples:
    >>> from goda import LocalDate
    >>> to_json(LocalDate(2024, 3, 15))
    '"2024-03-15"'
    >>> from_json(LocalDate, '"2024-03-15"')
    LocalDate(2024, 3, 15)
    >>> from_json(LocalDate, "null")
    LocalDate.zero()
"""

from __future__ import annotations

import json
from typing import TypeVar

from goda.errors import ParseError
from goda.format.iso8601 import as_text

T = TypeVar("T")


def to_json(value: object) -> str:
    """Render a value's canonical text as a JSON string literal.

    Args:
        value: Any goda value.

    Returns:
        The JSON document, such as ``'"2024-03-15"'``.
    """
    return json.dumps(str(value))


def from_json(cls: type[T], data: str | bytes | bytearray) -> T:
    """Parse a JSON document into an instance of cls.

    Args:
        cls: The goda type to produce.
        data: A JSON string literal or ``null``.

    Returns:
        The decoded value.

    Raises:
        ParseError: If the data is not valid JSON or not a JSON string.
    """
    text = as_text(data).strip()
    if text == "null":
        return cls.zero()  # type: ignore[attr-defined]
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON for {cls.__name__}") from e
    if not isinstance(decoded, str):
        raise ParseError(f"expected a JSON string for {cls.__name__}, got {type(decoded).__name__}")
    return cls.from_text(decoded)  # type: ignore[attr-defined]


__all__ = ["to_json", "from_json"]
