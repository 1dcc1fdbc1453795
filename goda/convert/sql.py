"""SQL bind and scan conversion for goda values.

This module provides the database boundary behind every type's
``to_sql`` and ``from_sql``. goda does not talk to a database; it only
produces bind parameters and consumes column values as a DB-API driver
would hand them over.

Functions:
    to_sql: Return the bind value: None for a zero value, else its text.
    from_sql: Scan None, str or bytes into an instance of a type.

Native column values (``datetime.date``, ``datetime.time``,
``datetime.datetime``, ``timedelta``, integer nanoseconds) are handled
by each type's ``from_sql`` before it delegates here.

Examples:
    >>> from goda import LocalDate
    >>> to_sql(LocalDate(2024, 3, 15))
    '2024-03-15'
    >>> to_sql(LocalDate.zero()) is None
    True
    >>> from_sql(LocalDate, b"2024-03-15")
    LocalDate(2024, 3, 15)
"""

from __future__ import annotations

from typing import TypeVar

from goda.errors import UnsupportedSqlTypeError

T = TypeVar("T")


def to_sql(value: object) -> str | None:
    """Return the SQL bind value for a goda value.

    Returns:
        None for a zero value, otherwise the canonical text.
    """
    if value.is_zero():  # type: ignore[attr-defined]
        return None
    return str(value)


def from_sql(cls: type[T], value: object) -> T:
    """Scan a textual SQL column value into an instance of cls.

    Args:
        cls: The goda type to produce.
        value: None, str, or bytes-like holding UTF-8 text.

    Returns:
        The zero value for None, else the parsed value.

    Raises:
        UnsupportedSqlTypeError: If the value has any other type.
        ParseError: If the text is malformed.
    """
    if value is None:
        return cls.zero()  # type: ignore[attr-defined]
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return cls.from_text(value)  # type: ignore[attr-defined]
    raise UnsupportedSqlTypeError(value)


__all__ = ["to_sql", "from_sql"]
