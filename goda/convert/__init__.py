"""Conversion functions for goda values.

This module provides:
    - to_json, from_json: JSON string-literal codec
    - to_sql, from_sql: SQL bind/scan codec

Examples:
    >>> from goda import LocalTime
    >>> from goda.convert import to_json, to_sql
    >>> to_json(LocalTime(9, 30))
    '"09:30:00"'
    >>> to_sql(LocalTime.zero()) is None
    True
"""

from __future__ import annotations

from goda.convert.json import from_json, to_json
from goda.convert.sql import from_sql, to_sql

__all__: list[str] = [
    "to_json",
    "from_json",
    "to_sql",
    "from_sql",
]
