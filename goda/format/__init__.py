"""Text formatting and parsing for goda values.

This module provides the ISO 8601 grammars used by ``str()`` and
``parse()`` on every goda type.

Examples:
    >>> from goda.format import parse_duration
    >>> str(parse_duration("PT1H30M"))
    'PT1H30M'
"""

from __future__ import annotations

from goda.format.iso8601 import (
    format_duration,
    format_local_date,
    format_local_date_time,
    format_local_time,
    format_offset_date_time,
    format_year_month,
    format_zone_offset,
    parse_duration,
    parse_local_date,
    parse_local_date_time,
    parse_local_time,
    parse_offset_date_time,
    parse_year_month,
    parse_zone_offset,
    parsing,
)

__all__: list[str] = [
    "parsing",
    "format_duration",
    "format_local_date",
    "format_local_date_time",
    "format_local_time",
    "format_offset_date_time",
    "format_year_month",
    "format_zone_offset",
    "parse_duration",
    "parse_local_date",
    "parse_local_date_time",
    "parse_local_time",
    "parse_offset_date_time",
    "parse_year_month",
    "parse_zone_offset",
]
