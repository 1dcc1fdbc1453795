"""Core temporal types.

This module provides the fundamental value types:
    - LocalDate: Calendar date in the proleptic Gregorian calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: Date and time without an offset
    - OffsetDateTime: Date and time with a fixed UTC offset
    - YearMonth: Year and month without a day
    - Duration: Signed time span with nanosecond precision
    - ZoneOffset: Fixed offset from UTC
    - ZoneId: Region or offset based zone identifier
    - TemporalValue, TemporalAccessor: Uniform field access
"""

from __future__ import annotations

from goda.core.duration import Duration
from goda.core.local_date import LocalDate
from goda.core.local_date_time import LocalDateTime
from goda.core.local_time import LocalTime
from goda.core.offset_date_time import OffsetDateTime
from goda.core.temporal import TemporalAccessor, TemporalValue
from goda.core.year_month import YearMonth
from goda.core.zone_id import ZoneId, load_location
from goda.core.zone_offset import ZoneOffset

__all__: list[str] = [
    "Duration",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDateTime",
    "TemporalAccessor",
    "TemporalValue",
    "YearMonth",
    "ZoneId",
    "ZoneOffset",
    "load_location",
]
