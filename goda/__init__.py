"""Goda: ISO 8601 calendrical value types for Python.

Goda provides immutable date and time values in the proleptic Gregorian
calendar with nanosecond precision, uniform field access, fluent
arithmetic with a sticky error, and strict text/JSON/SQL codecs.

Core Types:
    LocalDate: Calendar date (year, month, day)
    LocalTime: Time of day (hour, minute, second, nanosecond)
    LocalDateTime: Date and time without an offset
    OffsetDateTime: Date and time with a fixed UTC offset
    YearMonth: Year and month without a day
    Duration: Signed time span with nanosecond precision
    ZoneOffset: Fixed offset from UTC, within +/-18 hours
    ZoneId: Region (IANA) or offset zone identifier

Units:
    Month: Month-of-year (JANUARY..DECEMBER)
    DayOfWeek: ISO day-of-week (MONDAY..SUNDAY)
    Era: BCE/CE era designation
    Year: Proleptic Gregorian year
    Field: Temporal fields with value ranges

Every type has a zero value (``Type.zero()``) that is distinct from any
real value. Zero values render as the empty string, except Duration
which renders as "PT0S", and they sort before everything else.

Exceptions:
    GodaError: Base exception
    ParseError: Failed to parse text
    OutOfRangeError: Value outside its valid range
    UnsupportedFieldError: Field not handled by a type
    ArithmeticOverflowError: Arithmetic overflow
    UnsupportedSqlTypeError: Unexpected SQL column value
    InvalidZoneIdError: Unknown zone identifier

Example:
    >>> from goda import LocalDate, Field
    >>> d = LocalDate(2024, 1, 31).chain().plus_months(1).must_get()
    >>> str(d)
    '2024-02-29'
    >>> d.get_field(Field.DAY_OF_WEEK).value
    4
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from goda.core.duration import Duration
from goda.core.local_date import LocalDate
from goda.core.local_date_time import LocalDateTime
from goda.core.local_time import LocalTime
from goda.core.offset_date_time import OffsetDateTime
from goda.core.temporal import TemporalAccessor, TemporalValue
from goda.core.year_month import YearMonth
from goda.core.zone_id import ZoneId
from goda.core.zone_offset import ZoneOffset

# Units
from goda.units.day_of_week import DayOfWeek
from goda.units.era import Era
from goda.units.field import Field, ValueRange
from goda.units.month import Month
from goda.units.year import Year

# Exceptions
from goda.errors import (
    ArithmeticOverflowError,
    ErrorReason,
    GodaError,
    InvalidZoneIdError,
    OutOfRangeError,
    ParseError,
    UnsupportedFieldError,
    UnsupportedSqlTypeError,
)

__all__: list[str] = [
    "__version__",
    # Core types
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
    # Units
    "DayOfWeek",
    "Era",
    "Field",
    "Month",
    "ValueRange",
    "Year",
    # Exceptions
    "ErrorReason",
    "GodaError",
    "ParseError",
    "OutOfRangeError",
    "UnsupportedFieldError",
    "ArithmeticOverflowError",
    "UnsupportedSqlTypeError",
    "InvalidZoneIdError",
]
