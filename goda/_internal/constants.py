"""Internal constants for Goda.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MINUTES_PER_DAY: int = 24 * 60
HOURS_PER_DAY: int = 24

# Signed 64-bit bounds, used for overflow detection
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1

# Year limits: the year occupies the upper 48 bits of a packed date
MAX_YEAR: int = (1 << 47) - 1
MIN_YEAR: int = -MAX_YEAR

# Gregorian 400-year cycle
DAYS_PER_CYCLE: int = 146_097
DAYS_0000_TO_1970: int = DAYS_PER_CYCLE * 5 - (30 * 365 + 7)  # 719_528

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Zone offset limits (in seconds)
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR  # 64_800


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_DAY",
    "HOURS_PER_DAY",
    "INT64_MIN",
    "INT64_MAX",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_PER_CYCLE",
    "DAYS_0000_TO_1970",
    "DAYS_IN_MONTH",
    "MAX_OFFSET_SECONDS",
]
