"""Temporal units and enumerations.

This module provides:
    - Month: Month-of-year (JANUARY..DECEMBER)
    - DayOfWeek: ISO day-of-week (MONDAY..SUNDAY)
    - Era: BCE/CE era designation
    - Year: Proleptic Gregorian year
    - Field: Closed set of temporal fields with value ranges
"""

from __future__ import annotations

from goda.units.day_of_week import DayOfWeek
from goda.units.era import Era
from goda.units.field import Field, ValueRange
from goda.units.month import Month
from goda.units.year import Year

__all__: list[str] = [
    "DayOfWeek",
    "Era",
    "Field",
    "Month",
    "ValueRange",
    "Year",
]
