"""YearMonth class representing a month of a specific year.

This module provides the YearMonth class, such as 2024-02, with month
arithmetic and the yyyy-MM text form.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from goda._internal.arith import add_exact, compare_ints, floor_div, floor_mod
from goda._internal.validation import validate_fields
from goda.core.temporal import TemporalValue, field_value
from goda.errors import ArithmeticOverflowError, UnsupportedFieldError
from goda.units.era import Era
from goda.units.field import Field
from goda.units.month import Month
from goda.units.year import Year

if TYPE_CHECKING:
    from goda.arithmetic.chain import YearMonthChain
    from goda.core.local_date import LocalDate

_SUPPORTED_FIELDS = frozenset(
    {Field.MONTH_OF_YEAR, Field.PROLEPTIC_MONTH, Field.YEAR_OF_ERA, Field.YEAR, Field.ERA}
)


class YearMonth:
    """A year and month in the proleptic Gregorian calendar, such as 2024-02.

    The value is packed as ``year << 16 | month``; the zero value has
    neither year nor month and renders as "".

    Examples:
        >>> ym = YearMonth(2024, 2)
        >>> ym.length_of_month()
        29
        >>> str(ym.plus_months(11))
        '2025-01'
        >>> ym.at_day(29)
        LocalDate(2024, 2, 29)
    """

    __slots__ = ("_packed",)

    _EMPTY_TEXT_IS_ZERO = True

    @validate_fields(year=Field.YEAR, month=Field.MONTH_OF_YEAR)
    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            OutOfRangeError: If the year or month is out of range.
        """
        self._packed = int(year) << 16 | int(month)

    @classmethod
    def _from_packed(cls, packed: int) -> YearMonth:
        ym = object.__new__(cls)
        ym._packed = packed
        return ym

    @classmethod
    def zero(cls) -> YearMonth:
        """Return the zero YearMonth."""
        return cls._from_packed(0)

    @property
    def year(self) -> Year:
        return Year(self._packed >> 16)

    @property
    def month(self) -> Month | None:
        """Return the month, or None for the zero value."""
        value = self._packed & 0xFFFF
        return Month(value) if value else None

    @property
    def proleptic_month(self) -> int:
        """Return months since year 0: ``year * 12 + month - 1``."""
        if self.is_zero():
            return 0
        return self.year * 12 + (self._packed & 0xFFFF) - 1

    def is_zero(self) -> bool:
        return self._packed == 0

    def is_leap_year(self) -> bool:
        return self.year.is_leap_year()

    def length_of_month(self) -> int:
        """Return the number of days in this month, or 0 for the zero value."""
        month = self.month
        if month is None:
            return 0
        return month.length(self.is_leap_year())

    def length_of_year(self) -> int:
        return self.year.length()

    def at_day(self, day_of_month: int) -> LocalDate:
        """Combine with a day-of-month to form a date.

        Raises:
            OutOfRangeError: If the day is not valid for this month.
        """
        from goda.core.local_date import LocalDate

        if self.is_zero():
            return LocalDate.zero()
        return LocalDate(self.year, self._packed & 0xFFFF, day_of_month)

    def at_end_of_month(self) -> LocalDate:
        """Return the last day of this month."""
        return self.at_day(self.length_of_month())

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus_months(self, months: int) -> YearMonth:
        """Return a copy with months added.

        Raises:
            ArithmeticOverflowError: If the year leaves the supported range.

        Examples:
            >>> YearMonth(2024, 1).plus_months(-1)
            YearMonth(2023, 12)
        """
        if self.is_zero() or months == 0:
            return self
        calc = self.proleptic_month + months
        if not Field.PROLEPTIC_MONTH.range.is_valid(calc):
            raise ArithmeticOverflowError()
        return YearMonth(floor_div(calc, 12), floor_mod(calc, 12) + 1)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def plus_years(self, years: int) -> YearMonth:
        """Return a copy with years added.

        Raises:
            ArithmeticOverflowError: If the year leaves the supported range.
        """
        if self.is_zero() or years == 0:
            return self
        year = add_exact(self.year, years)
        if not Field.YEAR.range.is_valid(year):
            raise ArithmeticOverflowError()
        return YearMonth(year, self._packed & 0xFFFF)

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def with_month(self, month: int) -> YearMonth:
        """Return a copy with the month replaced."""
        return self.with_field(Field.MONTH_OF_YEAR, month)

    def with_year(self, year: int) -> YearMonth:
        """Return a copy with the year replaced."""
        return self.with_field(Field.YEAR, year)

    def chain(self) -> YearMonthChain:
        """Return a chain for error-accumulating arithmetic."""
        from goda.arithmetic.chain import YearMonthChain

        return YearMonthChain(self)

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported_field(self, field: Field) -> bool:
        return field in _SUPPORTED_FIELDS

    def get_field(self, field: Field) -> TemporalValue:
        """Return the value of a field, or an unsupported marker."""
        if self.is_zero() or field not in _SUPPORTED_FIELDS:
            return TemporalValue.unsupported_value()
        year = int(self.year)
        if field == Field.MONTH_OF_YEAR:
            return TemporalValue.of(self._packed & 0xFFFF)
        if field == Field.PROLEPTIC_MONTH:
            return TemporalValue.of(self.proleptic_month)
        if field == Field.YEAR_OF_ERA:
            return TemporalValue.of(year if year >= 1 else 1 - year)
        if field == Field.YEAR:
            return TemporalValue.of(year)
        return TemporalValue.of(Era.of_year(year).value)

    def with_field(self, field: Field, value: TemporalValue | int) -> YearMonth:
        """Return a copy with a field replaced.

        Raises:
            OutOfRangeError: If the value is outside the field's range.
            UnsupportedFieldError: If the field is not supported.

        Examples:
            >>> YearMonth(2024, 5).with_field(Field.PROLEPTIC_MONTH, 2025 * 12)
            YearMonth(2025, 1)
        """
        v = field.check(field_value(value))
        if self.is_zero():
            return self
        year = int(self.year)
        month = self._packed & 0xFFFF
        if field == Field.PROLEPTIC_MONTH:
            return self.plus_months(v - self.proleptic_month)
        if field == Field.YEAR:
            year = v
        elif field == Field.YEAR_OF_ERA:
            year = v if year >= 1 else 1 - v
        elif field == Field.MONTH_OF_YEAR:
            month = v
        elif field == Field.ERA:
            if Era.of_year(year) != v:
                year = 1 - year
        else:
            raise UnsupportedFieldError(field)
        return YearMonth(year, month)

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: YearMonth) -> int:
        """Compare chronologically, with the zero value first."""
        if self.is_zero() or other.is_zero():
            return other.is_zero() - self.is_zero()
        return compare_ints(self._packed, other._packed)

    def is_before(self, other: YearMonth) -> bool:
        return self.compare(other) < 0

    def is_after(self, other: YearMonth) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._packed == other._packed

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self._packed)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        if self.is_zero():
            return "YearMonth.zero()"
        return f"YearMonth({int(self.year)}, {self._packed & 0xFFFF})"

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        from goda.format.iso8601 import format_year_month

        return format_year_month(self)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse a yyyy-MM year-month."""
        from goda.format.iso8601 import parse_year_month

        return parse_year_month(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> YearMonth:
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> YearMonth:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> YearMonth:
        from goda.convert.sql import from_sql

        return from_sql(cls, value)


__all__ = ["YearMonth"]
