"""Tests for the LocalDate class."""

from __future__ import annotations

import datetime

import pytest

from goda import DayOfWeek, Era, Field, LocalDate, LocalTime, Month, YearMonth
from goda._internal.constants import MAX_YEAR, MIN_YEAR
from goda.errors import ArithmeticOverflowError, OutOfRangeError, ParseError, UnsupportedFieldError


class TestLocalDateConstruction:
    """Tests for LocalDate construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = LocalDate(2024, 3, 15)
        assert d.year == 2024
        assert d.month is Month.MARCH
        assert d.day_of_month == 15

    def test_construction_with_month_enum(self) -> None:
        """Test that a Month member is accepted."""
        assert LocalDate(2024, Month.MARCH, 15) == LocalDate(2024, 3, 15)

    def test_construction_leap_day(self) -> None:
        """Test Feb 29 in a leap year."""
        d = LocalDate(2024, 2, 29)
        assert d.day_of_month == 29

    def test_construction_feb_29_non_leap(self) -> None:
        """Test that Feb 29 in a common year is rejected."""
        with pytest.raises(OutOfRangeError, match="invalid date February 29 in non-leap year"):
            LocalDate(2023, 2, 29)

    def test_construction_day_31_in_short_month(self) -> None:
        """Test that April 31 is rejected."""
        with pytest.raises(OutOfRangeError, match="invalid date April 31"):
            LocalDate(2024, 4, 31)

    @pytest.mark.parametrize("month", [0, 13])
    def test_construction_invalid_month(self, month: int) -> None:
        """Test that months outside 1-12 are rejected."""
        with pytest.raises(OutOfRangeError, match="MonthOfYear"):
            LocalDate(2024, month, 1)

    @pytest.mark.parametrize("day", [0, 32])
    def test_construction_invalid_day(self, day: int) -> None:
        """Test that days outside 1-31 are rejected."""
        with pytest.raises(OutOfRangeError, match="DayOfMonth"):
            LocalDate(2024, 1, day)

    def test_construction_year_limits(self) -> None:
        """Test construction at the year limits."""
        assert LocalDate(MAX_YEAR, 12, 31) == LocalDate.max()
        assert LocalDate(MIN_YEAR, 1, 1) == LocalDate.min()
        with pytest.raises(OutOfRangeError, match="Year"):
            LocalDate(MAX_YEAR + 1, 1, 1)

    def test_year_zero_is_a_real_date(self) -> None:
        """Test that 0000-01-01 is distinct from the zero date."""
        d = LocalDate(0, 1, 1)
        assert not d.is_zero()
        assert str(d) == "0000-01-01"
        assert d.era is Era.BCE

    def test_of_epoch_day(self) -> None:
        """Test construction from epoch days."""
        assert LocalDate.of_epoch_day(0) == LocalDate(1970, 1, 1)
        assert LocalDate.of_epoch_day(19797) == LocalDate(2024, 3, 15)
        assert LocalDate.of_epoch_day(-1) == LocalDate(1969, 12, 31)

    def test_of_year_day(self) -> None:
        """Test construction from a day-of-year."""
        assert LocalDate.of_year_day(2024, 60) == LocalDate(2024, 2, 29)
        assert LocalDate.of_year_day(2024, 366) == LocalDate(2024, 12, 31)
        with pytest.raises(OutOfRangeError, match="366"):
            LocalDate.of_year_day(2023, 366)

    def test_from_date(self) -> None:
        """Test conversion from datetime.date."""
        assert LocalDate.from_date(datetime.date(2024, 3, 15)) == LocalDate(2024, 3, 15)
        assert LocalDate.from_date(datetime.datetime(2024, 3, 15, 23, 59)) == LocalDate(2024, 3, 15)

    def test_to_date(self) -> None:
        """Test conversion to datetime.date."""
        assert LocalDate(2024, 3, 15).to_date() == datetime.date(2024, 3, 15)
        with pytest.raises(OutOfRangeError):
            LocalDate(0, 1, 1).to_date()
        with pytest.raises(OutOfRangeError):
            LocalDate.zero().to_date()

    def test_now(self) -> None:
        """Test that now returns a real date."""
        assert not LocalDate.now().is_zero()
        assert LocalDate.now_utc().year >= 2024


class TestLocalDateProperties:
    """Tests for LocalDate accessors."""

    def test_reference_date(self) -> None:
        """Test the accessors on a reference date."""
        d = LocalDate(2024, 3, 15)
        assert d.day_of_week is DayOfWeek.FRIDAY
        assert d.day_of_year == 75
        assert d.unix_epoch_days() == 19797
        assert str(d) == "2024-03-15"

    def test_day_of_week_matches_datetime(self) -> None:
        """Test day-of-week against datetime over ten centuries."""
        start = datetime.date(1500, 1, 1).toordinal()
        end = datetime.date(2500, 1, 1).toordinal()
        for ordinal in range(start, end, 89):
            d = datetime.date.fromordinal(ordinal)
            assert LocalDate.from_date(d).day_of_week == d.isoweekday()

    def test_epoch_day_round_trip(self) -> None:
        """Test that epoch days round-trip through LocalDate."""
        for days in range(-800_000, 800_000, 7_919):
            assert LocalDate.of_epoch_day(days).unix_epoch_days() == days

    def test_leap_year(self) -> None:
        """Test leap-year queries."""
        assert LocalDate(2024, 1, 1).is_leap_year()
        assert LocalDate(2024, 2, 1).length_of_month() == 29
        assert LocalDate(2023, 2, 1).length_of_month() == 28
        assert LocalDate(2023, 6, 1).length_of_year() == 365

    def test_era(self) -> None:
        """Test era accessors."""
        assert LocalDate(2024, 1, 1).era is Era.CE
        assert LocalDate(-44, 3, 15).era is Era.BCE

    def test_year_month(self) -> None:
        """Test extracting the year-month."""
        assert LocalDate(2024, 3, 15).year_month == YearMonth(2024, 3)


class TestLocalDateZero:
    """Tests for the zero date."""

    def test_zero_accessors(self) -> None:
        """Test that the zero date has neutral accessors."""
        z = LocalDate.zero()
        assert z.is_zero()
        assert not z
        assert z.month is None
        assert z.day_of_week is None
        assert z.day_of_year == 0
        assert z.unix_epoch_days() == 0
        assert z.era is None
        assert z.year_month.is_zero()
        assert str(z) == ""
        assert repr(z) == "LocalDate.zero()"

    def test_zero_arithmetic_is_identity(self) -> None:
        """Test that arithmetic on the zero date returns it unchanged."""
        z = LocalDate.zero()
        assert z.plus_days(10).is_zero()
        assert z.plus_months(1).is_zero()
        assert z.plus_years(1).is_zero()
        assert z.with_day_of_month(5).is_zero()

    def test_zero_with_still_checks_range(self) -> None:
        """Test that with_month on zero validates before returning zero."""
        assert LocalDate.zero().with_month(5).is_zero()
        with pytest.raises(OutOfRangeError):
            LocalDate.zero().with_month(13)

    def test_zero_fields_unsupported(self) -> None:
        """Test that the zero date reports every field as unsupported."""
        z = LocalDate.zero()
        for field in Field:
            assert z.get_field(field).unsupported

    def test_zero_sorts_first(self) -> None:
        """Test that the zero date precedes every real date."""
        assert LocalDate.zero() < LocalDate.min()
        assert LocalDate.zero().compare(LocalDate.zero()) == 0


class TestLocalDateArithmetic:
    """Tests for day, week, month and year arithmetic."""

    def test_plus_days(self) -> None:
        """Test adding days across month and year boundaries."""
        assert LocalDate(2024, 2, 28).plus_days(2) == LocalDate(2024, 3, 1)
        assert LocalDate(2024, 12, 31).plus_days(1) == LocalDate(2025, 1, 1)
        assert LocalDate(2024, 1, 1).minus_days(1) == LocalDate(2023, 12, 31)

    def test_plus_weeks(self) -> None:
        """Test adding weeks."""
        assert LocalDate(2024, 3, 15).plus_weeks(2) == LocalDate(2024, 3, 29)
        assert LocalDate(2024, 3, 15).minus_weeks(1) == LocalDate(2024, 3, 8)

    def test_plus_months_clamps(self) -> None:
        """Test that month arithmetic clamps the day-of-month."""
        assert LocalDate(2024, 1, 31).plus_months(1) == LocalDate(2024, 2, 29)
        assert LocalDate(2023, 1, 31).plus_months(1) == LocalDate(2023, 2, 28)
        assert LocalDate(2024, 3, 31).minus_months(1) == LocalDate(2024, 2, 29)

    def test_plus_months_negative_floor(self) -> None:
        """Test that negative month totals use floor division."""
        assert LocalDate(2024, 1, 15).plus_months(-13) == LocalDate(2022, 12, 15)
        assert LocalDate(0, 1, 15).minus_months(1) == LocalDate(-1, 12, 15)

    def test_plus_years_clamps(self) -> None:
        """Test that year arithmetic clamps February 29."""
        assert LocalDate(2024, 2, 29).plus_years(1) == LocalDate(2025, 2, 28)
        assert LocalDate(2024, 2, 29).plus_years(4) == LocalDate(2028, 2, 29)
        assert LocalDate(2024, 2, 29).minus_years(1) == LocalDate(2023, 2, 28)

    def test_overflow(self) -> None:
        """Test that leaving the supported range raises overflow."""
        with pytest.raises(ArithmeticOverflowError):
            LocalDate.max().plus_days(1)
        with pytest.raises(ArithmeticOverflowError):
            LocalDate.max().plus_months(1)
        with pytest.raises(ArithmeticOverflowError):
            LocalDate.min().minus_years(1)
        with pytest.raises(ArithmeticOverflowError):
            LocalDate(2024, 1, 1).plus_weeks(2**62)

    def test_plus_zero_returns_same(self) -> None:
        """Test that adding nothing returns an equal date."""
        d = LocalDate(2024, 3, 15)
        assert d.plus_days(0) == d
        assert d.plus_months(0) == d


class TestLocalDateReplace:
    """Tests for with_* methods."""

    def test_with_day_of_month(self) -> None:
        """Test replacing the day-of-month."""
        assert LocalDate(2024, 2, 10).with_day_of_month(29) == LocalDate(2024, 2, 29)
        with pytest.raises(OutOfRangeError):
            LocalDate(2023, 2, 10).with_day_of_month(29)

    def test_with_day_of_year(self) -> None:
        """Test replacing the day-of-year."""
        assert LocalDate(2024, 7, 4).with_day_of_year(1) == LocalDate(2024, 1, 1)

    def test_with_month_clamps(self) -> None:
        """Test that replacing the month clamps the day."""
        assert LocalDate(2024, 3, 31).with_month(4) == LocalDate(2024, 4, 30)

    def test_with_year_clamps(self) -> None:
        """Test that replacing the year clamps February 29."""
        assert LocalDate(2024, 2, 29).with_year(2023) == LocalDate(2023, 2, 28)

    def test_at_time(self) -> None:
        """Test combining with a time."""
        ldt = LocalDate(2024, 3, 15).at_time(LocalTime(9, 30))
        assert str(ldt) == "2024-03-15T09:30:00"


class TestLocalDateFields:
    """Tests for get_field and with_field."""

    def test_supported_fields(self) -> None:
        """Test that exactly the date-based fields are supported."""
        d = LocalDate(2024, 3, 15)
        assert d.is_supported_field(Field.DAY_OF_MONTH)
        assert not d.is_supported_field(Field.HOUR_OF_DAY)
        assert d.get_field(Field.HOUR_OF_DAY).unsupported

    @pytest.mark.parametrize(
        "field,expected",
        [
            (Field.DAY_OF_WEEK, 5),
            (Field.ALIGNED_DAY_OF_WEEK_IN_MONTH, 1),
            (Field.ALIGNED_DAY_OF_WEEK_IN_YEAR, 5),
            (Field.DAY_OF_MONTH, 15),
            (Field.DAY_OF_YEAR, 75),
            (Field.EPOCH_DAY, 19797),
            (Field.ALIGNED_WEEK_OF_MONTH, 3),
            (Field.ALIGNED_WEEK_OF_YEAR, 11),
            (Field.MONTH_OF_YEAR, 3),
            (Field.PROLEPTIC_MONTH, 2024 * 12 + 2),
            (Field.YEAR_OF_ERA, 2024),
            (Field.YEAR, 2024),
            (Field.ERA, 1),
        ],
    )
    def test_get_field(self, field: Field, expected: int) -> None:
        """Test every date-based field on a reference date."""
        assert LocalDate(2024, 3, 15).get_field(field) == expected

    def test_year_of_era_before_year_one(self) -> None:
        """Test that YEAR_OF_ERA counts backwards before year 1."""
        assert LocalDate(0, 6, 1).get_field(Field.YEAR_OF_ERA) == 1
        assert LocalDate(-44, 3, 15).get_field(Field.YEAR_OF_ERA) == 45

    def test_with_field_day_of_week(self) -> None:
        """Test moving within the week."""
        assert LocalDate(2024, 3, 15).with_field(Field.DAY_OF_WEEK, 1) == LocalDate(2024, 3, 11)
        assert LocalDate(2024, 3, 15).with_field(Field.DAY_OF_WEEK, 7) == LocalDate(2024, 3, 17)

    def test_with_field_aligned_week(self) -> None:
        """Test moving by aligned weeks."""
        assert LocalDate(2024, 3, 15).with_field(Field.ALIGNED_WEEK_OF_MONTH, 1) == LocalDate(2024, 3, 1)

    def test_with_field_epoch_day(self) -> None:
        """Test replacing the epoch day."""
        assert LocalDate(2024, 3, 15).with_field(Field.EPOCH_DAY, 0) == LocalDate(1970, 1, 1)

    def test_with_field_proleptic_month(self) -> None:
        """Test replacing the proleptic month."""
        d = LocalDate(2024, 3, 31).with_field(Field.PROLEPTIC_MONTH, 2025 * 12 + 1)
        assert d == LocalDate(2025, 2, 28)

    def test_with_field_era(self) -> None:
        """Test switching era mirrors the year around year 1."""
        assert LocalDate(2024, 3, 15).with_field(Field.ERA, 0) == LocalDate(-2023, 3, 15)
        assert LocalDate(2024, 3, 15).with_field(Field.ERA, 1) == LocalDate(2024, 3, 15)

    def test_with_field_year_of_era(self) -> None:
        """Test YEAR_OF_ERA in both eras."""
        assert LocalDate(2024, 3, 15).with_field(Field.YEAR_OF_ERA, 2000) == LocalDate(2000, 3, 15)
        assert LocalDate(-10, 3, 15).with_field(Field.YEAR_OF_ERA, 45) == LocalDate(-44, 3, 15)

    def test_with_field_accepts_temporal_value(self) -> None:
        """Test that a TemporalValue can be passed back in."""
        other = LocalDate(2020, 7, 4)
        d = LocalDate(2024, 3, 15).with_field(Field.YEAR, other.get_field(Field.YEAR))
        assert d == LocalDate(2020, 3, 15)

    def test_with_field_out_of_range(self) -> None:
        """Test that values outside the field range are rejected."""
        with pytest.raises(OutOfRangeError):
            LocalDate(2024, 3, 15).with_field(Field.DAY_OF_WEEK, 8)

    def test_with_field_unsupported(self) -> None:
        """Test that time fields are rejected."""
        with pytest.raises(UnsupportedFieldError):
            LocalDate(2024, 3, 15).with_field(Field.HOUR_OF_DAY, 1)


class TestLocalDateComparison:
    """Tests for ordering and equality."""

    def test_ordering(self) -> None:
        """Test chronological ordering, including negative years."""
        dates = [
            LocalDate(2024, 3, 15),
            LocalDate(-44, 3, 15),
            LocalDate(0, 1, 1),
            LocalDate(2024, 1, 1),
            LocalDate(-1, 12, 31),
        ]
        assert sorted(dates) == [
            LocalDate(-44, 3, 15),
            LocalDate(-1, 12, 31),
            LocalDate(0, 1, 1),
            LocalDate(2024, 1, 1),
            LocalDate(2024, 3, 15),
        ]

    def test_is_before_after(self) -> None:
        """Test is_before and is_after."""
        a, b = LocalDate(2024, 1, 1), LocalDate(2024, 1, 2)
        assert a.is_before(b)
        assert b.is_after(a)
        assert not a.is_after(a)

    def test_hash(self) -> None:
        """Test that equal dates hash equally."""
        assert hash(LocalDate(2024, 3, 15)) == hash(LocalDate.parse("2024-03-15"))
        assert len({LocalDate(2024, 3, 15), LocalDate(2024, 3, 15)}) == 1

    def test_foreign_types(self) -> None:
        """Test comparison with other types."""
        assert LocalDate(2024, 3, 15) != "2024-03-15"
        with pytest.raises(TypeError):
            LocalDate(2024, 3, 15) < datetime.date(2024, 3, 15)  # noqa: B015


class TestLocalDateText:
    """Tests for text parsing and formatting."""

    @pytest.mark.parametrize(
        "text",
        ["2024-03-15", "0001-01-01", "0000-12-31", "-0044-03-15", "12345-06-07", "-12345-06-07"],
    )
    def test_round_trip(self, text: str) -> None:
        """Test that parse and str are inverse."""
        assert str(LocalDate.parse(text)) == text

    @pytest.mark.parametrize("text", ["2024-3-15", "2024/03/15", "20240315", "x024-03-15", "2024-03-1a"])
    def test_parse_bad_format(self, text: str) -> None:
        """Test malformed dates."""
        with pytest.raises(ParseError):
            LocalDate.parse(text)

    def test_parse_empty(self) -> None:
        """Test that parse rejects empty input."""
        with pytest.raises(ParseError, match="empty input"):
            LocalDate.parse("")

    def test_from_text_empty_is_zero(self) -> None:
        """Test that unmarshalling empty text yields the zero date."""
        assert LocalDate.from_text("").is_zero()
        assert LocalDate.from_text(b"2024-03-15") == LocalDate(2024, 3, 15)
        assert LocalDate(2024, 3, 15).to_text() == "2024-03-15"

    def test_repr(self) -> None:
        """Test repr."""
        assert repr(LocalDate(2024, 3, 15)) == "LocalDate(2024, 3, 15)"
        assert repr(LocalDate(-44, 3, 15)) == "LocalDate(-44, 3, 15)"
