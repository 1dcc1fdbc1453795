"""Tests for Month, DayOfWeek, Era, Year and Field."""

from __future__ import annotations

import datetime

import pytest

from goda._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    is_leap_year,
    year_day_to_month_day,
    ymd_to_epoch_day,
)
from goda.errors import OutOfRangeError
from goda.units.day_of_week import DayOfWeek
from goda.units.era import Era
from goda.units.field import Field, ValueRange
from goda.units.month import Month
from goda.units.year import Year


class TestMonth:
    """Tests for the Month enum."""

    def test_values(self) -> None:
        """Test that months are numbered 1 through 12."""
        assert Month.JANUARY == 1
        assert Month.DECEMBER == 12
        assert len(Month) == 12

    @pytest.mark.parametrize("year", [1900, 2023, 2024, 2000, -4, 0])
    def test_lengths_sum_to_year(self, year: int) -> None:
        """Test that month lengths add up to the year length."""
        leap = is_leap_year(year)
        total = sum(m.length(leap) for m in Month)
        assert total == (366 if leap else 365)

    @pytest.mark.parametrize("leap", [False, True])
    def test_first_day_of_year(self, leap: bool) -> None:
        """Test that first_day_of_year is the running sum of lengths."""
        expected = 1
        for m in Month:
            assert m.first_day_of_year(leap) == expected
            expected += m.length(leap)

    def test_max_min_days(self) -> None:
        """Test max and min month lengths."""
        assert Month.FEBRUARY.max_days() == 29
        assert Month.FEBRUARY.min_days() == 28
        assert Month.APRIL.max_days() == 30
        assert Month.JULY.min_days() == 31

    def test_plus_wraps(self) -> None:
        """Test that plus wraps in both directions."""
        assert Month.NOVEMBER.plus(3) is Month.FEBRUARY
        assert Month.JANUARY.plus(-1) is Month.DECEMBER
        assert Month.MAY.plus(24) is Month.MAY

    def test_str(self) -> None:
        """Test the display name."""
        assert str(Month.SEPTEMBER) == "September"
        assert f"{Month.MARCH}" == "March"


class TestDayOfWeek:
    """Tests for the DayOfWeek enum."""

    def test_iso_numbering(self) -> None:
        """Test that Monday is 1 and Sunday is 7."""
        assert DayOfWeek.MONDAY == 1
        assert DayOfWeek.SUNDAY == 7

    def test_python_weekday_round_trip(self) -> None:
        """Test conversion to and from datetime.weekday numbering."""
        for dow in DayOfWeek:
            assert DayOfWeek.from_python_weekday(dow.python_weekday()) is dow

    def test_matches_isoweekday(self) -> None:
        """Test agreement with datetime.date.isoweekday."""
        d = datetime.date(2024, 3, 15)
        assert DayOfWeek(d.isoweekday()) is DayOfWeek.FRIDAY
        assert DayOfWeek.from_python_weekday(d.weekday()) is DayOfWeek.FRIDAY

    def test_plus(self) -> None:
        """Test wrapping addition."""
        assert DayOfWeek.SATURDAY.plus(2) is DayOfWeek.MONDAY
        assert DayOfWeek.MONDAY.plus(-1) is DayOfWeek.SUNDAY

    def test_str(self) -> None:
        """Test the display name."""
        assert str(DayOfWeek.WEDNESDAY) == "Wednesday"


class TestEra:
    """Tests for the Era enum."""

    def test_of_year(self) -> None:
        """Test that year 1 starts CE and year 0 is BCE."""
        assert Era.of_year(1) is Era.CE
        assert Era.of_year(0) is Era.BCE
        assert Era.of_year(-100) is Era.BCE

    def test_values_match_era_field(self) -> None:
        """Test that BCE is 0 and CE is 1."""
        assert Era.BCE == 0
        assert Era.CE == 1
        assert Era.BCE.is_before_common_era
        assert not Era.CE.is_before_common_era


class TestYear:
    """Tests for the Year type."""

    def test_is_int(self) -> None:
        """Test that Year behaves as an int."""
        y = Year(2024)
        assert y == 2024
        assert y + 1 == 2025
        assert isinstance(y, int)

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2024, "2024"),
            (987, "0987"),
            (0, "0000"),
            (-1, "-0001"),
            (-44, "-0044"),
            (12345, "12345"),
            (-12345, "-12345"),
        ],
    )
    def test_str(self, year: int, expected: str) -> None:
        """Test ISO year formatting."""
        assert str(Year(year)) == expected

    def test_leap_and_length(self) -> None:
        """Test leap-year helpers."""
        assert Year(2000).is_leap_year()
        assert not Year(1900).is_leap_year()
        assert Year(2024).length() == 366
        assert Year(2023).length() == 365

    def test_is_zero(self) -> None:
        """Test the unset year."""
        assert Year(0).is_zero()
        assert not Year(1).is_zero()


class TestField:
    """Tests for the Field enum and ValueRange."""

    def test_ids(self) -> None:
        """Test that field ids run from 1 to 30."""
        assert Field.NANO_OF_SECOND == 1
        assert Field.OFFSET_SECONDS == 30
        assert len(Field.all_fields()) == 30

    def test_groups(self) -> None:
        """Test time-based and date-based groupings."""
        assert Field.AMPM_OF_DAY.is_time_based
        assert not Field.AMPM_OF_DAY.is_date_based
        assert Field.DAY_OF_WEEK.is_date_based
        assert Field.ERA.is_date_based
        assert not Field.INSTANT_SECONDS.is_time_based
        assert not Field.INSTANT_SECONDS.is_date_based

    def test_str(self) -> None:
        """Test the display names."""
        assert str(Field.NANO_OF_SECOND) == "NanoOfSecond"
        assert str(Field.CLOCK_HOUR_OF_AMPM) == "ClockHourOfAmPm"
        assert str(Field.AMPM_OF_DAY) == "AmPmOfDay"

    def test_java_name(self) -> None:
        """Test the java.time constant names."""
        assert Field.MONTH_OF_YEAR.java_name == "ChronoField.MONTH_OF_YEAR"

    def test_ranges(self) -> None:
        """Test a sample of value ranges."""
        assert Field.MONTH_OF_YEAR.range == ValueRange(1, 12)
        assert Field.CLOCK_HOUR_OF_DAY.range == ValueRange(1, 24)
        assert Field.ALIGNED_WEEK_OF_MONTH.range == ValueRange(1, 5)
        assert Field.OFFSET_SECONDS.range == ValueRange(-64800, 64800)
        assert Field.NANO_OF_DAY.range.max == 86_400 * 10**9 - 1

    def test_check(self) -> None:
        """Test range checking."""
        assert Field.HOUR_OF_DAY.check(23) == 23
        with pytest.raises(OutOfRangeError) as exc_info:
            Field.HOUR_OF_DAY.check(24)
        assert exc_info.value.field is Field.HOUR_OF_DAY
        assert exc_info.value.value == 24


class TestCalendar:
    """Tests for the proleptic Gregorian conversions."""

    @pytest.mark.parametrize(
        "ymd,epoch_day",
        [
            ((1970, 1, 1), 0),
            ((1969, 12, 31), -1),
            ((2000, 3, 1), 11017),
            ((2024, 3, 15), 19797),
            ((0, 1, 1), -719528),
        ],
    )
    def test_known_epoch_days(self, ymd: tuple[int, int, int], epoch_day: int) -> None:
        """Test conversions against known values."""
        assert ymd_to_epoch_day(*ymd) == epoch_day
        assert epoch_day_to_ymd(epoch_day) == ymd

    def test_matches_datetime_ordinal(self) -> None:
        """Test agreement with datetime.date over a span of centuries."""
        epoch = datetime.date(1970, 1, 1).toordinal()
        for ordinal in range(1, 3_652_059, 997):
            d = datetime.date.fromordinal(ordinal)
            assert ymd_to_epoch_day(d.year, d.month, d.day) == ordinal - epoch
            assert epoch_day_to_ymd(ordinal - epoch) == (d.year, d.month, d.day)

    def test_negative_years_round_trip(self) -> None:
        """Test that years before 1 round-trip."""
        for epoch_day in range(-1_500_000, -700_000, 3_331):
            y, m, d = epoch_day_to_ymd(epoch_day)
            assert ymd_to_epoch_day(y, m, d) == epoch_day

    def test_days_in_month(self) -> None:
        """Test February in leap and common years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_year_day_to_month_day(self) -> None:
        """Test conversion of a day-of-year."""
        assert year_day_to_month_day(2024, 60) == (2, 29)
        assert year_day_to_month_day(2023, 60) == (3, 1)
        assert year_day_to_month_day(2024, 366) == (12, 31)
