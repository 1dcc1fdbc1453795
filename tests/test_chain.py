"""Tests for chainable arithmetic with a sticky error."""

from __future__ import annotations

import pytest

from goda import (
    Duration,
    Field,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    YearMonth,
    ZoneOffset,
)
from goda.arithmetic import LocalDateChain, LocalTimeChain
from goda.errors import ArithmeticOverflowError, OutOfRangeError


class TestChainSuccess:
    """Tests for chains that do not fail."""

    def test_date_chain(self) -> None:
        """Test that operations apply in order."""
        result = LocalDate(2024, 1, 31).chain().plus_months(1).plus_days(1).must_get()
        assert result == LocalDate(2024, 3, 1)

    def test_chain_types(self) -> None:
        """Test the chain type of each value type."""
        assert isinstance(LocalDate(2024, 1, 1).chain(), LocalDateChain)
        assert isinstance(LocalTime(9, 0).chain(), LocalTimeChain)

    def test_time_chain_wraps(self) -> None:
        """Test a time chain across midnight."""
        result = LocalTime(23, 0).chain().plus_hours(2).with_minute(15).must_get()
        assert result == LocalTime(1, 15)

    def test_date_time_chain(self) -> None:
        """Test a date-time chain with a duration."""
        result = (
            LocalDateTime(2024, 12, 31, 22, 0)
            .chain()
            .plus_duration(Duration.of_hours(3))
            .with_field(Field.MINUTE_OF_HOUR, 45)
            .must_get()
        )
        assert result == LocalDateTime(2025, 1, 1, 1, 45)

    def test_offset_date_time_chain(self) -> None:
        """Test offset changes in a chain."""
        odt = OffsetDateTime.parse("2024-03-15T23:30:00Z")
        result = odt.chain().with_offset_same_instant(ZoneOffset.of(2)).plus_days(1).must_get()
        assert str(result) == "2024-03-17T01:30:00+02:00"

    def test_year_month_chain(self) -> None:
        """Test a year-month chain."""
        assert YearMonth(2024, 11).chain().plus_months(3).with_year(2000).must_get() == YearMonth(2000, 2)

    def test_results_without_error(self) -> None:
        """Test the result accessors when no error is held."""
        chain = LocalDate(2024, 3, 15).chain().plus_days(1)
        assert chain.get_error() is None
        assert chain.get_or_else(LocalDate.zero()) == LocalDate(2024, 3, 16)
        assert chain.get_or_else_get(LocalDate.zero) == LocalDate(2024, 3, 16)
        assert chain.get_result() == (LocalDate(2024, 3, 16), None)
        assert not chain.is_zero()

    def test_zero_chain(self) -> None:
        """Test that a chain over zero stays zero."""
        chain = LocalDate.zero().chain().plus_days(10)
        assert chain.is_zero()
        assert chain.must_get().is_zero()


class TestChainError:
    """Tests for error propagation in chains."""

    def test_first_error_is_kept(self) -> None:
        """Test that the first failure sticks and later steps are skipped."""
        chain = LocalDate(2024, 1, 31).chain().with_month(13).with_day_of_month(40).plus_days(1)
        err = chain.get_error()
        assert isinstance(err, OutOfRangeError)
        assert err.field is Field.MONTH_OF_YEAR
        assert err.op_name == "with_month"

    def test_error_message_names_operation(self) -> None:
        """Test that the message ends with the failing operation."""
        chain = LocalDate(2024, 1, 31).chain().with_month(13).plus_days(1)
        assert str(chain.get_error()) == (
            "goda: invalid value of MonthOfYear (valid range 1 - 12): 13 at LocalDate/with_month"
        )

    def test_value_before_error_is_kept(self) -> None:
        """Test that get_result returns the last good value."""
        value, err = LocalDate(2024, 1, 31).chain().plus_days(1).with_day_of_month(31).get_result()
        assert value == LocalDate(2024, 2, 1)
        assert isinstance(err, OutOfRangeError)

    def test_must_get_raises(self) -> None:
        """Test that must_get raises the held error."""
        chain = LocalTime(9, 0).chain().with_hour(24)
        with pytest.raises(OutOfRangeError, match="at LocalTime/with_hour"):
            chain.must_get()

    def test_fallbacks(self) -> None:
        """Test get_or_else and get_or_else_get with an error."""
        chain = LocalDate(2024, 1, 1).chain().with_year(Field.YEAR.range.max + 1)
        assert chain.get_or_else(LocalDate(2000, 1, 1)) == LocalDate(2000, 1, 1)
        assert chain.get_or_else_get(LocalDate.zero).is_zero()
        assert not chain.is_zero()

    def test_overflow_annotated(self) -> None:
        """Test that arithmetic overflow is annotated too."""
        top = YearMonth(Field.YEAR.range.max, 12)
        err = top.chain().plus_months(1).get_error()
        assert isinstance(err, ArithmeticOverflowError)
        assert str(err) == "goda: arithmetic overflow at YearMonth/plus_months"

    def test_offset_chain_error(self) -> None:
        """Test the type name of an offset date-time chain."""
        odt = OffsetDateTime.parse("2024-03-15T23:30:00Z")
        err = odt.chain().with_nano(-1).get_error()
        assert err is not None
        assert str(err).endswith("at OffsetDateTime/with_nano")

    def test_repr(self) -> None:
        """Test repr of good and failed chains."""
        assert repr(LocalDate(2024, 1, 1).chain()) == "LocalDateChain(LocalDate(2024, 1, 1))"
        failed = LocalDate(2024, 1, 1).chain().with_month(0)
        assert repr(failed).startswith("LocalDateChain(error=goda: invalid value of MonthOfYear")
