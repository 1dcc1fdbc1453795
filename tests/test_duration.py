"""Tests for the Duration class."""

from __future__ import annotations

import datetime

import pytest

from goda import Duration
from goda.errors import ArithmeticOverflowError, ErrorReason, ParseError


class TestDurationConstruction:
    """Tests for Duration construction and normalization."""

    def test_normalization(self) -> None:
        """Test that the nanosecond adjustment is folded into seconds."""
        d = Duration.of_seconds(5, -1_500_000_000)
        assert d == Duration.of_seconds(3, 500_000_000)
        assert d.seconds == 3
        assert d.nanos == 500_000_000

    def test_negative_fraction(self) -> None:
        """Test that a negative fraction borrows a whole second."""
        d = Duration.of_seconds(0, -1)
        assert d.seconds == -1
        assert d.nanos == 999_999_999
        assert d.to_nanos() == -1

    def test_unit_factories(self) -> None:
        """Test the unit factories."""
        assert Duration.of_minutes(2) == Duration.of_seconds(120)
        assert Duration.of_hours(1) == Duration.of_seconds(3600)
        assert Duration.of_days(1) == Duration.of_seconds(86_400)
        assert Duration.of_millis(1500) == Duration.of_seconds(1, 500_000_000)
        assert Duration.of_nanos(-500_000_000) == Duration.of_seconds(-1, 500_000_000)

    def test_overflow(self) -> None:
        """Test that seconds beyond a signed 64-bit integer are rejected."""
        with pytest.raises(ArithmeticOverflowError):
            Duration.of_seconds(2**63)
        with pytest.raises(ArithmeticOverflowError):
            Duration.of_seconds(2**63 - 1).plus(Duration.of_seconds(1))

    def test_timedelta_round_trip(self) -> None:
        """Test conversion to and from datetime.timedelta."""
        delta = datetime.timedelta(days=-1, seconds=5, microseconds=250)
        d = Duration.from_timedelta(delta)
        assert d.to_nanos() == (-86_400 + 5) * 10**9 + 250_000
        assert d.to_timedelta() == delta


class TestDurationArithmetic:
    """Tests for Duration arithmetic and ordering."""

    def test_plus_minus(self) -> None:
        """Test addition and subtraction."""
        a = Duration.of_seconds(1, 700_000_000)
        b = Duration.of_seconds(0, 400_000_000)
        assert a.plus(b) == Duration.of_seconds(2, 100_000_000)
        assert a.minus(b) == Duration.of_seconds(1, 300_000_000)
        assert a + b == a.plus(b)
        assert a - b == a.minus(b)

    def test_negation_is_involution(self) -> None:
        """Test that negating twice returns the original value."""
        for d in [Duration.of_seconds(1, 250_000_000), Duration.of_nanos(-1), Duration.zero()]:
            assert d.negated().negated() == d
            assert -(-d) == d

    def test_abs(self) -> None:
        """Test the absolute value."""
        assert abs(Duration.of_nanos(-1_500_000_000)) == Duration.of_nanos(1_500_000_000)
        assert Duration.of_seconds(3).abs() == Duration.of_seconds(3)

    def test_sign_predicates(self) -> None:
        """Test zero, positive and negative."""
        assert Duration.zero().is_zero()
        assert not Duration.zero()
        assert Duration.of_nanos(1).is_positive()
        assert Duration.of_nanos(-1).is_negative()
        assert not Duration.of_nanos(-1).is_positive()

    def test_ordering(self) -> None:
        """Test ordering on (seconds, nanos)."""
        a = Duration.of_nanos(-1)
        b = Duration.zero()
        c = Duration.of_nanos(1)
        assert a < b < c
        assert c.compare(a) == 1
        assert sorted([c, a, b]) == [a, b, c]

    def test_foreign_types(self) -> None:
        """Test that other types are not comparable."""
        assert Duration.zero() != 0
        with pytest.raises(TypeError):
            Duration.zero() + 1  # type: ignore[operator]


class TestDurationText:
    """Tests for the PT text form."""

    def test_reference_format(self) -> None:
        """Test a duration with hours, minutes and a fraction."""
        d = Duration.of_seconds(8 * 3600 + 6 * 60 + 12, 345_000_000)
        assert str(d) == "PT8H6M12.345S"
        assert Duration.parse("PT8H6M12.345S") == d

    def test_sign_applies_to_whole_duration(self) -> None:
        """Test that a leading minus negates every component."""
        d = Duration.parse("PT-6H3M")
        assert d.to_nanos() == -(6 * 3600 + 3 * 60) * 10**9
        assert str(d) == "PT-6H3M"

    @pytest.mark.parametrize(
        "duration,text",
        [
            (Duration.zero(), "PT0S"),
            (Duration.of_nanos(-500_000_000), "PT-0.5S"),
            (Duration.of_hours(25), "PT25H"),
            (Duration.of_seconds(60, 1), "PT1M0.000000001S"),
            (Duration.of_minutes(90), "PT1H30M"),
        ],
    )
    def test_format(self, duration: Duration, text: str) -> None:
        """Test canonical formatting."""
        assert str(duration) == text

    def test_parse_fraction(self) -> None:
        """Test fraction padding and truncation."""
        assert Duration.parse("PT1.5S") == Duration.of_seconds(1, 500_000_000)
        assert Duration.parse("PT0.1234567899S") == Duration.of_nanos(123_456_789)
        assert Duration.parse("PT-0.5S") == Duration.of_nanos(-500_000_000)

    @pytest.mark.parametrize("text", ["P1D", "PT", "PTxS", "PT1H2H", "pt1h", "PT1.5M", "PT1S "])
    def test_parse_bad_format(self, text: str) -> None:
        """Test malformed durations."""
        with pytest.raises(ParseError):
            Duration.parse(text)

    def test_parse_empty(self) -> None:
        """Test that empty text is rejected, including through from_text."""
        with pytest.raises(ParseError) as exc_info:
            Duration.parse("")
        assert exc_info.value.reason is ErrorReason.EMPTY_INPUT
        with pytest.raises(ParseError):
            Duration.from_text("")

    def test_from_text_bytes(self) -> None:
        """Test unmarshalling from bytes."""
        assert Duration.from_text(b"PT2M") == Duration.of_minutes(2)

    def test_repr(self) -> None:
        """Test repr."""
        assert repr(Duration.of_seconds(3, 500_000_000)) == "Duration(seconds=3, nanos=500000000)"
