"""Tests for SQL bind and scan conversion."""

from __future__ import annotations

import datetime
from zoneinfo import ZoneInfo

import pytest

from goda import (
    Duration,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    YearMonth,
    ZoneId,
    ZoneOffset,
)
from goda.convert import from_sql, to_sql
from goda.errors import ErrorReason, ParseError, UnsupportedSqlTypeError

SQL_TYPES = [LocalDate, LocalTime, LocalDateTime, OffsetDateTime, YearMonth, ZoneId, Duration]


class TestToSql:
    """Tests for bind values."""

    @pytest.mark.parametrize("cls", SQL_TYPES)
    def test_zero_binds_null(self, cls: type) -> None:
        """Test that zero values bind as NULL."""
        assert to_sql(cls.zero()) is None
        assert cls.zero().to_sql() is None

    def test_text_values(self) -> None:
        """Test that values bind as their canonical text."""
        assert LocalDate(2024, 3, 15).to_sql() == "2024-03-15"
        assert LocalTime(9, 30).to_sql() == "09:30:00"
        assert OffsetDateTime.parse("2024-03-15T14:30:00+05:30").to_sql() == "2024-03-15T14:30:00+05:30"
        assert Duration.of_seconds(90).to_sql() == "PT1M30S"


class TestFromSql:
    """Tests for scanning column values."""

    @pytest.mark.parametrize("cls", SQL_TYPES)
    def test_null_is_zero(self, cls: type) -> None:
        """Test that NULL scans to zero."""
        assert cls.from_sql(None).is_zero()

    def test_text_and_bytes(self) -> None:
        """Test scanning text in every accepted container."""
        expected = LocalDate(2024, 3, 15)
        assert LocalDate.from_sql("2024-03-15") == expected
        assert LocalDate.from_sql(b"2024-03-15") == expected
        assert LocalDate.from_sql(bytearray(b"2024-03-15")) == expected
        assert from_sql(LocalDate, memoryview(b"2024-03-15")) == expected

    def test_empty_text(self) -> None:
        """Test that empty text scans to zero for the zero-text types."""
        assert LocalDate.from_sql("").is_zero()
        with pytest.raises(ParseError):
            Duration.from_sql("")

    def test_native_date(self) -> None:
        """Test scanning datetime.date and datetime.datetime."""
        assert LocalDate.from_sql(datetime.date(2024, 3, 15)) == LocalDate(2024, 3, 15)
        assert LocalDate.from_sql(datetime.datetime(2024, 3, 15, 23, 59)) == LocalDate(2024, 3, 15)

    def test_native_time(self) -> None:
        """Test scanning datetime.time."""
        assert LocalTime.from_sql(datetime.time(9, 30, 0, 5)) == LocalTime(9, 30, 0, 5_000)
        assert LocalTime.from_sql(datetime.datetime(2024, 3, 15, 9, 30)) == LocalTime(9, 30)

    def test_native_date_time(self) -> None:
        """Test scanning datetime.datetime."""
        value = datetime.datetime(2024, 3, 15, 9, 30, tzinfo=datetime.timezone.utc)
        assert LocalDateTime.from_sql(value) == LocalDateTime(2024, 3, 15, 9, 30)

    def test_native_offset_date_time(self) -> None:
        """Test scanning aware and naive datetimes."""
        aware = datetime.datetime(2024, 3, 15, 9, 30, tzinfo=ZoneInfo("Asia/Tokyo"))
        assert OffsetDateTime.from_sql(aware).offset == ZoneOffset.of(9)
        naive = datetime.datetime(2024, 3, 15, 9, 30)
        assert OffsetDateTime.from_sql(naive).offset == ZoneOffset.utc()

    def test_native_duration(self) -> None:
        """Test scanning timedelta and integer nanoseconds."""
        assert Duration.from_sql(datetime.timedelta(minutes=2)) == Duration.of_minutes(2)
        assert Duration.from_sql(1_500_000_000) == Duration.of_seconds(1, 500_000_000)
        assert Duration.from_sql("PT2M") == Duration.of_minutes(2)

    def test_native_zone(self) -> None:
        """Test scanning tzinfo values."""
        assert ZoneId.from_sql(ZoneInfo("Europe/Paris")) == ZoneId.of("Europe/Paris")
        assert ZoneId.from_sql(datetime.timezone.utc) == ZoneId.utc()

    @pytest.mark.parametrize("value", [1.5, 20240315, True, ["2024-03-15"]])
    def test_unsupported_types(self, value: object) -> None:
        """Test that other column types are rejected."""
        with pytest.raises(UnsupportedSqlTypeError) as exc_info:
            LocalDate.from_sql(value)
        assert exc_info.value.reason is ErrorReason.UNSUPPORTED_SQL_TYPE
        assert exc_info.value.value_type is type(value)

    def test_bool_is_not_nanoseconds(self) -> None:
        """Test that a boolean is not taken as a duration."""
        with pytest.raises(UnsupportedSqlTypeError, match="cannot scan value of type bool"):
            Duration.from_sql(True)
