"""ISO 8601 formatting and parsing.

This module provides the text grammars of every goda value type.

Functions:
    format_*: Render a value in its canonical text form.
    parse_*: Parse canonical text into a value.
    parsing: Context manager that attaches the offending input to errors.
    from_text: Shared unmarshal routine behind ``Type.from_text``.

Grammars:
    - LocalDate: yyyy-MM-dd, where the year is signed with any number of
      digits and the last six characters are -MM-dd
    - LocalTime: HH:mm:ss[.fffffffff]
    - LocalDateTime: <date>T<time> (T, t or a space on parse)
    - OffsetDateTime: <datetime><offset>
    - YearMonth: yyyy-MM
    - Duration: PT[-][<n>H][<n>M][<n>[.<frac>]S]
    - ZoneOffset: Z | z | +H | +HH | +HHMM | +HH:MM | +HHMMSS | +HH:MM:SS

Zero values render as the empty string. Only Duration renders its zero
value, as "PT0S".

Examples:
    >>> from goda import LocalDate
    >>> format_local_date(LocalDate(2024, 3, 15))
    '2024-03-15'
    >>> parse_local_date("-0044-03-15")
    LocalDate(-44, 3, 15)
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, TypeVar

from goda._internal.constants import NANOS_PER_SECOND, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from goda.errors import ErrorReason, GodaError, ParseError

if TYPE_CHECKING:
    from goda.core.duration import Duration
    from goda.core.local_date import LocalDate
    from goda.core.local_date_time import LocalDateTime
    from goda.core.local_time import LocalTime
    from goda.core.offset_date_time import OffsetDateTime
    from goda.core.year_month import YearMonth
    from goda.core.zone_offset import ZoneOffset

T = TypeVar("T")

_DIGITS = re.compile(r"\d+", re.ASCII)
_SIGNED_DIGITS = re.compile(r"[+-]?\d+", re.ASCII)
_DURATION = re.compile(r"PT(-)?(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)(?:\.(\d*))?S)?", re.ASCII)


@contextmanager
def parsing(text: str) -> Iterator[None]:
    """Attach the input being parsed to any error raised inside the block.

    GodaErrors get ``text`` recorded as their input unless an inner parser
    already recorded one. Stray ValueErrors from numeric conversion become
    ParseErrors with reason PARSE_NUMBER.

    Examples:
        >>> with parsing("2024-13-01"):
        ...     parse_local_date("2024-13-01")
        Traceback (most recent call last):
        ...
        goda.errors.OutOfRangeError: goda: parse "2024-13-01": invalid value of MonthOfYear (valid range 1 - 12): 13
    """
    try:
        yield
    except GodaError as e:
        if e.input is None:
            e.input = text
        raise
    except ValueError as e:
        err = ParseError("invalid number", reason=ErrorReason.PARSE_NUMBER)
        err.input = text
        raise err from e


def as_text(data: str | bytes | bytearray | memoryview) -> str:
    """Return data as a str, decoding byte sequences as UTF-8.

    Raises:
        ParseError: If the bytes are not valid UTF-8.
    """
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError("input is not valid UTF-8") from e


def from_text(cls: type[T], data: str | bytes | bytearray | memoryview) -> T:
    """Unmarshal text into an instance of cls.

    Empty text yields ``cls.zero()`` for types whose zero value renders
    as the empty string; other types parse it strictly.
    """
    text = as_text(data)
    if not text and getattr(cls, "_EMPTY_TEXT_IS_ZERO", False):
        return cls.zero()  # type: ignore[attr-defined]
    return cls.parse(text)  # type: ignore[attr-defined]


def _require_text(text: str) -> None:
    if not text:
        raise ParseError("empty input", reason=ErrorReason.EMPTY_INPUT)


def _digits(s: str, what: str) -> int:
    if not _DIGITS.fullmatch(s):
        raise ParseError(f"invalid {what}: {s!r}", reason=ErrorReason.PARSE_NUMBER)
    return int(s)


def _signed(s: str, what: str) -> int:
    if not _SIGNED_DIGITS.fullmatch(s):
        raise ParseError(f"invalid {what}: {s!r}", reason=ErrorReason.PARSE_NUMBER)
    return int(s)


def _fraction(nano: int) -> str:
    """Render nanoseconds as a fraction padded to 3, 6 or 9 digits."""
    digits = f"{nano:09d}".rstrip("0")
    width = -(-len(digits) // 3) * 3
    return digits.ljust(width, "0")


# =============================================================================
# LocalDate / YearMonth
# =============================================================================


def format_local_date(date: LocalDate) -> str:
    """Format a date as yyyy-MM-dd, or "" for the zero date."""
    if date.is_zero():
        return ""
    return f"{date.year}-{int(date.month):02d}-{date.day_of_month:02d}"


def _parse_local_date(text: str) -> LocalDate:
    from goda.core.local_date import LocalDate

    if len(text) < 7 or text[-3] != "-" or text[-6] != "-":
        raise ParseError("date must end with -MM-dd")
    year = _signed(text[:-6], "year")
    month = _digits(text[-5:-3], "month")
    day = _digits(text[-2:], "day of month")
    return LocalDate(year, month, day)


def parse_local_date(text: str) -> LocalDate:
    """Parse a yyyy-MM-dd date.

    Raises:
        ParseError: If the text does not follow the grammar.
        OutOfRangeError: If a component is out of range.

    Examples:
        >>> parse_local_date("2024-03-15")
        LocalDate(2024, 3, 15)
        >>> parse_local_date("12345-01-01").year
        Year(12345)
    """
    with parsing(text):
        _require_text(text)
        return _parse_local_date(text)


def format_year_month(ym: YearMonth) -> str:
    """Format a year-month as yyyy-MM, or "" for the zero value."""
    if ym.is_zero():
        return ""
    return f"{ym.year}-{int(ym.month):02d}"


def parse_year_month(text: str) -> YearMonth:
    """Parse a yyyy-MM year-month.

    Examples:
        >>> parse_year_month("2024-02")
        YearMonth(2024, 2)
    """
    from goda.core.year_month import YearMonth

    with parsing(text):
        _require_text(text)
        if len(text) < 4 or text[-3] != "-":
            raise ParseError("year-month must end with -MM")
        year = _signed(text[:-3], "year")
        month = _digits(text[-2:], "month")
        return YearMonth(year, month)


# =============================================================================
# LocalTime
# =============================================================================


def format_local_time(time: LocalTime) -> str:
    """Format a time as HH:mm:ss[.fff[fff[fff]]], or "" for the zero time.

    Examples:
        >>> from goda import LocalTime
        >>> format_local_time(LocalTime(14, 30, 45, 120_000_000))
        '14:30:45.120'
        >>> format_local_time(LocalTime(14, 30))
        '14:30:00'
    """
    if time.is_zero():
        return ""
    text = f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
    if time.nanosecond:
        text += "." + _fraction(time.nanosecond)
    return text


def _parse_local_time(text: str) -> LocalTime:
    from goda.core.local_time import LocalTime

    if len(text) < 8 or text[2] != ":" or text[5] != ":":
        raise ParseError("time must be HH:mm:ss[.fffffffff]")
    hour = _digits(text[0:2], "hour")
    minute = _digits(text[3:5], "minute")
    second = _digits(text[6:8], "second")
    nano = 0
    if len(text) > 8:
        if text[8] != ".":
            raise ParseError("expected '.' before fraction of second")
        frac = text[9:]
        if frac:
            _digits(frac, "fraction of second")
            nano = int(frac[:9].ljust(9, "0"))
    return LocalTime(hour, minute, second, nano)


def parse_local_time(text: str) -> LocalTime:
    """Parse an HH:mm:ss[.f...] time.

    Only the first nine fractional digits are significant.

    Examples:
        >>> parse_local_time("14:30:45.5")
        LocalTime(14, 30, 45, 500000000)
    """
    with parsing(text):
        _require_text(text)
        return _parse_local_time(text)


# =============================================================================
# LocalDateTime / OffsetDateTime
# =============================================================================


def format_local_date_time(ldt: LocalDateTime) -> str:
    """Format a date-time as <date>T<time>, or "" for the zero value.

    Each part is formatted on its own, so a date joined with the zero
    time gives ``"2024-01-01T"``.
    """
    if ldt.is_zero():
        return ""
    return f"{format_local_date(ldt.local_date)}T{format_local_time(ldt.local_time)}"


def _parse_local_date_time(text: str) -> LocalDateTime:
    from goda.core.local_date_time import LocalDateTime

    index = next((i for i, ch in enumerate(text) if ch in "Tt "), -1)
    if index == -1:
        raise ParseError("missing 'T' separator between date and time")
    return LocalDateTime.of(_parse_local_date(text[:index]), _parse_local_time(text[index + 1 :]))


def parse_local_date_time(text: str) -> LocalDateTime:
    """Parse a <date>T<time> date-time.

    The separator may be ``T``, ``t`` or a single space.

    Examples:
        >>> parse_local_date_time("2024-03-15 14:30:00")
        LocalDateTime(2024, 3, 15, 14, 30, 0, 0)
    """
    with parsing(text):
        _require_text(text)
        return _parse_local_date_time(text)


def format_offset_date_time(odt: OffsetDateTime) -> str:
    """Format an offset date-time as <datetime><offset>, or "" for zero."""
    if odt.is_zero():
        return ""
    return format_local_date_time(odt.local_date_time) + format_zone_offset(odt.offset)


def parse_offset_date_time(text: str) -> OffsetDateTime:
    """Parse a <datetime><offset> value.

    The offset starts at the last ``+``, ``-``, ``Z`` or ``z``.

    Examples:
        >>> str(parse_offset_date_time("2024-03-15T14:30:00+05:30"))
        '2024-03-15T14:30:00+05:30'
    """
    from goda.core.offset_date_time import OffsetDateTime

    with parsing(text):
        _require_text(text)
        index = max(text.rfind(ch) for ch in "+-Zz")
        if index <= 0:
            raise ParseError("missing zone offset")
        ldt = _parse_local_date_time(text[:index])
        offset = _parse_zone_offset(text[index:])
        return OffsetDateTime.of(ldt, offset)


# =============================================================================
# Duration
# =============================================================================


def format_duration(duration: Duration) -> str:
    """Format a duration as PT[-][nH][nM][n[.f]S].

    The sign applies to the whole duration, and zero renders as "PT0S".

    Examples:
        >>> from goda import Duration
        >>> format_duration(Duration(29172, 345_000_000))
        'PT8H6M12.345S'
        >>> format_duration(Duration.of_seconds(-1, 500_000_000))
        'PT-0.5S'
        >>> format_duration(Duration.zero())
        'PT0S'
    """
    if duration.is_zero():
        return "PT0S"
    total = duration.to_nanos()
    text = "PT"
    if total < 0:
        text += "-"
        total = -total
    seconds, nanos = divmod(total, NANOS_PER_SECOND)
    hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
    if hours:
        text += f"{hours}H"
    if minutes:
        text += f"{minutes}M"
    if seconds or nanos:
        text += str(seconds)
        if nanos:
            text += "." + f"{nanos:09d}".rstrip("0")
        text += "S"
    return text


def parse_duration(text: str) -> Duration:
    """Parse a PT[-][nH][nM][n[.f]S] duration.

    A leading ``-`` after ``PT`` negates the whole duration. Fractional
    seconds are padded or truncated to nine digits.

    Raises:
        ParseError: If the text is empty, lacks the PT prefix, has no
            components, or has unparsed trailing input.

    Examples:
        >>> parse_duration("PT8H6M12.345S")
        Duration(seconds=29172, nanos=345000000)
        >>> parse_duration("PT-6H3M").to_nanos() == -(6 * 3600 + 180) * 10**9
        True
    """
    from goda.core.duration import Duration

    with parsing(text):
        _require_text(text)
        if not text.startswith("PT"):
            raise ParseError("duration must start with PT")
        match = _DURATION.fullmatch(text)
        if match is None:
            raise ParseError("invalid duration format")
        negative, hours, minutes, seconds, frac = match.groups()
        if hours is None and minutes is None and seconds is None:
            raise ParseError("invalid duration format")
        total = int(hours or 0) * SECONDS_PER_HOUR + int(minutes or 0) * SECONDS_PER_MINUTE + int(seconds or 0)
        nanos = int((frac or "")[:9].ljust(9, "0"))
        if negative:
            total, nanos = -total, -nanos
        return Duration.of_seconds(total, nanos)


# =============================================================================
# ZoneOffset
# =============================================================================


def format_zone_offset(offset: ZoneOffset) -> str:
    """Format an offset as Z or +HH:MM[:SS].

    Examples:
        >>> from goda import ZoneOffset
        >>> format_zone_offset(ZoneOffset.of(-3, -30))
        '-03:30'
        >>> format_zone_offset(ZoneOffset.of(5, 30, 15))
        '+05:30:15'
    """
    total = offset.total_seconds
    if total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    total = abs(total)
    hours, rest = divmod(total, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def _parse_zone_offset(text: str) -> ZoneOffset:
    from goda.core.zone_offset import ZoneOffset

    if not text:
        raise ParseError("zone offset cannot be empty", reason=ErrorReason.EMPTY_INPUT)
    if text in ("Z", "z"):
        return ZoneOffset.utc()
    if text[0] not in "+-":
        raise ParseError("zone offset must start with + or -")
    sign = -1 if text[0] == "-" else 1
    body = text[1:]
    if ":" in body:
        parts = body.split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise ParseError("zone offset must be +HH:MM or +HH:MM:SS")
        values = [_digits(p, "zone offset component") for p in parts]
    elif len(body) in (1, 2):
        values = [_digits(body, "zone offset hours")]
    elif len(body) == 4:
        values = [_digits(body[0:2], "zone offset hours"), _digits(body[2:4], "zone offset minutes")]
    elif len(body) == 6:
        values = [
            _digits(body[0:2], "zone offset hours"),
            _digits(body[2:4], "zone offset minutes"),
            _digits(body[4:6], "zone offset seconds"),
        ]
    else:
        raise ParseError("invalid zone offset length")
    values += [0] * (3 - len(values))
    hours, minutes, seconds = (sign * v for v in values)
    return ZoneOffset.of(hours, minutes, seconds)


def parse_zone_offset(text: str) -> ZoneOffset:
    """Parse a zone offset.

    The sign applies to every component.

    Examples:
        >>> parse_zone_offset("+05:30").total_seconds
        19800
        >>> parse_zone_offset("-0130").total_seconds
        -5400
        >>> parse_zone_offset("Z").is_zero()
        True
    """
    with parsing(text):
        return _parse_zone_offset(text)


__all__ = [
    "parsing",
    "as_text",
    "from_text",
    "format_local_date",
    "parse_local_date",
    "format_year_month",
    "parse_year_month",
    "format_local_time",
    "parse_local_time",
    "format_local_date_time",
    "parse_local_date_time",
    "format_offset_date_time",
    "parse_offset_date_time",
    "format_duration",
    "parse_duration",
    "format_zone_offset",
    "parse_zone_offset",
]
