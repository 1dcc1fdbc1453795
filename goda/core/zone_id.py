"""ZoneId class representing a time-zone identifier.

This module provides the ZoneId class, which names either an IANA
region (such as "Europe/Paris") resolved through ``zoneinfo``, or a
fixed ZoneOffset. Region lookups go through a process-wide cache.
"""

from __future__ import annotations

import datetime
import logging
import os
import threading
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from goda.core.zone_offset import ZoneOffset
from goda.errors import ArithmeticOverflowError, GodaError, InvalidZoneIdError

logger = logging.getLogger(__name__)

_location_cache: dict[str, ZoneInfo] = {}
_location_lock = threading.Lock()

# JSR-310 ZoneId.SHORT_IDS
SHORT_IDS: dict[str, str] = {
    "ACT": "Australia/Darwin",
    "AET": "Australia/Sydney",
    "AGT": "America/Argentina/Buenos_Aires",
    "ART": "Africa/Cairo",
    "AST": "America/Anchorage",
    "BET": "America/Sao_Paulo",
    "BST": "Asia/Dhaka",
    "CAT": "Africa/Harare",
    "CNT": "America/St_Johns",
    "CST": "America/Chicago",
    "CTT": "Asia/Shanghai",
    "EAT": "Africa/Addis_Ababa",
    "ECT": "Europe/Paris",
    "IET": "America/Indiana/Indianapolis",
    "IST": "Asia/Kolkata",
    "JST": "Asia/Tokyo",
    "MIT": "Pacific/Apia",
    "NET": "Asia/Yerevan",
    "NST": "Pacific/Auckland",
    "PLT": "Asia/Karachi",
    "PNT": "America/Phoenix",
    "PRT": "America/Puerto_Rico",
    "PST": "America/Los_Angeles",
    "SST": "Pacific/Guadalcanal",
    "VST": "Asia/Ho_Chi_Minh",
    "EST": "America/Panama",
    "MST": "America/Phoenix",
    "HST": "Pacific/Honolulu",
}

_UTC_IDS = ("Z", "UT", "UTC", "GMT")


def load_location(zone_id: str) -> ZoneInfo:
    """Return the IANA zone for zone_id, loading it on first use.

    Loaded zones are cached for the life of the process. Reads do not
    take the lock; concurrent first loads keep whichever entry was
    stored first.

    Args:
        zone_id: An IANA key such as "America/New_York".

    Returns:
        The resolved ZoneInfo.

    Raises:
        ZoneInfoNotFoundError: If the zone database has no such key.
        ValueError: If the key is malformed.
    """
    location = _location_cache.get(zone_id)
    if location is not None:
        return location
    location = ZoneInfo(zone_id)
    with _location_lock:
        location = _location_cache.setdefault(zone_id, location)
    logger.debug("loaded zone %s", zone_id)
    return location


class ZoneId:
    """A time-zone identifier: an IANA region or a fixed offset.

    ZoneId.of() accepts "Z", "UT", "UTC" and "GMT" for UTC; offsets such
    as "+05:30", optionally prefixed by "UTC", "GMT" or "UT"; IANA keys;
    and the JSR-310 short ids ("PST", "JST", ...).

    The zero value means "no zone" and renders as the empty string.

    Examples:
        >>> str(ZoneId.of("Europe/Paris"))
        'Europe/Paris'
        >>> ZoneId.of("GMT").offset
        ZoneOffset('Z')
        >>> str(ZoneId.of("UTC+05:30"))
        'UTC+05:30'
        >>> str(ZoneId.of("PST"))
        'America/Los_Angeles'
    """

    __slots__ = ("_id", "_offset", "_location")

    _EMPTY_TEXT_IS_ZERO = True

    def __init__(self, zone_id: str) -> None:
        """Resolve a zone id.

        Raises:
            InvalidZoneIdError: If the id names neither an offset nor a
                known region.
        """
        resolved = ZoneId.of(zone_id)
        self._id = resolved._id
        self._offset = resolved._offset
        self._location = resolved._location

    @classmethod
    def _create(cls, zone_id: str, offset: ZoneOffset | None, location: datetime.tzinfo | None) -> ZoneId:
        zone = object.__new__(cls)
        zone._id = zone_id
        zone._offset = offset
        zone._location = location
        return zone

    @classmethod
    def of(cls, zone_id: str) -> ZoneId:
        """Resolve a zone id.

        Args:
            zone_id: "Z", "UTC", an offset, an IANA key or a short id.

        Returns:
            The resolved ZoneId.

        Raises:
            InvalidZoneIdError: If the id cannot be resolved.
        """
        if zone_id in _UTC_IDS:
            return cls.utc()

        prefix = ""
        rest = zone_id
        for candidate in ("UTC", "GMT", "UT"):
            if zone_id.startswith(candidate):
                prefix, rest = candidate, zone_id[len(candidate) :]
                break
        if rest[:1] in ("+", "-"):
            try:
                offset = ZoneOffset.parse(rest)
            except GodaError:
                pass
            else:
                if offset.is_zero():
                    return cls.utc()
                return cls._create(prefix + str(offset), offset, None)

        try:
            location = load_location(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            key = SHORT_IDS.get(zone_id)
            if key is not None:
                logger.debug("resolved short zone id %s to %s", zone_id, key)
                return cls.of(key)
            raise InvalidZoneIdError(zone_id) from e
        return cls._create(zone_id, None, location)

    @classmethod
    def utc(cls) -> ZoneId:
        """Return the UTC zone."""
        return cls._create("UTC", ZoneOffset.utc(), None)

    @classmethod
    def zero(cls) -> ZoneId:
        """Return the zero ZoneId (no zone)."""
        return cls._create("", None, None)

    @classmethod
    def of_offset(cls, offset: ZoneOffset) -> ZoneId:
        """Return a fixed-offset zone."""
        if offset.is_zero():
            return cls.utc()
        return cls._create(str(offset), offset, None)

    @classmethod
    def of_tzinfo(cls, tz: datetime.tzinfo) -> ZoneId:
        """Create a ZoneId from a ``tzinfo``.

        A ``zoneinfo.ZoneInfo`` maps to its region; any other tzinfo with
        a fixed ``utcoffset`` maps to that offset.

        Raises:
            InvalidZoneIdError: If the tzinfo has neither a key nor a
                fixed offset.
        """
        if isinstance(tz, ZoneInfo):
            return cls._create(tz.key, None, tz)
        delta = tz.utcoffset(None)
        if delta is None:
            raise InvalidZoneIdError(str(tz))
        return cls.of_offset(ZoneOffset.from_timedelta(delta))

    @classmethod
    def system_default(cls) -> ZoneId:
        """Return the system default zone.

        The TZ environment variable is used when it names a resolvable
        zone; otherwise the host's current UTC offset is used.
        """
        name = os.environ.get("TZ", "").lstrip(":")
        if name:
            try:
                return cls.of(name)
            except InvalidZoneIdError:
                logger.debug("TZ=%s is not a known zone, using the local offset", name)
        delta = datetime.datetime.now().astimezone().utcoffset()
        if delta is None:
            return cls.utc()
        return cls.of_offset(ZoneOffset.from_timedelta(delta))

    @property
    def id(self) -> str:
        """Return the id: the region key, "UTC", or the offset text."""
        return self._id

    @property
    def offset(self) -> ZoneOffset | None:
        """Return the fixed offset, or None for a region."""
        return self._offset

    def is_zero(self) -> bool:
        return not self._id

    def to_tzinfo(self) -> datetime.tzinfo:
        """Return a tzinfo: the ZoneInfo of a region, or a fixed timezone.

        Raises:
            InvalidZoneIdError: If this is the zero ZoneId.
        """
        if self._location is not None:
            return self._location
        if self._offset is not None:
            return self._offset.to_timezone()
        raise InvalidZoneIdError("")

    def offset_at(self, epoch_second: int) -> ZoneOffset:
        """Return the offset in effect at an instant.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.

        Raises:
            ArithmeticOverflowError: If the instant is outside the range
                of ``datetime``.

        Examples:
            >>> ZoneId.of("Europe/Paris").offset_at(1_720_000_000)
            ZoneOffset('+02:00')
        """
        if self._offset is not None:
            return self._offset
        tz = self.to_tzinfo()
        try:
            instant = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc) + datetime.timedelta(
                seconds=epoch_second
            )
        except OverflowError as e:
            raise ArithmeticOverflowError() from e
        delta = instant.astimezone(tz).utcoffset()
        return ZoneOffset.from_timedelta(delta or datetime.timedelta(0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneId):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        if self.is_zero():
            return "ZoneId.zero()"
        return f"ZoneId('{self._id}')"

    # =========================================================================
    # Text / JSON / SQL
    # =========================================================================

    def __str__(self) -> str:
        return self._id

    @classmethod
    def parse(cls, text: str) -> ZoneId:
        """Parse a zone id.

        Raises:
            ParseError: If the text is empty.
            InvalidZoneIdError: If the id cannot be resolved.
        """
        from goda.errors import ErrorReason, ParseError
        from goda.format.iso8601 import parsing

        with parsing(text):
            if not text:
                raise ParseError("empty input", reason=ErrorReason.EMPTY_INPUT)
            return cls.of(text)

    def to_text(self) -> str:
        return str(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> ZoneId:
        """Unmarshal text; empty text yields the zero ZoneId."""
        from goda.format.iso8601 import from_text

        return from_text(cls, text)

    def to_json(self) -> str:
        from goda.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: str | bytes) -> ZoneId:
        from goda.convert.json import from_json

        return from_json(cls, data)

    def to_sql(self) -> str | None:
        from goda.convert.sql import to_sql

        return to_sql(self)

    @classmethod
    def from_sql(cls, value: object) -> ZoneId:
        """Scan a SQL value: None, text, or a ``tzinfo``."""
        from goda.convert.sql import from_sql

        if isinstance(value, datetime.tzinfo):
            return cls.of_tzinfo(value)
        return from_sql(cls, value)


__all__ = ["ZoneId", "load_location", "SHORT_IDS"]
