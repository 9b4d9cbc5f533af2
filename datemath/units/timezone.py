"""Timezone offset providers.

An Instant reads its local calendar fields through a Timezone. A Timezone
only answers one question, "what is the UTC offset at this instant?", and
derives the wall-clock conversions from it. There is no timezone database
in Datemath itself: FixedTimezone covers plain UTC offsets, SystemTimezone
reads the host's local rules, and TzinfoTimezone adapts any
``datetime.tzinfo`` (for example ``zoneinfo.ZoneInfo``) supplied by the
caller.
"""

from __future__ import annotations

import datetime as _datetime
import re
import time as _time
from typing import ClassVar

from datemath._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    MS_PER_DAY,
    MS_PER_SECOND,
)
from datemath.errors import TimezoneError

# Offsets are looked up within the range the standard library can represent.
_MIN_LOOKUP_MS: int = -62_104_060_800_000  # 0002-01-01T00:00Z
_MAX_LOOKUP_MS: int = 253_370_764_800_000  # 9999-01-01T00:00Z

_UTC_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def _clamp_lookup(epoch_ms: int) -> int:
    return min(max(epoch_ms, _MIN_LOOKUP_MS), _MAX_LOOKUP_MS)


class Timezone:
    """Base class for UTC offset providers.

    Subclasses implement offset_seconds_at(). Offsets are seconds east of
    UTC: positive ahead of UTC, negative behind it.
    """

    __slots__ = ()

    def offset_seconds_at(self, epoch_ms: int) -> int:
        """Return the UTC offset in seconds in force at epoch_ms."""
        raise NotImplementedError

    def epoch_to_local(self, epoch_ms: int) -> int:
        """Convert epoch milliseconds to wall-clock milliseconds."""
        return epoch_ms + self.offset_seconds_at(epoch_ms) * MS_PER_SECOND

    def local_to_epoch(self, local_ms: int) -> int:
        """Convert wall-clock milliseconds to epoch milliseconds.

        A wall-clock time that occurs twice (a DST fall-back overlap)
        resolves to the earlier instant. A wall-clock time that never
        occurs (a DST spring-forward gap) is read with the offset in force
        before the transition, which lands it after the gap.

        Assumes at most one offset transition within a day of local_ms.
        """
        before = self.offset_seconds_at(local_ms - MS_PER_DAY) * MS_PER_SECOND
        after = self.offset_seconds_at(local_ms + MS_PER_DAY) * MS_PER_SECOND

        candidates = [
            local_ms - offset
            for offset in {before, after}
            if self.offset_seconds_at(local_ms - offset) * MS_PER_SECOND == offset
        ]
        if candidates:
            return min(candidates)
        return local_ms - before


class FixedTimezone(Timezone):
    """A timezone represented as a constant UTC offset.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time).

    Examples:
        >>> FixedTimezone.utc().is_utc
        True

        >>> FixedTimezone.from_hours(5, 30).offset_seconds
        19800

        >>> FixedTimezone.from_string("-0500").offset_seconds
        -18000
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[FixedTimezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a FixedTimezone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds.
            name: Optional name for the timezone (e.g., "EST").

        Raises:
            TimezoneError: If offset_seconds is not an int or exceeds 24 hours.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._name: str | None = name

    @classmethod
    def utc(cls) -> FixedTimezone:
        """Return the shared UTC timezone instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> FixedTimezone:
        """Create a FixedTimezone from an hours and minutes offset.

        Args:
            hours: Hour component; its sign gives the direction.
            minutes: Minute component (0-59), taking the sign of hours.

        Raises:
            TimezoneError: If minutes is out of range.

        Examples:
            >>> FixedTimezone.from_hours(-3, 30).offset_seconds
            -12600
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        sign = -1 if hours < 0 else 1
        return cls(hours * 3600 + sign * minutes * 60)

    @classmethod
    def from_string(cls, s: str) -> FixedTimezone:
        """Parse "Z", "UTC", "+HH:MM", "+HHMM" or "+HH" into a FixedTimezone.

        Raises:
            TimezoneError: If the string cannot be parsed.
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = re.fullmatch(r"([+-])(\d{2})(?::?(\d{2}))?", s, re.ASCII)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (int(hours_str) * 3600 + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_utc(self) -> bool:
        return self._offset_seconds == 0

    def offset_seconds_at(self, epoch_ms: int) -> int:
        return self._offset_seconds

    def local_to_epoch(self, local_ms: int) -> int:
        return local_ms - self._offset_seconds * MS_PER_SECOND

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedTimezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._name:
            return f"FixedTimezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"FixedTimezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        if self._offset_seconds == 0:
            return self._name if self._name else "UTC"

        total_minutes = abs(self._offset_seconds) // 60
        sign = "+" if self._offset_seconds >= 0 else "-"
        return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"


class SystemTimezone(Timezone):
    """The host's local timezone, including its daylight saving rules.

    Offsets come from ``time.localtime`` and therefore follow the process's
    TZ configuration at the moment of each call.
    """

    __slots__ = ()

    def offset_seconds_at(self, epoch_ms: int) -> int:
        seconds = _clamp_lookup(epoch_ms) // MS_PER_SECOND
        return _time.localtime(seconds).tm_gmtoff

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemTimezone):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(SystemTimezone)

    def __repr__(self) -> str:
        return "SystemTimezone()"

    def __str__(self) -> str:
        return "local"


class TzinfoTimezone(Timezone):
    """Adapter for a ``datetime.tzinfo`` such as ``zoneinfo.ZoneInfo``.

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> tz = TzinfoTimezone(ZoneInfo("America/New_York"))
        >>> tz.offset_seconds_at(1402246795555)  # 2014-06-08T16:59:55.555Z
        -14400
    """

    __slots__ = ("_tzinfo",)

    def __init__(self, tzinfo: _datetime.tzinfo) -> None:
        if not isinstance(tzinfo, _datetime.tzinfo):
            raise TimezoneError(
                f"expected datetime.tzinfo, got {type(tzinfo).__name__}"
            )
        self._tzinfo = tzinfo

    @property
    def tzinfo(self) -> _datetime.tzinfo:
        return self._tzinfo

    def offset_seconds_at(self, epoch_ms: int) -> int:
        moment = _UTC_EPOCH + _datetime.timedelta(milliseconds=_clamp_lookup(epoch_ms))
        offset = moment.astimezone(self._tzinfo).utcoffset()
        if offset is None:
            raise TimezoneError(f"{self._tzinfo!r} does not provide a UTC offset")
        return offset // _datetime.timedelta(seconds=1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TzinfoTimezone):
            return NotImplemented
        return self._tzinfo == other._tzinfo

    def __hash__(self) -> int:
        return hash(self._tzinfo)

    def __repr__(self) -> str:
        return f"TzinfoTimezone({self._tzinfo!r})"

    def __str__(self) -> str:
        return str(self._tzinfo)


UTC: FixedTimezone = FixedTimezone.utc()

_DEFAULT_TIMEZONE: Timezone = SystemTimezone()


def default_timezone() -> Timezone:
    """Return the provider used when no timezone is given (the host zone)."""
    return _DEFAULT_TIMEZONE


def resolve_timezone(timezone: Timezone | None) -> Timezone:
    """Return timezone, or the default provider when it is None.

    Raises:
        TypeError: If timezone is neither None nor a Timezone.
    """
    if timezone is None:
        return _DEFAULT_TIMEZONE
    if not isinstance(timezone, Timezone):
        raise TypeError(f"expected Timezone for `timezone`, got {type(timezone).__name__}")
    return timezone


__all__ = [
    "Timezone",
    "FixedTimezone",
    "SystemTimezone",
    "TzinfoTimezone",
    "UTC",
    "default_timezone",
    "resolve_timezone",
]
