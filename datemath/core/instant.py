"""Instant: an immutable point in time with millisecond precision.

An Instant stores milliseconds since 1970-01-01T00:00:00Z together with the
Timezone that provides its local calendar view. Construction that fails
(for example a parse that finds no date) produces the Invalid Instant
rather than raising; use ``is_valid`` or
``datemath.is_valid_instant()`` to detect it.
"""

from __future__ import annotations

import datetime as _datetime
import time as _time

from datemath._internal.constants import MAX_EPOCH_MS
from datemath._internal.validation import require_int
from datemath.core.fields import Fields
from datemath.errors import OverflowError
from datemath.units.timezone import (
    Timezone,
    TzinfoTimezone,
    resolve_timezone,
)

_UTC_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MS = _datetime.timedelta(milliseconds=1)


class Instant:
    """A point in time viewed through a Timezone.

    Components passed to the constructor are local to ``timezone`` (the
    host zone when omitted) and roll over when out of range, so
    ``Instant(2014, 13, 1)`` is 2015-01-01.

    Attributes:
        year: The local year.
        month: The local month (1-12).
        day: The local day of the month.
        hour: The local hour (0-23).
        minute: The local minute (0-59).
        second: The local second (0-59).
        millisecond: The local millisecond (0-999).
        day_of_week: Monday=0 through Sunday=6.
        utc_offset: Local time minus UTC, in minutes.
        epoch_ms: Milliseconds since the Unix epoch, None when invalid.
        timezone: The Timezone providing the local view.

    Examples:
        >>> from datemath.units.timezone import UTC
        >>> d = Instant(2012, 9, 27, timezone=UTC)
        >>> d.day_of_week
        3
        >>> d.epoch_ms
        1348704000000

        >>> Instant.invalid().is_valid
        False
    """

    __slots__ = ("_epoch_ms", "_tz")

    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        timezone: Timezone | None = None,
    ) -> None:
        """Create an Instant from local components.

        Raises:
            TypeError: If a component is not an int or timezone is not a Timezone.
        """
        signature = "Instant(year, month, day, hour, minute, second, millisecond)"
        components = {
            "year": year,
            "month": month,
            "day": day,
            "hour": hour,
            "minute": minute,
            "second": second,
            "millisecond": millisecond,
        }
        for name, value in components.items():
            require_int(value, signature, name)

        tz = resolve_timezone(timezone)
        fields = Fields(year, month, day, hour, minute, second, millisecond)
        self._tz: Timezone = tz
        self._epoch_ms: int | None = _checked(tz.local_to_epoch(fields.to_local_ms()))

    @classmethod
    def _from_internal(cls, epoch_ms: int | None, tz: Timezone) -> Instant:
        """Create an Instant from epoch milliseconds, bypassing validation."""
        instance = object.__new__(cls)
        instance._epoch_ms = epoch_ms
        instance._tz = tz
        return instance

    @classmethod
    def from_epoch_ms(cls, ms: int, *, timezone: Timezone | None = None) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch.

        Values beyond +/-8.64e15 give the Invalid Instant.

        Raises:
            TypeError: If ms is not an int.
        """
        require_int(ms, "Instant.from_epoch_ms(ms)", "ms")
        return cls._from_internal(_checked(ms), resolve_timezone(timezone))

    @classmethod
    def from_fields(cls, fields: Fields, *, timezone: Timezone | None = None) -> Instant:
        """Create an Instant from local Fields, rolling over out-of-range parts."""
        tz = resolve_timezone(timezone)
        return cls._from_internal(_checked(tz.local_to_epoch(fields.to_local_ms())), tz)

    @classmethod
    def invalid(cls, *, timezone: Timezone | None = None) -> Instant:
        """Return the Invalid Instant."""
        return cls._from_internal(None, resolve_timezone(timezone))

    @classmethod
    def now(cls, *, timezone: Timezone | None = None) -> Instant:
        """Return the current instant."""
        return cls._from_internal(_time.time_ns() // 1_000_000, resolve_timezone(timezone))

    @classmethod
    def from_datetime(
        cls,
        dt: _datetime.datetime,
        *,
        timezone: Timezone | None = None,
    ) -> Instant:
        """Create an Instant from a standard library datetime.

        An aware datetime keeps its instant; unless timezone is given, the
        result is viewed through the datetime's own tzinfo. A naive
        datetime is read as wall-clock time in timezone. Microseconds are
        truncated to milliseconds.

        Raises:
            TypeError: If dt is not a datetime.datetime.
        """
        if not isinstance(dt, _datetime.datetime):
            raise TypeError(
                f"Instant.from_datetime(dt) expected datetime for `dt`, got {type(dt).__name__}"
            )

        if dt.tzinfo is None or dt.utcoffset() is None:
            fields = Fields(
                dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond // 1000
            )
            return cls.from_fields(fields, timezone=timezone)

        tz = timezone if timezone is not None else TzinfoTimezone(dt.tzinfo)
        return cls._from_internal((dt - _UTC_EPOCH) // _ONE_MS, resolve_timezone(tz))

    # Properties

    @property
    def is_valid(self) -> bool:
        return self._epoch_ms is not None

    @property
    def epoch_ms(self) -> int | None:
        return self._epoch_ms

    @property
    def timezone(self) -> Timezone:
        return self._tz

    @property
    def fields(self) -> Fields:
        """Return the local calendar components.

        Raises:
            ValueError: If this is the Invalid Instant.
        """
        return Fields.from_local_ms(self._tz.epoch_to_local(self._require_epoch()))

    @property
    def year(self) -> int:
        return self.fields.year

    @property
    def month(self) -> int:
        return self.fields.month

    @property
    def day(self) -> int:
        return self.fields.day

    @property
    def hour(self) -> int:
        return self.fields.hour

    @property
    def minute(self) -> int:
        return self.fields.minute

    @property
    def second(self) -> int:
        return self.fields.second

    @property
    def millisecond(self) -> int:
        return self.fields.millisecond

    @property
    def day_of_week(self) -> int:
        """Day of week, Monday=0 through Sunday=6."""
        return self.fields.day_of_week

    @property
    def iso_weekday(self) -> int:
        """ISO day of week, Monday=1 through Sunday=7."""
        return self.day_of_week + 1

    @property
    def utc_offset_seconds(self) -> int:
        return self._tz.offset_seconds_at(self._require_epoch())

    @property
    def utc_offset(self) -> int:
        """Local time minus UTC, in whole minutes."""
        return round(self.utc_offset_seconds / 60)

    # Conversions

    def with_timezone(self, timezone: Timezone) -> Instant:
        """Return the same instant viewed through another timezone."""
        return Instant._from_internal(self._epoch_ms, resolve_timezone(timezone))

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware datetime carrying this instant's local offset.

        Raises:
            ValueError: If this is the Invalid Instant.
            OverflowError: If the year is outside 1-9999.
        """
        f = self.fields
        if not 1 <= f.year <= 9999:
            raise OverflowError(f"year {f.year} is outside the datetime range")
        offset = _datetime.timedelta(seconds=self.utc_offset_seconds)
        return _datetime.datetime(
            f.year,
            f.month,
            f.day,
            f.hour,
            f.minute,
            f.second,
            f.millisecond * 1000,
            tzinfo=_datetime.timezone(offset),
        )

    def to_iso_format(self) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS.mmm+HH:MM`` in local time."""
        f = self.fields
        total_minutes = self.utc_offset
        sign = "+" if total_minutes >= 0 else "-"
        hours, minutes = divmod(abs(total_minutes), 60)
        year = f"{f.year:04d}" if f.year >= 0 else f"{f.year:05d}"
        return (
            f"{year}-{f.month:02d}-{f.day:02d}T{f.hour:02d}:{f.minute:02d}:"
            f"{f.second:02d}.{f.millisecond:03d}{sign}{hours:02d}:{minutes:02d}"
        )

    def _require_epoch(self) -> int:
        if self._epoch_ms is None:
            raise ValueError("Invalid Instant has no calendar fields")
        return self._epoch_ms

    # Operators

    def __sub__(self, other: object) -> int:
        """Return the milliseconds elapsed from other to self.

        Raises:
            TypeError: If either side is the Invalid Instant.
        """
        if not isinstance(other, Instant):
            return NotImplemented
        if self._epoch_ms is None or other._epoch_ms is None:
            raise TypeError("cannot subtract an Invalid Instant")
        return self._epoch_ms - other._epoch_ms

    def __eq__(self, other: object) -> bool:
        """Two valid instants are equal when they share the same epoch.

        The Invalid Instant equals nothing, itself included.
        """
        if not isinstance(other, Instant):
            return NotImplemented
        if self._epoch_ms is None or other._epoch_ms is None:
            return False
        return self._epoch_ms == other._epoch_ms

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        if self._epoch_ms is None or other._epoch_ms is None:
            return False
        return self._epoch_ms < other._epoch_ms

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        if self._epoch_ms is None or other._epoch_ms is None:
            return False
        return self._epoch_ms <= other._epoch_ms

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        if self._epoch_ms is None or other._epoch_ms is None:
            return False
        return self._epoch_ms > other._epoch_ms

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        if self._epoch_ms is None or other._epoch_ms is None:
            return False
        return self._epoch_ms >= other._epoch_ms

    def __hash__(self) -> int:
        return hash(self._epoch_ms)

    def __repr__(self) -> str:
        if self._epoch_ms is None:
            return f"Instant.invalid(timezone={self._tz!r})"
        f = self.fields
        return (
            f"Instant({f.year}, {f.month}, {f.day}, {f.hour}, {f.minute}, "
            f"{f.second}, {f.millisecond}, timezone={self._tz!r})"
        )

    def __str__(self) -> str:
        if self._epoch_ms is None:
            return "Invalid Instant"
        return self.to_iso_format()


def _checked(epoch_ms: int) -> int | None:
    """Return epoch_ms, or None when it is outside the supported range."""
    if -MAX_EPOCH_MS <= epoch_ms <= MAX_EPOCH_MS:
        return epoch_ms
    return None


__all__ = ["Instant"]
