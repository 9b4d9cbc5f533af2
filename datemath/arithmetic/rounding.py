"""Rounding Instants to interval boundaries.

floor() and ceil() accept any interval: the units ("ms" through "year")
plus "week" (Monday-aligned), the weekday names and "quarter".

Examples:
    >>> from datemath.units.timezone import UTC
    >>> d = Instant(2014, 7, 11, 16, 59, 55, 555, timezone=UTC)
    >>> floor("quarter", d).fields
    Fields(year=2014, month=7, day=1, hour=0, minute=0, second=0, millisecond=0)
    >>> ceil("hour", d).hour
    17
"""

from __future__ import annotations

from datemath._internal.validation import require_instant
from datemath.arithmetic.ops import _advance, _build, _build_fields
from datemath.core.instant import Instant
from datemath.units.timeunit import Interval, IntervalLike, resolve_interval


def _floor(interval: IntervalLike, date: Instant, signature: str) -> Instant:
    part = interval.part
    tz = date.timezone

    if interval.target is None and part.millis is not None:
        # Fixed-length parts floor on the local clock without a round trip
        # through wall-clock fields, so repeated hours keep their offset.
        epoch = date._require_epoch()
        return _build(epoch - tz.epoch_to_local(epoch) % part.millis, tz, signature)

    fields = date.fields.floored(part)
    if interval.target is not None:
        field, values = interval.target
        while getattr(fields, field) not in values:
            fields = fields.shifted(part, -1)
    return _build_fields(fields, tz, signature)


def floor(interval: str | Interval, date: Instant) -> Instant:
    """Return date rounded down to the start of its interval.

    Every part finer than the interval's part is reset (days and months to
    1, times to 0). Weekday intervals and "quarter" then step back to the
    most recent matching weekday or quarter month.

    Args:
        interval: An interval or unit name, or an Interval or Unit member.
        date: A valid Instant.

    Returns:
        A new Instant in date's timezone, never later than date.

    Raises:
        UnknownIntervalError: If interval is not an interval or unit name.
        TypeError: If date is not a valid Instant.

    Examples:
        >>> from datemath.units.timezone import UTC
        >>> floor("monday", Instant(2014, 6, 8, 12, timezone=UTC)).day
        2
        >>> floor("month", Instant(2014, 6, 8, 12, timezone=UTC)).day
        1
    """
    signature = "floor(interval, date)"
    resolved = resolve_interval(interval, signature)
    require_instant(date, signature, "date")
    return _floor(resolved, date, signature)


def ceil(interval: str | Interval, date: Instant) -> Instant:
    """Return date rounded up to the start of the next interval.

    A date already on a boundary is returned unchanged.

    Raises:
        UnknownIntervalError: If interval is not an interval or unit name.
        TypeError: If date is not a valid Instant.

    Examples:
        >>> from datemath.units.timezone import UTC
        >>> ceil("sunday", Instant(2014, 6, 8, 12, timezone=UTC)).day
        15
        >>> ceil("day", Instant(2014, 6, 8, timezone=UTC)).day
        8
    """
    signature = "ceil(interval, date)"
    resolved = resolve_interval(interval, signature)
    require_instant(date, signature, "date")

    floored = _floor(resolved, date, signature)
    if floored == date:
        return floored
    return _advance(floored, resolved.part, resolved.coefficient, signature)


__all__ = ["floor", "ceil"]
