"""Calendar arithmetic on Instants.

This module provides the unit arithmetic that floor(), ceil() and
date_range() build on:
    - add: Move an Instant by a whole number of units
    - diff: Count the whole units between two Instants
    - to_utc: View an Instant in UTC

Units with a fixed length (ms, second, minute, hour) move by elapsed time.
Calendar units (day, week, month, year) move the local calendar field and
roll over, so one month after January 31 is March 3 (March 2 in a leap
year) and one day after a DST switch lands on the same wall-clock time.

Every result keeps the timezone of its input.
"""

from __future__ import annotations

from datemath._internal.constants import MAX_EPOCH_MS, MS_PER_DAY, MS_PER_SECOND
from datemath._internal.validation import require_count, require_instant
from datemath.core.fields import Fields
from datemath.core.instant import Instant
from datemath.errors import OverflowError
from datemath.units.part import Part
from datemath.units.timeunit import Unit, resolve_unit
from datemath.units.timezone import UTC, Timezone


def _build(epoch_ms: int, tz: Timezone, signature: str) -> Instant:
    """Wrap an arithmetic result, refusing values outside the supported range."""
    if not -MAX_EPOCH_MS <= epoch_ms <= MAX_EPOCH_MS:
        raise OverflowError(f"{signature} result is outside the supported range")
    return Instant._from_internal(epoch_ms, tz)


def _build_fields(fields: Fields, tz: Timezone, signature: str) -> Instant:
    return _build(tz.local_to_epoch(fields.to_local_ms()), tz, signature)


def _advance(date: Instant, part: Part, n: int, signature: str) -> Instant:
    """Move date by n of part: elapsed time for fixed-length parts, calendar otherwise."""
    if part.millis is not None:
        return _build(date._require_epoch() + n * part.millis, date.timezone, signature)
    return _build_fields(date.fields.shifted(part, n), date.timezone, signature)


def _toward_start(numerator: int, denominator: int, forward: bool) -> int:
    """Divide, rounding toward the first date of a diff."""
    if forward:
        return numerator // denominator
    return -(-numerator // denominator)


def add(unit: str | Unit, n: float, date: Instant) -> Instant:
    """Return date moved by n units.

    n is rounded to the nearest integer first, halves toward positive
    infinity.

    Args:
        unit: A unit name ("ms", "second", "minute", "hour", "day", "week",
            "month", "year") or Unit member.
        n: Number of units, may be negative.
        date: A valid Instant.

    Returns:
        A new Instant in date's timezone.

    Raises:
        UnknownIntervalError: If unit is not a unit name.
        TypeError: If n is not a finite real number or date is not a valid Instant.
        OverflowError: If the result is outside the supported range.

    Examples:
        >>> from datemath.units.timezone import UTC
        >>> add("month", 1, Instant(2014, 1, 31, timezone=UTC)).fields
        Fields(year=2014, month=3, day=3, hour=0, minute=0, second=0, millisecond=0)

        >>> add("week", -1.5, Instant(2014, 6, 8, timezone=UTC)).day
        1
    """
    signature = "add(unit, n, date)"
    resolved = resolve_unit(unit, signature)
    count = require_count(n, signature, "n")
    require_instant(date, signature, "date")
    return _advance(date, resolved.part, count * resolved.coefficient, signature)


def diff(unit: str | Unit, date1: Instant, date2: Instant) -> int:
    """Return the number of whole units from date1 to date2.

    The result is positive when date2 is later. Partial units are dropped
    toward date1.

    - ms, second, minute, hour: elapsed time.
    - day, week: elapsed time corrected for any change in UTC offset, so a
      day that switches DST still counts as one day.
    - month, year: calendar months, minus a final month that is not yet
      complete (date2's day and time have not reached date1's).

    Raises:
        UnknownIntervalError: If unit is not a unit name.
        TypeError: If either date is not a valid Instant.

    Examples:
        >>> from datemath.units.timezone import UTC
        >>> d1 = Instant(2014, 2, 28, timezone=UTC)
        >>> diff("month", d1, Instant(2014, 3, 27, 23, 59, 59, 999, timezone=UTC))
        0
        >>> diff("month", d1, Instant(2014, 3, 28, timezone=UTC))
        1
        >>> diff("day", Instant(2014, 3, 28, timezone=UTC), d1)
        -28
    """
    signature = "diff(unit, date1, date2)"
    resolved = resolve_unit(unit, signature)
    require_instant(date1, signature, "date1")
    require_instant(date2, signature, "date2")

    part = resolved.part
    forward = date1 < date2

    if part.millis is not None:
        return _toward_start(date2 - date1, part.millis * resolved.coefficient, forward)

    if part is Part.DAY:
        offset_change = (date2.utc_offset_seconds - date1.utc_offset_seconds) * MS_PER_SECOND
        return _toward_start(
            date2 - date1 + offset_change, MS_PER_DAY * resolved.coefficient, forward
        )

    f1, f2 = date1.fields, date2.fields
    months = (f2.year - f1.year) * 12 + (f2.month - f1.month)
    remainder = f2.compare_from(Part.DAY, f1)
    if months > 0 and remainder < 0:
        months -= 1
    elif months < 0 and remainder > 0:
        months += 1

    months_per_unit = 12 if part is Part.YEAR else 1
    return _toward_start(months, months_per_unit * resolved.coefficient, forward)


def to_utc(date: Instant) -> Instant:
    """Return the same instant viewed in UTC.

    Raises:
        TypeError: If date is not a valid Instant.

    Examples:
        >>> from datemath.units.timezone import FixedTimezone
        >>> d = Instant(2014, 6, 8, 20, timezone=FixedTimezone.from_hours(-4))
        >>> to_utc(d).hour, to_utc(d) == d
        (0, True)
    """
    require_instant(date, "to_utc(date)", "date")
    return date.with_timezone(UTC)


__all__ = ["add", "diff", "to_utc"]
