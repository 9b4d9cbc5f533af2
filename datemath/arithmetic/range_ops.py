"""Sequences of interval boundaries.

This module provides date_range(), which walks the aligned boundaries of
an interval between two Instants.
"""

from __future__ import annotations

from typing import Iterator

from datemath._internal.validation import require_count, require_instant
from datemath.arithmetic.ops import add
from datemath.arithmetic.rounding import ceil
from datemath.core.instant import Instant
from datemath.errors import OverflowError
from datemath.units.timeunit import Interval, IntervalLike, resolve_interval


def date_range(
    interval: str | Interval,
    date1: Instant,
    date2: Instant,
    step: float = 1,
) -> Iterator[Instant]:
    """Return an iterator over the interval boundaries from date1 up to date2.

    Yields every step-th boundary d with ``date1 <= d < date2``, starting
    at ``ceil(interval, date1)``. Weekday intervals advance a week at a
    time and "quarter" three months at a time. step is rounded to the
    nearest integer and raised to at least 1.

    Arguments are checked when date_range() is called, not when iteration
    starts. Each call returns a fresh iterator.

    Args:
        interval: An interval or unit name, or an Interval or Unit member.
        date1: First bound, inclusive.
        date2: Last bound, exclusive.
        step: Number of intervals per step.

    Raises:
        UnknownIntervalError: If interval is not an interval or unit name.
        TypeError: If a bound is not a valid Instant or step is not a
            finite real number.

    Examples:
        >>> from datemath.units.timezone import UTC
        >>> start = Instant(2014, 6, 1, timezone=UTC)
        >>> end = Instant(2014, 7, 1, timezone=UTC)
        >>> [d.day for d in date_range("monday", start, end, 2)]
        [2, 16, 30]
        >>> list(date_range("day", end, start))
        []
    """
    signature = "date_range(interval, date1, date2, step)"
    resolved = resolve_interval(interval, signature)
    require_instant(date1, signature, "date1")
    require_instant(date2, signature, "date2")
    count = max(1, require_count(step, signature, "step"))
    return _boundaries(resolved, date1, date2, count)


def _boundaries(
    interval: IntervalLike,
    date1: Instant,
    date2: Instant,
    count: int,
) -> Iterator[Instant]:
    current = ceil(interval, date1)
    n = interval.step_coefficient * count
    while current < date2:
        yield current
        try:
            current = add(interval.step_unit, n, current)
        except OverflowError:
            # The next boundary is past the supported range, hence past date2
            return


__all__ = ["date_range"]
