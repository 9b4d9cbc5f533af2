"""Interval arithmetic on Instants.

This package provides the calendar arithmetic engine:
    - Rounding to interval boundaries
    - Adding and counting units
    - Walking the boundaries between two Instants

Rounding Operations (from datemath.arithmetic.rounding):
    - floor: Round down to the start of an interval
    - ceil: Round up to the start of the next interval

Unit Operations (from datemath.arithmetic.ops):
    - add: Move an Instant by whole units
    - diff: Count the whole units between two Instants
    - to_utc: View an Instant in UTC

Range Operations (from datemath.arithmetic.range_ops):
    - date_range: Iterate over interval boundaries
"""

from __future__ import annotations

from datemath.arithmetic.ops import add, diff, to_utc
from datemath.arithmetic.rounding import ceil, floor
from datemath.arithmetic.range_ops import date_range

__all__ = [
    # Rounding operations
    "floor",
    "ceil",
    # Unit operations
    "add",
    "diff",
    "to_utc",
    # Range operations
    "date_range",
]
