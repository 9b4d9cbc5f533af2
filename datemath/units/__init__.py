"""Units, intervals and timezones.

This module provides:
    - Part: The ladder of calendar fields (MILLISECOND .. YEAR)
    - Unit: Granularities for add() and diff()
    - Interval: Alignment boundaries beyond the plain units
    - Timezone: UTC offset providers
"""

from __future__ import annotations

from datemath.units.part import Part
from datemath.units.timeunit import Interval, Unit
from datemath.units.timezone import FixedTimezone, SystemTimezone, Timezone, TzinfoTimezone

__all__: list[str] = [
    "Part",
    "Unit",
    "Interval",
    "Timezone",
    "FixedTimezone",
    "SystemTimezone",
    "TzinfoTimezone",
]
