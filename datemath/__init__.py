"""Datemath: calendar arithmetic on immutable Instants.

Datemath validates, parses, formats and rounds points in time with
millisecond precision. Every operation is a plain function that returns a
new Instant; local calendar fields come from an explicit Timezone provider
(the host zone unless one is given).

Core Types:
    Instant: A point in time viewed through a Timezone
    Fields: Local calendar components (year through millisecond)

Units:
    Unit: Granularities for add() and diff()
    Interval: Alignment boundaries for floor(), ceil() and date_range()
    Part: The ladder of calendar fields
    Timezone: Offset providers (FixedTimezone, SystemTimezone, TzinfoTimezone)

Functions:
    is_valid_instant, is_valid_date_string: Input predicates
    parse_instant: Parse ISO 8601 text
    format_instant: Format with a token template
    floor, ceil: Round to interval boundaries
    add, diff: Unit arithmetic
    date_range: Iterate over interval boundaries
    to_utc: View an Instant in UTC

Exceptions:
    DatemathError: Base exception
    UnknownIntervalError: Unrecognised unit or interval name
    OverflowError: Arithmetic result out of range
    TimezoneError: Invalid timezone

Example:
    >>> from datemath import UTC, add, format_instant, parse_instant
    >>> d = parse_instant("2014-01-31", timezone=UTC)
    >>> format_instant("yyyy-mm-dd", add("month", 1, d))
    '2014-03-03'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datemath.core.fields import Fields
from datemath.core.instant import Instant

# Units
from datemath.units.part import Part
from datemath.units.timeunit import INTERVALS, UNITS, Interval, Unit, is_interval, is_unit
from datemath.units.timezone import (
    UTC,
    FixedTimezone,
    SystemTimezone,
    Timezone,
    TzinfoTimezone,
    default_timezone,
)

# Exceptions
from datemath.errors import (
    DatemathError,
    OverflowError,
    TimezoneError,
    UnknownIntervalError,
)

# Validators
from datemath.validate import is_valid_date_string, is_valid_instant

# Format functions
from datemath.format import (
    format_instant,
    iso_week,
    iso_weekday,
    iso_year,
    parse_instant,
)

# Arithmetic
from datemath.arithmetic import add, ceil, date_range, diff, floor, to_utc

__all__: list[str] = [
    "__version__",
    # Core types
    "Fields",
    "Instant",
    # Units
    "Part",
    "Unit",
    "Interval",
    "UNITS",
    "INTERVALS",
    "is_unit",
    "is_interval",
    "Timezone",
    "FixedTimezone",
    "SystemTimezone",
    "TzinfoTimezone",
    "UTC",
    "default_timezone",
    # Exceptions
    "DatemathError",
    "UnknownIntervalError",
    "OverflowError",
    "TimezoneError",
    # Validators
    "is_valid_instant",
    "is_valid_date_string",
    # Format functions
    "parse_instant",
    "format_instant",
    "iso_week",
    "iso_weekday",
    "iso_year",
    # Arithmetic
    "floor",
    "ceil",
    "add",
    "diff",
    "date_range",
    "to_utc",
]
