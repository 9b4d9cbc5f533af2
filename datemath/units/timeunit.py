"""Unit and Interval enumerations.

Units are the granularities accepted by add() and diff(). Intervals are the
alignment boundaries accepted by floor(), ceil() and date_range(); every
unit is also an interval.

Both sets are closed: names resolve only against the declared members, so
strings such as "__proto__", "__class__" or "_value_" are rejected like any
other unknown name.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from datemath.errors import UnknownIntervalError
from datemath.units.part import Part


class Unit(Enum):
    """Standard units for add() and diff().

    Each unit addresses one Part and counts ``coefficient`` of them per
    unit (a week is seven days).

    Examples:
        >>> Unit.WEEK.part, Unit.WEEK.coefficient
        (<Part.DAY: (4, 1, None)>, 7)

        >>> Unit("month") is Unit.MONTH
        True
    """

    MS = "ms"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def part(self) -> Part:
        return _UNIT_TABLE[self][0]

    @property
    def coefficient(self) -> int:
        return _UNIT_TABLE[self][1]

    @property
    def target(self) -> tuple[str, frozenset[int]] | None:
        """Units align on their part alone; they have no target values."""
        return None

    @property
    def step_unit(self) -> Unit:
        return self

    @property
    def step_coefficient(self) -> int:
        return 1


class Interval(Enum):
    """Named alignment boundaries beyond the plain units.

    An interval floors its part like a unit and then rewinds that part
    until a target field takes one of the target values: weekday intervals
    target ``day_of_week`` (Monday=0), ``quarter`` targets the first month
    of each quarter. date_range() steps through an interval with
    ``step_unit`` times ``step_coefficient``.

    Examples:
        >>> Interval.QUARTER.target
        ('month', frozenset({1, 4, 7, 10}))

        >>> Interval.MONDAY.step_unit
        <Unit.WEEK: 'week'>
    """

    WEEK = "week"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    QUARTER = "quarter"

    @property
    def part(self) -> Part:
        return _INTERVAL_TABLE[self][0]

    @property
    def coefficient(self) -> int:
        return _INTERVAL_TABLE[self][1]

    @property
    def target(self) -> tuple[str, frozenset[int]]:
        return _INTERVAL_TABLE[self][2]

    @property
    def step_unit(self) -> Unit:
        return _INTERVAL_TABLE[self][3]

    @property
    def step_coefficient(self) -> int:
        return _INTERVAL_TABLE[self][4]


IntervalLike = Union[Unit, Interval]

_UNIT_TABLE: dict[Unit, tuple[Part, int]] = {
    Unit.MS: (Part.MILLISECOND, 1),
    Unit.SECOND: (Part.SECOND, 1),
    Unit.MINUTE: (Part.MINUTE, 1),
    Unit.HOUR: (Part.HOUR, 1),
    Unit.DAY: (Part.DAY, 1),
    Unit.WEEK: (Part.DAY, 7),
    Unit.MONTH: (Part.MONTH, 1),
    Unit.YEAR: (Part.YEAR, 1),
}


def _weekday(n: int) -> tuple[str, frozenset[int]]:
    return ("day_of_week", frozenset({n}))


_INTERVAL_TABLE: dict[Interval, tuple[Part, int, tuple[str, frozenset[int]], Unit, int]] = {
    #                    part       coeff  target                          step unit   step coeff
    Interval.WEEK:      (Part.DAY,   7,    _weekday(0),                     Unit.WEEK,  1),
    Interval.MONDAY:    (Part.DAY,   7,    _weekday(0),                     Unit.WEEK,  1),
    Interval.TUESDAY:   (Part.DAY,   7,    _weekday(1),                     Unit.WEEK,  1),
    Interval.WEDNESDAY: (Part.DAY,   7,    _weekday(2),                     Unit.WEEK,  1),
    Interval.THURSDAY:  (Part.DAY,   7,    _weekday(3),                     Unit.WEEK,  1),
    Interval.FRIDAY:    (Part.DAY,   7,    _weekday(4),                     Unit.WEEK,  1),
    Interval.SATURDAY:  (Part.DAY,   7,    _weekday(5),                     Unit.WEEK,  1),
    Interval.SUNDAY:    (Part.DAY,   7,    _weekday(6),                     Unit.WEEK,  1),
    Interval.QUARTER:   (Part.MONTH, 3,    ("month", frozenset({1, 4, 7, 10})), Unit.MONTH, 3),
}

_UNITS_BY_NAME: dict[str, Unit] = {unit.value: unit for unit in Unit}
_INTERVALS_BY_NAME: dict[str, IntervalLike] = {
    **_UNITS_BY_NAME,
    # "week" as an interval is Monday-aligned, overriding the bare unit
    **{interval.value: interval for interval in Interval},
}

UNITS: frozenset[str] = frozenset(_UNITS_BY_NAME)
INTERVALS: frozenset[str] = frozenset(_INTERVALS_BY_NAME)


def is_unit(name: object) -> bool:
    """Return True if name is a unit name or Unit member."""
    return isinstance(name, Unit) or (isinstance(name, str) and name in _UNITS_BY_NAME)


def is_interval(name: object) -> bool:
    """Return True if name is an interval or unit name, or a member of either."""
    if isinstance(name, (Unit, Interval)):
        return True
    return isinstance(name, str) and name in _INTERVALS_BY_NAME


def resolve_unit(name: str | Unit, signature: str) -> Unit:
    """Resolve a unit name to its Unit member.

    Args:
        name: A unit name such as "month", or a Unit member.
        signature: Call signature used in the error message.

    Raises:
        UnknownIntervalError: If name is not a declared unit.
    """
    if isinstance(name, Unit):
        return name
    if isinstance(name, str) and name in _UNITS_BY_NAME:
        return _UNITS_BY_NAME[name]
    raise UnknownIntervalError(
        f"{signature} received unexpected value for `unit`: {name!r}"
    )


def resolve_interval(name: str | IntervalLike, signature: str) -> IntervalLike:
    """Resolve an interval name to its Interval or Unit member.

    Args:
        name: An interval name such as "quarter" or "hour", or a member.
        signature: Call signature used in the error message.

    Raises:
        UnknownIntervalError: If name is not a declared interval or unit.
    """
    if isinstance(name, (Unit, Interval)):
        return name
    if isinstance(name, str) and name in _INTERVALS_BY_NAME:
        return _INTERVALS_BY_NAME[name]
    raise UnknownIntervalError(
        f"{signature} received unexpected value for `interval`: {name!r}"
    )


__all__ = [
    "Unit",
    "Interval",
    "IntervalLike",
    "UNITS",
    "INTERVALS",
    "is_unit",
    "is_interval",
    "resolve_unit",
    "resolve_interval",
]
