"""Week-numbering helpers.

A custom week numbering is described by two weekdays (Monday=0 through
Sunday=6): the day a week starts on, and the weekday whose first
occurrence in a year falls in week 1. ISO 8601 weeks start on Monday and
week 1 holds the year's first Thursday.

Examples:
    >>> from datemath.core.instant import Instant
    >>> from datemath.units.timezone import UTC
    >>> d = Instant(2012, 9, 27, timezone=UTC)
    >>> iso_week(d), iso_year(d), iso_weekday(d)
    (39, 2012, 4)

    >>> iso_year(Instant(2010, 1, 3, timezone=UTC))
    2009
"""

from __future__ import annotations

from datemath._internal.calendar import ymd_to_days
from datemath._internal.validation import require_instant
from datemath.core.fields import Fields
from datemath.core.instant import Instant
from datemath.units.part import Part

_MONDAY = 0
_THURSDAY = 3


def _custom_weekday(first_day_of_week: int, fields: Fields) -> int:
    return (fields.day_of_week - first_day_of_week) % 7


def _custom_year(first_day_of_week: int, week1_weekday: int, fields: Fields) -> int:
    adjustment = (week1_weekday - first_day_of_week) % 7
    shift = adjustment - _custom_weekday(first_day_of_week, fields)
    return fields.shifted(Part.DAY, shift).year


def _custom_week(first_day_of_week: int, week1_weekday: int, fields: Fields) -> int:
    jan1 = Fields(_custom_year(first_day_of_week, week1_weekday, fields))
    jan1_weekday = _custom_weekday(first_day_of_week, jan1)
    days = ymd_to_days(fields.year, fields.month, fields.day) - ymd_to_days(jan1.year, 1, 1)
    week = -(-(days + jan1_weekday + 1) // 7)
    if jan1_weekday > (week1_weekday - first_day_of_week) % 7:
        return week - 1
    return week


def custom_weekday(first_day_of_week: int, date: Instant) -> int:
    """Return the 0-based position of date in a week starting on first_day_of_week."""
    require_instant(date, "custom_weekday(first_day_of_week, date)", "date")
    return _custom_weekday(first_day_of_week, date.fields)


def custom_year(first_day_of_week: int, week1_weekday: int, date: Instant) -> int:
    """Return the week-numbering year of date.

    This is the calendar year of the week1_weekday that falls in the same
    custom week as date.
    """
    require_instant(date, "custom_year(first_day_of_week, week1_weekday, date)", "date")
    return _custom_year(first_day_of_week, week1_weekday, date.fields)


def custom_week(first_day_of_week: int, week1_weekday: int, date: Instant) -> int:
    """Return the week number of date.

    Week 1 is the week holding the first week1_weekday of the
    week-numbering year. Only the calendar day of date matters, never its
    time of day.

    Args:
        first_day_of_week: Weekday a week starts on, Monday=0.
        week1_weekday: Weekday that pins week 1, Monday=0.
        date: A valid Instant.

    Raises:
        TypeError: If date is not a valid Instant.
    """
    require_instant(date, "custom_week(first_day_of_week, week1_weekday, date)", "date")
    return _custom_week(first_day_of_week, week1_weekday, date.fields)


def iso_weekday(date: Instant) -> int:
    """Return the ISO weekday, Monday=1 through Sunday=7."""
    return custom_weekday(_MONDAY, date) + 1


def iso_year(date: Instant) -> int:
    return custom_year(_MONDAY, _THURSDAY, date)


def iso_week(date: Instant) -> int:
    return custom_week(_MONDAY, _THURSDAY, date)


__all__ = [
    "custom_weekday",
    "custom_year",
    "custom_week",
    "iso_weekday",
    "iso_year",
    "iso_week",
]
