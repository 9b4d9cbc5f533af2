"""Calendar utilities for Datemath.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversions between
(year, month, day) triples and day numbers counted from the Unix epoch.

Epoch day 0 = 1970-01-01 (a Thursday)

This module is not part of the public API.
"""

from __future__ import annotations

from datemath._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if it is divisible by 400, or divisible by 4
    but not by 100.

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2004)
        True
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_PER_400_YEARS = 146097
_DAYS_PER_100_YEARS = 36524
_DAYS_PER_4_YEARS = 1461


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _ymd_to_ordinal(year: int, month: int, day: int) -> int:
    # Ordinal 1 is 0001-01-01; floor division keeps the formula valid for
    # years <= 0.
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + _days_before_month(year, month) + day


_EPOCH_ORDINAL = _ymd_to_ordinal(1970, 1, 1)


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    The day may fall outside the month; the surplus simply carries into
    the neighbouring months (day 0 is the last day of the previous month).

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The epoch day number.

    Examples:
        >>> ymd_to_days(1970, 1, 1)
        0
        >>> ymd_to_days(2014, 6, 8)
        16229
    """
    return _ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day.

    Args:
        days: The epoch day number (can be negative).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed from 0001-01-01; divmod floors, so negative n lands
    # in an earlier 400-year cycle with a non-negative remainder
    n = days + _EPOCH_ORDINAL - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year that closes a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month = 1
    dim = days_in_month(year, month)
    while doy > dim:
        doy -= dim
        month += 1
        dim = days_in_month(year, month)
    return (year, month, doy)


def days_to_day_of_week(days: int) -> int:
    """Convert an epoch day number to day of week (Monday=0, Sunday=6).

    Examples:
        >>> days_to_day_of_week(0)  # 1970-01-01
        3
    """
    return (days + 3) % 7


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """Return True if year, month, day form a real calendar date."""
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_days",
    "days_to_ymd",
    "days_to_day_of_week",
    "is_valid_ymd",
]
