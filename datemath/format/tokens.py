"""Template formatting for Instants.

Templates are plain strings in which runs of token letters are replaced by
the matching component of an Instant, in its local time. Text between
square brackets is copied without the brackets; everything else passes
through untouched.

Supported Tokens:
    yyyy - full year (2012)
    yy   - third and fourth characters of the year (12)
    mmmm - month name (September)
    mmm  - month abbreviation (Sep)
    mm   - 2-digit month (09)
    m    - month (9)
    dddd - weekday name (Thursday)
    ddd  - weekday abbreviation (Thu)
    dd   - 2-digit day (07)
    d    - day (7)
    S    - ordinal suffix for the day (st, nd, rd, th)
    q    - quarter (1-4)
    o    - ISO 8601 week-numbering year
    ww   - 2-digit ISO 8601 week
    w    - ISO 8601 week
    N    - ISO 8601 weekday, Monday=1 through Sunday=7
    HH   - 2-digit hour, 24-hour clock
    H    - hour, 24-hour clock
    hh   - 2-digit hour, 12-hour clock
    h    - hour, 12-hour clock
    MM   - 2-digit minute
    M    - minute
    ss   - 2-digit second
    s    - second
    l    - 3-digit millisecond
    AA   - AM or PM
    A    - A or P
    aa   - am or pm
    a    - a or p
    O    - UTC offset (+0530, -0400)
    P    - UTC offset with colon (+05:30, -04:00)

Examples:
    >>> from datemath.core.instant import Instant
    >>> from datemath.units.timezone import UTC
    >>> d = Instant(2012, 9, 27, 15, 4, 5, timezone=UTC)
    >>> format_instant("ddd, mmm d, yyyy", d)
    'Thu, Sep 27, 2012'

    >>> format_instant("h:MM aa [on the] dS", d)
    '3:04 pm on the 27th'

    >>> format_instant("yyyy-mm-ddTHH:MM:ss.lP", d)
    '2012-09-27T15:04:05.000+00:00'
"""

from __future__ import annotations

import re
from typing import Callable

from datemath._internal.constants import MONTH_NAMES, WEEKDAY_NAMES
from datemath._internal.validation import require_instant, require_str
from datemath.core.fields import Fields
from datemath.core.instant import Instant
from datemath.format.isoweek import iso_week, iso_weekday, iso_year

_TOKEN_PATTERN = re.compile(r"yy(?:yy)?|m{1,4}|d{1,4}|([wHhMsAa])\1?|[SqNolOP]|\[.*?\]")


class _Components:
    """Local view of an Instant, computed once per format call."""

    __slots__ = ("date", "fields", "offset_minutes")

    def __init__(self, date: Instant) -> None:
        self.date = date
        self.fields: Fields = date.fields
        self.offset_minutes: int = date.utc_offset


def _pad(n: int, width: int = 2) -> str:
    return str(n).rjust(width, "0")


def _ordinal_suffix(n: int) -> str:
    nn = n % 100
    return ("th", "st", "nd", "rd")[min(nn if nn < 20 else nn % 10, 4) % 4]


def _offset(minutes: int, sep: str = "") -> str:
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{_pad(hours)}{sep}{_pad(mins)}"


def _hour12(hour: int) -> int:
    return hour % 12 or 12


_FORMATTERS: dict[str, Callable[[_Components], object]] = {
    # date
    "yyyy": lambda c: c.fields.year,
    "yy": lambda c: str(c.fields.year)[2:4],
    "mmmm": lambda c: MONTH_NAMES[c.fields.month],
    "mmm": lambda c: MONTH_NAMES[c.fields.month][:3],
    "mm": lambda c: _pad(c.fields.month),
    "m": lambda c: c.fields.month,
    "dddd": lambda c: WEEKDAY_NAMES[c.fields.day_of_week],
    "ddd": lambda c: WEEKDAY_NAMES[c.fields.day_of_week][:3],
    "dd": lambda c: _pad(c.fields.day),
    "d": lambda c: c.fields.day,
    "S": lambda c: _ordinal_suffix(c.fields.day),
    "q": lambda c: (c.fields.month - 1) // 3 + 1,
    "o": lambda c: iso_year(c.date),
    "ww": lambda c: _pad(iso_week(c.date)),
    "w": lambda c: iso_week(c.date),
    "N": lambda c: iso_weekday(c.date),
    # time
    "HH": lambda c: _pad(c.fields.hour),
    "H": lambda c: c.fields.hour,
    "hh": lambda c: _pad(_hour12(c.fields.hour)),
    "h": lambda c: _hour12(c.fields.hour),
    "MM": lambda c: _pad(c.fields.minute),
    "M": lambda c: c.fields.minute,
    "ss": lambda c: _pad(c.fields.second),
    "s": lambda c: c.fields.second,
    "l": lambda c: _pad(c.fields.millisecond, 3),
    "AA": lambda c: "AM" if c.fields.hour < 12 else "PM",
    "A": lambda c: "A" if c.fields.hour < 12 else "P",
    "aa": lambda c: "am" if c.fields.hour < 12 else "pm",
    "a": lambda c: "a" if c.fields.hour < 12 else "p",
    "O": lambda c: _offset(c.offset_minutes),
    "P": lambda c: _offset(c.offset_minutes, ":"),
}


def format_instant(template: str, date: Instant) -> str:
    """Format date according to template.

    Args:
        template: Template string; see the module docstring for tokens.
        date: A valid Instant, formatted in its own timezone.

    Returns:
        The formatted string.

    Raises:
        TypeError: If template is not a str or date is not a valid Instant.

    Examples:
        >>> from datemath.core.instant import Instant
        >>> from datemath.units.timezone import UTC
        >>> format_instant("[Week] w, o", Instant(2010, 1, 3, timezone=UTC))
        'Week 53, 2009'
    """
    signature = "format_instant(template, date)"
    require_str(template, signature, "template")
    require_instant(date, signature, "date")
    components = _Components(date)

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        formatter = _FORMATTERS.get(token)
        if formatter is None:
            return token[1:-1]
        return str(formatter(components))

    return _TOKEN_PATTERN.sub(replace, template)


__all__ = ["format_instant"]
