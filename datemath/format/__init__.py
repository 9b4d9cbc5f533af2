"""Parsing and formatting of Instants.

This package converts Instants to and from strings:
    - ISO 8601 parsing
    - template formatting with date and time tokens
    - week-numbering helpers used by the week tokens

Functions:
    parse_instant: Parse the first ISO 8601 date/time in a string.
    format_instant: Format an Instant with a token template.
    iso_week, iso_year, iso_weekday: ISO 8601 week numbering.
    custom_week, custom_year, custom_weekday: Week numbering with any
        first day of week.

Examples:
    >>> from datemath.units.timezone import UTC
    >>> from datemath.format import parse_instant, format_instant

    >>> d = parse_instant("2014-06-08T16:59:55Z", timezone=UTC)
    >>> format_instant("dddd, mmmm dS", d)
    'Sunday, June 8th'
"""

from __future__ import annotations

from datemath.format.iso8601 import parse_instant
from datemath.format.isoweek import (
    custom_week,
    custom_weekday,
    custom_year,
    iso_week,
    iso_weekday,
    iso_year,
)
from datemath.format.tokens import format_instant

__all__: list[str] = [
    # ISO 8601
    "parse_instant",
    # Templates
    "format_instant",
    # Week numbering
    "custom_week",
    "custom_weekday",
    "custom_year",
    "iso_week",
    "iso_weekday",
    "iso_year",
]
