"""Predicates for guarding inputs before parsing or arithmetic.

Neither function raises: they return False for anything they do not
recognise.

Functions:
    is_valid_instant: Test for an Instant (optionally accepting the Invalid Instant).
    is_valid_date_string: Test for a real calendar date in yyyy-mm-dd,
        yyyymmdd or m/d/yyyy form.
"""

from __future__ import annotations

import re

from datemath._internal.calendar import is_valid_ymd
from datemath.core.instant import Instant

# The separator is captured once and must repeat, so "2014-0608" fails
_YYYYMMDD = re.compile(r"(\d{4})(-?)([012]\d)\2([0123]\d)", re.ASCII)
_MDYYYY = re.compile(r"([01]?\d)/([0123]?\d)/(\d{4})", re.ASCII)


def is_valid_instant(value: object, accept_invalid: bool = False) -> bool:
    """Return True if value is a valid Instant.

    Args:
        value: Any object.
        accept_invalid: Also accept the Invalid Instant.

    Examples:
        >>> is_valid_instant(Instant.now())
        True
        >>> is_valid_instant(Instant.invalid())
        False
        >>> is_valid_instant(Instant.invalid(), accept_invalid=True)
        True
        >>> is_valid_instant("2014-06-08", accept_invalid=True)
        False
    """
    return isinstance(value, Instant) and (value.is_valid or bool(accept_invalid))


def _extract_ymd(s: str) -> tuple[int, int, int] | None:
    match = _YYYYMMDD.fullmatch(s)
    if match:
        return int(match.group(1)), int(match.group(3)), int(match.group(4))
    match = _MDYYYY.fullmatch(s)
    if match:
        return int(match.group(3)), int(match.group(1)), int(match.group(2))
    return None


def is_valid_date_string(s: object) -> bool:
    """Return True if s is a real calendar date in a recognised format.

    Recognised formats are ``yyyy-mm-dd``, ``yyyymmdd`` and ``m/d/yyyy``
    (month and day with or without a leading zero).

    Examples:
        >>> is_valid_date_string("2004-02-29")
        True
        >>> is_valid_date_string("19000229")
        False
        >>> is_valid_date_string("6/31/1999")
        False
        >>> is_valid_date_string(19991231)
        False
    """
    if not isinstance(s, str):
        return False
    ymd = _extract_ymd(s)
    return ymd is not None and is_valid_ymd(*ymd)


__all__ = ["is_valid_instant", "is_valid_date_string"]
