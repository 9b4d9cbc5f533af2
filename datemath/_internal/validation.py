"""Argument validation for Datemath.

Every public operation checks its positional arguments here before doing
any work. Wrong argument types raise the built-in TypeError with the
operation's signature in the message, for example::

    TypeError: floor(interval, date) expected Instant for `date`

This module is not part of the public API.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datemath.core.instant import Instant


def require_instant(value: object, signature: str, name: str) -> Instant:
    """Return value if it is a valid Instant.

    Args:
        value: The argument to check.
        signature: Call signature used in the error message.
        name: Parameter name used in the error message.

    Raises:
        TypeError: If value is not an Instant, or is the Invalid Instant.
    """
    from datemath.core.instant import Instant

    if not isinstance(value, Instant) or not value.is_valid:
        raise TypeError(f"{signature} expected Instant for `{name}`, got {_describe(value)}")
    return value


def require_str(value: object, signature: str, name: str) -> str:
    """Return value if it is a str.

    Raises:
        TypeError: If value is not a str.
    """
    if not isinstance(value, str):
        raise TypeError(f"{signature} expected str for `{name}`, got {_describe(value)}")
    return value


def require_int(value: object, signature: str, name: str) -> int:
    """Return value if it is an int (bool excluded).

    Raises:
        TypeError: If value is not an int.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{signature} expected int for `{name}`, got {_describe(value)}")
    return value


def require_count(value: object, signature: str, name: str) -> int:
    """Return a finite real number rounded to the nearest int, halves up.

    Halves round toward positive infinity, so 2.5 becomes 3 and -2.5
    becomes -2.

    Raises:
        TypeError: If value is not a finite real number (bool excluded).
    """
    if not isinstance(value, Real) or isinstance(value, bool):
        raise TypeError(f"{signature} expected number for `{name}`, got {_describe(value)}")
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        raise TypeError(f"{signature} expected finite number for `{name}`, got {value!r}")
    return math.floor(value + 0.5)


def _describe(value: object) -> str:
    from datemath.core.instant import Instant

    if isinstance(value, Instant):
        return "Invalid Instant"
    return type(value).__name__


__all__ = [
    "require_instant",
    "require_str",
    "require_int",
    "require_count",
]
