"""Datemath exception hierarchy.

All Datemath-specific exceptions inherit from DatemathError. Argument type
mismatches raise the built-in TypeError.
"""

from __future__ import annotations


class DatemathError(Exception):
    """Base exception for all Datemath errors."""

    pass


class UnknownIntervalError(DatemathError, ValueError):
    """Unrecognized unit or interval name.

    Raised when a name is not one of the declared units or intervals.

    Examples:
        - "fortnight" passed to floor()
        - "monday" passed to add() (an interval, not a unit)
        - "__proto__" or "_value_" passed anywhere a name is expected
    """

    pass


class OverflowError(DatemathError):
    """Arithmetic operation exceeded representable range.

    Raised when an arithmetic result falls outside the supported range of
    +/-8.64e15 milliseconds around the epoch.

    Examples:
        - Adding 300000 years to an instant
    """

    pass


class TimezoneError(DatemathError):
    """Invalid timezone specification.

    Examples:
        - Invalid UTC offset format
        - Offset outside valid range (-24h to +24h)
        - A tzinfo that reports no UTC offset
    """

    pass


__all__ = [
    "DatemathError",
    "UnknownIntervalError",
    "OverflowError",
    "TimezoneError",
]
