"""Internal utilities for Datemath.

This module contains private implementation details:
    - Constants and name tables
    - Proleptic Gregorian calendar math
    - Argument validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datemath._internal.validation import (
    require_count,
    require_instant,
    require_int,
    require_str,
)

__all__: list[str] = [
    "require_count",
    "require_instant",
    "require_int",
    "require_str",
]
