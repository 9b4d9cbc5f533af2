"""Internal constants for Datemath.

These constants define the limits, unit sizes and name tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Instants are limited to 100 million days either side of the epoch
MAX_EPOCH_MS: int = 100_000_000 * MS_PER_DAY  # 8.64e15

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# English names, 1-indexed by month
MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# English names, indexed by day of week (Monday=0)
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "MAX_EPOCH_MS",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "MAX_UTC_OFFSET_SECONDS",
]
