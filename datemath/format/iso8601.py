"""ISO 8601 parsing.

parse_instant() extracts the first ISO 8601-like date/time found in a
string. It accepts the extended and basic forms and anything in between:

Dates:
    - YYYY-MM-DD, YYYYMMDD
    - YYYY-MM (day defaults to 1)

Times (after an optional "T"):
    - HH:MM:SS, HHMMSS, HH:MM, HH
    - fractional seconds of any length, truncated to milliseconds

Offsets:
    - Z
    - +HH:MM, -HH:MM, +HHMM, +HH

Examples:
    >>> from datemath.units.timezone import UTC
    >>> parse_instant("2012-09-27T22:56:00.555Z").epoch_ms
    1348786560555

    >>> parse_instant("20120927", timezone=UTC).day
    27

    >>> parse_instant("no date here").is_valid
    False
"""

from __future__ import annotations

import re

from datemath._internal.constants import MS_PER_SECOND
from datemath._internal.validation import require_str
from datemath.core.fields import Fields
from datemath.core.instant import Instant
from datemath.units.timezone import Timezone, resolve_timezone

_ISO_PATTERN = re.compile(
    r"(?P<year>\d{4})-?(?P<month>\d\d)-?(?P<day>\d\d)?"
    r"T?(?P<hour>\d\d)?:?(?P<minute>\d\d)?:?(?P<second>\d\d)?(?:\.(?P<fraction>\d+))?"
    r"(?P<utc>Z)?(?P<offset_hours>[+-]\d\d)?:?(?P<offset_minutes>\d\d)?",
    re.ASCII,
)


def parse_instant(s: str, *, timezone: Timezone | None = None) -> Instant:
    """Parse the first ISO 8601 date/time in s.

    Missing components default to the start of their period. Without a
    "Z" or numeric offset the components are wall-clock time in timezone,
    so "2012-09-27" is local midnight. The returned Instant is always
    viewed through timezone.

    An offset needs its signed hours ("+05", "-05:30"). Two trailing
    digits without a signed hour group are not read as offset minutes,
    so such text is still parsed as wall-clock time.

    Args:
        s: The string to parse.
        timezone: Provider for local time; the host zone when None.

    Returns:
        The parsed Instant, or the Invalid Instant if s contains no
        ISO 8601 date.

    Raises:
        TypeError: If s is not a str.

    Examples:
        >>> parse_instant("2014-06-08T16:59:55.555-05:30").epoch_ms
        1402266595555
    """
    require_str(s, "parse_instant(s)", "s")
    tz = resolve_timezone(timezone)

    match = _ISO_PATTERN.search(s)
    if match is None:
        return Instant.invalid(timezone=tz)

    groups = match.groupdict()
    fraction = groups["fraction"] or ""
    fields = Fields(
        int(groups["year"]),
        int(groups["month"]),
        int(groups["day"] or 1),
        int(groups["hour"] or 0),
        int(groups["minute"] or 0),
        int(groups["second"] or 0),
        int((fraction + "000")[:3]),
    )

    if groups["utc"]:
        return Instant.from_epoch_ms(fields.to_local_ms(), timezone=tz)

    if groups["offset_hours"]:
        # The sign covers the minutes too: -05:30 is 330 minutes behind UTC
        sign = -1 if groups["offset_hours"][0] == "-" else 1
        hours = int(groups["offset_hours"][1:])
        minutes = int(groups["offset_minutes"] or 0)
        offset_seconds = sign * (hours * 3600 + minutes * 60)
        return Instant.from_epoch_ms(
            fields.to_local_ms() - offset_seconds * MS_PER_SECOND, timezone=tz
        )

    return Instant.from_fields(fields, timezone=tz)


__all__ = ["parse_instant"]
