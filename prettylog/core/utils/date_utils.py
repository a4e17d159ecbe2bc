"""Parsing and formatting of syslog-ng ``R_ISODATE`` timestamps."""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo

# YYYY-MM-DDTHH:MM:SS[.fraction]Z
_ISO8601_UTC = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?Z",
    re.ASCII,
)

# strftime("%b") follows the process locale
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_iso8601_utc(token: str) -> datetime | None:
    """Parse ``token`` as a UTC ISO-8601 timestamp.

    The whole token must match ``YYYY-MM-DDTHH:MM:SS[.fraction]Z``. The
    fractional part is accepted but truncated, never rounded.

    Returns
    -------
    datetime | None
        An aware ``datetime`` in UTC, or ``None`` when the token does not
        match the pattern or names an impossible calendar date.
    """

    match = _ISO8601_UTC.fullmatch(token)
    if match is None:
        return None

    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def format_local(instant: datetime, zone: tzinfo) -> str:
    """Render ``instant`` in ``zone`` as ``Mon DD HH:MM:SS (ZONEABBR)``."""

    local = instant.astimezone(zone)
    return f"{_MONTH_ABBR[local.month - 1]} {local:%d %H:%M:%S} ({local.tzname()})"
