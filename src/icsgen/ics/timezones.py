"""VTIMEZONE definitions keyed by TZID."""

from __future__ import annotations

from typing import Optional

from .constants import DEFAULT_TIMEZONE

TIMEZONE_DEFINITIONS: dict[str, tuple[str, ...]] = {
    "America/New_York": (
        "BEGIN:VTIMEZONE",
        "TZID:America/New_York",
        "BEGIN:STANDARD",
        "DTSTART:20071104T020000",
        "RRULE:FREQ=YEARLY;BYMONTH=11;BYDAY=1SU",
        "TZOFFSETFROM:-0400",
        "TZOFFSETTO:-0500",
        "TZNAME:EST",
        "END:STANDARD",
        "BEGIN:DAYLIGHT",
        "DTSTART:20070311T020000",
        "RRULE:FREQ=YEARLY;BYMONTH=3;BYDAY=2SU",
        "TZOFFSETFROM:-0500",
        "TZOFFSETTO:-0400",
        "TZNAME:EDT",
        "END:DAYLIGHT",
        "END:VTIMEZONE",
    ),
}


def define_timezone(tzid: Optional[str] = DEFAULT_TIMEZONE) -> list[str]:
    """Return the VTIMEZONE lines for ``tzid``, or no lines for an unknown zone."""
    if not tzid:
        return []
    return list(TIMEZONE_DEFINITIONS.get(tzid, ()))
