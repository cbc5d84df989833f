"""Constants for iCalendar generation."""

from __future__ import annotations

PROD_ID = "-//icsgen//icsgen//ICS: iCalendar Generator"

DEFAULT_FILENAME = "event"
DEFAULT_TIMEZONE = "America/New_York"

ICS_SUFFIX = ".ics"
LINE_BREAK = "\r\n"

EVENT_STATUSES = ("TENTATIVE", "CONFIRMED", "CANCELLED")

DATE_FORMAT = "%Y%m%d"
# Seconds are always written as 00.
DATE_TIME_FORMAT = "%Y%m%dT%H%M00"
TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"

ENV_VARS = {
    "FILENAME": "ICSGEN_FILENAME",
    "TIMEZONE": "ICSGEN_TIMEZONE",
}
