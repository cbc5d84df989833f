"""iCalendar document generation."""

from .calendar import ICS, CalendarFile
from .clock import Clock, FixedClock, SystemClock
from .config import ICSOptions, load_config
from .datetimes import format_dtend, format_dtstart, is_date_time
from .errors import ICSError, ICSFileError, ICSValidationError, format_error_for_user
from .event import build_event
from .properties import (
    format_attachments,
    format_attendees,
    format_categories,
    format_geo,
    format_property,
    format_status,
)
from .timezones import define_timezone
from .file_utils import read_events_file, write_file
from .validators import Attendee, EventAttributes, Geo, parse_attendee

__all__ = [
    "ICS",
    "CalendarFile",
    "Clock",
    "FixedClock",
    "SystemClock",
    "ICSOptions",
    "load_config",
    "format_dtstart",
    "format_dtend",
    "is_date_time",
    "ICSError",
    "ICSFileError",
    "ICSValidationError",
    "format_error_for_user",
    "build_event",
    "format_attachments",
    "format_attendees",
    "format_categories",
    "format_geo",
    "format_property",
    "format_status",
    "define_timezone",
    "read_events_file",
    "write_file",
    "Attendee",
    "EventAttributes",
    "Geo",
    "parse_attendee",
]
