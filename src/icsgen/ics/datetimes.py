"""DTSTART / DTEND formatting.

Values are classified textually: a string holding an uppercase ``T`` or a space
is a date-time, anything else is a date. Date-times are written using the
wall-clock time as given, never converted between zones, with seconds forced
to ``00``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from .clock import Clock, default_clock
from .constants import DATE_FORMAT, DATE_TIME_FORMAT
from .errors import ICSValidationError


def is_date_time(value: str) -> bool:
    return "T" in value or " " in value


def parse_date_value(value: str, field: str = "datetime") -> datetime:
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ICSValidationError(
            f"Invalid {field} date '{value}'. Use ISO 8601 (e.g. 2026-02-01 or 2026-02-01T09:00)",
            field=field,
            value=value,
        ) from exc


def has_zero_offset(value: str, field: str = "datetime") -> bool:
    """True when ``value`` is at UTC. Values without an offset count as UTC."""
    offset = parse_date_value(value, field).utcoffset()
    return offset is None or offset == timedelta(0)


def _date(value: str, field: str) -> str:
    return parse_date_value(value, field).strftime(DATE_FORMAT)


def _date_time(value: str, field: str) -> str:
    return parse_date_value(value, field).strftime(DATE_TIME_FORMAT)


def _today(clock: Optional[Clock]) -> datetime:
    return (clock or default_clock()).now()


def format_dtstart(start: Optional[str], tz: Optional[str] = None, clock: Optional[Clock] = None) -> str:
    if not start:
        return "DTSTART:" + _today(clock).strftime(DATE_FORMAT)

    if tz:
        return f"DTSTART;TZID={tz}:{_date_time(start, 'start')}"

    if is_date_time(start) and has_zero_offset(start, "start"):
        return "DTSTART:" + _date_time(start, "start")

    if is_date_time(start):
        # Written without the property name for offset date-times.
        return _date_time(start, "start") + "Z"

    return "DTSTART;VALUE=DATE:" + _date(start, "start")


def format_dtend(
    start: Optional[str],
    end: Optional[str] = None,
    tz: Optional[str] = None,
    tz_end: Optional[str] = None,
    clock: Optional[Clock] = None,
) -> Optional[str]:
    if not start:
        return "DTEND:" + (_today(clock) + timedelta(days=1)).strftime(DATE_FORMAT)

    if tz and not tz_end and not end:
        return f"DTEND;TZID={tz}:{_date_time(start, 'start')}"

    if tz and not tz_end and end:
        return f"DTEND;TZID={tz}:{_date_time(end, 'end')}"

    if tz and tz_end and end:
        return f"DTEND;TZID={tz_end}:{_date_time(end, 'end')}"

    if end and not is_date_time(start):
        return "DTEND;VALUE=DATE:" + _date(end, "end")

    if end and is_date_time(start):
        return "DTEND:" + _date_time(end, "end")

    if not end and not is_date_time(start):
        next_day = parse_date_value(start, "start") + timedelta(days=1)
        return "DTEND;VALUE=DATE:" + next_day.strftime(DATE_FORMAT)

    if not end and is_date_time(start) and has_zero_offset(start, "start"):
        return "DTEND:" + _date_time(start, "start")

    return None
