"""Property line encoders for optional event attributes.

Each encoder returns a line (or list of lines) or ``None`` when the attribute
should be left out of the event.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Optional

from .constants import EVENT_STATUSES
from .validators import Attendee, Geo

logger = logging.getLogger(__name__)

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


def format_property(key: str, value: Any) -> Optional[str]:
    if value:
        return f"{key}:{value}"
    return None


def format_status(status: Optional[str]) -> Optional[str]:
    if status and status.upper() in EVENT_STATUSES:
        return f"STATUS:{status}"
    if status:
        logger.debug("Omitting unrecognized status %r", status)
    return None


def _format_number(value: Any) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    # 1e-07 is written 1e-7.
    return _EXPONENT_RE.sub(r"e\1\2", repr(number))


def format_geo(geo: Optional[Geo]) -> Optional[str]:
    if not geo or not geo.lat or not geo.lon:
        return None
    try:
        return f"GEO:{_format_number(geo.lat)};{_format_number(geo.lon)}"
    except (TypeError, ValueError):
        logger.debug("Omitting non-numeric geo %r", geo)
        return None


def format_categories(categories: Optional[Iterable[str]]) -> Optional[str]:
    if categories is None:
        return None
    return "CATEGORIES:" + ",".join(categories)


def format_attachments(attachments: Optional[Iterable[str]]) -> Optional[list[str]]:
    if attachments is None:
        return None
    return [f"ATTACH:{path}" for path in attachments]


def format_attendee(attendee: Attendee) -> Optional[str]:
    if attendee.name and attendee.email:
        return f"ATTENDEE;CN={attendee.name}:mailto:{attendee.email}"
    logger.debug("Omitting attendee without name and email: %r", attendee)
    return None


def format_attendees(attendees: Optional[Iterable[Attendee]]) -> Optional[list[Optional[str]]]:
    if attendees is None:
        return None
    return [format_attendee(attendee) for attendee in attendees]
