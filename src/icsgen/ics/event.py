"""Build VEVENT text blocks from event attributes."""

from __future__ import annotations

import logging
from datetime import timezone
from typing import Any, Callable, Iterable, Mapping, Optional
from uuid import uuid4

from .clock import Clock, default_clock
from .constants import LINE_BREAK, TIMESTAMP_FORMAT
from .datetimes import format_dtend, format_dtstart
from .properties import (
    format_attachments,
    format_attendees,
    format_categories,
    format_geo,
    format_property,
    format_status,
)
from .validators import EventAttributes, coerce_attributes

logger = logging.getLogger(__name__)

UidFactory = Callable[[], str]


def generate_uid() -> str:
    return str(uuid4())


def generate_timestamp(clock: Optional[Clock] = None) -> str:
    now = (clock or default_clock()).now()
    return now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def _flatten(items: Iterable[Any]) -> list[Optional[str]]:
    lines: list[Optional[str]] = []
    for item in items:
        if isinstance(item, list):
            lines.extend(item)
        else:
            lines.append(item)
    return lines


def build_event(
    attributes: EventAttributes | Mapping[str, Any] | None,
    clock: Optional[Clock] = None,
    uid_factory: Optional[UidFactory] = None,
) -> str:
    """Return the VEVENT block for ``attributes``, or ``""`` when it is absent or has no keys.

    UID and DTSTAMP are generated on every call.
    """
    if attributes is None:
        return ""
    if isinstance(attributes, EventAttributes):
        if attributes.is_empty():
            return ""
    elif not attributes:
        return ""
    attrs = coerce_attributes(attributes)

    clock = clock or default_clock()
    uid = (uid_factory or generate_uid)()
    lines = _flatten(
        [
            "BEGIN:VEVENT",
            f"UID:{uid}",
            "DTSTAMP:" + generate_timestamp(clock),
            format_dtstart(attrs.start, attrs.time_zone, clock=clock),
            format_dtend(attrs.start, attrs.end, attrs.time_zone, attrs.time_zone_end, clock=clock),
            format_property("SUMMARY", attrs.title),
            format_property("DESCRIPTION", attrs.description),
            format_property("LOCATION", attrs.location),
            format_property("URL", attrs.url),
            format_status(attrs.status),
            format_geo(attrs.geo),
            format_attendees(attrs.attendees),
            format_categories(attrs.categories),
            format_attachments(attrs.attachments),
            "END:VEVENT",
        ]
    )
    logger.debug("Built event %s", uid)
    return LINE_BREAK.join(line for line in lines if line)
