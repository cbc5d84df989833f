"""Input records and coercion helpers for event attributes."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Optional

from .errors import ICSValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attendee:
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class Geo:
    lat: Any = None
    lon: Any = None


@dataclass(frozen=True)
class EventAttributes:
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    time_zone: Optional[str] = None
    time_zone_end: Optional[str] = None
    status: Optional[str] = None
    geo: Optional[Geo] = None
    categories: Optional[tuple[str, ...]] = None
    attachments: Optional[tuple[str, ...]] = None
    attendees: Optional[tuple[Attendee, ...]] = None

    def is_empty(self) -> bool:
        return all(getattr(self, field.name) is None for field in fields(self))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "EventAttributes":
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ICSValidationError("Event attributes must be a mapping", field="attributes", value=data)

        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _ATTRIBUTE_ALIASES.get(key, key)
            if name not in _ATTRIBUTE_NAMES:
                logger.debug("Ignoring unknown event attribute %r", key)
                continue
            values[name] = value

        for name in ("start", "end"):
            if name in values:
                values[name] = _coerce_date_value(values[name], name)
        if "geo" in values:
            values["geo"] = _coerce_geo(values["geo"])
        for name in ("categories", "attachments"):
            if name in values:
                values[name] = _coerce_text_sequence(values[name], name)
        if "attendees" in values:
            values["attendees"] = _coerce_attendees(values["attendees"])
        return cls(**values)


_ATTRIBUTE_NAMES = {field.name for field in fields(EventAttributes)}
_ATTRIBUTE_ALIASES = {
    "timeZone": "time_zone",
    "timeZoneEnd": "time_zone_end",
}


def coerce_attributes(attributes: EventAttributes | Mapping[str, Any] | None) -> EventAttributes:
    if isinstance(attributes, EventAttributes):
        return attributes
    return EventAttributes.from_mapping(attributes)


def _coerce_date_value(value: Any, field: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, date):
        return value.isoformat()
    raise ICSValidationError("Date values must be ISO 8601 strings", field=field, value=value)


def _coerce_geo(value: Any) -> Optional[Geo]:
    if value is None or isinstance(value, Geo):
        return value
    if isinstance(value, Mapping):
        return Geo(lat=value.get("lat"), lon=value.get("lon"))
    raise ICSValidationError("Geo must be a mapping with lat and lon", field="geo", value=value)


def _coerce_text_sequence(value: Any, field: str) -> Optional[tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ICSValidationError(f"{field} must be a list of strings", field=field, value=value)
    return tuple(str(item) for item in value)


def _coerce_attendees(value: Any) -> Optional[tuple[Attendee, ...]]:
    if value is None:
        return None
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ICSValidationError("attendees must be a list", field="attendees", value=value)
    attendees: list[Attendee] = []
    for item in value:
        if isinstance(item, Attendee):
            attendees.append(item)
        elif isinstance(item, Mapping):
            attendees.append(Attendee(name=item.get("name"), email=item.get("email")))
        else:
            raise ICSValidationError("Each attendee must have a name and email", field="attendees", value=item)
    return tuple(attendees)


_ATTENDEE_RE = re.compile(r"^\s*(?P<name>[^<]+?)\s*<(?P<email>[^>]+)>\s*$")


def parse_attendee(value: str) -> Attendee:
    """Parse ``"Name <email>"`` as given on the command line."""
    match = _ATTENDEE_RE.match(value)
    if not match:
        raise ICSValidationError(
            "Invalid attendee. Use the form 'Name <email@example.com>'",
            field="attendee",
            value=value,
        )
    return Attendee(name=match.group("name"), email=match.group("email").strip())
