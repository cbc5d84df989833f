"""Calendar document assembly and output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .clock import Clock, default_clock
from .config import ICSOptions, load_config, merge_options, resolve_destination
from .constants import LINE_BREAK
from .event import UidFactory, build_event
from .file_utils import write_file
from .timezones import define_timezone
from .validators import EventAttributes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarFile:
    content: str
    destination: Path


class ICS:
    """An ordered collection of events serialized as one VCALENDAR document.

    Events are rendered when added, so serializing the same document twice gives
    identical text.
    """

    def __init__(
        self,
        options: ICSOptions | Mapping[str, Any] | None = None,
        clock: Optional[Clock] = None,
        uid_factory: Optional[UidFactory] = None,
    ) -> None:
        if isinstance(options, ICSOptions):
            self.options = options
        else:
            self.options = merge_options(load_config(), options)
        self.clock = clock or default_clock()
        self.uid_factory = uid_factory
        self.events: list[str] = []

    def add_event(self, attributes: EventAttributes | Mapping[str, Any] | None) -> None:
        self.events.append(build_event(attributes, clock=self.clock, uid_factory=self.uid_factory))

    def empty(self) -> None:
        self.events = []

    def to_string(self) -> str:
        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "CALSCALE:GREGORIAN",
            f"PRODID:{self.options.prod_id}",
            *define_timezone(self.options.timezone),
            *self.events,
            "END:VCALENDAR",
        ]
        return LINE_BREAK.join(line for line in lines if line)

    def __str__(self) -> str:
        return self.to_string()

    def get_destination(self, path: Optional[str | Path] = None) -> Path:
        return resolve_destination(path, self.options)

    def to_file(self, path: Optional[str | Path] = None) -> CalendarFile:
        content = self.to_string()
        destination = self.get_destination(path)
        write_file(destination, content.encode("utf-8"))
        logger.debug("Saved %d event(s) to %s", len([event for event in self.events if event]), destination)
        return CalendarFile(content=content, destination=destination)
