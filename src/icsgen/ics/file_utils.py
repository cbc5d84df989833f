"""File input and output for calendar generation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ICSFileError, ICSValidationError

logger = logging.getLogger(__name__)


def ensure_directory_exists(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ICSFileError("Unable to create calendar directory", path=str(path)) from exc


def write_file(path: Path, data: bytes) -> None:
    if path.is_dir():
        raise ICSFileError("Calendar path is a directory", path=str(path))
    ensure_directory_exists(path)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise ICSFileError("Unable to write calendar file", path=str(path)) from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)


def read_events_file(path: Path) -> list[dict[str, Any]]:
    """Load event attribute mappings from a JSON file holding an object or a list of objects."""
    if not path.exists():
        raise ICSFileError("Events file not found", path=str(path))
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ICSFileError("Unable to read events file", path=str(path)) from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ICSValidationError("Events file is not valid JSON", field="file", value=str(path)) from exc
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ICSValidationError("Events file must hold an object or a list of objects", field="file", value=str(path))
    return data
