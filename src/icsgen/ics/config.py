"""Configuration helpers for iCalendar generation."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .constants import DEFAULT_FILENAME, DEFAULT_TIMEZONE, ENV_VARS, ICS_SUFFIX, PROD_ID
from .errors import ICSValidationError


@dataclass(frozen=True)
class ICSOptions:
    filename: str = DEFAULT_FILENAME
    timezone: Optional[str] = DEFAULT_TIMEZONE
    prod_id: str = PROD_ID


def load_config() -> ICSOptions:
    return ICSOptions(
        filename=os.getenv(ENV_VARS["FILENAME"]) or DEFAULT_FILENAME,
        timezone=os.getenv(ENV_VARS["TIMEZONE"]) or DEFAULT_TIMEZONE,
    )


def merge_options(base: ICSOptions, overrides: Mapping[str, Any] | None) -> ICSOptions:
    if not overrides:
        return base
    known = {field.name for field in fields(ICSOptions)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ICSValidationError(f"Unknown option(s): {', '.join(unknown)}", field="options", value=unknown)
    # None leaves the default in place.
    values = {key: value for key, value in overrides.items() if value is not None}
    for key in ("filename", "prod_id"):
        if key in values and not isinstance(values[key], str):
            raise ICSValidationError(f"Option {key} must be a string", field=key, value=values[key])
    return replace(base, **values)


def ensure_ics_suffix(value: str) -> str:
    return value if value[-len(ICS_SUFFIX):] == ICS_SUFFIX else value + ICS_SUFFIX


def resolve_destination(path: Optional[str | Path], options: ICSOptions) -> Path:
    requested = str(path) if path else options.filename + ICS_SUFFIX
    destination = Path(ensure_ics_suffix(requested)).expanduser()
    return (Path.cwd() / destination).resolve()
