"""CLI entry point for icsgen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from icsgen import __version__
from icsgen.ics import (
    ICS,
    EventAttributes,
    Geo,
    format_error_for_user,
    parse_attendee,
    read_events_file,
)

app = typer.Typer(help="Generate iCalendar (.ics) files")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"icsgen version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
):
    """Generate iCalendar (.ics) files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _document(filename: Optional[str]) -> ICS:
    return ICS({"filename": filename} if filename else None)


def _emit(calendar: ICS, output: Optional[str], save: bool) -> None:
    if output is None and not save:
        typer.echo(calendar.to_string())
        return
    result = calendar.to_file(output)
    typer.echo(f"✅ Wrote calendar to {result.destination}")


@app.command("event")
def event(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Event summary."),
    description: Optional[str] = typer.Option(None, "--description", help="Event description."),
    location: Optional[str] = typer.Option(None, "--location", help="Event location."),
    url: Optional[str] = typer.Option(None, "--url", help="Event URL."),
    start: Optional[str] = typer.Option(None, "--start", help="Event start (ISO 8601 date or datetime)."),
    end: Optional[str] = typer.Option(None, "--end", help="Event end (ISO 8601 date or datetime)."),
    tz: Optional[str] = typer.Option(None, "--tz", help="TZID for the start (and end) time."),
    tz_end: Optional[str] = typer.Option(None, "--tz-end", help="TZID for the end time."),
    status: Optional[str] = typer.Option(
        None,
        "--status",
        help="Event status (TENTATIVE, CONFIRMED or CANCELLED).",
    ),
    lat: Optional[float] = typer.Option(None, "--lat", help="Latitude for GEO."),
    lon: Optional[float] = typer.Option(None, "--lon", help="Longitude for GEO."),
    category: Optional[List[str]] = typer.Option(None, "--category", help="Category (repeatable)."),
    attach: Optional[List[str]] = typer.Option(None, "--attach", help="Attachment path or URI (repeatable)."),
    attendee: Optional[List[str]] = typer.Option(
        None,
        "--attendee",
        help="Attendee as 'Name <email>' (repeatable).",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this .ics file instead of printing.",
    ),
    save: bool = typer.Option(False, "--save", help="Write to <filename>.ics in the current directory."),
    filename: Optional[str] = typer.Option(None, "--filename", help="File name stem used by --save."),
):
    """Build a calendar holding a single event."""
    try:
        attributes = EventAttributes(
            title=title,
            description=description,
            location=location,
            url=url,
            start=start,
            end=end,
            time_zone=tz,
            time_zone_end=tz_end,
            status=status,
            geo=Geo(lat=lat, lon=lon) if lat is not None or lon is not None else None,
            categories=tuple(category) if category else None,
            attachments=tuple(attach) if attach else None,
            attendees=tuple(parse_attendee(value) for value in attendee) if attendee else None,
        )
        calendar = _document(filename)
        calendar.add_event(attributes)
        _emit(calendar, output, save)
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("build")
def build(
    events_file: str = typer.Argument(..., help="JSON file with an event object or a list of them."),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this .ics file instead of printing.",
    ),
    save: bool = typer.Option(False, "--save", help="Write to <filename>.ics in the current directory."),
    filename: Optional[str] = typer.Option(None, "--filename", help="File name stem used by --save."),
):
    """Build a calendar from event attributes stored as JSON."""
    try:
        calendar = _document(filename)
        for attributes in read_events_file(Path(events_file).expanduser()):
            calendar.add_event(attributes)
        _emit(calendar, output, save)
    except Exception as exc:
        typer.secho(format_error_for_user(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def cli():
    """Entry point for the CLI."""
    app()
