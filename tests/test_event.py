from __future__ import annotations

import re

import pytest

from icsgen.ics import Attendee, EventAttributes, Geo, ICSValidationError, build_event


def test_empty_attributes_build_nothing(fixed_clock):
    assert build_event(None, clock=fixed_clock) == ""
    assert build_event({}, clock=fixed_clock) == ""
    assert build_event(EventAttributes(), clock=fixed_clock) == ""


def test_full_event_line_order(fixed_clock, uid_factory):
    attributes = EventAttributes(
        title="Launch",
        description="Product launch",
        location="Main hall",
        url="https://example.com/launch",
        start="2024-06-01T10:00",
        end="2024-06-01T12:00",
        status="confirmed",
        geo=Geo(lat=40.5, lon=-73.25),
        categories=("work", "launch"),
        attachments=("/tmp/agenda.pdf",),
        attendees=(
            Attendee(name="Ada", email="ada@example.com"),
            Attendee(name="Grace"),
            Attendee(name="Linus", email="linus@example.com"),
        ),
    )

    event = build_event(attributes, clock=fixed_clock, uid_factory=uid_factory)

    assert event.split("\r\n") == [
        "BEGIN:VEVENT",
        "UID:uid-1",
        "DTSTAMP:20240601T123045Z",
        "DTSTART:20240601T100000",
        "DTEND:20240601T120000",
        "SUMMARY:Launch",
        "DESCRIPTION:Product launch",
        "LOCATION:Main hall",
        "URL:https://example.com/launch",
        "STATUS:confirmed",
        "GEO:40.5;-73.25",
        "ATTENDEE;CN=Ada:mailto:ada@example.com",
        "ATTENDEE;CN=Linus:mailto:linus@example.com",
        "CATEGORIES:work,launch",
        "ATTACH:/tmp/agenda.pdf",
        "END:VEVENT",
    ]


def test_mapping_input_with_timezones(fixed_clock, uid_factory):
    event = build_event(
        {
            "title": "Flight",
            "start": "2024-06-01T09:00",
            "end": "2024-06-01T21:00",
            "timeZone": "America/New_York",
            "timeZoneEnd": "Europe/London",
        },
        clock=fixed_clock,
        uid_factory=uid_factory,
    )
    assert "DTSTART;TZID=America/New_York:20240601T090000" in event
    assert "DTEND;TZID=Europe/London:20240601T210000" in event


def test_defaults_when_only_title_is_set(fixed_clock):
    lines = build_event({"title": "Someday"}, clock=fixed_clock).split("\r\n")
    assert "DTSTART:20240601" in lines
    assert "DTEND:20240602" in lines


def test_offset_start_without_end_omits_dtend(fixed_clock):
    lines = build_event({"start": "2024-06-01T10:00:00+05:00"}, clock=fixed_clock).split("\r\n")
    assert "20240601T100000Z" in lines
    assert not any(line.startswith("DTEND") for line in lines)


def test_each_build_gets_a_new_uid(fixed_clock):
    first = build_event({"title": "A"}, clock=fixed_clock)
    second = build_event({"title": "A"}, clock=fixed_clock)
    uid_pattern = re.compile(r"^UID:(.+)$", re.MULTILINE)
    assert uid_pattern.search(first).group(1) != uid_pattern.search(second).group(1)


def test_unrecognized_status_is_omitted(fixed_clock):
    event = build_event({"title": "A", "status": "maybe"}, clock=fixed_clock)
    assert "STATUS" not in event


def test_empty_categories_still_emitted(fixed_clock):
    event = build_event({"title": "A", "categories": []}, clock=fixed_clock)
    assert "\r\nCATEGORIES:\r\n" in event


def test_bad_date_propagates(fixed_clock):
    with pytest.raises(ICSValidationError):
        build_event({"start": "not a date"}, clock=fixed_clock)


@pytest.mark.parametrize("attributes", [{"title": None}, {"colour": "blue"}])
def test_mapping_with_keys_builds_default_event(attributes, fixed_clock, uid_factory):
    lines = build_event(attributes, clock=fixed_clock, uid_factory=uid_factory).split("\r\n")
    assert lines == [
        "BEGIN:VEVENT",
        "UID:uid-1",
        "DTSTAMP:20240601T123045Z",
        "DTSTART:20240601",
        "DTEND:20240602",
        "END:VEVENT",
    ]
