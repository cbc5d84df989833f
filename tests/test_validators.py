from __future__ import annotations

from datetime import date, datetime

import pytest

from icsgen.ics import Attendee, EventAttributes, Geo, ICSValidationError, parse_attendee


def test_from_mapping_accepts_camel_and_snake_case():
    attributes = EventAttributes.from_mapping(
        {
            "title": "Standup",
            "timeZone": "America/New_York",
            "time_zone_end": "Europe/London",
            "geo": {"lat": 1.5, "lon": 2.5},
            "categories": ["a", "b"],
            "attendees": [{"name": "Ada", "email": "ada@example.com"}, {"name": "Grace"}],
        }
    )
    assert attributes.time_zone == "America/New_York"
    assert attributes.time_zone_end == "Europe/London"
    assert attributes.geo == Geo(lat=1.5, lon=2.5)
    assert attributes.categories == ("a", "b")
    assert attributes.attendees == (Attendee(name="Ada", email="ada@example.com"), Attendee(name="Grace"))


def test_from_mapping_converts_date_objects():
    attributes = EventAttributes.from_mapping({"start": date(2024, 6, 1), "end": datetime(2024, 6, 1, 9, 30)})
    assert attributes.start == "2024-06-01"
    assert attributes.end == "2024-06-01T09:30:00"


def test_unknown_keys_are_dropped_from_the_record():
    attributes = EventAttributes.from_mapping({"colour": "blue", "title": "Standup"})
    assert attributes == EventAttributes(title="Standup")


def test_empty_sequence_counts_as_set():
    assert not EventAttributes.from_mapping({"categories": []}).is_empty()


@pytest.mark.parametrize(
    "data",
    [
        {"categories": "work"},
        {"attendees": {"name": "Ada"}},
        {"attendees": ["Ada"]},
        {"geo": [1, 2]},
        {"start": 20240601},
    ],
)
def test_malformed_structures_raise(data):
    with pytest.raises(ICSValidationError):
        EventAttributes.from_mapping(data)


def test_parse_attendee():
    assert parse_attendee("Ada Lovelace <ada@example.com>") == Attendee(name="Ada Lovelace", email="ada@example.com")
    with pytest.raises(ICSValidationError):
        parse_attendee("ada@example.com")
