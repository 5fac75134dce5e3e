"""Tests for JSON serialization of NexTrip responses."""

from nextrip_test_server.adapters.web.serializers import (
    serialize_departure,
    serialize_nextrip_response,
)
from nextrip_test_server.domain.models import Departure, NexTripResponse, ScheduleRelationship


def test_departure_with_terminal_includes_all_fields() -> None:
    """Given a departure with a terminal, when serializing, then every field is present."""
    departure = Departure(True, "foo", "Due", "0", "Z", ScheduleRelationship.SCHEDULED)

    assert serialize_departure(departure) == {
        "actual": True,
        "trip_id": "foo",
        "departure_text": "Due",
        "route_short_name": "0",
        "terminal": "Z",
        "schedule_relationship": "Scheduled",
    }


def test_departure_without_terminal_omits_the_key() -> None:
    """Given a departure without a terminal, when serializing, then 'terminal' is left out."""
    departure = Departure(True, "bar", "4 Min", "012", None, ScheduleRelationship.SCHEDULED)

    data = serialize_departure(departure)

    assert "terminal" not in data
    assert list(data) == [
        "actual",
        "trip_id",
        "departure_text",
        "route_short_name",
        "schedule_relationship",
    ]


def test_schedule_relationship_is_serialized_as_plain_string() -> None:
    """Given a NoData departure, when serializing, then the enum becomes its name string."""
    departure = Departure(False, "qux", "1:23", "42", "B", ScheduleRelationship.NO_DATA)

    value = serialize_departure(departure)["schedule_relationship"]

    assert value == "NoData"
    assert type(value) is str


def test_response_envelope_wraps_departures() -> None:
    """Given a response, when serializing, then departures sit under a single key."""
    departure = Departure(False, "baz", "12:34", "99", "E", ScheduleRelationship.SKIPPED)

    data = serialize_nextrip_response(NexTripResponse(departures=[departure]))

    assert list(data) == ["departures"]
    assert data["departures"][0]["trip_id"] == "baz"


def test_empty_response_serializes_to_empty_list() -> None:
    """Given no departures, when serializing, then an empty list is produced."""
    assert serialize_nextrip_response(NexTripResponse(departures=[])) == {"departures": []}
