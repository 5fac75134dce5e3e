"""JSON serialization of NexTrip responses."""

from typing import Any

from nextrip_test_server.domain.models import Departure, NexTripResponse


def serialize_departure(departure: Departure) -> dict[str, Any]:
    """Convert a departure into a JSON-compatible dict.

    ``terminal`` is left out entirely when the departure has none.
    """
    data: dict[str, Any] = {
        "actual": departure.actual,
        "trip_id": departure.trip_id,
        "departure_text": departure.departure_text,
        "route_short_name": departure.route_short_name,
    }
    if departure.terminal is not None:
        data["terminal"] = departure.terminal
    data["schedule_relationship"] = departure.schedule_relationship.value
    return data


def serialize_nextrip_response(response: NexTripResponse) -> dict[str, Any]:
    """Convert a NexTrip response into a JSON-compatible dict."""
    return {"departures": [serialize_departure(d) for d in response.departures]}
