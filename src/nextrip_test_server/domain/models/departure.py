"""Departure domain model."""

from dataclasses import dataclass

from nextrip_test_server.domain.models.schedule_relationship import ScheduleRelationship


@dataclass(frozen=True)
class Departure:
    """Represents a single departure as reported by the NexTrip API."""

    actual: bool  # True for a real-time estimate, False for a scheduled-only time
    trip_id: str
    departure_text: str
    route_short_name: str
    terminal: str | None
    schedule_relationship: ScheduleRelationship
