"""Domain models for NexTrip departures."""

from nextrip_test_server.domain.models.departure import Departure
from nextrip_test_server.domain.models.nextrip_response import NexTripResponse
from nextrip_test_server.domain.models.schedule_relationship import ScheduleRelationship

__all__ = [
    "Departure",
    "NexTripResponse",
    "ScheduleRelationship",
]
