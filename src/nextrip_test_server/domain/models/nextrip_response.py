"""NexTrip response envelope."""

from dataclasses import dataclass

from nextrip_test_server.domain.models.departure import Departure


@dataclass(frozen=True)
class NexTripResponse:
    """Ordered departures returned for a stop."""

    departures: list[Departure]
