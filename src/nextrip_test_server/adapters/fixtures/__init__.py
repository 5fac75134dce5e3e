"""Fixed departure data used in place of a live NexTrip backend."""

from nextrip_test_server.adapters.fixtures.static_departure_repository import (
    FIXED_DEPARTURES,
    StaticDepartureRepository,
)

__all__ = ["FIXED_DEPARTURES", "StaticDepartureRepository"]
