"""Departure repository port."""

from typing import Protocol

from nextrip_test_server.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving departure information."""

    async def get_departures(self, stop_id: int) -> list[Departure]:
        """Get departures for a stop."""
        ...
