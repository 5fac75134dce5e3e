"""Application services (use cases) for the NexTrip API."""

import logging
from typing import TYPE_CHECKING

from nextrip_test_server.domain.models import NexTripResponse

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nextrip_test_server.domain.ports import DepartureRepository


class NexTripService:
    """Service answering NexTrip departure queries for a stop."""

    def __init__(self, departure_repository: "DepartureRepository") -> None:
        """Initialize with a departure repository."""
        self._departure_repository = departure_repository

    async def get_nextrip(self, stop_id: int) -> NexTripResponse:
        """Get the upcoming departures for a stop."""
        logger.info(f"Request for stop ID: {stop_id}")

        departures = await self._departure_repository.get_departures(stop_id)
        logger.debug(f"Returning {len(departures)} departure(s) for stop ID {stop_id}")
        return NexTripResponse(departures=departures)
