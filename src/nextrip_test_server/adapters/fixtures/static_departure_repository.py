"""Departure repository returning a fixed set of departures."""

from nextrip_test_server.domain.models import Departure, ScheduleRelationship
from nextrip_test_server.domain.ports import DepartureRepository

FIXED_DEPARTURES: tuple[Departure, ...] = (
    Departure(
        actual=True,
        trip_id="foo",
        departure_text="Due",
        route_short_name="0",
        terminal="Z",
        schedule_relationship=ScheduleRelationship.SCHEDULED,
    ),
    Departure(
        actual=True,
        trip_id="bar",
        departure_text="4 Min",
        route_short_name="012",
        terminal=None,
        schedule_relationship=ScheduleRelationship.SCHEDULED,
    ),
    Departure(
        actual=False,
        trip_id="baz",
        departure_text="12:34",
        route_short_name="99",
        terminal="E",
        schedule_relationship=ScheduleRelationship.SKIPPED,
    ),
    Departure(
        actual=False,
        trip_id="qux",
        departure_text="1:23",
        route_short_name="42",
        terminal="B",
        schedule_relationship=ScheduleRelationship.NO_DATA,
    ),
)


class StaticDepartureRepository(DepartureRepository):
    """Repository that answers every stop with the same four departures."""

    async def get_departures(self, stop_id: int) -> list[Departure]:  # noqa: ARG002
        """Get departures for a stop. The stop ID does not affect the result."""
        return list(FIXED_DEPARTURES)
