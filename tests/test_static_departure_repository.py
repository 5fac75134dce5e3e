"""Tests for the fixed departure repository."""

import pytest

from nextrip_test_server.adapters.fixtures import FIXED_DEPARTURES, StaticDepartureRepository
from nextrip_test_server.domain.models import ScheduleRelationship


@pytest.mark.asyncio
async def test_returns_four_departures_in_fixed_order() -> None:
    """Given any stop, when fetching departures, then the four fixed trips come back in order."""
    repo = StaticDepartureRepository()

    departures = await repo.get_departures(42)

    assert [d.trip_id for d in departures] == ["foo", "bar", "baz", "qux"]
    assert [d.departure_text for d in departures] == ["Due", "4 Min", "12:34", "1:23"]
    assert [d.route_short_name for d in departures] == ["0", "012", "99", "42"]
    assert [d.terminal for d in departures] == ["Z", None, "E", "B"]
    assert [d.actual for d in departures] == [True, True, False, False]
    assert [d.schedule_relationship for d in departures] == [
        ScheduleRelationship.SCHEDULED,
        ScheduleRelationship.SCHEDULED,
        ScheduleRelationship.SKIPPED,
        ScheduleRelationship.NO_DATA,
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("stop_id", [0, 1, -7, 2147483647])
async def test_stop_id_does_not_change_result(stop_id: int) -> None:
    """Given different stop IDs, when fetching departures, then the result is identical."""
    repo = StaticDepartureRepository()

    departures = await repo.get_departures(stop_id)

    assert departures == list(FIXED_DEPARTURES)


@pytest.mark.asyncio
async def test_each_call_returns_a_fresh_list() -> None:
    """Given two calls, when mutating one result, then the other is unaffected."""
    repo = StaticDepartureRepository()

    first = await repo.get_departures(1)
    first.clear()
    second = await repo.get_departures(1)

    assert len(second) == 4
