"""Starlette application exposing the NexTrip endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from .path_params import parse_stop_id
from .request_logging_middleware import RequestLoggingMiddleware
from .serializers import serialize_nextrip_response

if TYPE_CHECKING:
    from nextrip_test_server.application.services import NexTripService

logger = logging.getLogger(__name__)


def create_app(service: NexTripService) -> Starlette:
    """Create the web application.

    Args:
        service: Service answering NexTrip departure queries.

    Returns:
        A Starlette application serving ``/hello`` and ``/nextrip/{stop_id}``.
    """

    async def get_hello(_request: Request) -> Response:
        """Health check endpoint."""
        return PlainTextResponse("Hello!")

    async def get_nextrip(request: Request) -> Response:
        """Return the departures for a stop."""
        raw_stop_id = request.path_params["stop_id"]
        try:
            stop_id = parse_stop_id(raw_stop_id)
        except ValueError as e:
            logger.warning(f"Rejected stop ID: {e}")
            return PlainTextResponse(f"Invalid URL: {e}", status_code=400)

        response = await service.get_nextrip(stop_id)
        return JSONResponse(serialize_nextrip_response(response))

    routes = [
        Route("/hello", get_hello, methods=["GET"]),
        Route("/nextrip/{stop_id}", get_nextrip, methods=["GET"]),
    ]
    return Starlette(routes=routes, middleware=[Middleware(RequestLoggingMiddleware)])
