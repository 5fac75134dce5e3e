"""Request logging middleware for Starlette."""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


def describe_client(request: Request) -> str:
    """Return ``host:port`` of the connecting client, or 'unknown'."""
    if request.client and request.client.host:
        return f"{request.client.host}:{request.client.port}"
    return "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request with its status and duration."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Log the request, pass it on and log the response."""
        client = describe_client(request)
        logger.debug(f"Started {request.method} {request.url.path} from {client}")

        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.debug(
            f"Finished {request.method} {request.url.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f} ms"
        )
        return response
