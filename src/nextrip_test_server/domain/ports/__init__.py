"""Ports (interfaces) for the ports-and-adapters architecture."""

from nextrip_test_server.domain.ports.departure_repository import DepartureRepository
from nextrip_test_server.domain.ports.server_adapter import ServerAdapter

__all__ = [
    "DepartureRepository",
    "ServerAdapter",
]
