"""Application layer - use cases."""

from nextrip_test_server.application.services import NexTripService

__all__ = ["NexTripService"]
