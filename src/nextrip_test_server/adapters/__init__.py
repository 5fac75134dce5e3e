"""Adapters layer - configuration, fixtures, TLS and web integrations."""

from nextrip_test_server.adapters.config import AppConfig
from nextrip_test_server.adapters.fixtures import StaticDepartureRepository

__all__ = [
    "AppConfig",
    "StaticDepartureRepository",
]
