"""Configuration adapters."""

from nextrip_test_server.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
