"""Web adapter for the NexTrip API."""

from .app import create_app
from .server import UvicornWebAdapter

__all__ = ["UvicornWebAdapter", "create_app"]
