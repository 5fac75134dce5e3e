"""HTTPS test server that serves fixed NexTrip departure data."""

__version__ = "0.1.0"
