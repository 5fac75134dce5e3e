"""Main entry point for the NexTrip test server."""

import asyncio
import logging
import sys

from pydantic import ValidationError
from uvicorn.config import TRACE_LOG_LEVEL

from nextrip_test_server.adapters.config import AppConfig
from nextrip_test_server.adapters.fixtures import StaticDepartureRepository
from nextrip_test_server.adapters.tls import TlsConfigurationError
from nextrip_test_server.adapters.web import UvicornWebAdapter
from nextrip_test_server.application import NexTripService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load configuration, exiting on invalid settings."""
    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    # uvicorn registers the TRACE level below DEBUG
    level = TRACE_LOG_LEVEL if config.log_level == "trace" else config.log_level.upper()
    logging.getLogger().setLevel(level)
    return config


async def main() -> None:
    """Main application entry point."""
    config = load_config()

    departure_repo = StaticDepartureRepository()
    nextrip_service = NexTripService(departure_repo)
    web_adapter = UvicornWebAdapter(nextrip_service, config)

    try:
        await web_adapter.start()
    except TlsConfigurationError as e:
        logger.error(f"Invalid TLS configuration: {e}")
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        # uvicorn re-raises SIGINT after its own graceful shutdown
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
