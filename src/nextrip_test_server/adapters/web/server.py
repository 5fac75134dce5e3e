"""uvicorn server adapter serving the NexTrip API over HTTPS."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

from nextrip_test_server.adapters.config import AppConfig
from nextrip_test_server.adapters.tls import resolve_certificate_pair
from nextrip_test_server.domain.ports import ServerAdapter

from .app import create_app

if TYPE_CHECKING:
    from nextrip_test_server.application.services import NexTripService

logger = logging.getLogger(__name__)


class UvicornWebAdapter(ServerAdapter):
    """Serves the NexTrip API with uvicorn over TLS."""

    def __init__(self, service: NexTripService, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            service: Service answering NexTrip departure queries.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        self.config = config
        self.app = create_app(service)
        self._server: uvicorn.Server | None = None

    def build_server_config(self, cert_file: str, key_file: str) -> uvicorn.Config:
        """Build the uvicorn configuration for the given certificate pair."""
        return uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
            ssl_certfile=cert_file,
            ssl_keyfile=key_file,
            # Propagate uvicorn records to the root handler configured in main
            log_config=None,
        )

    async def start(self) -> None:
        """Start the HTTPS server and serve until stopped.

        Raises:
            TlsConfigurationError: If the certificate/key pair cannot be loaded.
        """
        with resolve_certificate_pair(self.config) as pair:
            # Fail before binding if the pair is unusable
            pair.create_server_context()

            server_config = self.build_server_config(str(pair.cert_file), str(pair.key_file))
            self._server = uvicorn.Server(server_config)

            logger.info(f"Listening on {self.config.host}:{self.config.port}")
            await self._server.serve()

    async def stop(self) -> None:
        """Stop the HTTPS server."""
        if self._server:
            logger.info("Stopping server")
            self._server.should_exit = True
