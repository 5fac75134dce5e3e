"""Certificate handling for the HTTPS server.

The package ships a self-signed certificate/key pair (issued for ``localhost``
and ``127.0.0.1``) under ``self_signed_cert/``. It is used unless both
``tls_cert_file`` and ``tls_key_file`` are configured.
"""

from __future__ import annotations

import logging
import ssl
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nextrip_test_server.adapters.config import AppConfig

logger = logging.getLogger(__name__)

EMBEDDED_CERT_DIR = "self_signed_cert"
EMBEDDED_CERT_NAME = "cert.pem"
EMBEDDED_KEY_NAME = "key.pem"


class TlsConfigurationError(Exception):
    """Raised when the TLS certificate/key pair cannot be used."""


@dataclass(frozen=True)
class CertificatePair:
    """Paths to a PEM certificate and its private key."""

    cert_file: Path
    key_file: Path

    def create_server_context(self) -> ssl.SSLContext:
        """Build a server-side SSL context from the pair.

        Raises:
            TlsConfigurationError: If either file is missing or not valid PEM,
                or the key does not match the certificate.
        """
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        try:
            context.load_cert_chain(certfile=str(self.cert_file), keyfile=str(self.key_file))
        except (ssl.SSLError, OSError) as e:
            raise TlsConfigurationError(
                f"Could not load certificate {self.cert_file} with key {self.key_file}: {e}"
            ) from e
        return context


@contextmanager
def embedded_certificate_pair() -> Iterator[CertificatePair]:
    """Yield the self-signed pair bundled with the package as real files."""
    cert_dir = resources.files(__package__).joinpath(EMBEDDED_CERT_DIR)
    with ExitStack() as stack:
        cert_file = stack.enter_context(resources.as_file(cert_dir.joinpath(EMBEDDED_CERT_NAME)))
        key_file = stack.enter_context(resources.as_file(cert_dir.joinpath(EMBEDDED_KEY_NAME)))
        yield CertificatePair(cert_file=cert_file, key_file=key_file)


@contextmanager
def resolve_certificate_pair(config: AppConfig) -> Iterator[CertificatePair]:
    """Yield the certificate pair selected by the configuration.

    Raises:
        TlsConfigurationError: If only one of tls_cert_file/tls_key_file is set.
    """
    if config.uses_embedded_certificate:
        logger.debug("Using embedded self-signed certificate")
        with embedded_certificate_pair() as pair:
            yield pair
        return

    if not config.tls_cert_file or not config.tls_key_file:
        raise TlsConfigurationError("tls_cert_file and tls_key_file must be set together")

    logger.info(f"Using TLS certificate from {config.tls_cert_file}")
    yield CertificatePair(cert_file=Path(config.tls_cert_file), key_file=Path(config.tls_key_file))
