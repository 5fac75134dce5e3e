"""TLS material for the HTTPS server."""

from nextrip_test_server.adapters.tls.certificates import (
    CertificatePair,
    TlsConfigurationError,
    embedded_certificate_pair,
    resolve_certificate_pair,
)

__all__ = [
    "CertificatePair",
    "TlsConfigurationError",
    "embedded_certificate_pair",
    "resolve_certificate_pair",
]
