"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to bind the server to")
    log_level: str = Field(
        default="debug",
        description="Log level for the application and uvicorn: 'critical', 'error', 'warning', 'info', 'debug' or 'trace'",
    )

    # TLS configuration
    # If neither is set, the self-signed pair bundled with the package is used
    tls_cert_file: str | None = Field(
        default=None,
        description="Path to a PEM certificate replacing the embedded self-signed certificate",
    )
    tls_key_file: str | None = Field(
        default=None,
        description="Path to the PEM private key matching tls_cert_file",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the supported names."""
        if v.lower() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.lower()

    @property
    def uses_embedded_certificate(self) -> bool:
        """Whether no TLS override has been configured."""
        return self.tls_cert_file is None and self.tls_key_file is None
