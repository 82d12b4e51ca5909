"""Configuration management for sheetfeed.

Loads settings from environment variables (prefix ``SHEETFEED_``) and an
optional .env file using Pydantic. Every field has a default, so importing
the package never requires a populated environment.

Usage:
    from sheetfeed.config import settings, configure_logging

    configure_logging()
    print(settings.timeout)
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    """sheetfeed configuration from environment variables.

    Attributes:
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        timeout: HTTP request timeout in seconds
        max_concurrency: Cap on concurrent worksheet fetches (None = unbounded)
        access_token: OAuth bearer token used when no credentials are passed
        max_connections: httpx connection pool size
        max_keepalive_connections: httpx keep-alive pool size
    """

    model_config = SettingsConfigDict(
        env_prefix="SHEETFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # HTTP
    timeout: float = Field(default=30.0, gt=0, description="Request timeout (seconds)")
    max_connections: int = Field(default=10, ge=1, description="httpx max connections")
    max_keepalive_connections: int = Field(
        default=5, ge=0, description="httpx max keep-alive connections"
    )

    # Fan-out (None = every worksheet at once)
    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        description="Max concurrent worksheet fetches (None = unbounded)",
    )

    # Auth (optional; public feeds need none)
    access_token: str | None = Field(
        default=None,
        description="OAuth bearer token for private feeds",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid:
            raise ValueError(f"log_level must be one of {valid}, got {v}")
        return v_upper

    @field_validator("access_token")
    @classmethod
    def blank_token_is_none(cls, v: str | None) -> str | None:
        """Treat an empty token as unset."""
        if v is not None and not v.strip():
            return None
        return v


def configure_logging(level: str | None = None) -> None:
    """Apply the package log format at the configured level.

    Args:
        level: Override for settings.log_level
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format=LOG_FORMAT,
    )


# Global settings instance — loaded once at import
settings = Settings()
