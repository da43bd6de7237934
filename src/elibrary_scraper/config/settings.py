"""Application settings and configuration management."""

import os
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://www.gsaelibrary.gsa.gov"

_TRUTHY = ("1", "true", "yes", "on")


class Settings:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Load environment variables from .env file."""
        load_dotenv()

    @property
    def elibrary_base_url(self) -> str:
        """Base URL of the GSA eLibrary site."""
        return os.getenv("ELIBRARY_BASE_URL", DEFAULT_BASE_URL)

    @property
    def http_timeout_seconds(self) -> float:
        """HTTP client timeout in seconds."""
        return float(os.getenv("HTTP_TIMEOUT_SECONDS", "20.0"))

    @property
    def verify_tls(self) -> bool:
        """Whether to verify the eLibrary TLS certificate.

        Only applies to the client dedicated to eLibrary requests. When unset,
        verification is off for the public eLibrary host only and on for any
        other base URL.
        """
        value = os.getenv("ELIBRARY_VERIFY_TLS")
        if value is None:
            return self.elibrary_base_url.rstrip("/") != DEFAULT_BASE_URL
        return value.strip().lower() in _TRUTHY

    @property
    def log_level(self) -> str:
        """Logging level name for the CLI."""
        return os.getenv("LOG_LEVEL", "WARNING").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()
