"""
Upstream (TMDB) settings loaded from environment or defaults.

The TMDB credential is mandatory; Settings refuses a blank key, and
load_settings() is the single place where the environment is read.
"""

import os
from dataclasses import dataclass

from tmdb_gateway.core.exceptions import ConfigurationError

DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_REQUEST_TIMEOUT = 10.0


def get_tmdb_api_key() -> str:
    """Get TMDB API key from env (empty string when unset)."""
    return os.getenv("TMDB_API_KEY", "").strip()


def get_tmdb_base_url() -> str:
    """Get TMDB base URL from env or default."""
    return (os.getenv("TMDB_BASE_URL", "") or DEFAULT_TMDB_BASE_URL).rstrip("/")


def get_request_timeout() -> str:
    """Get upstream request timeout (seconds, unparsed) from env or default."""
    return os.getenv("TMDB_TIMEOUT", "") or str(DEFAULT_REQUEST_TIMEOUT)


@dataclass(frozen=True)
class Settings:
    """Process-wide, read-only upstream configuration."""

    api_key: str
    base_url: str = DEFAULT_TMDB_BASE_URL
    timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self):
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError("TMDB API key must not be blank")

    def __repr__(self) -> str:
        return f"Settings(api_key='***', base_url={self.base_url!r}, timeout={self.timeout!r})"


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ConfigurationError: if TMDB_API_KEY is missing/blank or TMDB_TIMEOUT
            is not a positive number
    """
    api_key = get_tmdb_api_key()
    if not api_key:
        raise ConfigurationError(
            "TMDB_API_KEY is not set; export it before starting the gateway"
        )

    raw_timeout = get_request_timeout()
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"TMDB_TIMEOUT must be a number, got {raw_timeout!r}")
    if timeout <= 0:
        raise ConfigurationError(f"TMDB_TIMEOUT must be positive, got {timeout}")

    return Settings(api_key=api_key, base_url=get_tmdb_base_url(), timeout=timeout)
