"""
API configuration loaded from environment or defaults.

Upstream settings live in tmdb_gateway.core.settings and are re-exported
here for the HTTP layer.
"""

import os

from tmdb_gateway.core.settings import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TMDB_BASE_URL,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_TMDB_BASE_URL",
    "Settings",
    "load_settings",
    "get_log_level",
    "get_api_host",
    "get_api_port",
]


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
