"""
Exception hierarchy for the gateway.
"""

from typing import Optional


class TmdbGatewayError(Exception):
    """Base exception for gateway errors"""
    pass


class ConfigurationError(TmdbGatewayError):
    """Raised when required configuration is missing or invalid"""
    pass


class MissingIdentifierError(TmdbGatewayError, ValueError):
    """Raised when a mandatory resource identifier is absent"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class UnknownEndpointError(TmdbGatewayError, KeyError):
    """Raised when an endpoint name is not registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown endpoint: {self.name}"


class UpstreamError(TmdbGatewayError):
    """Raised when the TMDB API request fails or returns a non-success status"""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message)
