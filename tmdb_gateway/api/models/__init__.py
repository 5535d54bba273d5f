"""
Pydantic schemas for API responses.
"""

from tmdb_gateway.api.models.system import (
    CacheInfoResponse,
    CacheInvalidationResponse,
    EndpointInfo,
    HealthResponse,
)

__all__ = [
    "CacheInfoResponse",
    "CacheInvalidationResponse",
    "EndpointInfo",
    "HealthResponse",
]
