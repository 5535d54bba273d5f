"""
Pydantic schemas for system endpoints.

TMDB payloads are returned as-is and have no schema here.
"""

from pydantic import BaseModel


class EndpointInfo(BaseModel):
    """A registered upstream endpoint."""

    name: str
    arguments: list[str]
    description: str


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str
    base_url: str
    endpoints: list[EndpointInfo]


class CacheInfoResponse(BaseModel):
    """Cached entry counts."""

    entries: int
    by_endpoint: dict[str, int]


class CacheInvalidationResponse(BaseModel):
    """Result of a cache invalidation."""

    endpoint: str | None
    removed: int
