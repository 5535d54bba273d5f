"""
System API endpoints (health, cache).
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from tmdb_gateway import __version__
from tmdb_gateway.api.config import Settings
from tmdb_gateway.api.dependencies import get_query_client, get_settings
from tmdb_gateway.api.models.system import (
    CacheInfoResponse,
    CacheInvalidationResponse,
    EndpointInfo,
    HealthResponse,
)
from tmdb_gateway.core.endpoints.registry import ENDPOINTS
from tmdb_gateway.core.fetch.client import QueryClient

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check(settings: Settings = Depends(get_settings)):
    """Health check: configuration loaded and registered endpoints."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        base_url=settings.base_url,
        endpoints=[
            EndpointInfo(
                name=d.name,
                arguments=list(d.arguments),
                description=d.description,
            )
            for d in ENDPOINTS.values()
        ],
    )


@router.get("/cache", response_model=CacheInfoResponse)
def cache_info(client: QueryClient = Depends(get_query_client)):
    """Cached entry counts."""
    return CacheInfoResponse(**client.cache_info())


@router.delete("/cache", response_model=CacheInvalidationResponse)
def invalidate_cache(
    endpoint: str | None = Query(None),
    client: QueryClient = Depends(get_query_client),
):
    """Drop cached payloads, optionally for one endpoint only."""
    if endpoint is not None and endpoint not in ENDPOINTS:
        raise HTTPException(status_code=404, detail=f"Unknown endpoint: {endpoint}")
    removed = client.invalidate(endpoint)
    return CacheInvalidationResponse(endpoint=endpoint, removed=removed)
