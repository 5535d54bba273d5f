"""
Genre API endpoints.
"""

from fastapi import APIRouter, Depends, Response

from tmdb_gateway.api.dependencies import get_query_client
from tmdb_gateway.api.responses import run_query
from tmdb_gateway.core.fetch.client import QueryClient

router = APIRouter(prefix="/api/genres", tags=["genres"])


@router.get("")
def list_genres(response: Response, client: QueryClient = Depends(get_query_client)):
    """Movie genre list."""
    return run_query(client, response, "get_genres")
