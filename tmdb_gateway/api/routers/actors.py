"""
Actor API endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from tmdb_gateway.api.dependencies import get_query_client
from tmdb_gateway.api.responses import run_query
from tmdb_gateway.core.fetch.client import QueryClient

router = APIRouter(prefix="/api/actors", tags=["actors"])


@router.get("/{actor_id}")
def get_actor(actor_id: int, response: Response, client: QueryClient = Depends(get_query_client)):
    """Person details."""
    return run_query(client, response, "get_actor_details", actor_id=actor_id)


@router.get("/{actor_id}/movies")
def list_actor_movies(
    actor_id: int,
    response: Response,
    page: int = Query(1),
    client: QueryClient = Depends(get_query_client),
):
    """Movies featuring the person."""
    return run_query(client, response, "get_movies_by_actor_id", actor_id=actor_id, page=page)
