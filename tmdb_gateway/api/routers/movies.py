"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from tmdb_gateway.api.dependencies import get_query_client
from tmdb_gateway.api.responses import run_query
from tmdb_gateway.core.endpoints.selectors import choose_selector
from tmdb_gateway.core.fetch.client import QueryClient

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("")
def list_movies(
    response: Response,
    search: str | None = Query(None),
    category: str | None = Query(None),
    genre_id: int | None = Query(None),
    page: int = Query(1),
    client: QueryClient = Depends(get_query_client),
):
    """
    List movies by search text, category or genre.

    Search text wins over category, category over genre; with none of them
    the popular list is returned.
    """
    selector = choose_selector(search_query=search, category=category, genre_id=genre_id)
    return run_query(client, response, "get_movies", selector=selector, page=page)


@router.get("/{movie_id}")
def get_movie(movie_id: int, response: Response, client: QueryClient = Depends(get_query_client)):
    """Movie details with videos and credits."""
    return run_query(client, response, "get_movie", movie_id=movie_id)


@router.get("/{movie_id}/{list_kind}")
def get_related_movies(
    movie_id: int,
    list_kind: str,
    response: Response,
    client: QueryClient = Depends(get_query_client),
):
    """Related movies ('recommendations', 'similar', ...)."""
    return run_query(
        client, response, "get_recommendations", movie_id=movie_id, list_kind=list_kind
    )
