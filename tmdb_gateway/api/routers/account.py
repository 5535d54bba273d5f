"""
Account list API endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from tmdb_gateway.api.dependencies import get_query_client
from tmdb_gateway.api.responses import run_query
from tmdb_gateway.core.fetch.client import QueryClient

router = APIRouter(prefix="/api/account", tags=["account"])


@router.get("/{account_id}/lists/{list_name:path}")
def get_account_list(
    account_id: str,
    list_name: str,
    response: Response,
    session_id: str | None = Query(None),
    page: int = Query(1),
    client: QueryClient = Depends(get_query_client),
):
    """User list such as favorite/movies or watchlist/movies (needs a TMDB session)."""
    return run_query(
        client,
        response,
        "get_list",
        account_id=account_id,
        list_name=list_name,
        session_id=session_id,
        page=page,
    )
