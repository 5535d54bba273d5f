"""
Translation of query results into HTTP responses.
"""

from typing import Any

from fastapi import HTTPException, Response

from tmdb_gateway.core.fetch.client import QueryClient


def run_query(client: QueryClient, response: Response, endpoint: str, **arguments: Any) -> Any:
    """
    Run an endpoint and return its upstream payload.

    Sets X-Cache to HIT or MISS. Missing identifiers map to 422, upstream
    failures to the upstream status code (502 when there is none).
    """
    try:
        result = client.query(endpoint, **arguments)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if result.is_error:
        raise HTTPException(status_code=result.error.status_code or 502, detail=str(result.error))

    response.headers["X-Cache"] = "HIT" if result.from_cache else "MISS"
    return result.data
