"""
FastAPI dependency injection for settings and the query client.

Both objects are built once by create_app() and kept on app.state.
"""

from fastapi import Request

from tmdb_gateway.api.config import Settings
from tmdb_gateway.core.fetch.client import QueryClient


def get_settings(request: Request) -> Settings:
    """Validated settings of the running app."""
    return request.app.state.settings


def get_query_client(request: Request) -> QueryClient:
    """Shared QueryClient of the running app."""
    return request.app.state.query_client
