"""
Fetching and caching of resolved TMDB requests.
"""

from tmdb_gateway.core.fetch.result import QueryResult, QueryStatus
from tmdb_gateway.core.fetch.client import QueryClient

__all__ = ["QueryClient", "QueryResult", "QueryStatus"]
