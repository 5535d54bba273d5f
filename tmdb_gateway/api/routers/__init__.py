"""
API route handlers.
"""

from tmdb_gateway.api.routers import genres, movies, actors, account, system

__all__ = ["genres", "movies", "actors", "account", "system"]
