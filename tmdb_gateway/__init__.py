"""
TMDB Gateway Package.

This package contains the endpoint resolver for The Movie Database REST API,
the query client that fetches and caches upstream payloads, the HTTP
surface exposing them, and shared utilities.
"""

__version__ = "1.0.0"
