"""
Endpoint resolution for the TMDB REST API.
"""

from tmdb_gateway.core.endpoints.selectors import (
    CategoryName,
    GenreId,
    MovieSelector,
    NoSelector,
    SearchText,
    choose_selector,
    selector_from_value,
)
from tmdb_gateway.core.endpoints.resolver import EndpointResolver, RequestTarget
from tmdb_gateway.core.endpoints.registry import ENDPOINTS, EndpointDefinition, resolve

__all__ = [
    "CategoryName",
    "GenreId",
    "MovieSelector",
    "NoSelector",
    "SearchText",
    "choose_selector",
    "selector_from_value",
    "EndpointResolver",
    "RequestTarget",
    "ENDPOINTS",
    "EndpointDefinition",
    "resolve",
]
