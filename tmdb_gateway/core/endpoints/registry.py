"""
Declarative endpoint registry.

Each entry names a logical endpoint, the resolver method that builds its
target, and the arguments it accepts. The query client generates one
accessor per entry.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from tmdb_gateway.core.endpoints.resolver import EndpointResolver, RequestTarget
from tmdb_gateway.core.endpoints.selectors import NoSelector
from tmdb_gateway.core.exceptions import UnknownEndpointError


@dataclass(frozen=True)
class EndpointDefinition:
    """A registered endpoint."""

    name: str
    resolver_method: str
    arguments: Tuple[str, ...]
    description: str
    defaults: Tuple[Tuple[str, Any], ...] = ()


ENDPOINTS: Dict[str, EndpointDefinition] = {
    definition.name: definition
    for definition in (
        EndpointDefinition(
            name="get_genres",
            resolver_method="resolve_genres",
            arguments=(),
            description="Movie genre list",
        ),
        EndpointDefinition(
            name="get_movies",
            resolver_method="resolve_movies",
            arguments=("selector", "page"),
            description="Movies by search text, category or genre (popular by default)",
            defaults=(("selector", NoSelector()), ("page", 1)),
        ),
        EndpointDefinition(
            name="get_movie",
            resolver_method="resolve_movie_detail",
            arguments=("movie_id",),
            description="Movie details with videos and credits",
        ),
        EndpointDefinition(
            name="get_recommendations",
            resolver_method="resolve_recommendations",
            arguments=("movie_id", "list_kind"),
            description="Recommended or similar movies for a movie",
        ),
        EndpointDefinition(
            name="get_actor_details",
            resolver_method="resolve_actor_detail",
            arguments=("actor_id",),
            description="Person details",
        ),
        EndpointDefinition(
            name="get_movies_by_actor_id",
            resolver_method="resolve_movies_by_actor",
            arguments=("actor_id", "page"),
            description="Movies featuring a person",
            defaults=(("page", 1),),
        ),
        EndpointDefinition(
            name="get_list",
            resolver_method="resolve_account_list",
            arguments=("account_id", "list_name", "session_id", "page"),
            description="User account list (favorites, watchlist, rated)",
            defaults=(("page", 1),),
        ),
    )
}


def get_endpoint(name: str) -> EndpointDefinition:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpointError(name) from None


def resolve(resolver: EndpointResolver, name: str, **arguments: Any) -> RequestTarget:
    """
    Resolve a registered endpoint by name.

    Raises:
        UnknownEndpointError: if name is not registered
        TypeError: if an argument is not accepted by the endpoint
    """
    definition = get_endpoint(name)
    unexpected = set(arguments) - set(definition.arguments)
    if unexpected:
        raise TypeError(f"{name}() got unexpected arguments: {', '.join(sorted(unexpected))}")

    call_args = dict(definition.defaults)
    call_args.update(arguments)
    return getattr(resolver, definition.resolver_method)(**call_args)
