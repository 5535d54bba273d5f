"""
Endpoint resolver for The Movie Database (TMDB) v3 REST API.

Maps a logical request (resource kind + parameters) to a RequestTarget:
the resource path plus ordered query parameters, with the API credential
attached. Resolution is pure: no I/O, no shared mutable state, and
identical inputs always give equal targets.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union
from urllib.parse import quote, urlencode

from tmdb_gateway.core.settings import Settings
from tmdb_gateway.core.endpoints.selectors import (
    CategoryName,
    GenreId,
    MovieSelector,
    NoSelector,
    SearchText,
)
from tmdb_gateway.core.exceptions import MissingIdentifierError

Identifier = Union[int, str]

MOVIE_DETAIL_APPENDS = "videos,credits"


@dataclass(frozen=True)
class RequestTarget:
    """Concrete upstream request: path and ordered query parameters."""

    endpoint: str
    path: str
    params: Tuple[Tuple[str, Any], ...] = ()

    @property
    def query_params(self) -> Dict[str, Any]:
        """Parameters as a dict (insertion order preserved)."""
        return dict(self.params)

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    @property
    def cache_key(self) -> str:
        """Serialized target; equal targets share a key."""
        return f"{self.path}?{self.query_string}"

    def url(self, base_url: str) -> str:
        """Absolute URL against base_url."""
        return f"{base_url.rstrip('/')}{self.cache_key}"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "path": self.path,
            "params": self.query_params,
        }


def _require(value: Any, field: str) -> Any:
    """Return value unchanged, raising if it is absent."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingIdentifierError(field)
    return value


def _segment(value: Any, safe: str = "") -> str:
    """Percent-encode a value for use inside the path."""
    return quote(str(value), safe=safe)


class EndpointResolver:
    """
    Stateless resolver parameterized by immutable Settings.

    Usage:
        resolver = EndpointResolver(load_settings())
        target = resolver.resolve_movies(CategoryName("top_rated"), page=2)
        target.path          # '/movie/top_rated'
        target.query_params  # {'page': 2, 'api_key': '...'}
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def _target(self, endpoint: str, path: str, **params: Any) -> RequestTarget:
        ordered = [(name, value) for name, value in params.items() if value is not None]
        ordered.append(("api_key", self.settings.api_key))
        return RequestTarget(endpoint=endpoint, path=path, params=tuple(ordered))

    def resolve_genres(self) -> RequestTarget:
        """Movie genre list."""
        return self._target("get_genres", "/genre/movie/list")

    def resolve_movies(self, selector: MovieSelector, page: int = 1) -> RequestTarget:
        """
        Movie listing for one selector.

        The page is forwarded as given; TMDB governs its bounds.
        """
        if isinstance(selector, SearchText):
            return self._target("get_movies", "/search/movie", query=selector.text, page=page)
        if isinstance(selector, CategoryName):
            return self._target("get_movies", f"/movie/{_segment(selector.name)}", page=page)
        if isinstance(selector, GenreId):
            return self._target(
                "get_movies", "/discover/movie", with_genres=selector.genre_id, page=page
            )
        if isinstance(selector, NoSelector):
            return self._target("get_movies", "/movie/popular", page=page)
        raise TypeError(f"Unsupported movie selector: {selector!r}")

    def resolve_movie_detail(self, movie_id: Identifier) -> RequestTarget:
        """Movie details with videos and credits appended."""
        movie_id = _require(movie_id, "movie_id")
        return self._target(
            "get_movie", f"/movie/{_segment(movie_id)}", append_to_response=MOVIE_DETAIL_APPENDS
        )

    def resolve_recommendations(self, movie_id: Identifier, list_kind: str) -> RequestTarget:
        """Related-movie list, e.g. 'recommendations' or 'similar' (not validated)."""
        movie_id = _require(movie_id, "movie_id")
        path = f"/movie/{_segment(movie_id)}/{_segment(list_kind)}"
        return self._target("get_recommendations", path)

    def resolve_actor_detail(self, actor_id: Identifier) -> RequestTarget:
        actor_id = _require(actor_id, "actor_id")
        return self._target("get_actor_details", f"/person/{_segment(actor_id)}")

    def resolve_movies_by_actor(self, actor_id: Identifier, page: int = 1) -> RequestTarget:
        actor_id = _require(actor_id, "actor_id")
        return self._target(
            "get_movies_by_actor_id", "/discover/movie", with_cast=actor_id, page=page
        )

    def resolve_account_list(
        self,
        account_id: Identifier,
        list_name: str,
        session_id: str,
        page: int = 1,
    ) -> RequestTarget:
        """
        User account list such as 'favorite/movies' or 'watchlist/movies'.

        The session id is not checked here; an expired or missing session
        surfaces as an authorization error from TMDB.
        """
        account_id = _require(account_id, "account_id")
        path = f"/account/{_segment(account_id)}/{_segment(list_name, safe='/')}"
        return self._target("get_list", path, session_id=session_id, page=page)
