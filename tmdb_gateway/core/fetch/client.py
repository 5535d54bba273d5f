"""
Query client for the TMDB REST API.

Resolves registered endpoints to request targets, executes them with a
requests session, and keeps successful payloads in an in-memory cache keyed
by the serialized target. Concurrent queries for the same target share a
single upstream request, whether it succeeds or fails.
"""

import logging
import threading
from typing import Any, Dict, Optional

import requests

from tmdb_gateway.core.endpoints.registry import ENDPOINTS, EndpointDefinition, resolve
from tmdb_gateway.core.endpoints.resolver import EndpointResolver, RequestTarget
from tmdb_gateway.core.exceptions import UpstreamError
from tmdb_gateway.core.fetch.result import QueryResult, QueryStatus
from tmdb_gateway.core.settings import Settings

logger = logging.getLogger(__name__)


class _InFlight:
    """Upstream request in progress for one cache key."""

    def __init__(self):
        self.done = threading.Event()
        self.result: Optional[QueryResult] = None
        self.waiters = 0


def _upstream_message(response: requests.Response) -> str:
    """Extract TMDB's status_message from an error response if present."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("status_message"):
        return str(body["status_message"])
    return response.reason or f"HTTP {response.status_code}"


class QueryClient:
    """
    Fetch/cache collaborator for resolved TMDB endpoints.

    Each registered endpoint is also available as a method of the same name:

    Usage:
        client = QueryClient(load_settings())
        result = client.get_movies(selector=CategoryName("top_rated"), page=2)
        if result.is_success:
            movies = result.data["results"]
        client.invalidate("get_movies")
    """

    def __init__(
        self,
        settings: Settings,
        resolver: Optional[EndpointResolver] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize query client.

        Args:
            settings: Validated upstream configuration
            resolver: Endpoint resolver (default: built from settings)
            session: HTTP session (default: new requests.Session)
        """
        self.settings = settings
        self.resolver = resolver or EndpointResolver(settings)
        self.session = session or requests.Session()

        self._cache: Dict[str, QueryResult] = {}
        self._in_flight: Dict[str, _InFlight] = {}
        self._lock = threading.Lock()

        logger.info(f"QueryClient initialized (base_url: {settings.base_url})")

    def _mask(self, text: str) -> str:
        return text.replace(self.settings.api_key, "***")

    def query(self, endpoint: str, force_refetch: bool = False, **arguments: Any) -> QueryResult:
        """
        Run a registered endpoint.

        Args:
            endpoint: Registered endpoint name (e.g. 'get_movies')
            force_refetch: Skip the cache and re-fetch from upstream
            **arguments: Endpoint arguments

        Returns:
            QueryResult with SUCCESS or ERROR status
        """
        target = resolve(self.resolver, endpoint, **arguments)
        return self.fetch(target, force_refetch=force_refetch)

    def refetch(self, endpoint: str, **arguments: Any) -> QueryResult:
        """Re-fetch a query from upstream, replacing its cached payload."""
        return self.query(endpoint, force_refetch=True, **arguments)

    def fetch(self, target: RequestTarget, force_refetch: bool = False) -> QueryResult:
        """
        Fetch a resolved target, serving from cache where possible.

        Callers that arrive while a request for the same target is running
        wait for it and receive its result, errors included. The in-flight
        entry is removed as soon as that request completes, so later callers
        re-fetch failed queries.
        """
        key = target.cache_key

        if not force_refetch:
            cached = self._cached(key)
            if cached is not None:
                return cached

        with self._lock:
            in_flight = self._in_flight.get(key)
            leader = in_flight is None
            if leader:
                in_flight = self._in_flight[key] = _InFlight()
            else:
                in_flight.waiters += 1

        if not leader:
            logger.debug(f"Waiting on in-flight request for {target.endpoint} {target.path}")
            in_flight.done.wait()
            if in_flight.result is None:
                return self.fetch(target, force_refetch=force_refetch)
            return in_flight.result.cached()

        try:
            # The cache may have been filled between the check and becoming leader
            result = None if force_refetch else self._cached(key)
            if result is None:
                result = self._execute(target)
                if result.is_success:
                    with self._lock:
                        self._cache[key] = result
            in_flight.result = result
            return result
        finally:
            with self._lock:
                del self._in_flight[key]
            in_flight.done.set()

    def peek(self, endpoint: str, **arguments: Any) -> QueryResult:
        """
        Current state of a query without triggering a request.

        Returns the cached result, a PENDING placeholder while a request is in
        flight, or an UNINITIALIZED placeholder.
        """
        target = resolve(self.resolver, endpoint, **arguments)
        key = target.cache_key
        cached = self._cached(key)
        if cached is not None:
            return cached
        with self._lock:
            pending = key in self._in_flight
        if pending:
            return QueryResult.placeholder(target, QueryStatus.PENDING)
        return QueryResult.placeholder(target, QueryStatus.UNINITIALIZED)

    def invalidate(self, endpoint: Optional[str] = None) -> int:
        """
        Drop cached results.

        Args:
            endpoint: Only drop results of this endpoint (default: all)

        Returns:
            Number of entries removed
        """
        with self._lock:
            if endpoint is None:
                removed = len(self._cache)
                self._cache.clear()
            else:
                keys = [k for k, r in self._cache.items() if r.target.endpoint == endpoint]
                for key in keys:
                    del self._cache[key]
                removed = len(keys)
        logger.info(f"Cache invalidated ({endpoint or 'all endpoints'}): {removed} entries")
        return removed

    def cache_info(self) -> Dict[str, Any]:
        """Cache entry counts, total and per endpoint."""
        with self._lock:
            by_endpoint: Dict[str, int] = {}
            for result in self._cache.values():
                name = result.target.endpoint
                by_endpoint[name] = by_endpoint.get(name, 0) + 1
            return {"entries": len(self._cache), "by_endpoint": by_endpoint}

    def close(self) -> None:
        self.session.close()

    def _cached(self, key: str) -> Optional[QueryResult]:
        with self._lock:
            result = self._cache.get(key)
        if result is None:
            return None
        logger.debug(f"Cache hit: {result.target.endpoint} {result.target.path}")
        return result.cached()

    def _execute(self, target: RequestTarget) -> QueryResult:
        """Perform the upstream GET. Failures are returned, not raised."""
        url = target.url(self.settings.base_url)
        safe_url = self._mask(url)
        logger.info(f"Fetching {target.endpoint}: {safe_url}")

        try:
            response = self.session.get(url, timeout=self.settings.timeout)
        except requests.exceptions.RequestException as e:
            error = UpstreamError(
                f"Request to {target.path} failed: {self._mask(str(e))}", url=safe_url
            )
            logger.warning(str(error))
            return QueryResult.failure(target, error)

        if not response.ok:
            error = UpstreamError(
                f"TMDB returned {response.status_code} for {target.path}: "
                f"{self._mask(_upstream_message(response))}",
                status_code=response.status_code,
                url=safe_url,
            )
            logger.warning(str(error))
            return QueryResult.failure(target, error)

        try:
            data = response.json()
        except ValueError:
            error = UpstreamError(
                f"TMDB returned a non-JSON body for {target.path}",
                status_code=response.status_code,
                url=safe_url,
            )
            logger.warning(str(error))
            return QueryResult.failure(target, error)

        return QueryResult.success(target, data)


def _make_accessor(definition: EndpointDefinition):
    def accessor(self: QueryClient, force_refetch: bool = False, **arguments: Any) -> QueryResult:
        return self.query(definition.name, force_refetch=force_refetch, **arguments)

    accessor.__name__ = definition.name
    accessor.__qualname__ = f"QueryClient.{definition.name}"
    accessor.__doc__ = f"{definition.description}. Arguments: {', '.join(definition.arguments) or 'none'}."
    return accessor


for _definition in ENDPOINTS.values():
    setattr(QueryClient, _definition.name, _make_accessor(_definition))
