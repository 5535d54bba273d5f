#!/usr/bin/env python
"""
CLI script for running one TMDB endpoint and printing the JSON payload.

Usage:
    # Popular movies, page 2
    python scripts/fetch_endpoint.py movies --page 2

    # Search (wins over --category / --genre-id)
    python scripts/fetch_endpoint.py movies --search "blade runner"

    # Movie details, only show the resolved request
    python scripts/fetch_endpoint.py movie 550 --resolve-only

    # Account favorites
    python scripts/fetch_endpoint.py list 123 favorite/movies --session-id abc

Requires TMDB_API_KEY in the environment.
"""

import sys
import json
import argparse
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tmdb_gateway.api.config import load_settings
from tmdb_gateway.core.endpoints.registry import resolve
from tmdb_gateway.core.endpoints.selectors import choose_selector
from tmdb_gateway.core.exceptions import TmdbGatewayError
from tmdb_gateway.core.fetch.client import QueryClient
from tmdb_gateway.utils.logging_config import configure_cli_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a TMDB endpoint and print its payload")
    parser.add_argument("--resolve-only", action="store_true",
                        help="Print the resolved request instead of fetching it")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("genres", help="Movie genre list")

    movies = sub.add_parser("movies", help="Movies by search, category or genre")
    movies.add_argument("--search", default=None)
    movies.add_argument("--category", default=None, help="e.g. top_rated, upcoming")
    movies.add_argument("--genre-id", type=int, default=None)
    movies.add_argument("--page", type=int, default=1)

    movie = sub.add_parser("movie", help="Movie details")
    movie.add_argument("movie_id")

    related = sub.add_parser("related", help="Recommended or similar movies")
    related.add_argument("movie_id")
    related.add_argument("list_kind", nargs="?", default="recommendations")

    actor = sub.add_parser("actor", help="Person details")
    actor.add_argument("actor_id")

    actor_movies = sub.add_parser("actor-movies", help="Movies featuring a person")
    actor_movies.add_argument("actor_id")
    actor_movies.add_argument("--page", type=int, default=1)

    account_list = sub.add_parser("list", help="Account list (favorites, watchlist, ...)")
    account_list.add_argument("account_id")
    account_list.add_argument("list_name", help="e.g. favorite/movies")
    account_list.add_argument("--session-id", default=None)
    account_list.add_argument("--page", type=int, default=1)

    return parser


def endpoint_call(args: argparse.Namespace) -> tuple[str, dict]:
    """Map parsed arguments to (endpoint name, endpoint arguments)."""
    if args.command == "genres":
        return "get_genres", {}
    if args.command == "movies":
        selector = choose_selector(
            search_query=args.search, category=args.category, genre_id=args.genre_id
        )
        return "get_movies", {"selector": selector, "page": args.page}
    if args.command == "movie":
        return "get_movie", {"movie_id": args.movie_id}
    if args.command == "related":
        return "get_recommendations", {"movie_id": args.movie_id, "list_kind": args.list_kind}
    if args.command == "actor":
        return "get_actor_details", {"actor_id": args.actor_id}
    if args.command == "actor-movies":
        return "get_movies_by_actor_id", {"actor_id": args.actor_id, "page": args.page}
    return "get_list", {
        "account_id": args.account_id,
        "list_name": args.list_name,
        "session_id": args.session_id,
        "page": args.page,
    }


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_cli_logging(debug=args.debug)

    try:
        settings = load_settings()
    except TmdbGatewayError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    endpoint, arguments = endpoint_call(args)
    logger.debug(f"Running {endpoint} with {sorted(arguments)}")
    client = QueryClient(settings)
    try:
        if args.resolve_only:
            target = resolve(client.resolver, endpoint, **arguments)
            payload = target.as_dict()
            payload["params"]["api_key"] = "***"
            print(json.dumps(payload, indent=2))
            return 0

        data = client.query(endpoint, **arguments).unwrap()
    except TmdbGatewayError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    finally:
        client.close()

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
