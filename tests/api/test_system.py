"""
API tests for system endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from tmdb_gateway import __version__
from tmdb_gateway.api.main import create_app


@pytest.fixture
def client(settings, query_client):
    return TestClient(create_app(settings, query_client=query_client))


class TestSystemEndpoints:
    """Tests for /api/health and /api/cache."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health(self, client):
        """Health lists every registered endpoint and never calls upstream."""
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["base_url"] == "https://api.themoviedb.org/3"
        assert len(data["endpoints"]) == 7
        assert {"name": "get_movie", "arguments": ["movie_id"],
                "description": "Movie details with videos and credits"} in data["endpoints"]
        assert "secret-key" not in r.text

    def test_cache_info(self, client):
        client.get("/api/genres")
        client.get("/api/movies?page=1")
        client.get("/api/movies?page=2")

        r = client.get("/api/cache")

        assert r.json() == {"entries": 3, "by_endpoint": {"get_genres": 1, "get_movies": 2}}

    def test_invalidate_endpoint(self, client, session):
        client.get("/api/genres")
        client.get("/api/movies")

        r = client.delete("/api/cache?endpoint=get_movies")

        assert r.status_code == 200
        assert r.json() == {"endpoint": "get_movies", "removed": 1}
        assert client.get("/api/movies").headers["X-Cache"] == "MISS"
        assert client.get("/api/genres").headers["X-Cache"] == "HIT"

    def test_invalidate_all(self, client):
        client.get("/api/genres")
        r = client.delete("/api/cache")
        assert r.json() == {"endpoint": None, "removed": 1}

    def test_invalidate_unknown_endpoint(self, client):
        r = client.delete("/api/cache?endpoint=get_tv")
        assert r.status_code == 404
