"""
Shared fixtures.

TMDB_API_KEY is set before any test imports tmdb_gateway.api.main, whose
module-level app refuses to start without it.
"""

import json
import os
from unittest.mock import Mock

import pytest
import requests

if not os.environ.get("TMDB_API_KEY"):
    os.environ["TMDB_API_KEY"] = "test-api-key"

from tmdb_gateway.api.config import Settings
from tmdb_gateway.core.endpoints.resolver import EndpointResolver
from tmdb_gateway.core.fetch.client import QueryClient

API_KEY = "secret-key"
BASE_URL = "https://api.themoviedb.org/3"


def make_response(status_code=200, payload=None, reason="OK"):
    """Build a real requests.Response with a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = json.dumps(payload).encode() if payload is not None else b""
    return response


@pytest.fixture
def settings():
    """Settings with a known credential."""
    return Settings(api_key=API_KEY, base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def resolver(settings):
    """Create endpoint resolver."""
    return EndpointResolver(settings)


@pytest.fixture
def response_factory():
    """Factory for upstream responses."""
    return make_response


@pytest.fixture
def session():
    """Mock requests session returning an empty page by default."""
    mock_session = Mock(spec=requests.Session)
    mock_session.get.return_value = make_response(payload={"page": 1, "results": []})
    return mock_session


@pytest.fixture
def query_client(settings, session):
    """Query client backed by the mock session."""
    return QueryClient(settings, session=session)
