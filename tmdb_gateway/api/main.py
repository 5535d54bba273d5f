"""
FastAPI application entry point for the TMDB gateway.

Settings are loaded when the app is built, so a missing TMDB_API_KEY stops
the process before any route is served.

Run: uvicorn tmdb_gateway.api.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tmdb_gateway import __version__
from tmdb_gateway.api.config import Settings, get_api_host, get_api_port, get_log_level, load_settings
from tmdb_gateway.api.routers import genres, movies, actors, account, system
from tmdb_gateway.core.fetch.client import QueryClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    query_client: Optional[QueryClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Upstream settings (default: load_settings(), which raises
            ConfigurationError when the credential is missing)
        query_client: Query client (default: built from settings)
    """
    settings = settings or load_settings()
    query_client = query_client or QueryClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.query_client.close()

    app = FastAPI(
        title="TMDB Gateway API",
        description="Cached REST gateway for The Movie Database",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.query_client = query_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(genres.router)
    app.include_router(movies.router)
    app.include_router(actors.router)
    app.include_router(account.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "TMDB Gateway API",
            "docs": "/docs",
            "health": "/api/health",
        }

    logger.info(f"App created (upstream: {settings.base_url})")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from tmdb_gateway.utils.logging_config import configure_api_logging

    configure_api_logging(level=get_log_level())
    uvicorn.run(app, host=get_api_host(), port=get_api_port())
