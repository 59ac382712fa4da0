"""
podcast_api.api.app

FastAPI app factory for the podcast backend.

Responsibilities:
- Build the FastAPI application and register the GraphQL router, health router, and middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from podcast_api import __version__
from podcast_api.api.routers.health import router as health_router
from podcast_api.db.init_db import init_db
from podcast_api.db.session import create_engine, create_sessionmaker
from podcast_api.graphql.schema import create_graphql_router
from podcast_api.observability.logging import configure_logging, get_logger
from podcast_api.observability.middleware import RequestContextMiddleware
from podcast_api.settings import Settings, get_settings

log = get_logger(__name__)


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod uses Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Podcast API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(create_graphql_router(settings), prefix=settings.graphql_path)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; authorization lives in `graphql.permissions`, business
# rules in `services`.
