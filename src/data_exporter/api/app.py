"""
data_exporter.api.app

FastAPI app factory for the Data Exporter service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from data_exporter import __version__
from data_exporter.api.routers.health import router as health_router
from data_exporter.api.routers.policies import router as policies_router
from data_exporter.db.init_db import init_db, seed_sample_data
from data_exporter.db.session import create_engine, create_sessionmaker
from data_exporter.observability.logging import configure_logging, get_logger
from data_exporter.observability.middleware import RequestContextMiddleware
from data_exporter.services.clock import Clock, utc_today
from data_exporter.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, clock: Clock = utc_today) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # Engine and sessionmaker live on app.state; routers reach them via `api.deps`.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schemas are managed by Alembic migrations.
            await init_db(engine)
        if settings.seed_sample_data:
            async with app.state.sessionmaker() as session:
                added = await seed_sample_data(session)
            log.info("sample_data_seeded", policies_added=added)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Data Exporter",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.clock = clock

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(policies_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Tests enter `app.router.lifespan_context(app)` explicitly because httpx's
# ASGITransport does not drive lifespan events.
