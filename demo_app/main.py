from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from demo_app.api.health import router as health_router
from demo_app.api.metrics import router as metrics_router
from demo_app.api.welcome import router as welcome_router
from demo_app.config import Settings, get_settings
from demo_app.observability import RequestContextMiddleware, configure_logging
from demo_app.services.clock import ProcessClock


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    structlog.get_logger("demo_app").info(
        "server_started",
        started_at=app.state.clock.started_at.isoformat(),
        metrics_endpoint=settings.enable_metrics_endpoint,
    )
    yield


def create_app(settings: Settings | None = None, clock: ProcessClock | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level_value)

    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=_lifespan)
    app.state.settings = settings
    app.state.clock = clock or ProcessClock.start()

    app.add_middleware(RequestContextMiddleware, unmetered_paths=settings.unmetered_paths)
    app.include_router(welcome_router)
    app.include_router(health_router)
    app.include_router(metrics_router)
    return app


app = create_app()
