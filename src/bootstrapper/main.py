"""
FastAPI Application
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.api.error_handlers import register_exception_handlers
from shared.api.middleware import CorrelationIdMiddleware
from shared.config import Settings, get_settings
from shared.infrastructure.observability.logger import configure_logging, get_logger
from bootstrapper.container import Container, build_container

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use (defaults to environment / .env)
        container: Pre-built container (tests); built from ``settings`` otherwise
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.json_logs)
    container = container or build_container(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        await container.start()
        try:
            yield
        finally:
            await container.stop()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.mediator = container.mediator

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    for router in container.routers:
        app.include_router(router)

    # {code, message, details?, correlation_id?}
    register_exception_handlers(app)

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.PROJECT_VERSION,
            "docs": "/docs",
        }

    logger.info("Application created", routers=len(container.routers))
    return app
