import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine

from pubgate.application.api.v1.errors import map_error
from pubgate.application.api.v1.routes import events, health, publish_requests, workspaces
from pubgate.application.di import create_container
from pubgate.config import Config, configure_logging
from pubgate.domain.shared.error import PubGateError, StorageUnavailableError
from pubgate.infrastructure.persistence.migrate import is_in_memory, run_migrations
from pubgate.infrastructure.persistence.tables import metadata
from pubgate.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


def _error_response(exc: PubGateError) -> JSONResponse:
    http_exc = map_error(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content=http_exc.detail,
        headers=http_exc.headers,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config: Config = app.state.config

    if is_in_memory(config.database.url):
        # Migrations cannot reach an in-memory database; build it from metadata
        engine = await container.get(AsyncEngine)
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    yield

    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    if config.database.auto_migrate:
        run_migrations(config.database.url)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )
    app_instance.state.config = config

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_fastapi(app_instance)

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(events.router, prefix="/api/v1")
    app_instance.include_router(publish_requests.router, prefix="/api/v1")
    app_instance.include_router(workspaces.router, prefix="/api/v1")

    # Domain and infrastructure errors -> HTTP responses
    @app_instance.exception_handler(PubGateError)
    async def pubgate_error_handler(request: Request, exc: PubGateError):
        return _error_response(exc)

    @app_instance.exception_handler(OperationalError)
    async def storage_error_handler(request: Request, exc: OperationalError):
        logger.error("Database unavailable on %s %s: %s", request.method, request.url.path, exc)
        return _error_response(StorageUnavailableError("Database unavailable"))

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
