"""Inventory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InventoryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Pool opened and pinged on startup (bounded by
      database_connect_timeout_seconds); a failed ping aborts startup
    - Pool disposed on shutdown, after uvicorn drains in-flight requests

Design Decisions:
    - create_app(settings) factory: settings and pool live on app.state and
      reach routes through dependencies, never through module globals
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory.api.error_handlers import register_error_handlers
from inventory.api.middleware import register_request_logging
from inventory.api.routes import device_types, devices, health, owners
from inventory.config import Settings, get_settings
from inventory.core.errors import ConnectivityError
from inventory.infrastructure.database import (
    DatabaseSessionManager, create_engine_from_settings,
)
from inventory.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(
        settings.log_level, settings.log_format,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    db = DatabaseSessionManager(create_engine_from_settings(settings))
    try:
        await db.verify_connectivity(settings.database_connect_timeout_seconds)
    except ConnectivityError as e:
        logger.critical(f"Could not connect to database: {e.message}")
        await db.dispose()
        raise
    if settings.database_create_schema:
        await db.create_schema()
    app.state.db = db
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")
    await db.dispose()
    logger.info("Database pool closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one Settings instance."""
    settings = settings or get_settings()
    app = FastAPI(title="Inventory API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(owners.router)
    app.include_router(device_types.router)
    app.include_router(device_types.properties_router)
    app.include_router(devices.router)
    app.include_router(devices.properties_router)
    app.include_router(devices.logs_router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with a bounded shutdown grace period."""
    settings: Settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    run()
