import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from src.projectdesk.api.middlewares import setup_middlewares
from src.projectdesk.api.routes.router import api_router
from src.projectdesk.core.config import Settings, get_settings
from src.projectdesk.core.db import build_engine, run_migrations_async
from src.projectdesk.core.exceptions import setup_exception_handlers
from src.projectdesk.core.health import setup_health_endpoint
from src.projectdesk.core.logging import get_logger, setup_logging
from src.projectdesk.core.storage import LocalFileStore

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "projects", "description": "Project CRUD with inline tasks"},
    {"name": "files", "description": "Project attachments: upload, list, stats, delete, serve"},
    {"name": "health", "description": "Service health"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    owns_engine = app.state.engine is None
    if owns_engine:
        app.state.engine = build_engine(settings)

    try:
        async with app.state.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database connection failed")
        if owns_engine:
            await app.state.engine.dispose()
        raise

    # An injected engine belongs to a caller that manages its own schema
    if owns_engine and settings.run_migrations_on_startup:
        try:
            await run_migrations_async(settings.database_url)
        except Exception:
            logger.exception("Database migration failed")
            await app.state.engine.dispose()
            raise
        logger.info("Database migrations applied")

    await app.state.file_store.ensure_directory()
    logger.info("Upload directory ready", path=str(app.state.file_store.base_dir))

    yield

    logger.info("Closing connections...")
    if owns_engine:
        await app.state.engine.dispose()
        app.state.engine = None
    logger.info("Shutdown complete")


def create_app(settings: Settings | None = None, engine: AsyncEngine | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use instead of the environment.
        engine: An existing engine; the caller then owns its disposal.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Projects with tasks and file attachments",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/api-docs" if settings.enable_openapi else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.file_store = LocalFileStore(
        settings.upload_dir, delete_timeout=settings.file_delete_timeout_seconds
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)
    app.include_router(api_router)
    setup_health_endpoint(app)

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        return {"message": f"{settings.app_name} is running"}

    return app


def run() -> None:
    """Console entry point; missing or invalid configuration exits with status 1."""
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error("Invalid configuration", error=str(e))
        sys.exit(1)

    uvicorn.run(
        "src.projectdesk.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
