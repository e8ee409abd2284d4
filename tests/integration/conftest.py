"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite database file, migrated with Alembic, and its
own upload directory. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.projectdesk.core.config import Settings
from src.projectdesk.core.db import run_migrations_async
from src.projectdesk.core.storage import LocalFileStore
from src.projectdesk.main import create_app
from src.projectdesk.models import Project
from tests.helpers import create_project


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'projectdesk.db'}"


@pytest.fixture
def settings(database_url: str, upload_dir: Path) -> Settings:
    return Settings(
        database_url=database_url,
        app_env="testing",
        upload_dir=upload_dir,
        file_delete_timeout_seconds=1.0,
    )


@pytest.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Create test database engine after applying migrations."""
    await run_migrations_async(database_url)
    test_engine = create_async_engine(database_url, poolclass=NullPool)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does not auto-commit; tests call `await session.commit()`.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(settings: Settings, engine: AsyncEngine, file_store: LocalFileStore) -> FastAPI:
    """Application wired to the test engine and upload directory."""
    application = create_app(settings=settings, engine=engine)
    application.state.file_store = file_store
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for API tests."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def project(db_session: AsyncSession) -> Project:
    """A committed project without attachments."""
    return await create_project(db_session)
