"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Settings need a database URL at import time; integration tests use their own
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./projectdesk-test.db")
os.environ.setdefault("DATABASE_SSL_MODE", "disable")

# ruff: noqa: E402 - Imports must be after env var setup
from pathlib import Path

import pytest

from src.projectdesk.core.config import get_settings
from src.projectdesk.core.storage import LocalFileStore

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Upload directory that does not exist yet."""
    return tmp_path / "uploads" / "projects"


@pytest.fixture
def file_store(upload_dir: Path) -> LocalFileStore:
    """File store over a temporary upload directory."""
    return LocalFileStore(upload_dir, delete_timeout=1.0)
