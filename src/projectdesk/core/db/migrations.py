"""Reusable migration runner for both production and tests."""

import asyncio
from pathlib import Path

from alembic.config import Config

from alembic import command

ALEMBIC_DIR = Path(__file__).resolve().parents[3] / "alembic"


def _alembic_config(database_url: str | None = None) -> Config:
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    if database_url is not None:
        # ConfigParser interpolation treats % specially
        alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return alembic_cfg


def run_migrations_sync(database_url: str | None = None) -> None:
    """Run Alembic migrations up to head.

    Args:
        database_url: Overrides DATABASE_URL from settings (async URLs are accepted).
    """
    command.upgrade(_alembic_config(database_url), "head")


async def run_migrations_async(database_url: str | None = None) -> None:
    """Run Alembic migrations from async context.

    Alembic uses a sync engine, so it runs in a worker thread.
    """
    await asyncio.to_thread(run_migrations_sync, database_url)
