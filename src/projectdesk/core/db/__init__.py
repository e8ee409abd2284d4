"""Database utilities - engine, session, migrations."""

from src.projectdesk.core.db.engine import build_engine
from src.projectdesk.core.db.migrations import run_migrations_async, run_migrations_sync
from src.projectdesk.core.db.session import commit_or_raise, get_session

__all__ = [
    # Engine
    "build_engine",
    # Session
    "commit_or_raise",
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
