"""Database session dependency.

The engine is created in the application lifespan and kept on app.state;
each request gets its own session from it.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.projectdesk.core.db import get_session


def get_engine(request: Request) -> AsyncEngine:
    return request.app.state.engine


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Get a database session bound to the application's engine."""
    async with get_session(get_engine(request)) as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
