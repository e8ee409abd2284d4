"""Repository for the Project aggregate."""

from sqlmodel import select

from src.projectdesk.models import Project
from src.projectdesk.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_all(self) -> list[Project]:
        """List all projects, newest first."""
        result = await self.session.execute(select(Project).order_by(Project.created_at.desc()))
        return list(result.scalars().all())
