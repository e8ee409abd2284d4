"""Repository for attachments, always addressed through their project."""

from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select

from src.projectdesk.models import Attachment
from src.projectdesk.repositories.base import BaseRepository


class AttachmentRepository(BaseRepository[Attachment]):
    model = Attachment

    async def list_for_project(self, project_id: UUID) -> list[Attachment]:
        """List a project's attachments in insertion order.

        Concurrent uploads can produce equal positions; upload time and id
        break those ties.
        """
        result = await self.session.execute(
            select(Attachment)
            .where(Attachment.project_id == project_id)
            .order_by(Attachment.position, Attachment.uploaded_at, Attachment.id)
        )
        return list(result.scalars().all())

    async def next_position(self, project_id: UUID) -> int:
        """Position after the project's current last attachment."""
        result = await self.session.execute(
            select(func.max(Attachment.position)).where(Attachment.project_id == project_id)
        )
        last = result.scalar_one_or_none()
        return 0 if last is None else last + 1

    async def get_in_project(self, project_id: UUID, attachment_id: UUID) -> Attachment | None:
        result = await self.session.execute(
            select(Attachment).where(
                Attachment.project_id == project_id,
                Attachment.id == attachment_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_by_filename(self, filename: str) -> Attachment | None:
        result = await self.session.execute(
            select(Attachment).where(Attachment.filename == filename)
        )
        return result.scalar_one_or_none()

    async def delete_for_project(self, project_id: UUID) -> None:
        """Delete all attachment rows of a project (no commit)."""
        await self.session.execute(delete(Attachment).where(Attachment.project_id == project_id))
