"""Attachment store: project-bound file records kept in step with the disk."""

from collections.abc import Sequence
from pathlib import Path
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.projectdesk.core.db import commit_or_raise
from src.projectdesk.core.exceptions import NoFilesError, NotFoundError
from src.projectdesk.core.file_types import classify, format_size
from src.projectdesk.core.logging import get_logger
from src.projectdesk.core.storage import LocalFileStore
from src.projectdesk.models import Attachment, AttachmentCategory, Project
from src.projectdesk.models.base import utc_now
from src.projectdesk.repositories import AttachmentRepository, ProjectRepository
from src.projectdesk.schemas import CategoryStats, FileStats, RecentFile
from src.projectdesk.services.upload_gate import StagedFile

logger = get_logger(__name__)

RECENT_FILES_LIMIT = 5


def summarize_attachments(
    attachments: Sequence[Attachment], recent_limit: int = RECENT_FILES_LIMIT
) -> FileStats:
    """Aggregate counts and sizes per category plus the most recent uploads."""
    categories: dict[AttachmentCategory, CategoryStats] = {}
    total_size = 0
    for attachment in attachments:
        stats = categories.setdefault(AttachmentCategory(attachment.category), CategoryStats())
        stats.count += 1
        stats.total_size += attachment.size
        total_size += attachment.size

    for stats in categories.values():
        stats.formatted_size = format_size(stats.total_size)

    # sorted() is stable, so equal timestamps keep their stored order
    recent = sorted(attachments, key=lambda a: a.uploaded_at, reverse=True)[:recent_limit]

    return FileStats(
        total_files=len(attachments),
        total_size=total_size,
        formatted_total_size=format_size(total_size),
        categories=categories,
        recent_files=[
            RecentFile(
                filename=a.filename,
                original_name=a.original_name,
                category=AttachmentCategory(a.category),
                uploaded_at=a.uploaded_at,
                formatted_size=format_size(a.size),
            )
            for a in recent
        ],
    )


class AttachmentService:
    """Appends, lists, removes and summarizes a project's attachments."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        attachment_repo: AttachmentRepository,
        file_store: LocalFileStore,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.attachment_repo = attachment_repo
        self.file_store = file_store
        self.session = session

    async def _get_project(self, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def _discard(self, files: Sequence[StagedFile]) -> None:
        results = await self.file_store.delete_many_best_effort([f.path for f in files])
        removed = sum(1 for r in results if r.deleted)
        if files:
            logger.info("Discarded uploaded files", requested=len(files), removed=removed)

    async def append_attachments(
        self, project_id: UUID, files: Sequence[StagedFile]
    ) -> list[Attachment]:
        """Attach already-written files to a project.

        Raises:
            NotFoundError: Project does not exist (the files are deleted first).
            NoFilesError: No files were given.
            PersistenceError: Saving failed (the files are deleted first).
        """
        try:
            project = await self._get_project(project_id)
        except Exception:
            await self._discard(files)
            raise

        if not files:
            raise NoFilesError()

        try:
            position = await self.attachment_repo.next_position(project.id)
            uploaded_at = utc_now()
            attachments = [
                Attachment(
                    project_id=project.id,
                    position=position + offset,
                    filename=f.filename,
                    original_name=f.original_name,
                    mimetype=f.mimetype,
                    size=f.size,
                    category=classify(f.mimetype).value,
                    path=str(f.path),
                    uploaded_at=uploaded_at,
                )
                for offset, f in enumerate(files)
            ]
            for attachment in attachments:
                self.attachment_repo.add(attachment)
            project.touch()
            await commit_or_raise(self.session, "Error uploading files")
        except Exception:
            await self.session.rollback()
            await self._discard(files)
            raise

        logger.info(
            "Attachments added",
            project_id=str(project.id),
            count=len(attachments),
        )
        return attachments

    async def list_attachments(self, project_id: UUID) -> tuple[Project, list[Attachment]]:
        """Return the project and its attachments in insertion order."""
        project = await self._get_project(project_id)
        return project, await self.attachment_repo.list_for_project(project.id)

    async def remove_attachment(self, project_id: UUID, attachment_id: UUID) -> Attachment:
        """Delete one attachment record and, best-effort, its file.

        Raises:
            NotFoundError: Project missing, or attachment not in that project.
        """
        project = await self._get_project(project_id)
        attachment = await self.attachment_repo.get_in_project(project.id, attachment_id)
        if attachment is None:
            raise NotFoundError("Attachment not found in project")

        await self.file_store.delete_best_effort(attachment.path)

        await self.attachment_repo.delete(attachment)
        project.touch()
        await commit_or_raise(self.session, "Error deleting file")

        logger.info(
            "Attachment removed",
            project_id=str(project.id),
            attachment_id=str(attachment.id),
        )
        return attachment

    async def compute_stats(self, project_id: UUID) -> tuple[Project, FileStats]:
        project = await self._get_project(project_id)
        attachments = await self.attachment_repo.list_for_project(project.id)
        return project, summarize_attachments(attachments)

    async def resolve_download(self, filename: str) -> tuple[Path, Attachment]:
        """Find a stored file and its record; both must exist.

        Raises:
            NotFoundError: File missing on disk, or no record references it.
        """
        path = await self.file_store.resolve(filename)
        if path is None:
            raise NotFoundError("File not found")

        attachment = await self.attachment_repo.get_by_filename(filename)
        if attachment is None:
            raise NotFoundError("File not found in database")

        return path, attachment
