"""Test helper functions for common data creation patterns."""

from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from src.projectdesk.core.storage import LocalFileStore
from src.projectdesk.models import Attachment, Project
from tests.factories import AttachmentFactory, ProjectFactory

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 56
PDF_BYTES = b"%PDF-1.4\n" + b"0" * 100


async def create_project(session: AsyncSession, **project_kwargs) -> Project:
    """Create and commit a project.

    Args:
        session: Database session
        **project_kwargs: Additional args passed to ProjectFactory
    """
    project = ProjectFactory.build(**project_kwargs)
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return project


async def create_attachment(
    session: AsyncSession,
    project: Project,
    file_store: LocalFileStore,
    content: bytes = PDF_BYTES,
    **attachment_kwargs,
) -> Attachment:
    """Write a file to the store and attach it to a project.

    Args:
        session: Database session
        project: Owning project
        file_store: Store the file content is written to
        content: File content; its length becomes the attachment size
        **attachment_kwargs: Additional args passed to AttachmentFactory
    """
    attachment = AttachmentFactory.build(
        project_id=project.id, size=len(content), **attachment_kwargs
    )
    path = await file_store.write(attachment.filename, content)
    attachment.path = str(path)
    session.add(attachment)
    await session.commit()
    await session.refresh(attachment)
    return attachment


def upload_dir_listing(upload_dir: Path) -> set[str]:
    """Names of the files currently in the upload directory."""
    if not upload_dir.exists():
        return set()
    return {p.name for p in upload_dir.iterdir()}
