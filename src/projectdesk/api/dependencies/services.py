"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.projectdesk.api.dependencies.db import DBSession
from src.projectdesk.api.dependencies.repositories import AttachmentRepo, ProjectRepo
from src.projectdesk.api.dependencies.storage import FileStore
from src.projectdesk.services import AttachmentService, ProjectService


def get_project_service(
    project_repo: ProjectRepo,
    attachment_repo: AttachmentRepo,
    file_store: FileStore,
    session: DBSession,
) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, attachment_repo, file_store, session)


def get_attachment_service(
    project_repo: ProjectRepo,
    attachment_repo: AttachmentRepo,
    file_store: FileStore,
    session: DBSession,
) -> AttachmentService:
    """Get attachment service."""
    return AttachmentService(project_repo, attachment_repo, file_store, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
AttachmentServiceDep = Annotated[AttachmentService, Depends(get_attachment_service)]
