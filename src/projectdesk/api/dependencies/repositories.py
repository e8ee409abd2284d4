"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.projectdesk.api.dependencies.db import DBSession
from src.projectdesk.repositories import AttachmentRepository, ProjectRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_attachment_repository(session: DBSession) -> AttachmentRepository:
    return AttachmentRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
AttachmentRepo = Annotated[AttachmentRepository, Depends(get_attachment_repository)]
