"""FastAPI dependency injection definitions."""

from src.projectdesk.api.dependencies.db import DBSession, get_db_session, get_engine
from src.projectdesk.api.dependencies.repositories import (
    AttachmentRepo,
    ProjectRepo,
    get_attachment_repository,
    get_project_repository,
)
from src.projectdesk.api.dependencies.services import (
    AttachmentServiceDep,
    ProjectServiceDep,
    get_attachment_service,
    get_project_service,
)
from src.projectdesk.api.dependencies.storage import (
    FileStore,
    UploadGateDep,
    get_file_store,
    get_upload_gate,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    "get_engine",
    # Storage
    "FileStore",
    "UploadGateDep",
    "get_file_store",
    "get_upload_gate",
    # Repositories
    "AttachmentRepo",
    "ProjectRepo",
    "get_attachment_repository",
    "get_project_repository",
    # Services
    "AttachmentServiceDep",
    "ProjectServiceDep",
    "get_attachment_service",
    "get_project_service",
]
