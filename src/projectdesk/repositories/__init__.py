"""Repository layer - data access abstraction."""

from src.projectdesk.repositories.attachment import AttachmentRepository
from src.projectdesk.repositories.base import BaseRepository
from src.projectdesk.repositories.project import ProjectRepository

__all__ = [
    "AttachmentRepository",
    "BaseRepository",
    "ProjectRepository",
]
