"""Model exports.

Import from here: `from src.projectdesk.models import Project, Attachment`
"""

from src.projectdesk.models.attachment import Attachment
from src.projectdesk.models.enums import AttachmentCategory, ProjectStatus
from src.projectdesk.models.project import Project

__all__ = [
    # Enums
    "AttachmentCategory",
    "ProjectStatus",
    # Tables
    "Attachment",
    "Project",
]
