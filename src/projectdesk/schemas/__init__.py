from src.projectdesk.schemas.attachment import (
    AttachmentListResponse,
    AttachmentRead,
    CategoryStats,
    DeleteAttachmentResponse,
    DeletedFile,
    FileStats,
    FileStatsResponse,
    RecentFile,
    UploadResponse,
    file_url,
)
from src.projectdesk.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    TaskRead,
    TaskWrite,
)

__all__ = [
    # Attachments
    "AttachmentListResponse",
    "AttachmentRead",
    "CategoryStats",
    "DeleteAttachmentResponse",
    "DeletedFile",
    "FileStats",
    "FileStatsResponse",
    "RecentFile",
    "UploadResponse",
    "file_url",
    # Projects
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "TaskRead",
    "TaskWrite",
]
