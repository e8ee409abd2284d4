"""Attachment schemas for API responses."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.projectdesk.core.file_types import format_size
from src.projectdesk.models import Attachment
from src.projectdesk.models.enums import AttachmentCategory
from src.projectdesk.schemas.base import CamelModel

FILES_URL_PREFIX = "/api/files"


def file_url(filename: str) -> str:
    return f"{FILES_URL_PREFIX}/{filename}"


class AttachmentRead(CamelModel):
    """Attachment as exposed to clients; the storage path is never included."""

    id: UUID
    filename: str
    original_name: str
    mimetype: str
    size: int
    formatted_size: str
    category: AttachmentCategory
    uploaded_at: datetime
    url: str

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "AttachmentRead":
        return cls(
            id=attachment.id,
            filename=attachment.filename,
            original_name=attachment.original_name,
            mimetype=attachment.mimetype,
            size=attachment.size,
            formatted_size=format_size(attachment.size),
            category=AttachmentCategory(attachment.category),
            uploaded_at=attachment.uploaded_at,
            url=file_url(attachment.filename),
        )


class UploadResponse(CamelModel):
    message: str
    files: list[AttachmentRead]
    project_id: UUID


class AttachmentListResponse(CamelModel):
    project_id: UUID
    project_title: str
    files_count: int
    files: list[AttachmentRead]


class DeletedFile(CamelModel):
    filename: str
    original_name: str


class DeleteAttachmentResponse(CamelModel):
    message: str
    deleted_file: DeletedFile


class CategoryStats(CamelModel):
    count: int = 0
    total_size: int = 0
    formatted_size: str = "0 Bytes"


class RecentFile(CamelModel):
    filename: str
    original_name: str
    category: AttachmentCategory
    uploaded_at: datetime
    formatted_size: str


class FileStats(CamelModel):
    total_files: int
    total_size: int
    formatted_total_size: str
    categories: dict[AttachmentCategory, CategoryStats] = Field(default_factory=dict)
    recent_files: list[RecentFile] = Field(default_factory=list)


class FileStatsResponse(CamelModel):
    project_id: UUID
    project_title: str
    stats: FileStats
