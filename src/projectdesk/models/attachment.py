"""Attachment model - file metadata owned by a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from src.projectdesk.models.base import utc_now


class Attachment(SQLModel, table=True):
    """Metadata for one physical file in the upload directory.

    Rows are immutable once written. ``filename`` is unique across the whole
    store, ``path`` is server-side only and never serialized to clients.
    ``category`` is classified at upload time and never recomputed.
    ``original_name`` comes from the client and has no length limit.
    """

    __tablename__ = "attachments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    position: int = Field(default=0)
    filename: str = Field(max_length=255, unique=True)
    original_name: str = Field(sa_column=Column(Text, nullable=False))
    mimetype: str = Field(max_length=255)
    size: int = Field(ge=0)
    category: str = Field(max_length=20)
    path: str = Field(max_length=1000)
    uploaded_at: datetime = Field(default_factory=utc_now)
