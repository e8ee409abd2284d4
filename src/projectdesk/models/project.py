"""Project model - the aggregate that owns tasks and attachments."""

from datetime import date, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.projectdesk.models.base import utc_now
from src.projectdesk.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Project document.

    Tasks live inline as a JSON list of ``{"id", "name", "completed"}`` and
    are replaced wholesale on update. Attachments are rows in their own table
    (see Attachment) so each upload appends without rewriting the document.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(default="", max_length=5000)
    start_date: date | None = Field(default=None)
    end_date: date | None = Field(default=None)
    status: str = Field(default=ProjectStatus.NOT_STARTED.value, max_length=20)
    tasks: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    def touch(self) -> None:
        """Refresh updated_at; called on every mutation, attachments included."""
        self.updated_at = utc_now()
