"""Project schemas for API request/response."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field, field_validator

from src.projectdesk.models.enums import ProjectStatus
from src.projectdesk.schemas.base import CamelModel


class TaskWrite(CamelModel):
    """Task as sent by clients; id is generated when missing."""

    id: str | None = None
    name: str = Field(min_length=1, max_length=500)
    completed: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Task name cannot be empty or whitespace only")
        return v


class TaskRead(CamelModel):
    id: str
    name: str
    completed: bool


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    start_date: date | None = None
    end_date: date | None = None
    status: ProjectStatus = ProjectStatus.NOT_STARTED
    tasks: list[TaskWrite] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project title cannot be empty or whitespace only")
        return v


class ProjectUpdate(CamelModel):
    """Schema for updating a project. Only fields sent are changed."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    start_date: date | None = None
    end_date: date | None = None
    status: ProjectStatus | None = None
    tasks: list[TaskWrite] | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project title cannot be empty or whitespace only")
        return v


class ProjectRead(CamelModel):
    """Schema for reading a project."""

    id: UUID
    title: str
    description: str
    start_date: date | None
    end_date: date | None
    status: ProjectStatus
    tasks: list[TaskRead]
    created_at: datetime
    updated_at: datetime
