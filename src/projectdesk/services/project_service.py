"""Project CRUD service."""

from typing import Any
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from src.projectdesk.core.db import commit_or_raise
from src.projectdesk.core.exceptions import NotFoundError
from src.projectdesk.core.logging import get_logger
from src.projectdesk.core.storage import LocalFileStore
from src.projectdesk.models import Project
from src.projectdesk.repositories import AttachmentRepository, ProjectRepository
from src.projectdesk.schemas import ProjectCreate, ProjectUpdate, TaskWrite

logger = get_logger(__name__)


def _task_documents(tasks: list[TaskWrite]) -> list[dict[str, Any]]:
    return [
        {
            "id": task.id or uuid4().hex,
            "name": task.name,
            "completed": task.completed,
        }
        for task in tasks
    ]


class ProjectService:
    """Project management service."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        attachment_repo: AttachmentRepository,
        file_store: LocalFileStore,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.attachment_repo = attachment_repo
        self.file_store = file_store
        self.session = session

    async def list_projects(self) -> list[Project]:
        return await self.project_repo.list_all()

    async def get_project(self, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        project = Project(
            title=data.title,
            description=data.description,
            start_date=data.start_date,
            end_date=data.end_date,
            status=data.status.value,
            tasks=_task_documents(data.tasks),
        )
        self.project_repo.add(project)
        await commit_or_raise(self.session, "Error creating project")
        await self.session.refresh(project)

        logger.info("Project created", project_id=str(project.id))
        return project

    async def update_project(self, project_id: UUID, data: ProjectUpdate) -> Project:
        """Apply the fields present in the request; tasks are replaced wholesale."""
        project = await self.get_project(project_id)
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("title") is None:
            update_data.pop("title", None)
        if "description" in update_data and update_data["description"] is None:
            update_data["description"] = ""
        if "status" in update_data:
            if update_data["status"] is None:
                update_data.pop("status")
            else:
                update_data["status"] = data.status.value
        if "tasks" in update_data:
            update_data["tasks"] = _task_documents(data.tasks or [])

        for field, value in update_data.items():
            setattr(project, field, value)

        project.touch()
        await commit_or_raise(self.session, "Error updating project")
        await self.session.refresh(project)
        return project

    async def delete_project(self, project_id: UUID) -> None:
        """Delete a project with its attachments, then their files (best-effort)."""
        project = await self.get_project(project_id)
        attachments = await self.attachment_repo.list_for_project(project.id)

        await self.attachment_repo.delete_for_project(project.id)
        await self.project_repo.delete(project)
        await commit_or_raise(self.session, "Error deleting project")

        results = await self.file_store.delete_many_best_effort([a.path for a in attachments])
        logger.info(
            "Project deleted",
            project_id=str(project_id),
            attachments=len(attachments),
            files_removed=sum(1 for r in results if r.deleted),
        )
