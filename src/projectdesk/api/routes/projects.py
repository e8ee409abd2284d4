"""Project endpoints - plain CRUD over the project document."""

from uuid import UUID

from fastapi import APIRouter, status

from src.projectdesk.api.dependencies import ProjectServiceDep
from src.projectdesk.schemas import ProjectCreate, ProjectRead, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List all projects, newest first.",
    responses={
        200: {"description": "List of projects"},
    },
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    """List all projects."""
    projects = await service.list_projects()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    """Get a project by ID."""
    project = await service.get_project(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
    },
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectRead:
    """Create a new project."""
    project = await service.create_project(request)
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Update the fields present in the body. Tasks, when sent, replace the list.",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID,
    request: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Update an existing project."""
    project = await service.update_project(project_id, request)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project together with its attachments and their files.",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: UUID, service: ProjectServiceDep) -> None:
    """Delete a project."""
    await service.delete_project(project_id)
