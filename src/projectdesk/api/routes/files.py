"""Project attachment endpoints and inline file serving."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, File, Request, UploadFile, status
from fastapi.responses import FileResponse
from starlette.datastructures import UploadFile as FormFile

from src.projectdesk.api.dependencies import AttachmentServiceDep, UploadGateDep
from src.projectdesk.schemas import (
    AttachmentListResponse,
    AttachmentRead,
    DeleteAttachmentResponse,
    DeletedFile,
    FileStatsResponse,
    UploadResponse,
)

router = APIRouter(tags=["files"])


@router.post(
    "/projects/{project_id}/files",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload files",
    description="Upload up to 5 files (10MB each) in the multipart field 'files'.",
    responses={
        201: {"description": "Files attached to the project"},
        400: {
            "description": "No files, unexpected file field, file type not allowed, "
            "file too large or too many"
        },
        404: {"description": "Project not found"},
    },
)
async def upload_files(
    project_id: UUID,
    request: Request,
    service: AttachmentServiceDep,
    gate: UploadGateDep,
    files: Annotated[list[UploadFile] | None, File(description="Files to attach")] = None,
) -> UploadResponse:
    """Validate, store and attach a batch of files."""
    # The form is already parsed and cached for the File parameter
    form = await request.form()
    gate.check_file_fields(
        key for key, value in form.multi_items() if isinstance(value, FormFile)
    )
    staged = await gate.admit(files or [])
    attachments = await service.append_attachments(project_id, staged)
    return UploadResponse(
        message=f"{len(attachments)} file(s) uploaded successfully",
        files=[AttachmentRead.from_attachment(a) for a in attachments],
        project_id=project_id,
    )


@router.get(
    "/projects/{project_id}/files",
    response_model=AttachmentListResponse,
    summary="List project files",
    responses={
        200: {"description": "Attachments in upload order"},
        404: {"description": "Project not found"},
    },
)
async def list_project_files(
    project_id: UUID, service: AttachmentServiceDep
) -> AttachmentListResponse:
    """List a project's attachments."""
    project, attachments = await service.list_attachments(project_id)
    return AttachmentListResponse(
        project_id=project.id,
        project_title=project.title,
        files_count=len(attachments),
        files=[AttachmentRead.from_attachment(a) for a in attachments],
    )


@router.get(
    "/projects/{project_id}/files/stats",
    response_model=FileStatsResponse,
    summary="Project file statistics",
    responses={
        200: {"description": "Totals, per-category sums and recent uploads"},
        404: {"description": "Project not found"},
    },
)
async def get_file_stats(project_id: UUID, service: AttachmentServiceDep) -> FileStatsResponse:
    """Aggregate statistics over a project's attachments."""
    project, stats = await service.compute_stats(project_id)
    return FileStatsResponse(project_id=project.id, project_title=project.title, stats=stats)


@router.delete(
    "/projects/{project_id}/files/{file_id}",
    response_model=DeleteAttachmentResponse,
    summary="Delete a project file",
    responses={
        200: {"description": "Attachment and file removed"},
        404: {"description": "Project or attachment not found"},
    },
)
async def delete_project_file(
    project_id: UUID,
    file_id: UUID,
    service: AttachmentServiceDep,
) -> DeleteAttachmentResponse:
    """Remove one attachment from a project."""
    attachment = await service.remove_attachment(project_id, file_id)
    return DeleteAttachmentResponse(
        message="File deleted successfully",
        deleted_file=DeletedFile(
            filename=attachment.filename,
            original_name=attachment.original_name,
        ),
    )


@router.get(
    "/files/{filename}",
    response_class=FileResponse,
    summary="Serve a file",
    description="Stream a stored file inline with its original name and MIME type.",
    responses={
        200: {"description": "File content"},
        404: {"description": "File not found on disk or not referenced by any project"},
    },
)
async def serve_file(filename: str, service: AttachmentServiceDep) -> FileResponse:
    """Stream a stored file."""
    path, attachment = await service.resolve_download(filename)
    # Starlette switches to RFC 5987 filename* whenever the name needs quoting
    return FileResponse(
        path,
        media_type=attachment.mimetype,
        filename=attachment.original_name or attachment.filename,
        content_disposition_type="inline",
    )
