"""File store and upload gate dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from src.projectdesk.core.storage import LocalFileStore
from src.projectdesk.services import UploadGate


def get_file_store(request: Request) -> LocalFileStore:
    """Get the file store created at startup."""
    return request.app.state.file_store


FileStore = Annotated[LocalFileStore, Depends(get_file_store)]


def get_upload_gate(request: Request, file_store: FileStore) -> UploadGate:
    """Get an upload gate configured with the application's limits."""
    settings = request.app.state.settings
    return UploadGate(
        file_store,
        max_file_size=settings.upload_max_file_size,
        max_files=settings.upload_max_files,
    )


UploadGateDep = Annotated[UploadGate, Depends(get_upload_gate)]
