from src.projectdesk.services.attachment_service import AttachmentService, summarize_attachments
from src.projectdesk.services.project_service import ProjectService
from src.projectdesk.services.upload_gate import StagedFile, UploadGate, storage_name

__all__ = [
    "AttachmentService",
    "ProjectService",
    "StagedFile",
    "UploadGate",
    "storage_name",
    "summarize_attachments",
]
