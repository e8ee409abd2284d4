"""Shared enums for models."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project progress status."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AttachmentCategory(str, Enum):
    """Coarse attachment classification derived from the MIME type."""

    IMAGE = "image"
    DOCUMENT = "document"
    PDF = "pdf"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    OTHER = "other"
