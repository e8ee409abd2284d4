"""MIME type classification and human-readable sizes."""

from src.projectdesk.models.enums import AttachmentCategory

ALLOWED_MIME_TYPES = frozenset(
    {
        # Images
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        # Documents
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "text/plain",
        "text/csv",
    }
)

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def is_allowed_mimetype(mimetype: str) -> bool:
    return mimetype in ALLOWED_MIME_TYPES


def classify(mimetype: str) -> AttachmentCategory:
    """Map a MIME type to its attachment category.

    Rules are checked in order; OOXML types contain several of the keywords,
    so spreadsheet and presentation must win over document.
    """
    if mimetype.startswith("image/"):
        return AttachmentCategory.IMAGE
    if mimetype == "application/pdf":
        return AttachmentCategory.PDF
    if "excel" in mimetype or "spreadsheet" in mimetype or mimetype == "text/csv":
        return AttachmentCategory.SPREADSHEET
    if "powerpoint" in mimetype or "presentation" in mimetype:
        return AttachmentCategory.PRESENTATION
    if "word" in mimetype or "document" in mimetype or mimetype == "text/plain":
        return AttachmentCategory.DOCUMENT
    return AttachmentCategory.OTHER


def format_size(num_bytes: int) -> str:
    """Format a byte count as e.g. ``"1.5 KB"``.

    Magnitudes above GB stay in GB (``2 TiB -> "2048 GB"``).

    Raises:
        ValueError: If num_bytes is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"Size cannot be negative: {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"

    # floor(log1024(n)) without float error
    index = min((num_bytes.bit_length() - 1) // 10, len(SIZE_UNITS) - 1)
    value = f"{num_bytes / 1024**index:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[index]}"
