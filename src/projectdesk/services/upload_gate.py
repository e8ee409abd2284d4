"""Upload admission: type, size and count checks before anything is attached."""

import re
import secrets
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from src.projectdesk.core.exceptions import (
    FileTooLargeError,
    PersistenceError,
    TooManyFilesError,
    UnexpectedFileFieldError,
    UnsupportedFileTypeError,
)
from src.projectdesk.core.file_types import is_allowed_mimetype
from src.projectdesk.core.logging import get_logger
from src.projectdesk.core.storage import LocalFileStore

logger = get_logger(__name__)

UPLOAD_FIELD_NAME = "files"

_SAFE_EXTENSION = re.compile(r"\.[A-Za-z0-9]{1,16}")


@dataclass(frozen=True)
class StagedFile:
    """An admitted upload already written to the upload directory."""

    filename: str
    original_name: str
    mimetype: str
    size: int
    path: Path


def storage_name(original_name: str, field_name: str = UPLOAD_FIELD_NAME) -> str:
    """Build a storage name: ``<field>-<epoch ms>-<random>[<ext>]``.

    The extension of the original name is kept (when it is a plain
    alphanumeric suffix) so extension-based MIME inference keeps working.
    """
    millis = time.time_ns() // 1_000_000
    suffix = secrets.randbelow(1_000_000_001)
    extension = Path(original_name).suffix
    if not _SAFE_EXTENSION.fullmatch(extension):
        extension = ""
    return f"{field_name}-{millis}-{suffix}{extension}"


def _normalize_mimetype(content_type: str | None) -> str:
    if not content_type:
        return "application/octet-stream"
    return content_type.split(";", 1)[0].strip().lower()


class UploadGate:
    """Validates a batch of uploads and writes the accepted files.

    The batch is all-or-nothing: every file is checked before the first one
    is written, and a failed write removes what was already written.
    """

    def __init__(
        self,
        file_store: LocalFileStore,
        max_file_size: int,
        max_files: int,
    ):
        self.file_store = file_store
        self.max_file_size = max_file_size
        self.max_files = max_files

    def check_file_fields(self, field_names: Iterable[str]) -> None:
        """Reject files sent under any field other than the upload field.

        Raises:
            UnexpectedFileFieldError: A file part has another field name.
        """
        for field in field_names:
            if field != UPLOAD_FIELD_NAME:
                raise UnexpectedFileFieldError(field, UPLOAD_FIELD_NAME)

    async def admit(self, uploads: list[UploadFile]) -> list[StagedFile]:
        """Check and write a batch of uploads.

        Raises:
            TooManyFilesError: More than ``max_files`` files in the batch.
            UnsupportedFileTypeError: A MIME type outside the allow-list.
            FileTooLargeError: A file larger than ``max_file_size`` bytes.
            PersistenceError: Writing a file to disk failed.
        """
        if len(uploads) > self.max_files:
            raise TooManyFilesError(self.max_files)

        accepted: list[tuple[str, str, bytes]] = []
        for upload in uploads:
            original_name = upload.filename or ""
            mimetype = _normalize_mimetype(upload.content_type)
            if not is_allowed_mimetype(mimetype):
                raise UnsupportedFileTypeError(mimetype)

            # One byte past the limit is enough to reject
            content = await upload.read(self.max_file_size + 1)
            if len(content) > self.max_file_size:
                raise FileTooLargeError(original_name, self.max_file_size)
            accepted.append((original_name, mimetype, content))

        staged: list[StagedFile] = []
        try:
            for original_name, mimetype, content in accepted:
                filename = storage_name(original_name)
                path = await self.file_store.write(filename, content)
                staged.append(
                    StagedFile(
                        filename=filename,
                        original_name=original_name,
                        mimetype=mimetype,
                        size=len(content),
                        path=path,
                    )
                )
        except OSError as e:
            await self.file_store.delete_many_best_effort([s.path for s in staged])
            raise PersistenceError("Error uploading files", error=str(e)) from e

        logger.debug("Upload batch admitted", count=len(staged))
        return staged
