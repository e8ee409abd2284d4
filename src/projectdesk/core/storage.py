"""Physical file store for project attachments.

Files live flat in one upload directory under their generated storage names.
Writes use async I/O. Deletion is always best-effort: failures are logged and
reported through ``DeletionResult``, never raised.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path

import aiofiles
import aiofiles.os

from src.projectdesk.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of a best-effort deletion. Callers may log it, never fail on it."""

    path: Path
    deleted: bool
    error: str | None = None


class LocalFileStore:
    """Owns the lifetime of attachment files on disk."""

    def __init__(self, base_dir: str | Path, delete_timeout: float = 5.0) -> None:
        self.base_dir = Path(base_dir)
        self.delete_timeout = delete_timeout
        self._directory_ready = False

    async def ensure_directory(self) -> None:
        """Create the upload directory (recursively) once."""
        if self._directory_ready:
            return
        await aiofiles.os.makedirs(self.base_dir, exist_ok=True)
        self._directory_ready = True

    def path_for(self, filename: str) -> Path:
        return self.base_dir / filename

    async def write(self, filename: str, content: bytes) -> Path:
        """Write content under a storage name and return its path."""
        await self.ensure_directory()
        path = self.path_for(filename)
        async with aiofiles.open(path, "wb") as f:
            await f.write(content)
        logger.debug("Stored file", path=str(path), size=len(content))
        return path

    async def resolve(self, filename: str) -> Path | None:
        """Return the path of a stored file, or None if it is not on disk.

        Only plain basenames resolve; anything with a directory part is refused.
        """
        if not filename or Path(filename).name != filename or filename in (".", ".."):
            return None
        path = self.path_for(filename)
        if await aiofiles.os.path.isfile(path):
            return path
        return None

    async def delete_best_effort(self, path: str | Path) -> DeletionResult:
        """Delete a file, waiting at most ``delete_timeout`` seconds."""
        path = Path(path)
        try:
            await asyncio.wait_for(aiofiles.os.remove(path), timeout=self.delete_timeout)
        except FileNotFoundError:
            logger.warning("File already missing during cleanup", path=str(path))
            return DeletionResult(path=path, deleted=False, error="not found")
        except TimeoutError:
            logger.warning(
                "File deletion timed out", path=str(path), timeout=self.delete_timeout
            )
            return DeletionResult(path=path, deleted=False, error="timeout")
        except OSError as e:
            logger.warning("Error deleting file", path=str(path), error=str(e))
            return DeletionResult(path=path, deleted=False, error=str(e))
        return DeletionResult(path=path, deleted=True)

    async def delete_many_best_effort(self, paths: list[str | Path]) -> list[DeletionResult]:
        """Best-effort delete of several files concurrently."""
        if not paths:
            return []
        return list(await asyncio.gather(*(self.delete_best_effort(p) for p in paths)))
