"""Tests for the local file store and best-effort deletion."""

import asyncio
from pathlib import Path

import pytest

from src.projectdesk.core.storage import LocalFileStore

pytestmark = pytest.mark.unit


async def test_ensure_directory_creates_nested_dirs(file_store: LocalFileStore, upload_dir: Path):
    await file_store.ensure_directory()
    await file_store.ensure_directory()

    assert upload_dir.is_dir()


async def test_write_and_resolve(file_store: LocalFileStore, upload_dir: Path):
    path = await file_store.write("files-1-1.txt", b"content")

    assert path == upload_dir / "files-1-1.txt"
    assert await file_store.resolve("files-1-1.txt") == path


async def test_resolve_missing(file_store: LocalFileStore):
    assert await file_store.resolve("files-1-1.txt") is None


@pytest.mark.parametrize("filename", ["", ".", "..", "../secret", "sub/file.txt"])
async def test_resolve_refuses_non_basenames(
    file_store: LocalFileStore, tmp_path: Path, filename: str
):
    (tmp_path / "secret").write_bytes(b"top secret")
    await file_store.ensure_directory()

    assert await file_store.resolve(filename) is None


async def test_delete_existing(file_store: LocalFileStore):
    path = await file_store.write("files-1-1.txt", b"content")

    result = await file_store.delete_best_effort(path)

    assert result.deleted is True
    assert result.error is None
    assert not path.exists()


async def test_delete_missing_is_not_an_error(file_store: LocalFileStore, upload_dir: Path):
    result = await file_store.delete_best_effort(upload_dir / "gone.txt")

    assert result.deleted is False
    assert result.error == "not found"


async def test_delete_os_error_is_reported(
    file_store: LocalFileStore, monkeypatch: pytest.MonkeyPatch
):
    async def denied(path):
        raise PermissionError("permission denied")

    monkeypatch.setattr("src.projectdesk.core.storage.aiofiles.os.remove", denied)

    result = await file_store.delete_best_effort("/somewhere/file.txt")

    assert result.deleted is False
    assert result.error == "permission denied"


async def test_delete_times_out(upload_dir: Path, monkeypatch: pytest.MonkeyPatch):
    store = LocalFileStore(upload_dir, delete_timeout=0.01)

    async def hanging(path):
        await asyncio.sleep(1)

    monkeypatch.setattr("src.projectdesk.core.storage.aiofiles.os.remove", hanging)

    result = await store.delete_best_effort(upload_dir / "slow.txt")

    assert result.deleted is False
    assert result.error == "timeout"


async def test_delete_many(file_store: LocalFileStore, upload_dir: Path):
    paths = [await file_store.write(f"files-1-{i}.txt", b"x") for i in range(3)]

    results = await file_store.delete_many_best_effort([*paths, upload_dir / "gone.txt"])

    assert [r.deleted for r in results] == [True, True, True, False]
    assert list(upload_dir.iterdir()) == []


async def test_delete_many_empty(file_store: LocalFileStore):
    assert await file_store.delete_many_best_effort([]) == []
