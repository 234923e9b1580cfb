"""Filesystem operations behind the REST API.

Each operation is a single blocking filesystem call run in a worker thread.
Failures are returned as ``OperationError`` values rather than raised, so the
router decides how each kind is reported.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import stat
from pathlib import Path

import structlog

from fsgateway.schemas.fs import ErrorKind, OperationError, Outcome, Success
from fsgateway.services.path_resolver import display_path

logger = structlog.get_logger(__name__)


def _failed(kind: ErrorKind, path: str, exc: Exception, prefix: str | None = None) -> OperationError:
    error = OperationError.from_exception(kind, exc, prefix=prefix)
    logger.warning("fs_operation_failed", kind=str(kind), path=path, error=str(exc))
    return error


async def list_entries(directory_path: str) -> Outcome[list[str]]:
    """Return the names of the direct children of ``directory_path``, in OS order."""
    logger.info("listing_directory", path=directory_path)
    try:
        entries = await asyncio.to_thread(os.listdir, directory_path)
    except OSError as exc:
        return _failed(ErrorKind.list, directory_path, exc)
    return Success([display_path(name) for name in entries])


async def create_directory(directory_path: str) -> Outcome[None]:
    """Create exactly one directory. Missing parents and existing targets are errors."""
    try:
        await asyncio.to_thread(os.mkdir, directory_path)
    except OSError as exc:
        return _failed(ErrorKind.create, directory_path, exc, prefix="Error creating directory")
    logger.info("directory_created", path=directory_path)
    return Success(None)


def _write_utf8(file_path: str, data: str) -> None:
    Path(file_path).write_bytes(data.encode("utf-8"))


async def create_file(file_path: str, data: str = "") -> Outcome[None]:
    """Write ``data`` to ``file_path``, silently replacing any existing content."""
    try:
        await asyncio.to_thread(_write_utf8, file_path, data)
    except (OSError, UnicodeEncodeError) as exc:
        return _failed(ErrorKind.create, file_path, exc, prefix="Error creating file")
    logger.info("file_created", path=file_path, size=len(data))
    return Success(None)


async def read_file(file_path: str) -> Outcome[str]:
    """Return the full content of ``file_path`` decoded as UTF-8."""
    try:
        raw = await asyncio.to_thread(Path(file_path).read_bytes)
        content = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return _failed(ErrorKind.read, file_path, exc)
    return Success(content)


async def update_file(file_path: str, data: str = "") -> Outcome[None]:
    """Replace the content of ``file_path``. Behaves exactly like ``create_file``."""
    try:
        await asyncio.to_thread(_write_utf8, file_path, data)
    except (OSError, UnicodeEncodeError) as exc:
        return _failed(ErrorKind.update, file_path, exc)
    logger.info("file_updated", path=file_path, size=len(data))
    return Success(None)


def _remove(target_path: str) -> None:
    # stat follows symlinks, so a link to a directory is removed as a directory
    if stat.S_ISDIR(os.stat(target_path).st_mode):
        shutil.rmtree(target_path)
    else:
        os.unlink(target_path)


async def delete_path(target_path: str) -> Outcome[None]:
    """Remove a file, or a directory together with everything below it."""
    try:
        await asyncio.to_thread(_remove, target_path)
    except OSError as exc:
        return _failed(ErrorKind.delete, target_path, exc)
    logger.info("path_deleted", path=target_path)
    return Success(None)
