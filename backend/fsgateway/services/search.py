"""Depth-first file search by name substring."""

from __future__ import annotations

import asyncio
import os
import stat
from collections.abc import Iterator

import structlog

from fsgateway.schemas.fs import ErrorKind, OperationError, Outcome, Success
from fsgateway.services.path_resolver import display_path

logger = structlog.get_logger(__name__)


def _walk_matches(search_term: str, root: str) -> list[str]:
    """Collect absolute paths of files whose name contains ``search_term``.

    Pre-order: each directory's children are visited in listing order, and a
    subdirectory's matches are emitted before the siblings that follow it. The
    stack holds one entry iterator per open directory instead of recursing.
    Directories are followed through symlinks and there is no cycle detection.
    Any OSError aborts the whole walk.
    """
    results: list[str] = []
    stack: list[tuple[str, Iterator[str]]] = [(root, iter(os.listdir(root)))]

    while stack:
        directory, entries = stack[-1]
        name = next(entries, None)
        if name is None:
            stack.pop()
            continue

        path = os.path.join(directory, name)
        if stat.S_ISDIR(os.stat(path).st_mode):
            stack.append((path, iter(os.listdir(path))))
        elif search_term in name:
            results.append(display_path(path))

    return results


async def search_files(search_term: str, root: str) -> Outcome[list[str]]:
    """Search the tree below ``root`` for files whose name contains ``search_term`` (case-sensitive)."""
    start = os.path.abspath(root)
    try:
        matches = await asyncio.to_thread(_walk_matches, search_term, start)
    except OSError as exc:
        error = OperationError.from_exception(ErrorKind.search, exc)
        logger.warning("search_failed", term=search_term, root=start, error=str(exc))
        return error
    logger.info("search_complete", term=search_term, root=start, matches=len(matches))
    return Success(matches)
