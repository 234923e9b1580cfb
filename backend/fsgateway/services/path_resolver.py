"""Turns user-supplied path segments into absolute paths under the configured root.

No sandboxing: ``..`` segments and absolute segments are honoured exactly as
the OS path rules resolve them.
"""

import os
from pathlib import Path


def resolve_path(root: str | Path, segment: str | None = None) -> str:
    """Resolve ``segment`` against ``root`` lexically. An empty segment resolves to the root itself."""
    if not segment:
        return os.path.abspath(root)
    return os.path.abspath(os.path.join(root, segment))


def join_path(root: str | Path, segment: str) -> str:
    """Join ``segment`` onto the absolute root without normalising it."""
    return os.path.join(os.path.abspath(root), segment)


def display_path(path: str) -> str:
    """Make an OS path string safe for JSON by replacing undecodable filename bytes with U+FFFD."""
    return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
