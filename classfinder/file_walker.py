"""File walking utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .config import DEFAULT_EXCLUDES, DEFAULT_EXTENSIONS
from .filesystem import Filesystem, LocalFilesystem


def iter_php_files(
    root: str | Path,
    excludes: Iterable[str] | None = None,
    extensions: Iterable[str] | None = None,
    filesystem: Filesystem | None = None,
) -> list[str]:
    filesystem = filesystem or LocalFilesystem()
    exclude_set = set(DEFAULT_EXCLUDES if excludes is None else excludes)
    suffixes = {ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS)}
    root_path = Path(root)
    matches: list[str] = []

    for path in filesystem.list_files(root_path, recursive=True):
        candidate = Path(path)
        if candidate.suffix.lower() not in suffixes:
            continue
        try:
            relative_parts = candidate.relative_to(root_path).parts
        except ValueError:
            relative_parts = candidate.parts
        if any(part in exclude_set for part in relative_parts[:-1]):
            continue
        matches.append(path)

    return matches
