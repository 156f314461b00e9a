"""Search configuration resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_EXTENSIONS = (".php",)
DEFAULT_EXCLUDES: frozenset[str] = frozenset()


@dataclass(frozen=True)
class FinderConfig:
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    excludes: frozenset[str] = DEFAULT_EXCLUDES
    workers: int = 1


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def resolve_finder_config() -> FinderConfig:
    extensions = tuple(
        ext if ext.startswith(".") else f".{ext}"
        for ext in _split_list(os.getenv("CLASSFINDER_EXTENSIONS"))
    )
    excludes = frozenset(_split_list(os.getenv("CLASSFINDER_EXCLUDES")))
    workers = int(os.getenv("CLASSFINDER_WORKERS", "1"))

    return FinderConfig(
        extensions=extensions or DEFAULT_EXTENSIONS,
        excludes=excludes or DEFAULT_EXCLUDES,
        workers=max(1, workers),
    )
