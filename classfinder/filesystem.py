"""Read-only local filesystem access with a normalized error model."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from .errors import DirectoryNotFound, FileNotFound, FilesystemIOError, PermissionDenied


class Filesystem(Protocol):
    def list_files(self, directory: str | Path, recursive: bool = False) -> list[str]: ...

    def read_text(self, path: str | Path) -> str: ...


class LocalFilesystem:
    """Local disk access. Relative paths resolve against ``base_path``."""

    def __init__(self, base_path: str | Path | None = None) -> None:
        self.base_path = Path(base_path) if base_path is not None else None

    def path(self, path: str | Path) -> Path:
        candidate = Path(path)
        if self.base_path is not None and not candidate.is_absolute():
            return self.base_path / candidate
        return candidate

    def exists(self, path: str | Path) -> bool:
        return self.path(path).exists()

    def is_file(self, path: str | Path) -> bool:
        return self.path(path).is_file()

    def is_directory(self, path: str | Path) -> bool:
        return self.path(path).is_dir()

    def list_files(self, directory: str | Path, recursive: bool = False) -> list[str]:
        """Return the files under ``directory`` in sorted order."""
        root = self.path(directory)
        if not root.is_dir():
            raise DirectoryNotFound(str(root))
        if not os.access(root, os.R_OK | os.X_OK):
            raise PermissionDenied(str(root), "read")

        try:
            if recursive:
                candidates = root.rglob("*")
            else:
                candidates = root.iterdir()
            files = [str(path) for path in candidates if path.is_file()]
        except PermissionError as exc:
            raise PermissionDenied(str(root), "read") from exc
        except OSError as exc:
            raise FilesystemIOError(f"Unable to list directory: {root}", str(root)) from exc

        return sorted(files)

    def read_bytes(self, path: str | Path) -> bytes:
        full_path = self.path(path)
        try:
            return full_path.read_bytes()
        except FileNotFoundError as exc:
            raise FileNotFound(str(full_path)) from exc
        except PermissionError as exc:
            raise PermissionDenied(str(full_path), "read") from exc
        except OSError as exc:
            raise FilesystemIOError(f"Unable to read file: {full_path}", str(full_path)) from exc

    def read_text(self, path: str | Path) -> str:
        return self.read_bytes(path).decode("utf-8", errors="replace")
