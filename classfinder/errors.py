"""Filesystem error taxonomy surfaced by searches."""

from __future__ import annotations


class FilesystemError(RuntimeError):
    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class DirectoryNotFound(FilesystemError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Directory not found: {path}", path)


class FileNotFound(FilesystemError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}", path)


class FilesystemIOError(FilesystemError):
    pass


class PermissionDenied(FilesystemIOError):
    def __init__(self, path: str, operation: str) -> None:
        super().__init__(f"Permission denied: cannot {operation} '{path}'", path)
        self.operation = operation
