"""Static PHP class finder: search classes by parent, interface or trait."""

from .errors import DirectoryNotFound, FileNotFound, FilesystemError, FilesystemIOError, PermissionDenied
from .extract import extract_declarations, scan_declarations
from .file_walker import iter_php_files
from .filesystem import LocalFilesystem
from .finder import ClassFinder, find_by_interface, find_by_parent, find_by_trait
from .imports import build_import_table
from .models import Declaration, Relation
from .names import normalize_name, resolve_name
from .parser import PhpParser
from .tokens import Token, TokenKind, tokenize, tokenize_source

__all__ = [
    "ClassFinder",
    "Declaration",
    "DirectoryNotFound",
    "FileNotFound",
    "FilesystemError",
    "FilesystemIOError",
    "LocalFilesystem",
    "PermissionDenied",
    "PhpParser",
    "Relation",
    "Token",
    "TokenKind",
    "build_import_table",
    "extract_declarations",
    "find_by_interface",
    "find_by_parent",
    "find_by_trait",
    "iter_php_files",
    "normalize_name",
    "resolve_name",
    "scan_declarations",
    "tokenize",
    "tokenize_source",
]
