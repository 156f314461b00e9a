"""Search PHP classes by parent, interface or trait across a directory tree.

Files are tokenized and scanned statically; nothing is loaded or
executed, so bulk scans over large trees are free of side effects.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .config import FinderConfig
from .errors import FileNotFound
from .extract import scan_declarations
from .file_walker import iter_php_files
from .filesystem import Filesystem, LocalFilesystem
from .imports import build_import_table
from .models import Declaration, Relation
from .names import normalize_name
from .parser import PhpParser
from .tokens import tokenize

logger = logging.getLogger(__name__)


class ClassFinder:
    def __init__(
        self,
        filesystem: Filesystem | None = None,
        config: FinderConfig | None = None,
    ) -> None:
        self.filesystem = filesystem or LocalFilesystem()
        self.config = config or FinderConfig()
        # tree-sitter parsers must not be shared between threads.
        self._local = threading.local()

    def find_by_parent(self, directory: str | Path, parent: str) -> list[Declaration]:
        return self.find(directory, parent, Relation.EXTENDS)

    def find_by_interface(self, directory: str | Path, interface: str) -> list[Declaration]:
        return self.find(directory, interface, Relation.IMPLEMENTS)

    def find_by_trait(self, directory: str | Path, trait: str) -> list[Declaration]:
        return self.find(directory, trait, Relation.TRAIT)

    def find(
        self,
        directory: str | Path,
        target: str,
        relation: Relation | str,
    ) -> list[Declaration]:
        """Declarations whose parent, interfaces or traits include ``target``.

        Names compare case-insensitively and ignore a leading separator.
        Results keep file order, then declaration order within a file.
        """
        relation = Relation(relation)
        wanted = normalize_name(target)
        results: list[Declaration] = []

        for declaration in self.scan_directory(directory):
            for name in declaration.related(relation):
                if normalize_name(name) == wanted:
                    results.append(declaration)
                    break

        logger.info(
            "Found %d declaration(s) with %s %s under %s",
            len(results),
            relation.value,
            target,
            directory,
        )
        return results

    def php_files(self, directory: str | Path) -> list[str]:
        return iter_php_files(
            directory,
            excludes=self.config.excludes,
            extensions=self.config.extensions,
            filesystem=self.filesystem,
        )

    def scan_directory(self, directory: str | Path) -> list[Declaration]:
        files = self.php_files(directory)
        logger.debug("Scanning %d PHP file(s) under %s", len(files), directory)

        if self.config.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                per_file = list(executor.map(self.scan_file, files))
        else:
            per_file = [self.scan_file(path) for path in files]

        return [declaration for declarations in per_file for declaration in declarations]

    def scan_file(self, path: str) -> list[Declaration]:
        try:
            source = self.filesystem.read_text(path)
        except FileNotFound:
            # Removed between listing and reading.
            logger.debug("Skipping vanished file %s", path)
            return []
        return self.scan_source(source, path)

    def scan_source(self, source: str, path: str = "") -> list[Declaration]:
        tokens = tokenize(self._parser().parse_text(source))
        imports = build_import_table(tokens)
        return scan_declarations(tokens, path, imports)

    def _parser(self) -> PhpParser:
        parser = getattr(self._local, "parser", None)
        if parser is None:
            parser = PhpParser()
            self._local.parser = parser
        return parser


def find_by_parent(
    directory: str | Path, parent: str, filesystem: Filesystem | None = None
) -> list[Declaration]:
    return ClassFinder(filesystem).find_by_parent(directory, parent)


def find_by_interface(
    directory: str | Path, interface: str, filesystem: Filesystem | None = None
) -> list[Declaration]:
    return ClassFinder(filesystem).find_by_interface(directory, interface)


def find_by_trait(
    directory: str | Path, trait: str, filesystem: Filesystem | None = None
) -> list[Declaration]:
    return ClassFinder(filesystem).find_by_trait(directory, trait)
