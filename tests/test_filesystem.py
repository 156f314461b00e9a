from __future__ import annotations

import os
from pathlib import Path

import pytest

from classfinder.errors import DirectoryNotFound, FileNotFound, FilesystemIOError, PermissionDenied
from classfinder.filesystem import LocalFilesystem


def test_list_files_flat_and_recursive(tmp_path: Path):
    (tmp_path / "a.php").write_text("<?php", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.php").write_text("<?php", encoding="utf-8")
    fs = LocalFilesystem()

    assert fs.list_files(tmp_path) == [str(tmp_path / "a.php")]
    assert fs.list_files(tmp_path, recursive=True) == [
        str(tmp_path / "a.php"),
        str(tmp_path / "sub" / "b.php"),
    ]


def test_relative_paths_resolve_against_base(tmp_path: Path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.php").write_text("<?php echo 1;", encoding="utf-8")
    fs = LocalFilesystem(tmp_path)

    assert fs.exists("src/a.php")
    assert fs.is_file("src/a.php")
    assert fs.is_directory("src")
    assert fs.read_text("src/a.php") == "<?php echo 1;"
    assert fs.list_files("src") == [str(tmp_path / "src" / "a.php")]


def test_missing_directory_and_file(tmp_path: Path):
    fs = LocalFilesystem()

    with pytest.raises(DirectoryNotFound) as excinfo:
        fs.list_files(tmp_path / "missing", recursive=True)
    assert excinfo.value.path == str(tmp_path / "missing")

    with pytest.raises(FileNotFound, match="File not found"):
        fs.read_text(tmp_path / "missing.php")


def test_reading_a_directory_is_an_io_error(tmp_path: Path):
    with pytest.raises(FilesystemIOError):
        LocalFilesystem().read_text(tmp_path)


def test_undecodable_bytes_are_replaced(tmp_path: Path):
    path = tmp_path / "latin.php"
    path.write_bytes(b"<?php // caf\xe9\n")

    assert LocalFilesystem().read_text(path) == "<?php // caf\ufffd\n"


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unreadable_directory(tmp_path: Path):
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        with pytest.raises(PermissionDenied):
            LocalFilesystem().list_files(locked)
    finally:
        locked.chmod(0o755)
