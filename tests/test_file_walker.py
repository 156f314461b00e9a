from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

from classfinder.file_walker import iter_php_files


def test_iter_php_files_filters_non_php():
    with TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "a.php").write_text("<?php", encoding="utf-8")
        (root / "B.PHP").write_text("<?php", encoding="utf-8")
        (root / "b.txt").write_text("nope", encoding="utf-8")
        sub = root / "sub"
        sub.mkdir()
        (sub / "c.php").write_text("<?php", encoding="utf-8")
        git = root / ".git"
        git.mkdir()
        (git / "hook.php").write_text("<?php", encoding="utf-8")

        matches = iter_php_files(root)
        names = {Path(path).name for path in matches}

        assert names == {"a.php", "B.PHP", "c.php", "hook.php"}


def test_iter_php_files_custom_excludes_and_extensions():
    with TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        vendor = root / "vendor"
        vendor.mkdir()
        (vendor / "lib.php").write_text("<?php", encoding="utf-8")
        (root / "legacy.inc").write_text("<?php", encoding="utf-8")

        matches = iter_php_files(root, excludes={"vendor"}, extensions=[".INC"])
        names = {Path(path).name for path in matches}

        assert names == {"legacy.inc"}
