"""Shared helpers for the shop-deployer test suite."""

from __future__ import annotations

import os
from pathlib import Path

CONFIGURED_CONFIG = "<?php\n$this->dbHost = 'localhost';\n$this->dbName = 'shop';\n"
TEMPLATE_CONFIG = "<?php\n$this->dbHost = '<dbHost>';\n$this->dbName = '<dbName>';\n"


def write_file(path: Path, content: str = "placeholder") -> Path:
    """Create a file (and any missing parent dirs), return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative POSIX path) to its content."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def deny_directory_scan(monkeypatch, directory: Path) -> None:
    """Make os.scandir fail with PermissionError for *directory* only."""
    real_scandir = os.scandir

    def scandir(path="."):
        if Path(path) == directory:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
