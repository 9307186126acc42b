"""Tests for shop_deployer.deploy.copier - copy primitives."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from shop_deployer.deploy.copier import copy_file, copy_if_missing, copy_tree
from shop_deployer.deploy.exceptions import CopySourceMissingError, SourceMissingError
from tests.utils import deny_directory_scan, write_file


class TestCopyIfMissing:
    """copy_if_missing() never replaces an existing destination."""

    def test_copies_when_destination_missing(self, tmp_path: Path) -> None:
        source = write_file(tmp_path / "pkg" / "favicon.ico", "icon")
        destination = tmp_path / "shop" / "favicon.ico"

        assert copy_if_missing(source, destination) is True
        assert destination.read_text() == "icon"

    def test_creates_intermediate_directories(self, tmp_path: Path) -> None:
        source = write_file(tmp_path / "pkg" / ".htaccess", "Deny from all")
        destination = tmp_path / "shop" / "out" / "pictures" / ".htaccess"

        copy_if_missing(source, destination)

        assert destination.read_text() == "Deny from all"

    def test_existing_destination_is_kept(self, tmp_path: Path) -> None:
        source = write_file(tmp_path / "pkg" / "robots.txt", "package")
        destination = write_file(tmp_path / "shop" / "robots.txt", "custom")

        assert copy_if_missing(source, destination) is False
        assert destination.read_text() == "custom"

    def test_existing_destination_with_missing_source_is_no_error(self, tmp_path: Path) -> None:
        destination = write_file(tmp_path / "shop" / "config.inc.php", "configured")

        assert copy_if_missing(tmp_path / "nowhere", destination) is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_dangling_symlink_destination_is_kept(self, tmp_path: Path) -> None:
        source = write_file(tmp_path / "pkg" / "robots.txt", "package")
        target = tmp_path / "elsewhere" / "robots.txt"
        destination = tmp_path / "shop" / "robots.txt"
        destination.parent.mkdir()
        os.symlink(target, destination)

        assert copy_if_missing(source, destination) is False
        assert destination.is_symlink()
        assert not target.exists()

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        source = tmp_path / "pkg" / "offline.html"
        destination = tmp_path / "shop" / "offline.html"

        with pytest.raises(CopySourceMissingError) as excinfo:
            copy_if_missing(source, destination)

        assert excinfo.value.source == source
        assert excinfo.value.destination == destination
        assert not destination.exists()

    def test_copies_bytes_verbatim(self, tmp_path: Path) -> None:
        payload = bytes(range(256))
        source = tmp_path / "favicon.ico"
        source.write_bytes(payload)
        destination = tmp_path / "out" / "favicon.ico"

        copy_if_missing(source, destination)

        assert destination.read_bytes() == payload


class TestCopyFile:
    """copy_file() always overwrites."""

    def test_overwrites_destination(self, tmp_path: Path) -> None:
        source = write_file(tmp_path / "a.php", "new")
        destination = write_file(tmp_path / "out" / "a.php", "old")

        copy_file(source, destination)

        assert destination.read_text() == "new"

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceMissingError):
            copy_file(tmp_path / "missing.php", tmp_path / "out.php")


class TestCopyTree:
    """copy_tree() mirrors a directory minus excluded patterns."""

    def test_overwrites_existing_files(self, tmp_path: Path) -> None:
        write_file(tmp_path / "src" / "Core" / "Shop.php", "v2")
        write_file(tmp_path / "dst" / "Core" / "Shop.php", "v1")

        copy_tree(tmp_path / "src", tmp_path / "dst")

        assert (tmp_path / "dst" / "Core" / "Shop.php").read_text() == "v2"

    def test_leaves_unrelated_destination_files(self, tmp_path: Path) -> None:
        write_file(tmp_path / "src" / "index.php")
        write_file(tmp_path / "dst" / "modules" / "mine.php", "mine")

        copy_tree(tmp_path / "src", tmp_path / "dst")

        assert (tmp_path / "dst" / "modules" / "mine.php").read_text() == "mine"

    def test_excluded_files_are_skipped(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        write_file(src / "index.php")
        write_file(src / ".htaccess", "package")
        write_file(src / "tmp" / ".htaccess", "package")
        write_file(tmp_path / "dst" / ".htaccess", "custom")

        copied = copy_tree(src, tmp_path / "dst", ["**/.htaccess"])

        assert copied == ["index.php"]
        assert (tmp_path / "dst" / ".htaccess").read_text() == "custom"
        assert not (tmp_path / "dst" / "tmp").exists()

    def test_directories_with_only_excluded_files_are_not_created(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        write_file(src / ".git" / "HEAD")
        write_file(src / "index.php")

        copy_tree(src, tmp_path / "dst", [".git/**/*"])

        assert not (tmp_path / "dst" / ".git").exists()

    def test_empty_directories_are_mirrored(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        (src / "log").mkdir(parents=True)
        (src / "Setup" / "empty").mkdir(parents=True)

        copy_tree(src, tmp_path / "dst", ["Setup/**/*"])

        assert (tmp_path / "dst" / "log").is_dir()
        assert not (tmp_path / "dst" / "Setup" / "empty").exists()

    def test_returns_sorted_relative_paths(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        write_file(src / "b.php")
        write_file(src / "a" / "z.php")
        write_file(src / "a.php")

        assert copy_tree(src, tmp_path / "dst") == ["a.php", "a/z.php", "b.php"]

    def test_missing_source_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceMissingError) as excinfo:
            copy_tree(tmp_path / "missing", tmp_path / "dst")
        assert excinfo.value.source == tmp_path / "missing"

    def test_unreadable_subdirectory_is_an_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        src = tmp_path / "src"
        write_file(src / "index.php")
        write_file(src / "Core" / "Model" / "Article.php")
        deny_directory_scan(monkeypatch, src / "Core" / "Model")

        with pytest.raises(PermissionError) as excinfo:
            copy_tree(src, tmp_path / "dst")

        assert excinfo.value.filename == str(src / "Core" / "Model")
