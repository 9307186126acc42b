"""Copy primitives: overwriting tree/file copy and copy-if-missing."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Sequence

from shop_deployer.deploy.exceptions import CopySourceMissingError, SourceMissingError
from shop_deployer.deploy.glob_filter import matches_any

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    raise error


def copy_file(source: Path, destination: Path) -> None:
    """Copy one file, replacing *destination* and creating its parents."""
    source = Path(source)
    destination = Path(destination)
    if not source.is_file():
        raise SourceMissingError(source, destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, destination)


def copy_if_missing(source: Path, destination: Path) -> bool:
    """Copy *source* to *destination* unless *destination* already exists.

    A symlink at *destination* counts as existing, even when it dangles.

    Returns:
        True if the file was copied, False if an existing destination was kept.

    Raises:
        CopySourceMissingError: If a copy is needed but *source* does not exist.
    """
    destination = Path(destination)
    if destination.exists() or destination.is_symlink():
        return False

    source = Path(source)
    if not source.is_file():
        raise CopySourceMissingError(source, destination)

    copy_file(source, destination)
    return True


def copy_tree(source: Path, destination: Path, exclude: Sequence[str] = ()) -> list[str]:
    """Mirror *source* into *destination*, overwriting existing files.

    Files whose path relative to *source* matches one of *exclude* are
    skipped. Directories are created when a file is copied into them;
    empty source directories are mirrored unless excluded.

    Returns:
        Relative POSIX paths of the copied files, sorted.

    Raises:
        SourceMissingError: If *source* is not a directory.
    """
    source = Path(source)
    destination = Path(destination)
    if not source.is_dir():
        raise SourceMissingError(source, destination)

    copied: list[str] = []
    for dirpath, dirnames, filenames in os.walk(source, onerror=_raise_walk_error, followlinks=False):
        dirnames.sort()
        current = Path(dirpath)
        rel_dir = current.relative_to(source)

        if not dirnames and not filenames and rel_dir.parts:
            if not matches_any(rel_dir.as_posix(), exclude):
                (destination / rel_dir).mkdir(parents=True, exist_ok=True)
            continue

        for name in sorted(filenames):
            rel = (rel_dir / name).as_posix()
            if matches_any(rel, exclude):
                logger.debug("Excluded from bulk copy: %s", rel)
                continue
            copy_file(current / name, destination / rel)
            copied.append(rel)

    logger.debug("Copied %d files from %s to %s", len(copied), source, destination)
    return sorted(copied)


__all__ = ["copy_file", "copy_if_missing", "copy_tree"]
