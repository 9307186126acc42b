"""Mapping of package file paths onto the installation root."""

from __future__ import annotations

from pathlib import Path

from shop_deployer.core.constants import DeployLayout
from shop_deployer.deploy.exceptions import InvalidPathError


def package_source_directory(package_path: Path, layout: DeployLayout) -> Path:
    """Return the directory inside the package whose content is deployed."""
    return Path(package_path) / layout.source_directory


def map_to_installation(source_base: Path, path: Path, installation_root: Path) -> Path:
    """Re-root *path* from *source_base* under *installation_root*.

    Args:
        source_base: Directory *path* was found in (the package source directory)
        path: Absolute path of a file under *source_base*
        installation_root: Live installation directory

    Returns:
        Absolute path of the corresponding installation file.

    Raises:
        InvalidPathError: If *path* is not inside *source_base*.
    """
    source_base = Path(source_base).absolute()
    path = Path(path).absolute()
    try:
        relative = path.relative_to(source_base)
    except ValueError as exc:
        raise InvalidPathError(path, source_base) from exc

    # relative_to() is lexical; "a/../../x" would escape the installation root
    if ".." in relative.parts:
        raise InvalidPathError(path, source_base)

    return Path(installation_root).absolute() / relative


__all__ = ["map_to_installation", "package_source_directory"]
