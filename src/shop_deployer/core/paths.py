"""Project root discovery."""

from __future__ import annotations

from pathlib import Path

from shop_deployer.core.constants import PROJECT_CONFIG_FILE


def locate_project_root(start: Path | None = None) -> Path | None:
    """Walk up from *start* to the first directory holding a project config."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / PROJECT_CONFIG_FILE).is_file():
            return candidate
    return None


__all__ = ["locate_project_root"]
