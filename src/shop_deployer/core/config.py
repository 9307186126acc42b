"""Project config (shop-deployer.yaml) and package manifest (deploy.yaml).

Project config, next to the shop project::

    target-directory: source      # installation root, relative to this file
    blacklist-filter:             # never deployed, in addition to the package's own
      - "**/*.md"

Package manifest, at the root of an extracted package::

    source-directory: source
    description: OXID eShop CE package
    blacklist-filter:
      - "Application/views/**/*.tpl.bak"

``SHOP_DEPLOYER_TARGET`` overrides the configured target directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ruamel.yaml import YAML

from shop_deployer.core.constants import (
    DEFAULT_LAYOUT,
    DEFAULT_PACKAGE_DESCRIPTION,
    DEFAULT_TARGET_DIRECTORY,
    PACKAGE_MANIFEST_FILE,
    PROJECT_CONFIG_FILE,
    TARGET_ENV_VAR,
)
from shop_deployer.deploy.exceptions import DeployConfigError, InvalidPatternError
from shop_deployer.deploy.glob_filter import compile_glob, split_patterns


def _load_yaml_mapping(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except Exception as exc:
        raise DeployConfigError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise DeployConfigError(f"{path} must contain a mapping, got {type(payload).__name__}")
    return payload


def _string_value(data: dict[str, object], key: str, default: str, path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise DeployConfigError(f"{path}: '{key}' must be a non-empty string")
    return value.strip()


def _pattern_list(data: dict[str, object], key: str, path: Path) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DeployConfigError(f"{path}: '{key}' must be a list of glob patterns")

    patterns = split_patterns(value)
    for pattern in patterns:
        try:
            compile_glob(pattern)
        except InvalidPatternError as exc:
            raise DeployConfigError(f"{path}: '{key}': {exc}") from exc
    return patterns


@dataclass(slots=True)
class ProjectConfig:
    """Where the shop is installed and what is never deployed into it."""

    project_root: Path
    target_directory: str = DEFAULT_TARGET_DIRECTORY
    blacklist: list[str] = field(default_factory=list)

    @property
    def installation_root(self) -> Path:
        target = Path(os.path.expanduser(self.target_directory))
        if target.is_absolute():
            return target
        return (self.project_root / target).absolute()


@dataclass(slots=True)
class PackageManifest:
    """Deployment settings shipped inside a package."""

    source_directory: str = DEFAULT_LAYOUT.source_directory
    description: str = DEFAULT_PACKAGE_DESCRIPTION
    blacklist: list[str] = field(default_factory=list)


def load_project_config(project_root: Path) -> ProjectConfig:
    """Load shop-deployer.yaml from *project_root*; missing file means defaults."""
    config_path = project_root / PROJECT_CONFIG_FILE
    data = _load_yaml_mapping(config_path)

    target = _string_value(data, "target-directory", DEFAULT_TARGET_DIRECTORY, config_path)
    if env_target := os.environ.get(TARGET_ENV_VAR):
        target = env_target

    return ProjectConfig(
        project_root=project_root,
        target_directory=target,
        blacklist=_pattern_list(data, "blacklist-filter", config_path),
    )


def load_package_manifest(package_path: Path) -> PackageManifest:
    """Load deploy.yaml from the package root; missing file means defaults."""
    manifest_path = package_path / PACKAGE_MANIFEST_FILE
    data = _load_yaml_mapping(manifest_path)

    source_directory = _string_value(
        data, "source-directory", DEFAULT_LAYOUT.source_directory, manifest_path
    )
    if Path(source_directory).is_absolute() or ".." in Path(source_directory).parts:
        raise DeployConfigError(
            f"{manifest_path}: 'source-directory' must be a path inside the package"
        )

    return PackageManifest(
        source_directory=source_directory,
        description=_string_value(data, "description", DEFAULT_PACKAGE_DESCRIPTION, manifest_path),
        blacklist=_pattern_list(data, "blacklist-filter", manifest_path),
    )


__all__ = [
    "PackageManifest",
    "ProjectConfig",
    "load_package_manifest",
    "load_project_config",
]
