"""Core constants, configuration and path helpers."""

from .constants import (
    DEFAULT_LAYOUT,
    PACKAGE_MANIFEST_FILE,
    PLACEHOLDER_TOKENS,
    PROJECT_CONFIG_FILE,
    DeployLayout,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "PACKAGE_MANIFEST_FILE",
    "PLACEHOLDER_TOKENS",
    "PROJECT_CONFIG_FILE",
    "DeployLayout",
]
