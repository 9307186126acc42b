"""Package deployment engine.

Copies a shop package's source directory into the installation root:
core files are overwritten, operator customizations are kept.
"""

from shop_deployer.deploy.config_state import is_unconfigured_or_missing
from shop_deployer.deploy.copier import copy_file, copy_if_missing, copy_tree
from shop_deployer.deploy.events import DeploymentEvents, StepResult
from shop_deployer.deploy.exceptions import (
    CopySourceMissingError,
    DeployConfigError,
    DeployError,
    DeploymentStepError,
    InvalidPathError,
    InvalidPatternError,
    SourceMissingError,
)
from shop_deployer.deploy.filters import (
    CopyPolicy,
    FileCategory,
    bulk_exclusion_filters,
    combine_filters,
    preserved_categories,
)
from shop_deployer.deploy.glob_filter import compile_glob, glob_files, match_paths
from shop_deployer.deploy.installer import DeploymentReport, ShopPackageInstaller
from shop_deployer.deploy.paths import map_to_installation

__all__ = [
    "CopyPolicy",
    "CopySourceMissingError",
    "DeployConfigError",
    "DeployError",
    "DeploymentEvents",
    "DeploymentReport",
    "DeploymentStepError",
    "FileCategory",
    "InvalidPathError",
    "InvalidPatternError",
    "ShopPackageInstaller",
    "SourceMissingError",
    "StepResult",
    "bulk_exclusion_filters",
    "combine_filters",
    "compile_glob",
    "copy_file",
    "copy_if_missing",
    "copy_tree",
    "glob_files",
    "is_unconfigured_or_missing",
    "map_to_installation",
    "match_paths",
    "preserved_categories",
]
