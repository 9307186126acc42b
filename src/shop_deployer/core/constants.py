"""Fixed names and filters describing a shop package and its installation."""

from __future__ import annotations

from dataclasses import dataclass, replace

ALL_FILES_FILTER = "**/*"

PROJECT_CONFIG_FILE = "shop-deployer.yaml"
PACKAGE_MANIFEST_FILE = "deploy.yaml"
TARGET_ENV_VAR = "SHOP_DEPLOYER_TARGET"

DEFAULT_TARGET_DIRECTORY = "source"
DEFAULT_PACKAGE_DESCRIPTION = "OXID eShop package"

# Literal fields of config.inc.php.dist that an operator replaces on setup.
PLACEHOLDER_TOKENS: tuple[str, ...] = (
    "<dbHost>",
    "<dbName>",
    "<dbUser>",
    "<dbPwd>",
    "<sShopURL>",
    "<sShopDir>",
    "<sCompileDir>",
)


@dataclass(frozen=True, slots=True)
class DeployLayout:
    """File names and glob filters of a shop package, relative to its source directory.

    The same names apply to the installation root, which mirrors the
    package's source directory.
    """

    source_directory: str = "source"
    marker_file: str = "index.php"
    configuration_file: str = "config.inc.php"
    distribution_suffix: str = ".dist"
    setup_directory: str = "Setup"
    favicon_file: str = "favicon.ico"
    offline_file: str = "offline.html"
    htaccess_filter: str = "**/.htaccess"
    robots_filter: str = "**/robots.txt"
    vcs_filters: tuple[str, ...] = (".git/" + ALL_FILES_FILTER, ".gitignore")

    @property
    def setup_filter(self) -> str:
        return f"{self.setup_directory}/{ALL_FILES_FILTER}"

    @property
    def configuration_template(self) -> str:
        return self.configuration_file + self.distribution_suffix

    def with_source_directory(self, source_directory: str) -> "DeployLayout":
        """Return a copy of the layout reading from another package subdirectory."""
        return replace(self, source_directory=source_directory)


DEFAULT_LAYOUT = DeployLayout()

__all__ = [
    "ALL_FILES_FILTER",
    "DEFAULT_LAYOUT",
    "DEFAULT_PACKAGE_DESCRIPTION",
    "DEFAULT_TARGET_DIRECTORY",
    "DeployLayout",
    "PACKAGE_MANIFEST_FILE",
    "PLACEHOLDER_TOKENS",
    "PROJECT_CONFIG_FILE",
    "TARGET_ENV_VAR",
]
