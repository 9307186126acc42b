"""Install and update a shop package into its installation root.

The copy sequence runs in a fixed order. The bulk copy overwrites core
files, so it excludes everything the later, more careful steps own:

1. ``source``   - bulk copy of the package source directory (overwrite)
2. ``setup``    - Setup/ directory, only while the shop is not configured
3. ``config``   - config.inc.php from its .dist template, if missing
4. ``htaccess`` - every .htaccess, if missing
5. ``favicon``  - favicon.ico, if missing
6. ``offline``  - offline.html, if missing
7. ``robots``   - every robots.txt, if missing

The first failing step aborts the sequence. Nothing is rolled back: every
write is either a missing file or a deliberate overwrite of a core file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from shop_deployer.core.constants import (
    DEFAULT_LAYOUT,
    DEFAULT_PACKAGE_DESCRIPTION,
    DeployLayout,
)
from shop_deployer.deploy.config_state import is_unconfigured_or_missing
from shop_deployer.deploy.copier import copy_file, copy_if_missing, copy_tree
from shop_deployer.deploy.events import DeploymentEvents, StepResult
from shop_deployer.deploy.exceptions import DeployError, DeploymentStepError
from shop_deployer.deploy.filters import (
    CopyPolicy,
    FileCategory,
    bulk_exclusion_filters,
    preserved_categories,
)
from shop_deployer.deploy.glob_filter import glob_files
from shop_deployer.deploy.paths import map_to_installation, package_source_directory

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]

STEP_SOURCE = "source"
STEP_SETUP = "setup"
STEP_CONFIG = "config"


def _never_confirm(question: str) -> bool:
    logger.warning("No confirmation handler configured; declining: %s", question.splitlines()[0])
    return False


@dataclass
class DeploymentReport:
    """Outcome of one run of the copy sequence."""

    package_path: Path
    installation_root: Path
    steps: list[StepResult] = field(default_factory=list)

    def step(self, name: str) -> StepResult | None:
        for result in self.steps:
            if result.step == name:
                return result
        return None

    @property
    def copied(self) -> list[Path]:
        return [path for result in self.steps for path in result.copied]

    @property
    def preserved(self) -> list[Path]:
        return [path for result in self.steps for path in result.preserved]

    @property
    def skipped_steps(self) -> list[str]:
        return [result.step for result in self.steps if result.skipped]


class ShopPackageInstaller:
    """Deploys a shop package without clobbering operator customizations."""

    def __init__(
        self,
        installation_root: Path,
        layout: DeployLayout = DEFAULT_LAYOUT,
        blacklist: Sequence[str] | None = None,
        confirm: ConfirmCallback | None = None,
        events: DeploymentEvents | None = None,
        description: str = DEFAULT_PACKAGE_DESCRIPTION,
    ):
        self.installation_root = Path(installation_root).absolute()
        self.layout = layout
        self.blacklist = list(blacklist or [])
        self.confirm = confirm or _never_confirm
        self.events = events or DeploymentEvents()
        self.description = description

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def is_installed(self) -> bool:
        """Return True if the marker file exists directly under the root."""
        return (self.installation_root / self.layout.marker_file).exists()

    def install(self, package_path: Path) -> DeploymentReport:
        """Copy all shop files from the package into the installation root."""
        self.events.installing(self.description)
        self.events.copying()
        report = self.copy_package(package_path)
        self.events.done()
        return report

    def update(self, package_path: Path) -> DeploymentReport | None:
        """Overwrite core files after the operator agreed to it.

        An installation root that holds no installation yet is updated
        without asking.

        Returns:
            The deployment report, or None when the operator declined.
        """
        self.events.updating(self.description)
        if self.is_installed() and not self.confirm(self.update_question()):
            self.events.skipped()
            return None

        self.events.copying()
        report = self.copy_package(package_path)
        self.events.done()
        return report

    def uninstall(self, package_path: Path) -> None:
        """Do nothing: removing an installed shop is not supported.

        Files in the installation root belong to the operator once
        deployed, so they are left in place.
        """
        logger.info(
            "Uninstall of %s from %s is not implemented; no files were removed",
            package_path,
            self.installation_root,
        )

    def update_question(self) -> str:
        return (
            "All files in the following directories will be overwritten:\n"
            f"- {self.installation_root}\n"
            "Do you want to overwrite them?"
        )

    # ------------------------------------------------------------------
    # Copy sequence
    # ------------------------------------------------------------------

    def copy_package(self, package_path: Path) -> DeploymentReport:
        """Run the full copy sequence for *package_path*."""
        package_path = Path(package_path).absolute()
        source_dir = package_source_directory(package_path, self.layout)
        report = DeploymentReport(package_path=package_path, installation_root=self.installation_root)

        steps: list[tuple[str, Callable[[], StepResult]]] = [
            (STEP_SOURCE, lambda: self._copy_shop_source(source_dir)),
            (STEP_SETUP, lambda: self._copy_setup_files(source_dir)),
            (STEP_CONFIG, self._copy_configuration_template),
        ]
        for category in preserved_categories(self.layout):
            steps.append((category.name, lambda category=category: self._copy_category(source_dir, category)))

        for name, action in steps:
            report.steps.append(self._run_step(name, action))
        return report

    def _run_step(self, name: str, action: Callable[[], StepResult]) -> StepResult:
        self.events.step_started(name)
        try:
            result = action()
        except DeploymentStepError:
            raise
        except DeployError as exc:
            raise DeploymentStepError(
                name,
                exc,
                source=getattr(exc, "source", None) or getattr(exc, "path", None),
                destination=getattr(exc, "destination", None),
            ) from exc
        except OSError as exc:
            raise DeploymentStepError(
                name,
                exc,
                source=Path(exc.filename) if exc.filename else None,
                destination=Path(exc.filename2) if exc.filename2 else None,
            ) from exc

        if result.skipped:
            self.events.step_skipped(name, result.reason)
        else:
            self.events.step_finished(name, result)
        return result

    def _copy_shop_source(self, source_dir: Path) -> StepResult:
        exclude = bulk_exclusion_filters(self.layout, self.blacklist)
        copied = copy_tree(source_dir, self.installation_root, exclude)
        return StepResult(STEP_SOURCE, copied=[self.installation_root / rel for rel in copied])

    def _copy_setup_files(self, source_dir: Path) -> StepResult:
        config_path = self.installation_root / self.layout.configuration_file
        if not is_unconfigured_or_missing(config_path):
            return StepResult(STEP_SETUP, skipped=True, reason=f"{config_path.name} is already configured")

        setup_source = source_dir / self.layout.setup_directory
        if not setup_source.is_dir():
            return StepResult(STEP_SETUP, skipped=True, reason=f"package has no {self.layout.setup_directory} directory")

        setup_target = self.installation_root / self.layout.setup_directory
        copied = copy_tree(setup_source, setup_target)
        return StepResult(STEP_SETUP, copied=[setup_target / rel for rel in copied])

    def _copy_configuration_template(self) -> StepResult:
        config_path = self.installation_root / self.layout.configuration_file
        template_path = self.installation_root / self.layout.configuration_template

        result = StepResult(STEP_CONFIG)
        if copy_if_missing(template_path, config_path):
            result.copied.append(config_path)
        else:
            result.preserved.append(config_path)
        return result

    def _copy_category(self, source_dir: Path, category: FileCategory) -> StepResult:
        result = StepResult(category.name)
        for package_file in glob_files(source_dir, category.pattern):
            target_file = map_to_installation(source_dir, package_file, self.installation_root)
            if category.policy is CopyPolicy.OVERWRITE:
                copy_file(package_file, target_file)
                result.copied.append(target_file)
            elif copy_if_missing(package_file, target_file):
                result.copied.append(target_file)
            else:
                logger.debug("Keeping existing %s", target_file)
                result.preserved.append(target_file)
        return result


__all__ = ["ConfirmCallback", "DeploymentReport", "ShopPackageInstaller"]
