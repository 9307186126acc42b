"""CLI commands deploying a shop package.

Usage:
    shop-deployer install vendor/oxid-esales/oxideshop-ce
    shop-deployer update vendor/oxid-esales/oxideshop-ce           # asks before overwriting
    shop-deployer update vendor/oxid-esales/oxideshop-ce --yes     # no prompt
    shop-deployer status

The installation root comes from ``--target``, the ``SHOP_DEPLOYER_TARGET``
environment variable, or ``target-directory`` in ``shop-deployer.yaml``
(in that order).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from shop_deployer.cli.ui import ConsoleDeploymentEvents
from shop_deployer.core.config import load_package_manifest, load_project_config
from shop_deployer.core.constants import DEFAULT_LAYOUT
from shop_deployer.core.paths import locate_project_root
from shop_deployer.deploy.config_state import is_unconfigured_or_missing
from shop_deployer.deploy.exceptions import DeployConfigError, DeploymentStepError
from shop_deployer.deploy.filters import combine_filters
from shop_deployer.deploy.installer import ShopPackageInstaller

console = Console()

PACKAGE_ARGUMENT = typer.Argument(
    ...,
    exists=True,
    file_okay=False,
    dir_okay=True,
    resolve_path=True,
    help="Path to the extracted shop package",
)
TARGET_OPTION = typer.Option(
    None,
    "--target",
    "-t",
    help="Installation root (overrides shop-deployer.yaml and SHOP_DEPLOYER_TARGET)",
)


def _resolve_installation_root(target: Optional[Path]) -> tuple[Path, list[str]]:
    project_root = locate_project_root() or Path.cwd()
    config = load_project_config(project_root)
    root = target.expanduser().absolute() if target is not None else config.installation_root
    return root, config.blacklist


def _build_installer(
    package: Path,
    target: Optional[Path],
    assume_yes: bool = False,
    verbose: bool = False,
) -> tuple[ShopPackageInstaller, ConsoleDeploymentEvents]:
    try:
        installation_root, project_blacklist = _resolve_installation_root(target)
        manifest = load_package_manifest(package)
    except DeployConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    def confirm(question: str) -> bool:
        if assume_yes:
            return True
        return typer.confirm(question, default=False)

    events = ConsoleDeploymentEvents(console, verbose=verbose)
    installer = ShopPackageInstaller(
        installation_root,
        layout=DEFAULT_LAYOUT.with_source_directory(manifest.source_directory),
        blacklist=combine_filters([project_blacklist, manifest.blacklist]),
        confirm=confirm,
        events=events,
        description=manifest.description,
    )
    return installer, events


def _report_failure(events: ConsoleDeploymentEvents, error: DeploymentStepError) -> None:
    events.step_failed(error.step)
    console.print(f"[red]Error:[/red] {error}")
    console.print("[yellow]Remaining steps were not run. Fix the problem and run the command again.[/yellow]")


def install(
    package: Path = PACKAGE_ARGUMENT,
    target: Optional[Path] = TARGET_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every copied and kept file"),
) -> None:
    """Install the shop package into the installation root.

    Core files are copied over; .htaccess, robots.txt, favicon.ico,
    offline.html and config.inc.php are only created when missing.
    """
    installer, events = _build_installer(package, target, verbose=verbose)
    try:
        installer.install(package)
    except DeploymentStepError as e:
        _report_failure(events, e)
        raise typer.Exit(1)


def update(
    package: Path = PACKAGE_ARGUMENT,
    target: Optional[Path] = TARGET_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every copied and kept file"),
) -> None:
    """Update an installed shop, overwriting its core files.

    Asks for confirmation when the installation root already holds a shop.
    Declining is not an error.
    """
    installer, events = _build_installer(package, target, assume_yes=yes, verbose=verbose)
    try:
        installer.update(package)
    except DeploymentStepError as e:
        _report_failure(events, e)
        raise typer.Exit(1)


def uninstall(
    package: Path = typer.Argument(..., help="Path to the shop package"),
) -> None:
    """Uninstalling is not supported; installed files are left in place."""
    project_root = locate_project_root() or Path.cwd()
    ShopPackageInstaller(project_root).uninstall(package)
    console.print("[yellow]Uninstall is not implemented; no files were removed.[/yellow]")


def status(
    target: Optional[Path] = TARGET_OPTION,
) -> None:
    """Show whether a shop is installed and configured."""
    try:
        root, _ = _resolve_installation_root(target)
    except DeployConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    installer = ShopPackageInstaller(root)
    console.print(f"Installation root: {root}")
    if installer.is_installed():
        console.print("Installed: [green]yes[/green]")
    else:
        console.print("Installed: [yellow]no[/yellow]")

    config_path = root / DEFAULT_LAYOUT.configuration_file
    if not config_path.exists():
        console.print(f"Configuration: [yellow]{config_path.name} missing[/yellow]")
    elif is_unconfigured_or_missing(config_path):
        console.print(f"Configuration: [yellow]{config_path.name} still contains placeholders[/yellow]")
    else:
        console.print("Configuration: [green]configured[/green]")


__all__ = ["install", "status", "uninstall", "update"]
