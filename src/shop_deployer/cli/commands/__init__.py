"""CLI command modules for shop-deployer."""

import typer

from .deploy import install, status, uninstall, update


def register_commands(app: typer.Typer) -> None:
    """Attach all top-level commands to *app*."""
    app.command()(install)
    app.command()(update)
    app.command()(uninstall)
    app.command()(status)


__all__ = ["install", "register_commands", "status", "uninstall", "update"]
