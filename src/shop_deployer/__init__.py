"""
shop-deployer - deploy shop packages without clobbering local changes.

Usage:
    shop-deployer install <package-path>
    shop-deployer update <package-path>
    shop-deployer status
"""

import sys

import typer
from rich.console import Console

from shop_deployer.cli.commands import register_commands

__version__ = "0.1.0"

console = Console()

app = typer.Typer(
    name="shop-deployer",
    help="Deploy shop packages into a live installation while keeping operator customizations",
    add_completion=False,
    invoke_without_command=True,
)


def _version_callback(value: bool):
    if value:
        console.print(f"shop-deployer {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Show usage hint when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        console.print("[dim]Run 'shop-deployer --help' for usage information[/dim]")


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
