"""Top-level callback for the git-workflow application."""

from typing import Optional

import typer

from gitworkflow import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-workflow {__version__}")
        raise typer.Exit()


def main_command(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Branch naming, per-branch commit templates and cleanup for git."""
