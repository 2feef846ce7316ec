"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from gitworkflow.git import get_current_branch
from gitworkflow.workflow import (
    InvalidTicketFormatError,
    TemplateManager,
    UnsetResult,
    UnsetStatus,
    sanitize,
)

INDENT = "  "


def echo_success(message: str, *details: str) -> None:
    typer.echo(f"✓ {message}")
    for line in details:
        typer.echo(f"{INDENT}{line}")


def echo_warning(message: str, *details: str) -> None:
    typer.echo(f"Warning: {message}", err=True)
    for line in details:
        typer.echo(f"{INDENT}{line}", err=True)


def echo_error(message: str, *details: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    for line in details:
        typer.echo(f"{INDENT}{line}", err=True)


def confirm(question: str) -> bool:
    return typer.confirm(question, default=False)


def require_current_branch(repo_root: Path) -> str:
    """Get the checked-out branch, exiting if HEAD is detached.

    Raises:
        typer.Exit: In detached HEAD state.
    """
    branch = get_current_branch(cwd=repo_root)
    if branch is None:
        echo_error("HEAD is detached. Check out a branch first.")
        raise typer.Exit(1)
    return branch


def prompt_required(label: str, error_message: str) -> str:
    """Prompt until the sanitized answer is not blank."""
    while True:
        value = sanitize(typer.prompt(label))
        if value:
            return value
        echo_error(error_message)


def prompt_optional(label: str) -> str:
    return sanitize(typer.prompt(label, default="", show_default=False))


def prompt_ticket(manager: TemplateManager, ticket: Optional[str] = None) -> str:
    """Get a ticket number that passes validation.

    A ticket passed on the command line is used if valid; otherwise the user
    is prompted until a valid one is entered.

    Returns:
        The ticket as entered (formatting is applied when configuring).
    """
    if ticket:
        try:
            manager.format_ticket(ticket)
            return ticket
        except InvalidTicketFormatError as e:
            echo_error(str(e))

    while True:
        ticket = typer.prompt("Ticket number")
        try:
            manager.format_ticket(ticket)
            return ticket
        except InvalidTicketFormatError:
            echo_error(
                "enter a valid ticket number.",
                f"Expected format: {manager.settings.ticket_input_format_regex}",
            )


def report_unset(result: UnsetResult) -> None:
    """Print the outcome of unsetting a branch's template."""
    if result.status == UnsetStatus.NOTHING_CONFIGURED:
        typer.echo(f"No config file specified for branch {result.branch}.")
        return

    echo_success(
        f"Unset commit template config for branch {result.branch}.",
        f"Will no longer include configs from .git/{result.config_file}",
        f"when on branch {result.branch}.",
    )

    if result.status == UnsetStatus.NO_TEMPLATE:
        echo_warning(
            f"Branch config .git/{result.config_file} did not set commit.template.",
            "No template file to remove.",
        )
        return

    if result.template_kept:
        echo_warning(f"--keep-file was specified, leaving template file {result.template_file}.")
    elif result.template_removed:
        echo_success(f"Removed template file {result.template_file}.")
    else:
        echo_warning(f"Template file {result.template_file} not found.")
