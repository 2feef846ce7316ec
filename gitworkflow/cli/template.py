"""CLI commands for per-branch commit templates."""

from typing import Optional

import typer

from gitworkflow.git import GitError, get_repo_root, verify_git_version
from gitworkflow.workflow import (
    InitStatus,
    TemplateManager,
    WorkflowError,
    init_workflow,
)
from gitworkflow.cli.utils import (
    echo_error,
    echo_success,
    prompt_ticket,
    report_unset,
    require_current_branch,
)


def template_set_command(
    ticket: Optional[str] = typer.Argument(
        None,
        help="Ticket number (e.g. HT-12345). Prompted for if omitted or invalid.",
    ),
) -> None:
    """Create a commit template for the current branch."""
    try:
        repo_root = get_repo_root()
        verify_git_version()
        branch = require_current_branch(repo_root)

        manager = TemplateManager(repo_root)
        ticket = prompt_ticket(manager, ticket)

        if init_workflow(repo_root, manager.store) == InitStatus.CREATED:
            echo_success("Initialized workflow config for this repo.")

        template_path = manager.configure(branch, ticket)
        echo_success("Template file created:", str(template_path))
        echo_success(f"Commit template configured for branch {branch}.")

    except (GitError, WorkflowError, OSError) as e:
        echo_error(str(e))
        raise typer.Exit(1)


def template_unset_command(
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch to unset (defaults to the current branch)",
    ),
    keep_file: bool = typer.Option(
        False,
        "--keep-file",
        "-D",
        help="Don't delete the commit template file",
    ),
) -> None:
    """Remove the commit template config for a branch."""
    try:
        repo_root = get_repo_root()
        verify_git_version()
        branch = branch or require_current_branch(repo_root)

        result = TemplateManager(repo_root).unset(branch, keep_file=keep_file)
        report_unset(result)

    except (GitError, WorkflowError, OSError) as e:
        echo_error(str(e))
        raise typer.Exit(1)


def template_list_command() -> None:
    """List branches with commit templates and orphaned template files."""
    try:
        repo_root = get_repo_root()
        manager = TemplateManager(repo_root)
        entries = manager.list_configured_branches()
        orphans = sorted(manager.find_orphans())

        typer.echo("Configured branches:")
        if entries:
            for entry in entries:
                template = entry.template_file or "(no commit.template set)"
                typer.echo(f"  - {entry.branch}: {template}")
        else:
            typer.echo("  (none)")

        if orphans:
            typer.echo()
            typer.echo("Orphaned templates:")
            for filename in orphans:
                typer.echo(f"  - {filename}")

    except (GitError, WorkflowError) as e:
        echo_error(str(e))
        raise typer.Exit(1)
