"""CLI command for initializing the workflow config of a repository."""

import typer

from gitworkflow.git import GitError, get_repo_root, verify_git_version
from gitworkflow.workflow import InitStatus, init_workflow
from gitworkflow.workflow.paths import get_workflow_config_path
from gitworkflow.cli.utils import echo_error, echo_success


def init_command() -> None:
    """Set up the current repository for the workflow commands.

    Commands that need the workflow config run this automatically, so it
    rarely has to be called directly.
    """
    try:
        repo_root = get_repo_root()
        verify_git_version()

        typer.echo("Creating workflow config file for this repo...")
        status = init_workflow(repo_root)
        if status == InitStatus.ALREADY_INITIALIZED:
            typer.echo("Repo already initialized.")
            return

        echo_success("Workflow config created:", str(get_workflow_config_path(repo_root)))
        echo_success("Repo configured. Initialization complete.")

    except GitError as e:
        echo_error(str(e))
        raise typer.Exit(1)
