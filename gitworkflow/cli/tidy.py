"""CLI command for cleaning up branch templates and orphaned template files."""

import typer

from gitworkflow.git import GitError, get_repo_root, verify_git_version
from gitworkflow.workflow import RepoTidyer, TidyStatus, WorkflowError
from gitworkflow.cli.utils import confirm, echo_error, echo_success, report_unset


def tidy_command(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Don't ask for confirmation",
    ),
    include_current_branch: bool = typer.Option(
        False,
        "--include-current-branch",
        help="Also unset the commit template of the current branch",
    ),
    orphans_only: bool = typer.Option(
        False,
        "--orphans-only",
        help="Only remove template files no branch is configured to use",
    ),
) -> None:
    """Unset commit templates for all branches and remove orphaned templates."""
    try:
        repo_root = get_repo_root()
        verify_git_version()

        tidyer = RepoTidyer(repo_root)
        plan = tidyer.plan(
            include_current_branch=include_current_branch,
            orphans_only=orphans_only,
        )

        if plan.target_branches:
            typer.echo("Branches to unset:")
            for branch in plan.target_branches:
                typer.echo(f"  - {branch}")
        if plan.orphan_templates:
            typer.echo("Orphaned templates to remove:")
            for filename in plan.orphan_templates:
                typer.echo(f"  - {filename}")

        result = tidyer.execute(plan, skip_confirmation=force, confirm=confirm)

        if result.status == TidyStatus.NOTHING_TO_DO:
            typer.echo("Nothing to tidy up.")
            return
        if result.status == TidyStatus.ABORTED:
            typer.echo("Aborted.")
            return

        for unset_result in result.unset_results:
            report_unset(unset_result)
        for filename in result.removed_orphans:
            echo_success(f"Removed orphaned template {filename}.")

        typer.echo()
        typer.echo(
            f"Tidied {len(result.unset_results)} branch(es), "
            f"removed {len(result.removed_orphans)} orphaned template(s)."
        )

    except (GitError, WorkflowError, OSError) as e:
        echo_error(str(e))
        raise typer.Exit(1)
