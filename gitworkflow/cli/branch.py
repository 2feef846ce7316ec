"""CLI commands for creating and finishing branches."""

from typing import Optional

import typer

from gitworkflow.git import (
    GitError,
    get_repo_root,
    supports_branch_config,
    verify_git_repo,
)
from gitworkflow.workflow import (
    BranchLifecycle,
    FinishStatus,
    NamingPolicyViolationError,
    WorkflowError,
    build_branch_name,
    check_forbidden_patterns,
    default_timestamp,
    sanitize,
)
from gitworkflow.cli.utils import (
    confirm,
    echo_error,
    echo_success,
    echo_warning,
    prompt_optional,
    prompt_required,
    prompt_ticket,
    report_unset,
    require_current_branch,
)


def branch_create_command(
    client: Optional[str] = typer.Option(
        None,
        "--client",
        "-c",
        help="Client name to prefix the branch with",
    ),
    no_client: bool = typer.Option(
        False,
        "--no-client",
        "-C",
        help="Don't prefix the branch with a client name (overrides --client)",
    ),
    description: Optional[str] = typer.Option(
        None,
        "--description",
        "-d",
        help="Brief description of the work",
    ),
    initials: Optional[str] = typer.Option(
        None,
        "--initials",
        "-i",
        help="Your initials (defaults to workflow.initials)",
    ),
    base_branch: Optional[str] = typer.Option(
        None,
        "--base-branch",
        "-b",
        help="Branch to create the new branch from (defaults to workflow.baseBranch)",
    ),
    use_current_as_base: bool = typer.Option(
        False,
        "--use-current-as-base",
        help="Create the new branch from the current branch",
    ),
    timestamp: Optional[str] = typer.Option(
        None,
        "--timestamp",
        "-t",
        help="Date part of the branch name (defaults to today, yyyymmdd)",
    ),
    ticket: Optional[str] = typer.Option(
        None,
        "--ticket",
        "-k",
        help="Ticket number for the commit template",
    ),
    no_ticket: bool = typer.Option(
        False,
        "--no-ticket",
        help="Don't set up a commit template for the new branch",
    ),
    skip_pull: bool = typer.Option(
        False,
        "--skip-pull",
        "-P",
        help="Don't pull the base branch before branching",
    ),
    skip_name_check: bool = typer.Option(
        False,
        "--skip-name-check",
        help="Don't check the name against workflow.badBranchNamePatterns",
    ),
) -> None:
    """Create a branch named [<client>-]<description>-<yyyymmdd>-<initials>."""
    if base_branch and use_current_as_base:
        echo_error("--base-branch and --use-current-as-base cannot be used together.")
        raise typer.Exit(1)
    if ticket and no_ticket:
        echo_error("--ticket and --no-ticket cannot be used together.")
        raise typer.Exit(1)

    try:
        repo_root = get_repo_root()
        verify_git_repo(cwd=repo_root)
        lifecycle = BranchLifecycle(repo_root)
        settings = lifecycle.settings

        # Client
        client_part = ""
        if not no_client:
            client_part = sanitize(client or "") or prompt_optional("(Optional) Client name")

        # Description
        desc = sanitize(description or "")
        if not desc:
            desc = prompt_required("Brief description of ticket", "description must not be blank.")

        # Initials
        user_initials = sanitize(initials or "")
        if not user_initials and settings.initials:
            user_initials = sanitize(settings.initials)
            if user_initials:
                typer.echo(f"Initials configured in workflow.initials: {user_initials}")
        if not user_initials:
            user_initials = prompt_required("Initials", "must enter initials.")

        branch_name = build_branch_name(
            client_part,
            desc,
            timestamp or default_timestamp(),
            user_initials,
        )

        if not skip_name_check:
            try:
                check_forbidden_patterns(branch_name, settings.bad_branch_name_patterns)
            except NamingPolicyViolationError as e:
                echo_error(str(e), "Use --skip-name-check to create it anyway.")
                raise typer.Exit(1)

        base = base_branch
        if use_current_as_base:
            base = require_current_branch(repo_root)
        base = base or settings.base_branch

        typer.echo(f"Creating new branch {branch_name} from {base}...")
        result = lifecycle.create_branch(branch_name, base_branch=base, skip_pull=skip_pull)
        if skip_pull:
            typer.echo(f"(Skipped pulling updates to {base})")
        elif result.pulled:
            typer.echo(f"Pulled updates to {base}.")
        echo_success(f"Created branch {branch_name}.")

        # Commit template
        if no_ticket or not settings.enable_commit_template:
            return
        if not supports_branch_config():
            echo_warning("Installed git does not support per-branch config; skipping commit template.")
            return

        manager = lifecycle.manager
        ticket = prompt_ticket(manager, ticket)
        template_path = manager.configure(branch_name, ticket)
        echo_success(f"Commit template configured for branch {branch_name}:", str(template_path))

    except (GitError, WorkflowError, OSError) as e:
        echo_error(str(e))
        raise typer.Exit(1)


def branch_finish_command(
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch to finish (defaults to the current branch)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Don't ask for confirmation",
    ),
) -> None:
    """Remove a branch's commit template, switch to the base branch and delete it."""
    try:
        repo_root = get_repo_root()
        lifecycle = BranchLifecycle(repo_root)
        name = branch or require_current_branch(repo_root)

        if name == lifecycle.settings.base_branch:
            echo_error(f"Refusing to finish the base branch {name}.")
            raise typer.Exit(1)

        result = lifecycle.finish_branch(name, skip_confirmation=force, confirm=confirm)
        if result.status == FinishStatus.ABORTED:
            typer.echo("Aborted.")
            raise typer.Exit(0)

        if result.unset_result is not None:
            report_unset(result.unset_result)
        if result.pulled:
            typer.echo(f"Pulled updates to {result.base_branch}.")
        if result.deleted:
            echo_success(f"Deleted branch {name}.")
        for warning in result.warnings:
            echo_warning(warning)

    except (GitError, WorkflowError, OSError) as e:
        echo_error(str(e))
        raise typer.Exit(1)
