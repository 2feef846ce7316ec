"""Git branch utilities.

Contains:
- get_current_branch: Get the current branch name
- get_upstream: Get the upstream tracking branch of a local branch
- is_valid_branch_name: Check a name with `git check-ref-format --branch`
- checkout_branch, create_branch, pull, delete_branch: Thin wrappers over
  the corresponding porcelain commands
"""

from pathlib import Path
from typing import Optional

from gitworkflow.git.exceptions import GitOperationError
from gitworkflow.git.runner import _run_git_command, _run_git_process


def get_current_branch(cwd: Optional[Path] = None) -> Optional[str]:
    """Get the current branch name.

    Returns:
        The current branch name, or None in detached HEAD state.
    """
    result = _run_git_process(["symbolic-ref", "--short", "-q", "HEAD"], cwd=cwd)
    branch = result.stdout.strip()
    if result.returncode != 0 or not branch:
        # Detached HEAD state
        return None
    return branch


def get_upstream(branch: str, cwd: Optional[Path] = None) -> Optional[str]:
    """Get the upstream tracking branch of a local branch.

    Args:
        branch: Local branch name.

    Returns:
        The short upstream name (e.g. 'origin/main'), or None if the branch
        has no upstream or does not exist.
    """
    output = _run_git_command(
        ["for-each-ref", "--format=%(upstream:short)", f"refs/heads/{branch}"],
        cwd=cwd,
    )
    return output or None


def is_valid_branch_name(name: str, cwd: Optional[Path] = None) -> bool:
    """Check whether a name is acceptable as a git branch name."""
    if not name:
        return False
    result = _run_git_process(["check-ref-format", "--branch", name], cwd=cwd)
    return result.returncode == 0


def checkout_branch(branch: str, cwd: Optional[Path] = None) -> None:
    _run_git_command(["checkout", branch], cwd=cwd)


def create_branch(name: str, cwd: Optional[Path] = None) -> None:
    """Create a new branch from HEAD and check it out."""
    _run_git_command(["checkout", "-b", name], cwd=cwd)


def pull(cwd: Optional[Path] = None) -> None:
    _run_git_command(["pull"], cwd=cwd)


def delete_branch(name: str, cwd: Optional[Path] = None) -> None:
    """Safely delete a local branch.

    Uses `git branch -d`, so git refuses to delete a branch that is not
    fully merged.

    Raises:
        GitOperationError: If git refuses or fails to delete the branch.
    """
    try:
        _run_git_command(["branch", "-d", name], cwd=cwd)
    except GitOperationError as e:
        raise GitOperationError(
            f"Unable to delete branch {name}.\n{e.stderr}".strip(),
            args_list=e.args_list,
            stderr=e.stderr,
        )
