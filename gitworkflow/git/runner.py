"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- _run_git_process: Run a git command and return the completed process
- get_repo_root: Get the root directory of the current git repository
- verify_git_repo: Check that the working directory is inside a repository
"""

import subprocess
from pathlib import Path
from typing import Optional

from gitworkflow.git.exceptions import (
    GitError,
    GitOperationError,
    NotAGitRepositoryError,
)


def _run_git_process(args: list[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """Run a git command without raising on a non-zero exit.

    Callers that need to interpret git's exit codes (e.g. git config, where
    1 means "key not found") use this instead of _run_git_command.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the current directory).

    Returns:
        The completed process with stdout and stderr captured as text.

    Raises:
        GitError: If git is not installed.
    """
    try:
        return subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=False,
            cwd=cwd,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the current directory).

    Returns:
        The stdout of the git command.

    Raises:
        GitOperationError: If the command fails.
        GitError: If git is not installed.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitOperationError(
            f"Git command failed: git {' '.join(args)}\n{stderr}",
            args_list=args,
            stderr=stderr,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        NotAGitRepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
        return Path(root)
    except GitOperationError:
        raise NotAGitRepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )


def verify_git_repo(cwd: Optional[Path] = None) -> None:
    """Check that git considers the working directory part of a repository.

    Raises:
        NotAGitRepositoryError: If `git status` fails.
    """
    try:
        _run_git_command(["status", "--porcelain"], cwd=cwd)
    except GitOperationError as e:
        raise NotAGitRepositoryError(f"Not in a git repository.\n{e.stderr}".strip())
