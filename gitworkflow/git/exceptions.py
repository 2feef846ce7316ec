"""Git-related exception classes.

Contains all exception classes for git operations:
- GitError: Base exception for git-related errors
- NotAGitRepositoryError: Raised outside of a git repository
- GitVersionUnsupportedError: Raised when git is too old for per-branch config
- GitOperationError: Raised when a git command exits non-zero
- ConfigError: Raised when a git config file cannot be read or written
"""

from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotAGitRepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class GitVersionUnsupportedError(GitError):
    """Raised when the installed git does not support per-branch config."""

    pass


class GitOperationError(GitError):
    """Raised when a git command fails.

    Attributes:
        args_list: The git arguments that were run.
        stderr: The stderr captured from git.
    """

    def __init__(self, message: str, args_list: Optional[list[str]] = None, stderr: str = ""):
        super().__init__(message)
        self.args_list = args_list or []
        self.stderr = stderr


class ConfigError(GitError):
    """Raised when reading or writing a git config file fails.

    Attributes:
        path: The config file involved, or None for the local repo config.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
