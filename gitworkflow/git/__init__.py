"""Git plumbing for gitworkflow.

This package wraps the git executable:
- exceptions: GitError, NotAGitRepositoryError, GitVersionUnsupportedError,
              GitOperationError, ConfigError
- runner: _run_git_command, _run_git_process, get_repo_root, verify_git_repo
- version: get_git_version, supports_branch_config, verify_git_version
- branch: get_current_branch, get_upstream, is_valid_branch_name,
          checkout_branch, create_branch, pull, delete_branch
- config: ConfigStore
"""

# Exceptions
from gitworkflow.git.exceptions import (
    ConfigError,
    GitError,
    GitOperationError,
    GitVersionUnsupportedError,
    NotAGitRepositoryError,
)

# Runner utilities
from gitworkflow.git.runner import (
    _run_git_command,
    _run_git_process,
    get_repo_root,
    verify_git_repo,
)

# Version checks
from gitworkflow.git.version import (
    MIN_BRANCH_CONFIG_VERSION,
    get_git_version,
    parse_git_version,
    supports_branch_config,
    verify_git_version,
)

# Branch utilities
from gitworkflow.git.branch import (
    checkout_branch,
    create_branch,
    delete_branch,
    get_current_branch,
    get_upstream,
    is_valid_branch_name,
    pull,
)

# Config access
from gitworkflow.git.config import ConfigStore


__all__ = [
    # Exceptions
    "ConfigError",
    "GitError",
    "GitOperationError",
    "GitVersionUnsupportedError",
    "NotAGitRepositoryError",
    # Runner
    "_run_git_command",
    "_run_git_process",
    "get_repo_root",
    "verify_git_repo",
    # Version
    "MIN_BRANCH_CONFIG_VERSION",
    "get_git_version",
    "parse_git_version",
    "supports_branch_config",
    "verify_git_version",
    # Branch
    "checkout_branch",
    "create_branch",
    "delete_branch",
    "get_current_branch",
    "get_upstream",
    "is_valid_branch_name",
    "pull",
    # Config
    "ConfigStore",
]
