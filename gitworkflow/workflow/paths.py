"""Path and file name helpers for workflow artifacts.

Contains:
- get_git_dir: Get the .git directory
- get_workflow_config_path: Get path to .git/config_workflow
- branch_config_name: Name of a branch's config file inside .git/
- get_branch_config_path: Get path to a branch's config file
- template_filename: Name of a branch's commit template file
- include_directive_key: Config key of a branch's include directive
"""

from pathlib import Path

WORKFLOW_CONFIG_NAME = "config_workflow"
BRANCH_CONFIG_PREFIX = "config_"
TEMPLATE_PREFIX = ".gitmessage_local"
TEMPLATE_GLOB = f"{TEMPLATE_PREFIX}*"

# Canonical (lower-cased) form used by `git config --get-regexp` output
INCLUDE_KEY_PREFIX = "includeif.onbranch:"
INCLUDE_KEY_SUFFIX = ".path"
INCLUDE_KEY_PATTERN = r"^includeif\.onbranch:.*\.path$"


def get_git_dir(repo_root: Path) -> Path:
    return repo_root / ".git"


def get_workflow_config_path(repo_root: Path) -> Path:
    """Return path to the workflow config file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .git/config_workflow.
    """
    return get_git_dir(repo_root) / WORKFLOW_CONFIG_NAME


def flatten_branch(branch: str) -> str:
    """Strip path separators so a branch name can be used in a flat file name."""
    return branch.replace("/", "")


def branch_config_name(branch: str) -> str:
    """Return the file name of a branch's config, relative to .git/."""
    return f"{BRANCH_CONFIG_PREFIX}{flatten_branch(branch)}"


def get_branch_config_path(repo_root: Path, config_name: str) -> Path:
    return get_git_dir(repo_root) / config_name


def template_filename(ticket: str, branch: str) -> str:
    """Return the file name of a commit template, relative to the repo root.

    Both the ticket and the branch are part of the name so templates for
    different branches or tickets never collide.
    """
    return f"{TEMPLATE_PREFIX}_{ticket}_{flatten_branch(branch)}"


def include_directive_key(branch: str) -> str:
    return f"includeIf.onbranch:{branch}.path"


def branch_from_include_key(key: str) -> str:
    """Extract the branch name from a canonical include directive key.

    >>> branch_from_include_key("includeif.onbranch:feature/x.path")
    'feature/x'
    """
    return key[len(INCLUDE_KEY_PREFIX):-len(INCLUDE_KEY_SUFFIX)]
