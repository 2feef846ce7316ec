"""Git version detection.

Per-branch configuration relies on `includeIf "onbranch:..."`, which was
added in git 2.23.
"""

import re
from typing import Optional

from gitworkflow.git.exceptions import GitError, GitVersionUnsupportedError
from gitworkflow.git.runner import _run_git_command

MIN_BRANCH_CONFIG_VERSION = (2, 23, 0)

_VERSION_PATTERN = re.compile(r"git version (\d+)\.(\d+)(?:\.(\d+))?")


def parse_git_version(output: str) -> tuple[int, int, int]:
    """Parse the output of `git --version`.

    Args:
        output: Text such as "git version 2.39.2 (Apple Git-143)".

    Returns:
        (major, minor, patch) tuple.

    Raises:
        GitError: If the output does not look like a git version string.
    """
    match = _VERSION_PATTERN.search(output)
    if not match:
        raise GitError(f"Unable to determine git version from: {output!r}")
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch or 0)


def get_git_version() -> tuple[int, int, int]:
    """Return the installed git version as a (major, minor, patch) tuple."""
    return parse_git_version(_run_git_command(["--version"]))


def format_version(version: tuple[int, int, int]) -> str:
    return ".".join(str(part) for part in version)


def supports_branch_config(version: Optional[tuple[int, int, int]] = None) -> bool:
    """Check whether git supports per-branch conditional includes.

    Args:
        version: Version tuple to check. Queries git when omitted.

    Returns:
        True for git 2.23 or newer.
    """
    if version is None:
        version = get_git_version()
    return version >= MIN_BRANCH_CONFIG_VERSION


def verify_git_version() -> tuple[int, int, int]:
    """Ensure the installed git supports per-branch config.

    Returns:
        The installed version.

    Raises:
        GitVersionUnsupportedError: If git is older than 2.23.
    """
    version = get_git_version()
    if not supports_branch_config(version):
        raise GitVersionUnsupportedError(
            f"Requires git version {format_version(MIN_BRANCH_CONFIG_VERSION)} or greater "
            f"(installed: {format_version(version)})"
        )
    return version
