"""Branch naming helpers.

Branch names follow the format:

    [<client>-]<description>-<yyyymmdd>-<initials>
"""

import re
from datetime import datetime
from typing import Optional

from gitworkflow.workflow.exceptions import NamingPolicyViolationError

TIMESTAMP_FORMAT = "%Y%m%d"

_SEPARATOR_RUN = re.compile(r"[ _]+")


def sanitize(text: str) -> str:
    """Format free-form input for use in a branch name.

    Lowercases, trims surrounding whitespace and replaces runs of spaces and
    underscores with a single hyphen.

    >>> sanitize("  My Client_Name ")
    'my-client-name'
    """
    return _SEPARATOR_RUN.sub("-", text.strip().lower())


def default_timestamp(now: Optional[datetime] = None) -> str:
    """Return today's date (or `now`) as yyyymmdd."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def build_branch_name(
    client: Optional[str],
    description: str,
    timestamp: str,
    initials: str,
) -> str:
    """Compose a branch name from its parts.

    The client segment (and its hyphen) is left out when client is empty.
    """
    parts = [sanitize(client or ""), sanitize(description), sanitize(timestamp), sanitize(initials)]
    if not parts[0]:
        parts = parts[1:]
    return "-".join(parts)


def check_forbidden_patterns(branch_name: str, patterns: list[str]) -> None:
    """Reject a branch name that contains any of the given patterns.

    Raises:
        NamingPolicyViolationError: For the first pattern found in the name.
    """
    for pattern in patterns:
        if pattern and pattern in branch_name:
            raise NamingPolicyViolationError(branch_name, pattern)
