"""Workflow policy exception classes.

Contains:
- WorkflowError: Base exception for workflow policy errors
- InvalidTicketFormatError: Raised when a ticket does not match the configured format
- NamingPolicyViolationError: Raised when a branch name contains a forbidden pattern
- InvalidBranchNameError: Raised when a name is not a valid git branch name
"""


class WorkflowError(Exception):
    """Base exception for workflow policy errors."""

    pass


class InvalidTicketFormatError(WorkflowError):
    """Raised when a ticket number does not match the configured format."""

    def __init__(self, ticket: str, pattern: str):
        super().__init__(f"Invalid ticket number {ticket!r} (expected format: {pattern})")
        self.ticket = ticket
        self.pattern = pattern


class NamingPolicyViolationError(WorkflowError):
    """Raised when a branch name contains a forbidden pattern."""

    def __init__(self, branch_name: str, pattern: str):
        super().__init__(f"Branch name {branch_name!r} contains forbidden pattern {pattern!r}")
        self.branch_name = branch_name
        self.pattern = pattern


class InvalidBranchNameError(WorkflowError):
    """Raised when a name cannot be used as a git branch name."""

    pass
