"""Workflow layer for gitworkflow.

This package implements the branch and commit template workflow:
- exceptions: WorkflowError, InvalidTicketFormatError,
              NamingPolicyViolationError, InvalidBranchNameError
- naming: sanitize, build_branch_name, check_forbidden_patterns
- settings: WorkflowSettings, load_settings
- init: WorkflowState, InitStatus, get_workflow_state, init_workflow
- templates: TemplateManager, ConfiguredBranch, UnsetResult
- lifecycle: BranchLifecycle, CreateResult, FinishResult
- tidy: RepoTidyer, TidyPlan, TidyResult
"""

# Exceptions
from gitworkflow.workflow.exceptions import (
    InvalidBranchNameError,
    InvalidTicketFormatError,
    NamingPolicyViolationError,
    WorkflowError,
)

# Naming
from gitworkflow.workflow.naming import (
    build_branch_name,
    check_forbidden_patterns,
    default_timestamp,
    sanitize,
)

# Settings
from gitworkflow.workflow.settings import WorkflowSettings, load_settings

# Initialization
from gitworkflow.workflow.init import (
    InitStatus,
    WorkflowState,
    get_workflow_state,
    init_workflow,
)

# Templates
from gitworkflow.workflow.templates import (
    BranchTemplateState,
    ConfiguredBranch,
    TemplateManager,
    UnsetResult,
    UnsetStatus,
)

# Branch lifecycle
from gitworkflow.workflow.lifecycle import (
    BranchLifecycle,
    CreateResult,
    FinishResult,
    FinishStatus,
)

# Tidy
from gitworkflow.workflow.tidy import RepoTidyer, TidyPlan, TidyResult, TidyStatus


__all__ = [
    # Exceptions
    "InvalidBranchNameError",
    "InvalidTicketFormatError",
    "NamingPolicyViolationError",
    "WorkflowError",
    # Naming
    "build_branch_name",
    "check_forbidden_patterns",
    "default_timestamp",
    "sanitize",
    # Settings
    "WorkflowSettings",
    "load_settings",
    # Init
    "InitStatus",
    "WorkflowState",
    "get_workflow_state",
    "init_workflow",
    # Templates
    "BranchTemplateState",
    "ConfiguredBranch",
    "TemplateManager",
    "UnsetResult",
    "UnsetStatus",
    # Lifecycle
    "BranchLifecycle",
    "CreateResult",
    "FinishResult",
    "FinishStatus",
    # Tidy
    "RepoTidyer",
    "TidyPlan",
    "TidyResult",
    "TidyStatus",
]
