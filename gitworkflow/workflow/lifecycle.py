"""Branch creation and completion."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from gitworkflow.git.branch import (
    checkout_branch,
    create_branch,
    delete_branch,
    get_upstream,
    pull,
)
from gitworkflow.git.exceptions import GitOperationError
from gitworkflow.git.version import supports_branch_config
from gitworkflow.workflow.templates import TemplateManager, UnsetResult
from gitworkflow.workflow.settings import WorkflowSettings

ConfirmFn = Callable[[str], bool]


@dataclass
class CreateResult:
    branch: str
    base_branch: str
    pulled: bool = False


class FinishStatus(Enum):
    FINISHED = "finished"
    ABORTED = "aborted"


@dataclass
class FinishResult:
    """Outcome of BranchLifecycle.finish_branch.

    Attributes:
        branch: Branch being finished.
        status: FINISHED, or ABORTED if the user declined.
        unset_result: Result of removing the branch's template, or None when
            git does not support per-branch config.
        pulled: Whether the base branch was pulled.
        deleted: Whether `git branch -d` succeeded.
        warnings: Problems that were reported but did not stop the finish.
    """

    branch: str
    status: FinishStatus
    base_branch: Optional[str] = None
    unset_result: Optional[UnsetResult] = None
    pulled: bool = False
    deleted: bool = False
    warnings: list[str] = field(default_factory=list)


class BranchLifecycle:
    """Create branches from the base branch and clean them up when done."""

    def __init__(
        self,
        repo_root: Path,
        manager: Optional[TemplateManager] = None,
        settings: Optional[WorkflowSettings] = None,
    ):
        self.repo_root = Path(repo_root)
        self.manager = manager or TemplateManager(self.repo_root, settings=settings)
        self.settings = settings or self.manager.settings

    def _pull_if_tracked(self, branch: str) -> bool:
        if not get_upstream(branch, cwd=self.repo_root):
            return False
        pull(cwd=self.repo_root)
        return True

    def create_branch(
        self,
        name: str,
        base_branch: Optional[str] = None,
        skip_pull: bool = False,
    ) -> CreateResult:
        """Check out the base branch, update it and branch off it.

        Args:
            name: New branch name.
            base_branch: Branch to start from (defaults to the configured base).
            skip_pull: Don't pull the base branch first.

        Raises:
            GitOperationError: If any git command fails.
        """
        base_branch = base_branch or self.settings.base_branch
        checkout_branch(base_branch, cwd=self.repo_root)

        pulled = False
        if not skip_pull:
            pulled = self._pull_if_tracked(base_branch)

        create_branch(name, cwd=self.repo_root)
        return CreateResult(name, base_branch, pulled)

    def finish_branch(
        self,
        name: str,
        skip_confirmation: bool = False,
        confirm: Optional[ConfirmFn] = None,
    ) -> FinishResult:
        """Remove a branch's template, return to the base branch and delete it.

        A failed `git branch -d` (e.g. unmerged work) is recorded as a warning
        and the branch is left for manual cleanup.

        Args:
            name: Branch to finish.
            skip_confirmation: Don't ask before making changes.
            confirm: Callback asked a yes/no question when confirming.

        Raises:
            GitOperationError: If checking out or pulling the base branch fails.
        """
        base_branch = self.settings.base_branch
        if not skip_confirmation and confirm is not None:
            if not confirm(f"Finish branch {name} and switch to {base_branch}?"):
                return FinishResult(name, FinishStatus.ABORTED, base_branch=base_branch)

        result = FinishResult(name, FinishStatus.FINISHED, base_branch=base_branch)

        if supports_branch_config():
            result.unset_result = self.manager.unset(name, keep_file=False)
        else:
            result.warnings.append(
                "Installed git does not support per-branch config; skipped removing the commit template."
            )

        checkout_branch(base_branch, cwd=self.repo_root)
        result.pulled = self._pull_if_tracked(base_branch)

        try:
            delete_branch(name, cwd=self.repo_root)
            result.deleted = True
        except GitOperationError as e:
            result.warnings.append(f"{e}\nBranch {name} must be deleted manually.")

        return result
