"""Bulk cleanup of branch templates and orphaned template files."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from gitworkflow.git.branch import get_current_branch
from gitworkflow.workflow.templates import TemplateManager, UnsetResult


@dataclass
class TidyPlan:
    """What a tidy run would remove.

    Attributes:
        target_branches: Branches whose templates and configs get unset.
        orphan_templates: Template files with no configured branch.
    """

    target_branches: list[str] = field(default_factory=list)
    orphan_templates: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.target_branches and not self.orphan_templates


class TidyStatus(Enum):
    NOTHING_TO_DO = "nothing_to_do"
    ABORTED = "aborted"
    DONE = "done"


@dataclass
class TidyResult:
    status: TidyStatus
    unset_results: list[UnsetResult] = field(default_factory=list)
    removed_orphans: list[str] = field(default_factory=list)


class RepoTidyer:
    """Plan and run cleanup of configured branches and orphaned templates."""

    def __init__(self, repo_root: Path, manager: Optional[TemplateManager] = None):
        self.repo_root = Path(repo_root)
        self.manager = manager or TemplateManager(self.repo_root)

    def plan(self, include_current_branch: bool = False, orphans_only: bool = False) -> TidyPlan:
        """Work out which branches and template files to clean up.

        Args:
            include_current_branch: Also unset the checked-out branch.
            orphans_only: Only remove orphaned template files.
        """
        current_branch = get_current_branch(cwd=self.repo_root)
        protect_current = current_branch is not None and not include_current_branch

        configured = self.manager.list_configured_branches()

        exclude = None
        if protect_current:
            for entry in configured:
                if entry.branch == current_branch:
                    exclude = entry.template_file
                    break

        targets = []
        if not orphans_only:
            targets = [
                entry.branch
                for entry in configured
                if not (protect_current and entry.branch == current_branch)
            ]

        orphans = sorted(self.manager.find_orphans(exclude=exclude))
        return TidyPlan(target_branches=targets, orphan_templates=orphans)

    def execute(
        self,
        plan: TidyPlan,
        skip_confirmation: bool = False,
        confirm: Optional[Callable[[str], bool]] = None,
    ) -> TidyResult:
        """Carry out a tidy plan.

        An empty plan returns NOTHING_TO_DO without asking for confirmation.
        """
        if plan.is_empty:
            return TidyResult(TidyStatus.NOTHING_TO_DO)

        if not skip_confirmation and confirm is not None:
            question = (
                f"Unset templates for {len(plan.target_branches)} branch(es) and "
                f"remove {len(plan.orphan_templates)} orphaned template(s)?"
            )
            if not confirm(question):
                return TidyResult(TidyStatus.ABORTED)

        result = TidyResult(TidyStatus.DONE)
        for branch in plan.target_branches:
            result.unset_results.append(self.manager.unset(branch, keep_file=False))

        for filename in plan.orphan_templates:
            path = self.repo_root / filename
            if path.is_file():
                path.unlink()
                result.removed_orphans.append(filename)

        return result
