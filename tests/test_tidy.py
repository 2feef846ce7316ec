"""Tests for gitworkflow.workflow.tidy module."""

import shutil
from unittest.mock import MagicMock

import pytest

from gitworkflow.workflow import (
    RepoTidyer,
    TemplateManager,
    TidyPlan,
    TidyStatus,
    UnsetStatus,
    WorkflowSettings,
)

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture
def manager(git_repo):
    return TemplateManager(git_repo, settings=WorkflowSettings())


@pytest.fixture
def tidyer(git_repo, manager):
    return RepoTidyer(git_repo, manager=manager)


class TestPlan:
    """Tests for RepoTidyer.plan."""

    def test_empty_repo(self, tidyer):
        plan = tidyer.plan()

        assert plan == TidyPlan()
        assert plan.is_empty

    def test_excludes_current_branch(self, tidyer, manager):
        manager.configure("main", "abc-1")
        manager.configure("feature-a", "abc-2")

        plan = tidyer.plan()

        assert plan.target_branches == ["feature-a"]
        assert plan.orphan_templates == []

    def test_include_current_branch(self, tidyer, manager):
        manager.configure("main", "abc-1")
        manager.configure("feature-a", "abc-2")

        plan = tidyer.plan(include_current_branch=True)

        assert plan.target_branches == ["main", "feature-a"]

    def test_orphans_only(self, tidyer, manager, git_repo):
        manager.configure("feature-a", "abc-2")
        (git_repo / ".gitmessage_local_OLD-1_gone").write_text("[OLD-1] ")

        plan = tidyer.plan(orphans_only=True)

        assert plan.target_branches == []
        assert plan.orphan_templates == [".gitmessage_local_OLD-1_gone"]

    def test_current_branch_template_not_orphaned(self, tidyer, manager, git_repo):
        """Test that the current branch's template is left alone when the branch is skipped."""
        manager.configure("main", "abc-1")

        plan = tidyer.plan()

        assert plan.target_branches == []
        assert plan.orphan_templates == []
        assert plan.is_empty

    def test_detached_head(self, tidyer, manager, mocker):
        mocker.patch("gitworkflow.workflow.tidy.get_current_branch", return_value=None)
        manager.configure("main", "abc-1")

        assert tidyer.plan().target_branches == ["main"]


class TestExecute:
    """Tests for RepoTidyer.execute."""

    def test_empty_plan_is_a_no_op(self, tidyer):
        confirm = MagicMock(return_value=True)

        result = tidyer.execute(tidyer.plan(), confirm=confirm)

        assert result.status == TidyStatus.NOTHING_TO_DO
        confirm.assert_not_called()

    def test_declined(self, tidyer, manager):
        manager.configure("feature-a", "abc-2")
        confirm = MagicMock(return_value=False)

        result = tidyer.execute(tidyer.plan(), confirm=confirm)

        assert result.status == TidyStatus.ABORTED
        confirm.assert_called_once()
        assert manager.lookup("feature-a") is not None

    def test_skip_confirmation(self, tidyer, manager):
        manager.configure("feature-a", "abc-2")
        confirm = MagicMock(return_value=False)

        result = tidyer.execute(tidyer.plan(), skip_confirmation=True, confirm=confirm)

        assert result.status == TidyStatus.DONE
        confirm.assert_not_called()

    def test_unsets_branches_and_removes_orphans(self, tidyer, manager, git_repo):
        manager.configure("main", "abc-1")
        manager.configure("feature-a", "abc-2")
        manager.configure("feature-b", "abc-3")
        (git_repo / ".gitmessage_local_OLD-1_gone").write_text("[OLD-1] ")

        result = tidyer.execute(tidyer.plan(), confirm=lambda question: True)

        assert result.status == TidyStatus.DONE
        assert [r.branch for r in result.unset_results] == ["feature-a", "feature-b"]
        assert all(r.status == UnsetStatus.UNSET for r in result.unset_results)
        assert result.removed_orphans == [".gitmessage_local_OLD-1_gone"]
        assert [entry.branch for entry in manager.list_configured_branches()] == ["main"]
        assert sorted(p.name for p in git_repo.glob(".gitmessage_local*")) == [".gitmessage_local_ABC-1_main"]

    def test_orphan_already_gone(self, tidyer, git_repo):
        plan = TidyPlan(orphan_templates=[".gitmessage_local_OLD-1_gone"])

        result = tidyer.execute(plan, skip_confirmation=True)

        assert result.status == TidyStatus.DONE
        assert result.removed_orphans == []
