"""Tests for gitworkflow.workflow.lifecycle module."""

from unittest.mock import MagicMock

import pytest

from gitworkflow.git import GitOperationError
from gitworkflow.workflow import (
    BranchLifecycle,
    FinishStatus,
    UnsetResult,
    UnsetStatus,
    WorkflowSettings,
)

MODULE = "gitworkflow.workflow.lifecycle"


@pytest.fixture
def git_ops(mocker):
    """Mock every git command used by the lifecycle."""
    ops = MagicMock()
    for name in ("checkout_branch", "create_branch", "pull", "delete_branch", "get_upstream"):
        ops.attach_mock(mocker.patch(f"{MODULE}.{name}"), name)
    ops.get_upstream.return_value = "origin/main"
    mocker.patch(f"{MODULE}.supports_branch_config", return_value=True)
    return ops


@pytest.fixture
def manager():
    manager = MagicMock()
    manager.unset.return_value = UnsetResult("feature", UnsetStatus.UNSET, "config_feature", ".gitmessage_local_HT-1_feature", True)
    return manager


@pytest.fixture
def lifecycle(temp_dir, manager):
    return BranchLifecycle(temp_dir, manager=manager, settings=WorkflowSettings(base_branch="main"))


class TestCreateBranch:
    """Tests for BranchLifecycle.create_branch."""

    def test_checkout_pull_create(self, lifecycle, git_ops, temp_dir):
        result = lifecycle.create_branch("fix-login-20240101-cd")

        assert [c[0] for c in git_ops.mock_calls] == ["checkout_branch", "get_upstream", "pull", "create_branch"]
        git_ops.checkout_branch.assert_called_once_with("main", cwd=temp_dir)
        git_ops.create_branch.assert_called_once_with("fix-login-20240101-cd", cwd=temp_dir)
        assert result.base_branch == "main"
        assert result.pulled is True

    def test_explicit_base_branch(self, lifecycle, git_ops, temp_dir):
        result = lifecycle.create_branch("fix-login-20240101-cd", base_branch="develop")

        git_ops.checkout_branch.assert_called_once_with("develop", cwd=temp_dir)
        assert result.base_branch == "develop"

    def test_skip_pull(self, lifecycle, git_ops):
        result = lifecycle.create_branch("fix-login-20240101-cd", skip_pull=True)

        git_ops.pull.assert_not_called()
        git_ops.get_upstream.assert_not_called()
        assert result.pulled is False

    def test_no_upstream_no_pull(self, lifecycle, git_ops):
        git_ops.get_upstream.return_value = None

        result = lifecycle.create_branch("fix-login-20240101-cd")

        git_ops.pull.assert_not_called()
        assert result.pulled is False

    def test_git_failure_propagates(self, lifecycle, git_ops):
        git_ops.checkout_branch.side_effect = GitOperationError("checkout failed")

        with pytest.raises(GitOperationError):
            lifecycle.create_branch("fix-login-20240101-cd")

        git_ops.create_branch.assert_not_called()


class TestFinishBranch:
    """Tests for BranchLifecycle.finish_branch."""

    def test_finishes_branch(self, lifecycle, git_ops, manager, temp_dir):
        result = lifecycle.finish_branch("feature", skip_confirmation=True)

        manager.unset.assert_called_once_with("feature", keep_file=False)
        git_ops.checkout_branch.assert_called_once_with("main", cwd=temp_dir)
        git_ops.pull.assert_called_once()
        git_ops.delete_branch.assert_called_once_with("feature", cwd=temp_dir)
        assert result.status == FinishStatus.FINISHED
        assert result.deleted is True
        assert result.pulled is True
        assert result.unset_result.status == UnsetStatus.UNSET
        assert result.warnings == []

    def test_declined(self, lifecycle, git_ops, manager):
        confirm = MagicMock(return_value=False)

        result = lifecycle.finish_branch("feature", confirm=confirm)

        assert result.status == FinishStatus.ABORTED
        confirm.assert_called_once()
        manager.unset.assert_not_called()
        git_ops.checkout_branch.assert_not_called()

    def test_confirmed(self, lifecycle, git_ops):
        confirm = MagicMock(return_value=True)

        result = lifecycle.finish_branch("feature", confirm=confirm)

        assert result.status == FinishStatus.FINISHED
        assert "feature" in confirm.call_args.args[0]

    def test_skip_confirmation_does_not_prompt(self, lifecycle, git_ops):
        confirm = MagicMock(return_value=False)

        result = lifecycle.finish_branch("feature", skip_confirmation=True, confirm=confirm)

        assert result.status == FinishStatus.FINISHED
        confirm.assert_not_called()

    def test_old_git_skips_unset(self, lifecycle, git_ops, manager, mocker):
        mocker.patch(f"{MODULE}.supports_branch_config", return_value=False)

        result = lifecycle.finish_branch("feature", skip_confirmation=True)

        manager.unset.assert_not_called()
        assert result.unset_result is None
        assert result.deleted is True
        assert len(result.warnings) == 1

    def test_delete_failure_is_a_warning(self, lifecycle, git_ops):
        git_ops.delete_branch.side_effect = GitOperationError("Unable to delete branch feature.")

        result = lifecycle.finish_branch("feature", skip_confirmation=True)

        assert result.status == FinishStatus.FINISHED
        assert result.deleted is False
        assert "deleted manually" in result.warnings[0]

    def test_checkout_failure_propagates(self, lifecycle, git_ops):
        git_ops.checkout_branch.side_effect = GitOperationError("checkout failed")

        with pytest.raises(GitOperationError):
            lifecycle.finish_branch("feature", skip_confirmation=True)

        git_ops.delete_branch.assert_not_called()
