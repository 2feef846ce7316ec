"""Tests for gitworkflow.workflow.init module."""

import shutil

import pytest

from gitworkflow.git import ConfigStore
from gitworkflow.workflow import InitStatus, WorkflowState, get_workflow_state, init_workflow

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


class TestGetWorkflowState:
    """Tests for get_workflow_state function."""

    def test_uninitialized(self, git_repo):
        assert get_workflow_state(git_repo) == WorkflowState.UNINITIALIZED

    def test_initialized(self, git_repo):
        init_workflow(git_repo)

        assert get_workflow_state(git_repo) == WorkflowState.INITIALIZED

    def test_missing_include(self, git_repo):
        config_path = git_repo / ".git" / "config_workflow"
        ConfigStore(git_repo).set("workflow.configpath", str(config_path), file=config_path)

        assert get_workflow_state(git_repo) == WorkflowState.MISSING_INCLUDE

    def test_missing_file(self, git_repo):
        init_workflow(git_repo)
        (git_repo / ".git" / "config_workflow").unlink()

        # The include is still in the local config but resolves to nothing
        assert get_workflow_state(git_repo) == WorkflowState.UNINITIALIZED


class TestInitWorkflow:
    """Tests for init_workflow function."""

    def test_creates_config_and_include(self, git_repo, read_git_config):
        status = init_workflow(git_repo)

        config_path = git_repo / ".git" / "config_workflow"
        assert status == InitStatus.CREATED
        assert config_path.is_file()
        assert read_git_config(git_repo, "-f", str(config_path), "--get", "workflow.configpath") == str(config_path)
        assert read_git_config(git_repo, "--local", "--get-all", "include.path") == "config_workflow"

    def test_second_run_is_a_no_op(self, git_repo, read_git_config):
        assert init_workflow(git_repo) == InitStatus.CREATED
        assert init_workflow(git_repo) == InitStatus.ALREADY_INITIALIZED

        assert read_git_config(git_repo, "--local", "--get-all", "include.path") == "config_workflow"

    def test_recreates_deleted_file_without_duplicate_include(self, git_repo, read_git_config):
        init_workflow(git_repo)
        (git_repo / ".git" / "config_workflow").unlink()

        assert init_workflow(git_repo) == InitStatus.CREATED

        assert (git_repo / ".git" / "config_workflow").is_file()
        assert read_git_config(git_repo, "--local", "--get-all", "include.path") == "config_workflow"

    def test_keeps_existing_settings(self, git_repo):
        config_path = git_repo / ".git" / "config_workflow"
        store = ConfigStore(git_repo)
        store.set("workflow.initials", "cd", file=config_path)

        init_workflow(git_repo, store)

        assert store.get("workflow.initials", file=config_path) == "cd"
        assert store.get("workflow.initials") == "cd"
