"""Workflow initialization for a repository.

Initialization does two things:
1. Creates .git/config_workflow. Configuration written by the workflow
   commands goes into this file.
2. Adds include.path=config_workflow to the local repo config so git picks
   up everything in that file.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from gitworkflow.git.config import ConfigStore
from gitworkflow.git.exceptions import ConfigError
from gitworkflow.workflow.paths import WORKFLOW_CONFIG_NAME, get_workflow_config_path

CONFIG_PATH_KEY = "workflow.configpath"


class WorkflowState(Enum):
    """Initialization state of a repository."""

    UNINITIALIZED = "uninitialized"
    MISSING_FILE = "missing_file"
    MISSING_INCLUDE = "missing_include"
    INITIALIZED = "initialized"


class InitStatus(Enum):
    """Outcome of init_workflow."""

    CREATED = "created"
    ALREADY_INITIALIZED = "already_initialized"


def get_workflow_state(repo_root: Path, store: Optional[ConfigStore] = None) -> WorkflowState:
    """Determine whether the repository has been set up for the workflow.

    The config file is checked on disk; the include is checked by reading
    workflow.configpath through the local config with includes resolved.
    """
    store = store or ConfigStore(repo_root)
    file_exists = get_workflow_config_path(repo_root).is_file()
    include_active = bool(store.get_local(CONFIG_PATH_KEY))

    if file_exists and include_active:
        return WorkflowState.INITIALIZED
    if file_exists:
        return WorkflowState.MISSING_INCLUDE
    if include_active:
        return WorkflowState.MISSING_FILE
    return WorkflowState.UNINITIALIZED


def init_workflow(repo_root: Path, store: Optional[ConfigStore] = None) -> InitStatus:
    """Set up the workflow config for a repository.

    Running this on an initialized repository is a no-op.

    Returns:
        InitStatus.CREATED, or InitStatus.ALREADY_INITIALIZED.

    Raises:
        ConfigError: If the config file or the include could not be created.
    """
    store = store or ConfigStore(repo_root)
    if get_workflow_state(repo_root, store) == WorkflowState.INITIALIZED:
        return InitStatus.ALREADY_INITIALIZED

    config_path = get_workflow_config_path(repo_root)
    if not store.get(CONFIG_PATH_KEY, file=config_path):
        store.set(CONFIG_PATH_KEY, str(config_path), file=config_path)
        if not config_path.is_file():
            raise ConfigError(
                f"Unable to create workflow config at {config_path}",
                path=config_path,
            )

    # The include may have outlived a deleted config file. Only add it when
    # the local config still can't see the workflow config.
    if not store.get_local(CONFIG_PATH_KEY):
        store.add("include.path", WORKFLOW_CONFIG_NAME)

    if not store.get_local(CONFIG_PATH_KEY):
        raise ConfigError(
            "Something went wrong when adding include.path for the workflow config "
            "to the local repo config.",
        )
    return InitStatus.CREATED
