"""Workflow settings loaded from git config.

Settings live under the `workflow.` section and are read through the merged
config view, so they can be set per repository (in .git/config_workflow) or
globally for the user.
"""

import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from gitworkflow.git.config import ConfigStore
from gitworkflow.git.exceptions import ConfigError
from gitworkflow.workflow.paths import get_workflow_config_path

TICKET_PLACEHOLDER = "%%ticket%%"
DEFAULT_TEMPLATE_FORMAT = f"[{TICKET_PLACEHOLDER}] "
DEFAULT_TICKET_REGEX = r"[a-zA-Z]+-[0-9]+"

# Field name -> git config key
CONFIG_KEYS = {
    "initials": "workflow.initials",
    "base_branch": "workflow.baseBranch",
    "bad_branch_name_patterns": "workflow.badBranchNamePatterns",
    "enable_commit_template": "workflow.enableCommitTemplate",
    "commit_template_format": "workflow.commitTemplateFormat",
    "ticket_input_format_regex": "workflow.ticketInputFormatRegex",
    "ticket_format_capitalize": "workflow.ticketFormatCapitalize",
}


class WorkflowSettings(BaseModel):
    """Typed view of the workflow.* config keys.

    Attributes:
        initials: Engineer's initials used as the branch name suffix.
        base_branch: Branch new branches are created from.
        bad_branch_name_patterns: Substrings that may not appear in branch names.
        enable_commit_template: Offer a commit template when creating a branch.
        commit_template_format: Template body, with %%ticket%% placeholders.
        ticket_input_format_regex: Regex a ticket number must fully match.
        ticket_format_capitalize: Upper-case ticket numbers before use.
    """

    initials: str = ""
    base_branch: str = "master"
    bad_branch_name_patterns: list[str] = []
    enable_commit_template: bool = True
    commit_template_format: str = DEFAULT_TEMPLATE_FORMAT
    ticket_input_format_regex: str = DEFAULT_TICKET_REGEX
    ticket_format_capitalize: bool = True

    @field_validator("bad_branch_name_patterns", mode="before")
    @classmethod
    def split_patterns(cls, v):
        """Accept the space-separated string stored in git config."""
        if v is None:
            return []
        if isinstance(v, str):
            return v.split()
        return v

    @field_validator("ticket_input_format_regex")
    @classmethod
    def compile_regex(cls, v):
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}")
        return v


def load_settings(store: ConfigStore, file: Optional[Path] = None) -> WorkflowSettings:
    """Load workflow settings from git config.

    Args:
        store: Config store for the repository.
        file: Read a single config file instead of the merged view.

    Returns:
        WorkflowSettings with defaults for any unset key.

    Raises:
        ConfigError: If a configured value is invalid.
    """
    raw = {}
    for field, key in CONFIG_KEYS.items():
        value = store.get(key, file=file)
        if value:
            raw[field] = value

    try:
        return WorkflowSettings(**raw)
    except ValidationError as e:
        config_path = get_workflow_config_path(store.repo_root)
        raise ConfigError(f"Invalid workflow configuration: {e}", path=config_path)
