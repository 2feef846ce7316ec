"""Per-branch commit template management.

A configured branch owns three artifacts that are created and removed
together:

- an include directive in .git/config_workflow:
      [includeIf "onbranch:<branch>"]
          path = config_<branch>
- a branch config file .git/config_<branch> setting commit.template
- a template file .gitmessage_local_<ticket>_<branch> in the repo root

Template files in the repo root that no branch config points to are
orphans.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from gitworkflow.git.branch import is_valid_branch_name
from gitworkflow.git.config import ConfigStore
from gitworkflow.workflow.exceptions import InvalidBranchNameError, InvalidTicketFormatError
from gitworkflow.workflow.init import init_workflow
from gitworkflow.workflow.paths import (
    INCLUDE_KEY_PATTERN,
    TEMPLATE_GLOB,
    branch_config_name,
    branch_from_include_key,
    get_branch_config_path,
    get_workflow_config_path,
    include_directive_key,
    template_filename,
)
from gitworkflow.workflow.settings import TICKET_PLACEHOLDER, WorkflowSettings, load_settings

COMMIT_TEMPLATE_KEY = "commit.template"


class BranchTemplateState(Enum):
    """Template state of a single branch."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    # Include directive present, but its branch config is missing or has no
    # commit.template
    DANGLING = "dangling"


class UnsetStatus(Enum):
    NOTHING_CONFIGURED = "nothing_configured"
    UNSET = "unset"
    NO_TEMPLATE = "no_template"


@dataclass
class ConfiguredBranch:
    """A branch with an include directive in the workflow config.

    Attributes:
        branch: Branch name.
        config_file: Branch config file name, relative to .git/.
        template_file: Template file name relative to the repo root, or None
            if the branch config is missing or does not set commit.template.
    """

    branch: str
    config_file: str
    template_file: Optional[str] = None

    @property
    def state(self) -> BranchTemplateState:
        if self.template_file:
            return BranchTemplateState.CONFIGURED
        return BranchTemplateState.DANGLING


@dataclass
class UnsetResult:
    """Outcome of TemplateManager.unset."""

    branch: str
    status: UnsetStatus
    config_file: Optional[str] = None
    template_file: Optional[str] = None
    template_removed: bool = False
    template_kept: bool = False


class TemplateManager:
    """Create, look up and remove per-branch commit templates."""

    def __init__(
        self,
        repo_root: Path,
        store: Optional[ConfigStore] = None,
        settings: Optional[WorkflowSettings] = None,
    ):
        self.repo_root = Path(repo_root)
        self.store = store or ConfigStore(self.repo_root)
        self.settings = settings or load_settings(self.store)

    @property
    def workflow_config_path(self) -> Path:
        return get_workflow_config_path(self.repo_root)

    # ------------------------------------------------------------------
    # Ticket formatting
    # ------------------------------------------------------------------

    def format_ticket(self, raw: str) -> str:
        """Validate and normalize a ticket number.

        Raises:
            InvalidTicketFormatError: If the ticket does not fully match the
                configured ticket regex.
        """
        ticket = raw.strip()
        pattern = self.settings.ticket_input_format_regex
        if not ticket or not re.fullmatch(pattern, ticket):
            raise InvalidTicketFormatError(raw, pattern)
        if self.settings.ticket_format_capitalize:
            ticket = ticket.upper()
        return ticket

    def render_template(self, ticket: str) -> str:
        return self.settings.commit_template_format.replace(TICKET_PLACEHOLDER, ticket)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _read_template(self, config_file: str) -> Optional[str]:
        config_path = get_branch_config_path(self.repo_root, config_file)
        return self.store.get(COMMIT_TEMPLATE_KEY, file=config_path) or None

    def lookup(self, branch: str) -> Optional[ConfiguredBranch]:
        """Read the include directive and branch config for a branch.

        Returns:
            The configured branch, or None if no include directive exists.
        """
        config_file = self.store.get(include_directive_key(branch), file=self.workflow_config_path)
        if not config_file:
            return None
        return ConfiguredBranch(branch, config_file, self._read_template(config_file))

    def get_state(self, branch: str) -> BranchTemplateState:
        entry = self.lookup(branch)
        if entry is None:
            return BranchTemplateState.UNCONFIGURED
        return entry.state

    def list_configured_branches(self) -> list[ConfiguredBranch]:
        """List every branch with an include directive, in config file order."""
        matches = self.store.get_regex_matches(INCLUDE_KEY_PATTERN, file=self.workflow_config_path)

        branches = []
        seen = set()
        for key, config_file in matches:
            branch = branch_from_include_key(key)
            if branch in seen:
                continue
            seen.add(branch)
            branches.append(ConfiguredBranch(branch, config_file, self._read_template(config_file)))
        return branches

    def find_orphans(self, exclude: Optional[str] = None) -> set[str]:
        """Find template files that no configured branch points to.

        Args:
            exclude: Template file name to leave out of the scan, typically
                the current branch's own template.

        Returns:
            File names (relative to the repo root) of orphaned templates.
        """
        referenced = {
            entry.template_file
            for entry in self.list_configured_branches()
            if entry.template_file
        }
        on_disk = {path.name for path in self.repo_root.glob(TEMPLATE_GLOB) if path.is_file()}

        orphans = on_disk - referenced
        if exclude:
            orphans.discard(exclude)
        return orphans

    # ------------------------------------------------------------------
    # Configure / unset
    # ------------------------------------------------------------------

    def configure(self, branch: str, ticket: str) -> Path:
        """Create a commit template for a branch and wire it into git config.

        Initializes the workflow config first if needed. Configuring a branch
        that already has a template replaces it.

        Args:
            branch: Branch the template applies to.
            ticket: Ticket number, validated against the configured format.

        Returns:
            Path to the template file.

        Raises:
            InvalidBranchNameError: If branch is not a valid branch name.
            InvalidTicketFormatError: If the ticket is rejected.
            ConfigError: If a config file cannot be written.
        """
        if not is_valid_branch_name(branch, cwd=self.repo_root):
            raise InvalidBranchNameError(f"Invalid branch name: {branch!r}")
        ticket = self.format_ticket(ticket)

        init_workflow(self.repo_root, self.store)
        previous = self.lookup(branch)

        filename = template_filename(ticket, branch)
        template_path = self.repo_root / filename
        template_path.write_text(self.render_template(ticket))

        config_file = branch_config_name(branch)
        self.store.set(
            COMMIT_TEMPLATE_KEY,
            filename,
            file=get_branch_config_path(self.repo_root, config_file),
        )
        self.store.set(include_directive_key(branch), config_file, file=self.workflow_config_path)

        if previous is not None:
            if previous.template_file and previous.template_file != filename:
                (self.repo_root / previous.template_file).unlink(missing_ok=True)
            if previous.config_file != config_file:
                get_branch_config_path(self.repo_root, previous.config_file).unlink(missing_ok=True)

        return template_path

    def unset(self, branch: str, keep_file: bool = False) -> UnsetResult:
        """Remove a branch's include directive, branch config and template.

        A branch with no include directive is reported, not treated as an
        error. When the branch config does not name a template, the directive
        and branch config are still removed and the result status is
        NO_TEMPLATE.

        Args:
            branch: Branch to unset.
            keep_file: Leave the template file on disk.
        """
        entry = self.lookup(branch)
        if entry is None:
            return UnsetResult(branch, UnsetStatus.NOTHING_CONFIGURED)

        self.store.unset(include_directive_key(branch), file=self.workflow_config_path)
        get_branch_config_path(self.repo_root, entry.config_file).unlink(missing_ok=True)

        if not entry.template_file:
            return UnsetResult(branch, UnsetStatus.NO_TEMPLATE, config_file=entry.config_file)

        result = UnsetResult(
            branch,
            UnsetStatus.UNSET,
            config_file=entry.config_file,
            template_file=entry.template_file,
        )
        if keep_file:
            result.template_kept = True
            return result

        template_path = self.repo_root / entry.template_file
        if template_path.exists():
            template_path.unlink()
            result.template_removed = True
        return result
