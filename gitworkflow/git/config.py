"""Typed access to git's hierarchical configuration.

ConfigStore wraps `git config` with three scopes:
- file-scoped reads and writes (`git config -f <file>`), used for the
  workflow config and per-branch config files
- local writes (`git config --local`), used for the include directive
- merged reads with include resolution, used for settings and for
  checking whether the workflow config is wired into the repository

Missing keys are not errors: reads return an empty string and unsets return
False. Any other git config failure raises ConfigError.
"""

from pathlib import Path
from typing import Optional

from gitworkflow.git.exceptions import ConfigError
from gitworkflow.git.runner import _run_git_process

# `git config` exit codes
_EXIT_KEY_NOT_FOUND = 1
_EXIT_NOTHING_TO_UNSET = 5


class ConfigStore:
    """Key/value access to git config for a single repository."""

    def __init__(self, repo_root: Path):
        self.repo_root = Path(repo_root)

    def _scope_args(self, file: Optional[Path], write: bool) -> list[str]:
        if file is not None:
            return ["-f", str(file)]
        if write:
            return ["--local"]
        return ["--includes"]

    def _run(
        self,
        args: list[str],
        file: Optional[Path],
        allowed_codes: tuple[int, ...] = (),
    ):
        result = _run_git_process(["config"] + args, cwd=self.repo_root)
        if result.returncode != 0 and result.returncode not in allowed_codes:
            location = str(file) if file is not None else "local repository config"
            raise ConfigError(
                f"git config failed for {location}: {result.stderr.strip()}",
                path=file,
            )
        return result

    def get(self, key: str, file: Optional[Path] = None) -> str:
        """Read a single value.

        Args:
            key: Config key, e.g. 'commit.template'.
            file: Config file to read. Reads the merged view when omitted.

        Returns:
            The value, or an empty string if the key is not set.
        """
        if file is not None and not Path(file).exists():
            return ""
        args = self._scope_args(file, write=False) + ["--get", key]
        result = self._run(args, file, allowed_codes=(_EXIT_KEY_NOT_FOUND,))
        return result.stdout.strip()

    def get_default(self, key: str, default: str, file: Optional[Path] = None) -> str:
        return self.get(key, file=file) or default

    def get_local(self, key: str) -> str:
        """Read a key from the local repository config, following includes."""
        result = self._run(
            ["--local", "--includes", "--get", key],
            None,
            allowed_codes=(_EXIT_KEY_NOT_FOUND,),
        )
        return result.stdout.strip()

    def set(self, key: str, value: str, file: Optional[Path] = None) -> None:
        """Write a value, replacing any existing values for the key."""
        args = self._scope_args(file, write=True) + ["--replace-all", key, value]
        self._run(args, file)

    def add(self, key: str, value: str, file: Optional[Path] = None) -> None:
        """Append a value for a multi-valued key."""
        args = self._scope_args(file, write=True) + ["--add", key, value]
        self._run(args, file)

    def unset(self, key: str, file: Optional[Path] = None) -> bool:
        """Remove every value of a key.

        Returns:
            True if something was removed, False if the key was not set.
        """
        if file is not None and not Path(file).exists():
            return False
        args = self._scope_args(file, write=True) + ["--unset-all", key]
        result = self._run(args, file, allowed_codes=(_EXIT_NOTHING_TO_UNSET,))
        return result.returncode == 0

    def get_regex_matches(self, pattern: str, file: Optional[Path] = None) -> list[tuple[str, str]]:
        """Read all keys matching a regular expression.

        Git canonicalizes section and variable names to lower case before
        matching, so patterns should be written in lower case (subsections
        keep their case).

        Returns:
            Ordered (key, value) pairs. Empty if nothing matches.
        """
        if file is not None and not Path(file).exists():
            return []
        args = self._scope_args(file, write=False) + ["--get-regexp", pattern]
        result = self._run(args, file, allowed_codes=(_EXIT_KEY_NOT_FOUND,))

        matches = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            key, _, value = line.partition(" ")
            matches.append((key, value))
        return matches
