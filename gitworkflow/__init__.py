"""Git workflow helpers: branch naming, per-branch commit templates and cleanup."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("git-workflow")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
