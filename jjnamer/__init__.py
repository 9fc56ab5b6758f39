"""Generate jj bookmark names from commit messages with a local LLM."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jj-namer")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
