"""Shared helpers for the CLI commands."""

import typer

from jjnamer.global_config import GlobalConfigError
from jjnamer.llm.exceptions import (
    ExtractionError,
    LLMError,
    ModelError,
    ModelUnavailable,
)
from jjnamer.vcs.exceptions import (
    BookmarkExists,
    CollectionError,
    PushRejected,
    VcsError,
    VcsInvocationError,
)

# Most specific first: (exception, stage label, exit code)
ERROR_STAGES = [
    (CollectionError, "vcs state", 2),
    (ModelUnavailable, "model availability", 3),
    (ModelError, "model availability", 3),
    (ExtractionError, "model output quality", 4),
    (BookmarkExists, "naming conflict", 5),
    (PushRejected, "push", 6),
    (VcsInvocationError, "vcs invocation", 7),
    (VcsError, "vcs invocation", 7),
    (LLMError, "model availability", 3),
    (GlobalConfigError, "configuration", 1),
]


def classify_error(error: Exception) -> tuple[str, int]:
    """Return the stage label and exit code for a pipeline error."""
    for error_type, stage, exit_code in ERROR_STAGES:
        if isinstance(error, error_type):
            return stage, exit_code
    return "unexpected", 1


def report_error(error: Exception) -> int:
    """Print an error with its kind and stage to stderr.

    Returns:
        The exit code to use for this error.
    """
    stage, exit_code = classify_error(error)
    typer.echo(f"{type(error).__name__} ({stage}): {error}", err=True)
    return exit_code
