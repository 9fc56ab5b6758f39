"""Commit message collection.

Contains:
- CommitLog: The ordered commit messages of a revision range
- collect_messages: Read the messages for a revision range through jj
"""

from dataclasses import dataclass

from jjnamer.config import DEFAULT_REVISION
from jjnamer.logging import get_logger
from jjnamer.vcs.base import BaseVcs
from jjnamer.vcs.exceptions import CollectionError, VcsInvocationError

logger = get_logger("vcs.log")

# Marks the end of one description when whole descriptions are collected
RECORD_SEPARATOR = "---- jj-namer end of description ----"

# jj template syntax: the "\n" escapes are interpreted by jj, not Python
FIRST_LINE_TEMPLATE = "if(description, description.first_line(), '') ++ \"\\n\""
FULL_DESCRIPTION_TEMPLATE = (
    "if(description, description ++ \"\\n" + RECORD_SEPARATOR + "\\n\", '')"
)


@dataclass(frozen=True)
class CommitLog:
    """Commit messages for a revision range, in jj's log order."""

    revision: str
    messages: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.messages)


def _split_first_lines(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


def _split_descriptions(output: str) -> list[str]:
    return [block.strip() for block in output.split(RECORD_SEPARATOR) if block.strip()]


def collect_messages(
    vcs: BaseVcs,
    revision: str = DEFAULT_REVISION,
    full_descriptions: bool = False,
) -> CommitLog:
    """Collect the commit messages for every commit in `revision`.

    Commits without a description are skipped.

    Args:
        vcs: The VCS capability to query.
        revision: The revset to summarize, passed to jj unchanged.
        full_descriptions: Collect whole descriptions instead of subject lines.

    Returns:
        A CommitLog holding at least one message.

    Raises:
        CollectionError: If jj fails or the range holds no described commits.
    """
    template = FULL_DESCRIPTION_TEMPLATE if full_descriptions else FIRST_LINE_TEMPLATE

    try:
        output = vcs.list_messages(revision, template)
    except VcsInvocationError as e:
        raise CollectionError(f"Could not read commits for revision '{revision}'.\n{e}")

    if full_descriptions:
        messages = _split_descriptions(output)
    else:
        messages = _split_first_lines(output)

    if not messages:
        raise CollectionError(
            f"Revision '{revision}' contains no commits with a description. "
            "Describe your changes with 'jj describe' first."
        )

    logger.debug("Collected %d message(s) for %s", len(messages), revision)
    return CommitLog(revision=revision, messages=tuple(messages))
