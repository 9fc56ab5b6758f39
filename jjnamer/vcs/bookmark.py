"""Bookmark creation and push.

Contains:
- BookmarkResult: Outcome of publishing a bookmark
- publish_bookmark: Create a bookmark at @ and push it, or plan it in dry-run mode
"""

from dataclasses import dataclass

from jjnamer.logging import get_logger
from jjnamer.vcs.base import BaseVcs

logger = get_logger("vcs.bookmark")


@dataclass(frozen=True)
class BookmarkResult:
    """What publish_bookmark did (or would have done in a dry run)."""

    name: str
    dry_run: bool
    commands: tuple[str, ...]
    create_output: str = ""
    push_output: str = ""
    pushed: bool = False


def publish_bookmark(
    vcs: BaseVcs,
    name: str,
    dry_run: bool = False,
    remote: str | None = None,
    allow_new: bool = True,
) -> BookmarkResult:
    """Create bookmark `name` at the working-copy commit and push it.

    Creation and push are independent steps. If the push fails the bookmark
    stays created locally; it is never rolled back.

    Args:
        vcs: The VCS capability to drive.
        name: A validated bookmark name.
        dry_run: Only report the commands, run nothing.
        remote: Remote to push to, jj's default when None.
        allow_new: Pass --allow-new to jj git push. The bookmark was just
            created, so the remote side is always new.

    Returns:
        A BookmarkResult describing the outcome.

    Raises:
        BookmarkExists: If the name is taken. Nothing is pushed.
        PushRejected: If the remote rejects the push.
        VcsInvocationError: If jj cannot be run.
    """
    commands = tuple(vcs.plan_commands(name, remote=remote, allow_new=allow_new))

    if dry_run:
        logger.debug("Dry run, skipping: %s", "; ".join(commands))
        return BookmarkResult(name=name, dry_run=True, commands=commands)

    create_output = vcs.create_bookmark(name)
    logger.debug("Created bookmark %s", name)

    push_output = vcs.push_bookmark(name, remote=remote, allow_new=allow_new)
    logger.debug("Pushed bookmark %s", name)

    return BookmarkResult(
        name=name,
        dry_run=False,
        commands=commands,
        create_output=create_output,
        push_output=push_output,
        pushed=True,
    )
