"""The naming pipeline: collect, prompt, generate, extract, publish."""

from dataclasses import dataclass

from jjnamer.config import DEFAULT_REVISION
from jjnamer.llm.base import BaseLLMProvider, LLMResult
from jjnamer.llm.parsing import extract_bookmark_name
from jjnamer.llm.prompts import build_prompt
from jjnamer.logging import get_logger
from jjnamer.vcs.base import BaseVcs
from jjnamer.vcs.bookmark import BookmarkResult, publish_bookmark
from jjnamer.vcs.log import CommitLog, collect_messages

logger = get_logger("pipeline")


@dataclass(frozen=True)
class NamingResult:
    """Everything one pipeline run produced."""

    log: CommitLog
    prompt: str
    completion: LLMResult
    name: str
    bookmark: BookmarkResult


def generate_bookmark(
    vcs: BaseVcs,
    provider: BaseLLMProvider,
    revision: str = DEFAULT_REVISION,
    prefix: str | None = None,
    dry_run: bool = False,
    remote: str | None = None,
    allow_new: bool = True,
    full_descriptions: bool = False,
) -> NamingResult:
    """Name a bookmark after the commits in `revision`, then create and push it.

    Each stage's error propagates unchanged, so the caller can tell which
    stage failed.

    Args:
        vcs: The VCS capability used to read commits and publish the bookmark.
        provider: The model that summarizes the commit messages.
        revision: The revset whose commit messages are summarized.
        prefix: Optional prefix, joined to the generated name with "/".
        dry_run: Compute the name but do not create or push anything.
        remote: Remote to push to, jj's default when None.
        allow_new: Pass --allow-new when pushing, since the bookmark is new.
        full_descriptions: Summarize whole descriptions, not just subject lines.

    Returns:
        A NamingResult with the final name and the publish outcome.

    Raises:
        CollectionError, ModelUnavailable, ModelError, ExtractionError,
        BookmarkExists, PushRejected, VcsInvocationError.
    """
    log = collect_messages(vcs, revision, full_descriptions=full_descriptions)

    prompt = build_prompt(log.messages)
    logger.debug("Built prompt from %d message(s), %d characters", len(log), len(prompt))

    completion = provider.generate(prompt)
    logger.debug(
        "Model %s replied (%d in / %d out tokens): %r",
        completion.model,
        completion.input_tokens,
        completion.output_tokens,
        completion.text,
    )

    name = extract_bookmark_name(completion.text, prefix=prefix)
    logger.debug("Bookmark name: %s", name)

    bookmark = publish_bookmark(vcs, name, dry_run=dry_run, remote=remote, allow_new=allow_new)

    return NamingResult(
        log=log,
        prompt=prompt,
        completion=completion,
        name=name,
        bookmark=bookmark,
    )
