"""jj integration for jjnamer.

This package provides the VCS side of the pipeline:
- exceptions: VcsError, VcsInvocationError, CollectionError, BookmarkExists, PushRejected
- runner: _run_jj_command, format_command
- base: BaseVcs capability
- jujutsu: JujutsuVcs subprocess binding
- log: collect_messages, CommitLog
- bookmark: publish_bookmark, BookmarkResult
"""

# Exceptions
from jjnamer.vcs.exceptions import (
    BookmarkExists,
    CollectionError,
    PushRejected,
    VcsError,
    VcsInvocationError,
)

# Runner utilities
from jjnamer.vcs.runner import (
    _run_jj_command,
    format_command,
)

# Capability and binding
from jjnamer.vcs.base import BaseVcs
from jjnamer.vcs.jujutsu import JujutsuVcs

# Collector and driver
from jjnamer.vcs.log import CommitLog, DEFAULT_REVISION, collect_messages
from jjnamer.vcs.bookmark import BookmarkResult, publish_bookmark


__all__ = [
    # Exceptions
    "VcsError",
    "VcsInvocationError",
    "CollectionError",
    "BookmarkExists",
    "PushRejected",
    # Runner
    "_run_jj_command",
    "format_command",
    # Capability
    "BaseVcs",
    "JujutsuVcs",
    # Collector
    "CommitLog",
    "DEFAULT_REVISION",
    "collect_messages",
    # Driver
    "BookmarkResult",
    "publish_bookmark",
]
