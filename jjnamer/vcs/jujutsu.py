"""jj binding of the VCS capability, backed by subprocess calls."""

from jjnamer.vcs.base import BaseVcs, bookmark_create_args, git_push_args
from jjnamer.vcs.exceptions import BookmarkExists, PushRejected, VcsInvocationError
from jjnamer.vcs.runner import DEFAULT_JJ_EXECUTABLE, _run_jj_command

# jj prints "Error: Bookmark already exists: <name>" on collisions
_ALREADY_EXISTS_MARKER = "already exists"


class JujutsuVcs(BaseVcs):
    """Runs jj in the current working directory."""

    def __init__(self, executable: str | None = None):
        self.executable = executable or DEFAULT_JJ_EXECUTABLE

    def list_messages(self, revision: str, template: str) -> str:
        return _run_jj_command(
            ["log", "--no-graph", "-r", revision, "-T", template],
            executable=self.executable,
        )

    def create_bookmark(self, name: str) -> str:
        try:
            return _run_jj_command(
                bookmark_create_args(name),
                executable=self.executable,
                include_stderr=True,
            )
        except VcsInvocationError as e:
            if _ALREADY_EXISTS_MARKER in e.stderr.lower():
                raise BookmarkExists(f"Bookmark '{name}' already exists.\n{e.stderr}")
            raise

    def push_bookmark(self, name: str, remote: str | None = None, allow_new: bool = False) -> str:
        try:
            return _run_jj_command(
                git_push_args(name, remote, allow_new),
                executable=self.executable,
                include_stderr=True,
            )
        except VcsInvocationError as e:
            if e.returncode is None:
                # jj never started; nothing reached the remote
                raise
            raise PushRejected(e.stderr or str(e))
