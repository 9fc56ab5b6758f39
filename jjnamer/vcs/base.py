"""Abstract VCS capability used by the naming pipeline."""

from abc import ABC, abstractmethod

from jjnamer.vcs.runner import DEFAULT_JJ_EXECUTABLE, format_command

WORKING_COPY_REVISION = "@"


def bookmark_create_args(name: str) -> list[str]:
    """Arguments for creating bookmark `name` at the working-copy commit."""
    return ["bookmark", "create", name, "-r", WORKING_COPY_REVISION]


def git_push_args(name: str, remote: str | None = None, allow_new: bool = False) -> list[str]:
    """Arguments for pushing bookmark `name` to a git remote."""
    args = ["git", "push", "--bookmark", name]
    if remote:
        args.extend(["--remote", remote])
    if allow_new:
        args.append("--allow-new")
    return args


class BaseVcs(ABC):
    """The three jj operations the pipeline needs."""

    executable: str = DEFAULT_JJ_EXECUTABLE

    @abstractmethod
    def list_messages(self, revision: str, template: str) -> str:
        """Render `template` for every commit in `revision`.

        Args:
            revision: The revset to log, passed through unchanged.
            template: The jj template applied to each commit.

        Returns:
            The concatenated template output, in jj's log order.

        Raises:
            VcsInvocationError: If jj cannot be run or rejects the revset.
        """
        pass

    @abstractmethod
    def create_bookmark(self, name: str) -> str:
        """Create bookmark `name` at the working-copy commit.

        Returns:
            Whatever jj reported about the new bookmark.

        Raises:
            BookmarkExists: If the name is already taken.
            VcsInvocationError: For any other failure.
        """
        pass

    @abstractmethod
    def push_bookmark(self, name: str, remote: str | None = None, allow_new: bool = False) -> str:
        """Push bookmark `name` to `remote` (jj's default remote when None).

        Returns:
            Whatever jj reported about the push.

        Raises:
            PushRejected: If the push fails.
            VcsInvocationError: If jj cannot be run at all.
        """
        pass

    def plan_commands(self, name: str, remote: str | None = None, allow_new: bool = False) -> list[str]:
        """The commands create + push would run, rendered for display."""
        return [
            format_command(bookmark_create_args(name), self.executable),
            format_command(git_push_args(name, remote, allow_new), self.executable),
        ]
