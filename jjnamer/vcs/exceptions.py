"""VCS-related exception classes.

Contains all exception classes for jj operations:
- VcsError: Base exception for jj-related errors
- VcsInvocationError: Raised when jj cannot be spawned or exits non-zero
- CollectionError: Raised when commit messages cannot be collected
- BookmarkExists: Raised when the bookmark name is already taken
- PushRejected: Raised when the remote rejects the push
"""


class VcsError(Exception):
    """Base exception for jj-related errors."""

    pass


class VcsInvocationError(VcsError):
    """Raised when a jj command cannot be run or exits with a failure.

    Attributes:
        args_list: The arguments passed to jj.
        returncode: The exit status, or None if the process never started.
        stderr: The captured standard error of the command.
    """

    def __init__(
        self,
        message: str,
        args_list: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.args_list = args_list or []
        self.returncode = returncode
        self.stderr = stderr


class CollectionError(VcsError):
    """Raised when the revision range is empty, malformed, or cannot be read."""

    pass


class BookmarkExists(VcsError):
    """Raised when jj refuses to create a bookmark because the name is taken."""

    pass


class PushRejected(VcsError):
    """Raised when pushing the bookmark fails. Carries jj's output verbatim."""

    pass
