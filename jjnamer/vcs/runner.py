"""jj command runner.

Contains:
- _run_jj_command: Run a jj command and return its output
- format_command: Render a jj invocation for display
"""

import shlex
import subprocess

from jjnamer.config import DEFAULT_JJ_EXECUTABLE
from jjnamer.logging import get_logger
from jjnamer.vcs.exceptions import VcsInvocationError

logger = get_logger("vcs")


def format_command(args: list[str], executable: str = DEFAULT_JJ_EXECUTABLE) -> str:
    """Render a jj invocation the way a user would type it.

    Args:
        args: List of arguments to pass to jj.
        executable: The jj executable name or path.

    Returns:
        The shell-quoted command line.
    """
    return " ".join(shlex.quote(part) for part in [executable, *args])


def _run_jj_command(
    args: list[str],
    executable: str = DEFAULT_JJ_EXECUTABLE,
    include_stderr: bool = False,
) -> str:
    """Run a jj command and return its output.

    Args:
        args: List of arguments to pass to jj.
        executable: The jj executable name or path.
        include_stderr: Append stderr to the returned text. jj reports the
            outcome of mutating commands (bookmark create, git push) there.

    Returns:
        The stdout of the command, plus stderr when requested.

    Raises:
        VcsInvocationError: If jj is missing or the command fails.
    """
    command = format_command(args, executable)
    logger.debug("Running %s", command)
    try:
        result = subprocess.run(
            [executable] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise VcsInvocationError(
            f"jj command failed: {command}\n{stderr}",
            args_list=args,
            returncode=e.returncode,
            stderr=stderr,
        )
    except FileNotFoundError:
        raise VcsInvocationError(
            f"'{executable}' is not installed or not in PATH.",
            args_list=args,
        )

    if not include_stderr:
        return result.stdout

    parts = [(result.stdout or "").strip(), (result.stderr or "").strip()]
    return "\n".join(part for part in parts if part)
