"""Git command runner.

Contains:
- CommandOutput: Snapshot of a captured git invocation
- capture: Run git with captured output, never raising on non-zero exit
- passthrough: Run git with the caller's standard streams
- run_checked: Run git with captured output, raising on failure
- ensure_repository: Check that the working directory is inside a repo
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Sequence

from gitie.config import CAPTURE_TIMEOUT_SECONDS, GIT_BINARY
from gitie.git.exceptions import (
    GitCommandError,
    GitError,
    NotARepositoryError,
    PassthroughFailedError,
)

logger = logging.getLogger(__name__)

# Exit status reported when git's own status is unavailable
UNKNOWN_EXIT_STATUS = 128


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of one git invocation."""

    stdout: str
    stderr: str
    exit_status: int

    @property
    def success(self) -> bool:
        return self.exit_status == 0


def _effective_args(args: Sequence[str]) -> list[str]:
    # git is never invoked bare
    return list(args) if args else ["--help"]


def format_command(args: Sequence[str]) -> str:
    """Reconstruct the command line for messages."""
    return " ".join([GIT_BINARY] + list(args))


def capture(args: Sequence[str], timeout: float = CAPTURE_TIMEOUT_SECONDS) -> CommandOutput:
    """Run a git command and capture its output.

    A non-zero exit is reported through CommandOutput.exit_status, not raised.

    Args:
        args: Arguments to pass to git. Empty means --help.
        timeout: Seconds to wait for git to finish.

    Returns:
        The captured stdout, stderr and exit status.

    Raises:
        GitError: If git is not installed.
        GitCommandError: If git does not finish within the timeout.
    """
    args = _effective_args(args)
    logger.debug("Capturing: %s", format_command(args))
    try:
        result = subprocess.run(
            [GIT_BINARY] + args,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Failed to run git: {e}")
    except subprocess.TimeoutExpired:
        raise GitCommandError(
            format_command(args),
            None,
            stderr=f"timed out after {timeout} seconds",
        )

    return CommandOutput(
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        exit_status=result.returncode,
    )


def run_checked(args: Sequence[str]) -> CommandOutput:
    """Run a git command with captured output and require success.

    Raises:
        GitCommandError: If the command exits non-zero.
    """
    output = capture(args)
    if not output.success:
        raise GitCommandError(
            format_command(_effective_args(args)),
            output.exit_status,
            output.stdout,
            output.stderr,
        )
    return output


def passthrough(args: Sequence[str]) -> None:
    """Run a git command attached to the caller's terminal.

    The child inherits stdin, stdout and stderr so the user sees live output
    and interactive programs (editor, pager) work.

    Args:
        args: Arguments to pass to git. Empty means --help.

    Raises:
        GitError: If git is not installed.
        PassthroughFailedError: If git exits non-zero.
    """
    args = _effective_args(args)
    command = format_command(args)
    logger.debug("Passing through: %s", command)
    try:
        result = subprocess.run([GIT_BINARY] + args, check=False)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Failed to run git: {e}")

    if result.returncode != 0:
        # Negative codes mean the child was killed by a signal
        status = result.returncode if result.returncode > 0 else None
        raise PassthroughFailedError(command, status)


def ensure_repository() -> None:
    """Check that the working directory is inside a git work tree.

    Raises:
        NotARepositoryError: If it is not.
    """
    output = capture(["rev-parse", "--is-inside-work-tree"])
    if not output.success or output.stdout.strip() != "true":
        raise NotARepositoryError()
