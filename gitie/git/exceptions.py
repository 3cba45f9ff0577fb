"""Git-related exception classes.

Contains all exception classes for git operations:
- GitError: Base exception for git-related errors
- NotARepositoryError: Raised outside a git work tree
- NoStagedChangesError: Raised when there is nothing staged to describe
- GitCommandError: A captured git command exited non-zero
- PassthroughFailedError: An interactive git command exited non-zero
- GitDiffError: The staged diff could not be obtained
"""

from typing import Optional


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    def __init__(self, message: str = "Not a git repository (or any of the parent directories)."):
        super().__init__(message)


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    def __init__(self, message: str = "No changes staged for commit."):
        super().__init__(message)


class GitCommandError(GitError):
    """Raised when a captured git command fails."""

    def __init__(
        self,
        command: str,
        status: Optional[int],
        stdout: str = "",
        stderr: str = "",
    ):
        self.command = command
        self.status = status
        self.stdout = stdout
        self.stderr = stderr
        status_text = "unknown" if status is None else str(status)
        message = f"Git command failed: {command} (exit status {status_text})"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class PassthroughFailedError(GitError):
    """Raised when a git command run with inherited streams exits non-zero."""

    def __init__(self, command: str, status: Optional[int]):
        self.command = command
        self.status = status
        status_text = "unknown" if status is None else str(status)
        super().__init__(f"Git command failed: {command} (exit status {status_text})")


class GitDiffError(GitError):
    """Raised when the staged diff cannot be obtained."""

    pass
