"""Git bridge for gitie.

This package delegates all version-control work to the git binary:
- exceptions: GitError, NotARepositoryError, NoStagedChangesError,
              GitCommandError, PassthroughFailedError, GitDiffError
- runner: CommandOutput, capture, passthrough, run_checked, ensure_repository
- diff: stage_tracked_changes, get_staged_diff, summarize_diff
"""

# Exceptions
from gitie.git.exceptions import (
    GitError,
    NotARepositoryError,
    NoStagedChangesError,
    GitCommandError,
    PassthroughFailedError,
    GitDiffError,
)

# Runner utilities
from gitie.git.runner import (
    CommandOutput,
    UNKNOWN_EXIT_STATUS,
    capture,
    ensure_repository,
    format_command,
    passthrough,
    run_checked,
)

# Diff utilities
from gitie.git.diff import (
    get_staged_diff,
    stage_tracked_changes,
    summarize_diff,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    "NoStagedChangesError",
    "GitCommandError",
    "PassthroughFailedError",
    "GitDiffError",
    # Runner
    "CommandOutput",
    "UNKNOWN_EXIT_STATUS",
    "capture",
    "ensure_repository",
    "format_command",
    "passthrough",
    "run_checked",
    # Diff
    "get_staged_diff",
    "stage_tracked_changes",
    "summarize_diff",
]
