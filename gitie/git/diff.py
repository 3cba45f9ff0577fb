"""Staging and staged-diff utilities.

Contains:
- stage_tracked_changes: Stage every modified tracked file (git add -u)
- get_staged_diff: Get the staged diff
- summarize_diff: Count added and removed lines in a diff
"""

from gitie.git.exceptions import GitDiffError, NotARepositoryError
from gitie.git.runner import capture, run_checked


def stage_tracked_changes() -> None:
    """Stage all modifications to tracked files.

    Raises:
        GitCommandError: If git add fails.
    """
    run_checked(["add", "-u"])


def get_staged_diff() -> str:
    """Get the staged diff.

    Returns:
        The output of git diff --staged. Empty when nothing is staged.

    Raises:
        NotARepositoryError: If not in a git repository.
        GitDiffError: If git diff fails for another reason.
    """
    output = capture(["diff", "--staged"])
    if not output.success:
        stderr = output.stderr.strip()
        if "not a git repository" in stderr.lower():
            raise NotARepositoryError()
        raise GitDiffError(f"Failed to get git diff: {stderr or 'exit status ' + str(output.exit_status)}")
    return output.stdout


def summarize_diff(diff: str) -> str:
    """Summarize a unified diff as approximate added/removed line counts.

    Args:
        diff: Unified diff text.

    Returns:
        A one-line summary such as "Added ~3 lines. Removed ~1 lines."
    """
    additions = 0
    deletions = 0
    for line in diff.splitlines():
        if line.startswith("+") and not line.startswith("+++"):
            additions += 1
        elif line.startswith("-") and not line.startswith("---"):
            deletions += 1

    parts = []
    if additions:
        parts.append(f"Added ~{additions} lines.")
    if deletions:
        parts.append(f"Removed ~{deletions} lines.")

    if not parts:
        return "No significant changes detected in diff summary."
    return " ".join(parts)
