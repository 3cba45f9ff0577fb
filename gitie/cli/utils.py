"""Shared utility functions for CLI commands."""

import typer

from gitie.global_config import ConfigError
from gitie.git import (
    UNKNOWN_EXIT_STATUS,
    GitCommandError,
    GitError,
    PassthroughFailedError,
)
from gitie.llm import LLMError


def exit_code_for(error: Exception) -> int:
    """Map an error to the process exit code.

    git's own status is propagated for failed git commands (128 when it is
    unavailable); configuration, AI and other git errors exit with 1.
    """
    if isinstance(error, (PassthroughFailedError, GitCommandError)):
        return error.status if error.status is not None else UNKNOWN_EXIT_STATUS
    return 1


def error_label(error: Exception) -> str:
    """Prefix naming the subsystem an error came from."""
    if isinstance(error, ConfigError):
        return "Configuration error"
    if isinstance(error, GitError):
        return "Git error"
    if isinstance(error, LLMError):
        return "AI error"
    return "Error"


def report_error(error: Exception) -> int:
    """Print an error on stderr and return its exit code."""
    typer.echo(f"{error_label(error)}: {error}", err=True)
    return exit_code_for(error)


def show_message(message: str) -> None:
    """Show a generated commit message on stderr, framed."""
    typer.echo("", err=True)
    typer.echo("=" * 60, err=True)
    typer.echo(message, err=True)
    typer.echo("=" * 60, err=True)
    typer.echo("", err=True)
