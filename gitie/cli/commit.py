"""CLI flow for `gitie commit`."""

import logging
from dataclasses import replace
from typing import Sequence

import typer

from gitie.config import ResolvedConfig
from gitie.git import (
    NoStagedChangesError,
    ensure_repository,
    get_staged_diff,
    passthrough,
    stage_tracked_changes,
    summarize_diff,
)
from gitie.intent import CommitRequestIntent
from gitie.llm import generate_commit_message
from gitie.cli.utils import show_message

logger = logging.getLogger(__name__)

STAGING_FLAGS = ("-a", "--all")
ALLOW_EMPTY_FLAG = "--allow-empty"


def filter_staging_flags(args: Sequence[str]) -> list[str]:
    """Drop -a/--all so staging is not requested twice."""
    return [arg for arg in args if arg not in STAGING_FLAGS]


def build_plain_commit_args(intent: CommitRequestIntent) -> list[str]:
    """Translate a commit intent into `git commit` arguments."""
    args = ["commit"]
    if intent.message is not None:
        args += ["-m", intent.message]

    tail = list(intent.passthrough_args)
    if intent.auto_stage:
        args.append("--all")
        tail = filter_staging_flags(tail)

    return args + tail


def build_ai_commit_args(message: str, passthrough_args: Sequence[str]) -> list[str]:
    """Arguments for committing with a generated message.

    Staging flags are dropped so the commit contains exactly the diff the
    message was written for.
    """
    return ["commit", "-m", message] + filter_staging_flags(passthrough_args)


def run_plain_commit(intent: CommitRequestIntent) -> None:
    """Run git commit with the user's own flags."""
    passthrough(build_plain_commit_args(intent))


def run_ai_commit(intent: CommitRequestIntent, config: ResolvedConfig) -> None:
    """Stage (optionally), read the staged diff, generate a message, commit.

    Raises:
        NotARepositoryError: If not inside a git repository.
        NoStagedChangesError: If nothing is staged and --allow-empty was not given.
        GitError: If staging, diffing or committing fails.
        LLMError: If the message cannot be generated.
    """
    ensure_repository()

    if intent.auto_stage:
        typer.echo("Staging tracked changes...", err=True)
        stage_tracked_changes()

    diff = get_staged_diff()

    if not diff.strip():
        if ALLOW_EMPTY_FLAG in intent.passthrough_args:
            typer.echo("No staged changes; creating an empty commit.", err=True)
            # Staging already happened above
            run_plain_commit(replace(intent, use_ai=False, auto_stage=False))
            return
        raise NoStagedChangesError()

    if intent.message is not None:
        typer.echo("Warning: --message is ignored when --ai is given.", err=True)

    typer.echo(summarize_diff(diff), err=True)
    typer.echo("Generating commit message...", err=True)
    message = generate_commit_message(diff, config)

    show_message(message)
    passthrough(build_ai_commit_args(message, intent.passthrough_args))


def run_commit(intent: CommitRequestIntent, config: ResolvedConfig) -> None:
    """Run the commit flow selected by the intent."""
    if intent.use_ai:
        run_ai_commit(intent, config)
    else:
        run_plain_commit(intent)
