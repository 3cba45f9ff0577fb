"""CLI flows that ask the model to explain git."""

from typing import Sequence

import typer

from gitie.config import ResolvedConfig
from gitie.git import capture
from gitie.llm import explain_command, explain_output


def run_help_explain(args: Sequence[str], config: ResolvedConfig) -> None:
    """Run git with captured output and print an explanation of it."""
    output = capture(args)
    typer.echo("Asking AI to explain the output...", err=True)
    typer.echo(explain_output(output, config))


def run_command_explain(args: Sequence[str], config: ResolvedConfig) -> None:
    """Print an explanation of a git command without running it."""
    typer.echo("Asking AI to explain the command...", err=True)
    typer.echo(explain_command(args, config))
