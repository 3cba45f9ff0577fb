"""CLI entry point for gitie.

The command line is not parsed by a single command tree: every invocation
is first classified by gitie.intent.classify() and then dispatched to
git passthrough, an explanation flow, or the commit flow.
"""

from gitie.cli.main import dispatch, main_command
from gitie.cli.commit import run_commit
from gitie.cli.explain import run_command_explain, run_help_explain
from gitie.cli.utils import exit_code_for, report_error

__all__ = [
    "main_command",
    "dispatch",
    "run_commit",
    "run_help_explain",
    "run_command_explain",
    "exit_code_for",
    "report_error",
]
