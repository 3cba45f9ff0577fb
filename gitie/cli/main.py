"""Entry point: resolve configuration, classify the invocation, dispatch."""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from gitie.config import ResolvedConfig
from gitie.global_config import ConfigError, resolve_config
from gitie.git import GitError, PassthroughFailedError, passthrough
from gitie.intent import (
    Classification,
    GlobalExplain,
    HelpPassthrough,
    HelpWithExplain,
    KnownSubcommand,
    Passthrough,
    classify,
)
from gitie.llm import LLMError
from gitie.logging_config import setup_logging
from gitie.cli.commit import run_commit
from gitie.cli.explain import run_command_explain, run_help_explain
from gitie.cli.utils import exit_code_for, report_error

logger = logging.getLogger(__name__)


def dispatch(classification: Classification, config: ResolvedConfig) -> None:
    """Execute the path selected by the classifier."""
    if isinstance(classification, (HelpPassthrough, Passthrough)):
        passthrough(classification.args)
    elif isinstance(classification, HelpWithExplain):
        run_help_explain(classification.args, config)
    elif isinstance(classification, GlobalExplain):
        run_command_explain(classification.args, config)
    elif isinstance(classification, KnownSubcommand):
        run_commit(classification.intent, config)
    else:
        raise TypeError(f"Unhandled classification: {classification!r}")


def main_command(argv: Optional[Sequence[str]] = None) -> int:
    """Run gitie.

    Args:
        argv: Arguments after the program name. Defaults to sys.argv[1:].

    Returns:
        The process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    # Only the working directory's .env is considered
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    setup_logging()

    classification = None
    try:
        classification = classify(args)
        logger.debug("Classified %r as %s", args, type(classification).__name__)
        config = resolve_config()
        dispatch(classification, config)
    except PassthroughFailedError as e:
        if isinstance(classification, (HelpPassthrough, Passthrough)):
            # git has already reported its own failure
            logger.debug("%s", e)
            return exit_code_for(e)
        return report_error(e)
    except (ConfigError, GitError, LLMError) as e:
        return report_error(e)

    return 0
