"""AI gateway for gitie.

This module provides the three kinds of model calls the CLI makes:
explaining captured git output, explaining a command line, and writing a
commit message from a staged diff. All of them go through
gitie.llm.client.complete().
"""

import logging
from typing import Sequence

from gitie.config import COMMIT_MAX_TEMPERATURE, COMMIT_MAX_TOKENS, ResolvedConfig
from gitie.git.runner import CommandOutput
from gitie.llm.client import complete
from gitie.llm.exceptions import (
    AIRequestError,
    APIResponseError,
    EmptyMessageError,
    LLMError,
    NoChoiceError,
    ResponseParseError,
)
from gitie.llm.parsing import clean_ai_output, extract_code_blocks
from gitie.llm.prompts import (
    EXPLAIN_COMMAND_SYSTEM_PROMPT,
    EXPLAIN_OUTPUT_SYSTEM_PROMPT,
    build_command_prompt,
    build_commit_prompt,
    build_output_prompt,
    build_output_text,
)

logger = logging.getLogger(__name__)

NO_OUTPUT_NOTICE = (
    "The command produced no output for the AI to explain. "
    "It might be a command that doesn't print anything on success, "
    "or it requires specific conditions to produce output."
)


def explain_output(output: CommandOutput, config: ResolvedConfig) -> str:
    """Explain the captured output of a git command.

    Args:
        output: Captured stdout/stderr/exit status.
        config: Resolved configuration.

    Returns:
        The explanation, or NO_OUTPUT_NOTICE without calling the model
        when there is nothing to explain.
    """
    text = build_output_text(output.stdout, output.stderr, output.success)
    if not text.strip():
        return NO_OUTPUT_NOTICE

    logger.debug("Explaining %d characters of git output", len(text))
    return complete(EXPLAIN_OUTPUT_SYSTEM_PROMPT, build_output_prompt(text), config)


def explain_command(args: Sequence[str], config: ResolvedConfig) -> str:
    """Explain what a git command line does, without running it."""
    return complete(EXPLAIN_COMMAND_SYSTEM_PROMPT, build_command_prompt(args), config)


def generate_commit_message(diff: str, config: ResolvedConfig) -> str:
    """Generate a commit message for a staged diff.

    Uses the commit prompt document as the system prompt, a temperature no
    higher than COMMIT_MAX_TEMPERATURE and a COMMIT_MAX_TOKENS budget.

    Returns:
        The cleaned commit message.
    """
    return complete(
        config.system_prompt,
        build_commit_prompt(diff),
        config,
        temperature=min(config.temperature, COMMIT_MAX_TEMPERATURE),
        max_tokens=COMMIT_MAX_TOKENS,
    )


# Export commonly used items
__all__ = [
    "LLMError",
    "AIRequestError",
    "APIResponseError",
    "ResponseParseError",
    "NoChoiceError",
    "EmptyMessageError",
    "NO_OUTPUT_NOTICE",
    "complete",
    "clean_ai_output",
    "extract_code_blocks",
    "explain_output",
    "explain_command",
    "generate_commit_message",
]
