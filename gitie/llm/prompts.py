"""Prompt templates and builders.

The commit-message system prompt is loaded from the user's commit-prompt
file (see gitie.global_config); the two explanation prompts below are
built in.
"""

from typing import Sequence

from gitie.config import MAX_PAYLOAD_CHARS, TRUNCATION_MARGIN, TRUNCATION_MARKER
from gitie.git.runner import format_command

EXPLAIN_OUTPUT_SYSTEM_PROMPT = """You are a helpful assistant integrated into a Git command-line enhancer.
The user has executed a Git command and received the following output.
Please explain this output clearly and concisely.
If the output indicates an error or a common misunderstanding, clarify it.
Focus on what the output means and what the user might want to do next.
Do not include any conversational pleasantries or self-references like "As an AI...".
Just provide the explanation directly."""

EXPLAIN_COMMAND_SYSTEM_PROMPT = """You are a helpful assistant integrated into a Git command-line enhancer.
The user wants to understand a specific Git command.
Please explain the Git command provided by the user clearly and concisely.
Describe its purpose, common options (if any are apparent or highly relevant), and typical use cases.
If the command seems incomplete or potentially problematic, you can briefly note that.
Do not include any conversational pleasantries or self-references like "As an AI...".
Just provide the explanation for the command directly.
The user's command will follow."""

COMMIT_USER_PROMPT_TEMPLATE = """Generate a commit message for these staged changes.
Output only the commit message.

GIT DIFF:
{diff}"""

STDERR_SEPARATOR = "\n\n--- stderr ---\n"


def truncate_payload(text: str, limit: int = MAX_PAYLOAD_CHARS) -> str:
    """Bound a payload to `limit` characters.

    Oversized text is cut to `limit - TRUNCATION_MARGIN` characters and
    TRUNCATION_MARKER is appended, so the result never exceeds `limit`
    and truncation is always visible.

    Args:
        text: The payload (diff or captured output).
        limit: Maximum length of the result.

    Returns:
        The original text, or the truncated text ending with the marker.
    """
    if len(text) <= limit:
        return text
    keep = max(limit - TRUNCATION_MARGIN, 0)
    return text[:keep] + TRUNCATION_MARKER


def build_commit_prompt(diff: str) -> str:
    """Build the user prompt for commit-message generation."""
    return COMMIT_USER_PROMPT_TEMPLATE.format(diff=truncate_payload(diff.strip()))


def build_output_text(stdout: str, stderr: str, success: bool) -> str:
    """Combine captured output for explanation.

    stderr is appended under a labelled separator only when the command
    failed.
    """
    text = stdout
    if not success and stderr.strip():
        text = f"{text.rstrip()}{STDERR_SEPARATOR}{stderr}"
    return text


def build_output_prompt(output_text: str) -> str:
    """Build the user prompt for explaining captured output."""
    return truncate_payload(output_text)


def build_command_prompt(args: Sequence[str]) -> str:
    """Build the user prompt for explaining a command line."""
    return format_command(args)
