"""Text transforms for model output.

Contains:
- clean_ai_output: Strip model scaffolding from a reply
- extract_code_blocks: Return the body of every fenced block
"""

import re

# Reasoning blocks emitted by thinking models (qwen3, deepseek-r1, ...)
_REASONING_BLOCK = re.compile(r"<(think|thinking)>.*?</\1>", re.DOTALL | re.IGNORECASE)
# A closing tag whose opening tag was cut off; everything before it is reasoning
_DANGLING_REASONING = re.compile(r"^.*?</(think|thinking)>", re.DOTALL | re.IGNORECASE)
# One fence pair wrapping the whole reply
_WRAPPING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n(.*?)\n?```$", re.DOTALL)

_WRAPPING_QUOTES = ('"', "'", "`")


def clean_ai_output(text: str) -> str:
    """Remove model-specific scaffolding from a reply.

    Removes, in order:
    1. <think>...</think> and <thinking>...</thinking> blocks
    2. A dangling prefix ending in a closing reasoning tag
    3. A single code fence wrapping the whole reply
    4. Surrounding whitespace, and quotes wrapping the whole reply

    Args:
        text: The raw message content.

    Returns:
        The cleaned text (may be empty).
    """
    cleaned = _REASONING_BLOCK.sub("", text)
    cleaned = _DANGLING_REASONING.sub("", cleaned, count=1)
    cleaned = cleaned.strip()

    match = _WRAPPING_FENCE.match(cleaned)
    if match and "```" not in match.group(1):
        cleaned = match.group(1).strip()

    if (
        len(cleaned) >= 2
        and cleaned[0] == cleaned[-1]
        and cleaned[0] in _WRAPPING_QUOTES
        and cleaned[0] not in cleaned[1:-1]
    ):
        cleaned = cleaned[1:-1].strip()

    return cleaned


def extract_code_blocks(content: str) -> list[str]:
    """Extract fenced code blocks from a markdown-like reply.

    Args:
        content: The reply text.

    Returns:
        The trimmed body of each fenced block, in order. Empty blocks and
        an unterminated trailing block are skipped.
    """
    blocks = []
    in_block = False
    current: list[str] = []

    for line in content.splitlines():
        if line.strip().startswith("```"):
            if in_block:
                body = "\n".join(current).strip()
                if body:
                    blocks.append(body)
                current = []
            in_block = not in_block
        elif in_block:
            current.append(line)

    return blocks
