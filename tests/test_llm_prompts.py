"""Tests for gitie.llm.prompts module."""

from gitie.config import MAX_PAYLOAD_CHARS, TRUNCATION_MARKER
from gitie.llm.prompts import (
    STDERR_SEPARATOR,
    build_command_prompt,
    build_commit_prompt,
    build_output_prompt,
    build_output_text,
    truncate_payload,
)


class TestTruncatePayload:
    """Tests for truncate_payload function."""

    def test_short_text_unchanged(self):
        """Test that text within the limit is unchanged."""
        assert truncate_payload("abc") == "abc"

    def test_exact_limit_unchanged(self):
        """Test that text at exactly the limit is unchanged."""
        text = "x" * MAX_PAYLOAD_CHARS
        assert truncate_payload(text) == text

    def test_long_text_truncated(self):
        """Test that oversized text is cut and marked."""
        result = truncate_payload("x" * 9000)

        assert len(result) <= MAX_PAYLOAD_CHARS
        assert result.endswith(TRUNCATION_MARKER)
        assert result.startswith("x" * 7900)


class TestBuildCommitPrompt:
    """Tests for build_commit_prompt function."""

    def test_contains_diff(self, sample_diff):
        """Test that the diff follows the instruction."""
        prompt = build_commit_prompt(sample_diff)

        assert prompt.startswith("Generate a commit message")
        assert "GIT DIFF:\n" + sample_diff.strip() in prompt

    def test_large_diff_truncated(self):
        """Test that a 9000-character diff is bounded with a marker."""
        diff = "+" + "a" * 8999
        prompt = build_commit_prompt(diff)

        payload = prompt.split("GIT DIFF:\n", 1)[1]
        assert len(payload) <= MAX_PAYLOAD_CHARS
        assert payload.endswith(TRUNCATION_MARKER)


class TestBuildOutputText:
    """Tests for build_output_text function."""

    def test_success_uses_stdout_only(self):
        """Test that stderr is ignored on success."""
        assert build_output_text("usage: git", "hint", True) == "usage: git"

    def test_failure_appends_stderr(self):
        """Test that stderr is appended under a separator on failure."""
        result = build_output_text("out\n", "fatal: bad", False)
        assert result == "out" + STDERR_SEPARATOR + "fatal: bad"

    def test_failure_without_stderr(self):
        """Test that empty stderr adds nothing."""
        assert build_output_text("out", "  ", False) == "out"


class TestOtherPrompts:
    """Tests for explanation prompt builders."""

    def test_output_prompt_truncated(self):
        """Test that captured output is bounded with a marker that does not say diff."""
        result = build_output_prompt("y" * 20000)

        assert len(result) <= MAX_PAYLOAD_CHARS
        assert result.endswith(TRUNCATION_MARKER)
        assert "diff" not in TRUNCATION_MARKER

    def test_command_prompt(self):
        """Test that the command line is reconstructed."""
        assert build_command_prompt(["rebase", "-i", "HEAD~3"]) == "git rebase -i HEAD~3"
