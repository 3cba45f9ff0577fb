"""Tests for gitie.intent module."""

import pytest

from gitie.intent import (
    CommitRequestIntent,
    GlobalExplain,
    HelpPassthrough,
    HelpWithExplain,
    KnownSubcommand,
    Passthrough,
    classify,
    has_flag,
    parse_commit_args,
    split_at_separator,
    strip_flag,
)


class TestSplitAtSeparator:
    """Tests for split_at_separator function."""

    def test_no_separator(self):
        """Test that args without -- are all in the head."""
        assert split_at_separator(["commit", "--ai"]) == (("commit", "--ai"), ())

    def test_splits_on_first_separator(self):
        """Test that the first -- splits and is dropped."""
        head, tail = split_at_separator(["commit", "--", "--amend", "--", "x"])
        assert head == ("commit",)
        assert tail == ("--amend", "--", "x")


class TestHasFlag:
    """Tests for has_flag function."""

    def test_finds_flag_before_separator(self):
        """Test that a flag before -- is found."""
        assert has_flag(["status", "--ai"], ["--ai"])

    def test_ignores_flag_after_separator(self):
        """Test that a flag after -- is not found."""
        assert not has_flag(["log", "--", "--help"], ["-h", "--help"])


class TestStripFlag:
    """Tests for strip_flag function."""

    def test_removes_all_occurrences(self):
        """Test that every occurrence before -- is removed."""
        assert strip_flag(["--ai", "status", "--ai"], "--ai") == ("status",)

    def test_keeps_tail_untouched(self):
        """Test that the separator and tail are preserved."""
        result = strip_flag(["commit", "--ai", "--", "--ai"], "--ai")
        assert result == ("commit", "--", "--ai")


class TestParseCommitArgs:
    """Tests for parse_commit_args function."""

    def test_plain_commit(self):
        """Test a bare commit."""
        assert parse_commit_args(["commit"]) == CommitRequestIntent()

    def test_all_flags(self):
        """Test --ai, -a and -m together."""
        intent = parse_commit_args(["commit", "--ai", "-a", "-m", "msg"])
        assert intent == CommitRequestIntent(use_ai=True, auto_stage=True, message="msg")

    def test_long_flags(self):
        """Test the long spellings."""
        intent = parse_commit_args(["commit", "--all", "--message", "msg"])
        assert intent.auto_stage is True
        assert intent.message == "msg"

    def test_ci_alias(self):
        """Test that ci is accepted as commit."""
        intent = parse_commit_args(["ci", "--ai"])
        assert intent.use_ai is True

    def test_passthrough_tail(self):
        """Test that arguments after -- are kept verbatim."""
        intent = parse_commit_args(["commit", "--ai", "--", "--amend", "--no-verify"])
        assert intent.use_ai is True
        assert intent.passthrough_args == ("--amend", "--no-verify")

    def test_unknown_flag_returns_none(self):
        """Test that an unknown commit flag is not understood."""
        assert parse_commit_args(["commit", "--amend"]) is None

    def test_stray_positional_returns_none(self):
        """Test that a positional argument is not understood."""
        assert parse_commit_args(["commit", "file.txt"]) is None

    def test_missing_message_value_returns_none(self):
        """Test that -m without a value is not understood."""
        assert parse_commit_args(["commit", "-m"]) is None

    def test_other_subcommand_returns_none(self):
        """Test that other subcommands are not parsed."""
        assert parse_commit_args(["status"]) is None
        assert parse_commit_args([]) is None


class TestClassify:
    """Tests for classify function."""

    def test_empty_args_pass_through(self):
        """Test that no arguments is a passthrough."""
        assert classify([]) == Passthrough(())

    def test_help_passthrough(self):
        """Test that a help flag without --ai passes through."""
        assert classify(["status", "--help"]) == HelpPassthrough(("status", "--help"))
        assert classify(["-h"]) == HelpPassthrough(("-h",))

    def test_help_with_explain(self):
        """Test that help with --ai is explained and --ai removed."""
        result = classify(["--ai", "status", "--help"])
        assert result == HelpWithExplain(("status", "--help"))

    def test_ai_help_is_explained(self):
        """Test that --ai --help captures and explains git's help."""
        assert classify(["--ai", "--help"]) == HelpWithExplain(("--help",))

    def test_repeated_ai_flag(self):
        """Test that repeated --ai flags classify like a single one."""
        assert classify(["--ai", "--ai", "status"]) == classify(["--ai", "status"])
        assert classify(["--ai", "--ai", "status"]) == GlobalExplain(("status",))

    def test_ai_after_separator_not_stripped(self):
        """Test that a literal --ai after -- is forwarded."""
        result = classify(["status", "--ai", "--", "--ai"])
        assert result == GlobalExplain(("status", "--", "--ai"))

    def test_help_wins_over_commit(self):
        """Test that commit --help is a help passthrough."""
        assert classify(["commit", "--help"]) == HelpPassthrough(("commit", "--help"))

    def test_help_after_separator_is_not_help(self):
        """Test that a help flag after -- is forwarded."""
        result = classify(["log", "--", "--help"])
        assert result == Passthrough(("log", "--", "--help"))

    def test_known_commit(self):
        """Test that an understood commit is a known subcommand."""
        result = classify(["commit", "--ai", "-a"])
        assert result == KnownSubcommand(CommitRequestIntent(use_ai=True, auto_stage=True))

    def test_plain_commit_is_known(self):
        """Test that commit without --ai is still handled by the commit flow."""
        result = classify(["commit", "-m", "fix"])
        assert isinstance(result, KnownSubcommand)
        assert result.intent.use_ai is False
        assert result.intent.message == "fix"

    def test_global_explain(self):
        """Test that --ai on another command is an explanation."""
        assert classify(["status", "--ai"]) == GlobalExplain(("status",))

    def test_bare_ai_explains_git(self):
        """Test that --ai alone explains git itself."""
        assert classify(["--ai"]) == GlobalExplain(("--help",))

    def test_unparseable_commit_with_ai_is_explained(self):
        """Test that an unknown commit flag with --ai falls to explanation."""
        result = classify(["commit", "--amend", "--ai"])
        assert result == GlobalExplain(("commit", "--amend"))

    def test_unparseable_commit_without_ai_passes_through(self):
        """Test that an unknown commit flag without --ai passes through."""
        assert classify(["commit", "--amend"]) == Passthrough(("commit", "--amend"))

    def test_mixed_known_and_unknown_flags_pass_through(self):
        """Test that an unknown commit flag mixed with known ones passes through."""
        result = classify(["commit", "-a", "--no-verify"])
        assert result == Passthrough(("commit", "-a", "--no-verify"))

    def test_passthrough(self):
        """Test that ordinary commands pass through unchanged."""
        assert classify(["log", "--oneline", "-3"]) == Passthrough(("log", "--oneline", "-3"))

    @pytest.mark.parametrize(
        "args",
        [
            [],
            ["--ai"],
            ["-h", "--ai"],
            ["commit"],
            ["commit", "-m"],
            ["commit", "--", "--help"],
            ["--", "--ai"],
            ["push", "origin", "main"],
        ],
    )
    def test_total(self, args):
        """Test that classify returns exactly one variant and never raises."""
        result = classify(args)
        assert isinstance(
            result,
            (HelpPassthrough, HelpWithExplain, KnownSubcommand, GlobalExplain, Passthrough),
        )


class TestCommitSchema:
    """Tests for the commit option schema."""

    def test_parse_errors_are_caught(self):
        """Test that every kind of commit parse error yields None."""
        for args in (["commit", "--amend"], ["commit", "x"], ["commit", "-m"], ["ci", "--help"]):
            assert parse_commit_args(args) is None
