"""Classify a raw gitie invocation into exactly one action.

classify() is a pure function of the argument list. Rules, first match wins:

1. A help flag (-h/--help) with --ai      -> HelpWithExplain (run, capture, explain)
   A help flag without --ai               -> HelpPassthrough
2. `commit`/`ci` with only its own flags  -> KnownSubcommand
3. --ai anywhere else                     -> GlobalExplain (explain, do not run)
4. Anything else                          -> Passthrough

Flags are only recognised before a `--` separator; everything after it is
forwarded untouched.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import click

AI_FLAG = "--ai"
HELP_FLAGS = ("-h", "--help")
SEPARATOR = "--"
COMMIT_NAMES = ("commit", "ci")

# Explaining a bare `gitie --ai` describes git itself
DEFAULT_EXPLAIN_ARGS = ("--help",)


@dataclass(frozen=True)
class CommitRequestIntent:
    """What the user asked the commit subcommand to do."""

    use_ai: bool = False
    auto_stage: bool = False
    message: Optional[str] = None
    passthrough_args: tuple[str, ...] = ()


@dataclass(frozen=True)
class HelpPassthrough:
    args: tuple[str, ...]


@dataclass(frozen=True)
class HelpWithExplain:
    args: tuple[str, ...]


@dataclass(frozen=True)
class KnownSubcommand:
    intent: CommitRequestIntent


@dataclass(frozen=True)
class GlobalExplain:
    args: tuple[str, ...]


@dataclass(frozen=True)
class Passthrough:
    args: tuple[str, ...]


Classification = Union[
    HelpPassthrough,
    HelpWithExplain,
    KnownSubcommand,
    GlobalExplain,
    Passthrough,
]


# Option schema for `gitie commit`. Only parsed, never invoked.
@click.command(name="commit", add_help_option=False)
@click.option("--ai", "ai", is_flag=True, default=False,
              help="Generate the commit message from the staged diff")
@click.option("--all", "-a", "stage_all", is_flag=True, default=False,
              help="Stage all modified tracked files first")
@click.option("--message", "-m", "message", default=None,
              help="Use the given commit message")
def commit_schema(ai: bool, stage_all: bool, message: Optional[str]) -> None:
    """Commit staged changes. Arguments after -- are passed to git commit."""


def split_at_separator(args: Sequence[str]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split args into (before `--`, after `--`). The separator is dropped."""
    args = tuple(args)
    if SEPARATOR in args:
        index = args.index(SEPARATOR)
        return args[:index], args[index + 1:]
    return args, ()


def has_flag(args: Sequence[str], flags: Sequence[str]) -> bool:
    """Check for any of `flags` before the separator."""
    head, _ = split_at_separator(args)
    return any(arg in flags for arg in head)


def strip_flag(args: Sequence[str], flag: str) -> tuple[str, ...]:
    """Remove every occurrence of `flag` before the separator.

    The separator and everything after it are kept as given.
    """
    result = []
    seen_separator = False
    for arg in args:
        if arg == SEPARATOR:
            seen_separator = True
        if seen_separator or arg != flag:
            result.append(arg)
    return tuple(result)


def parse_commit_args(args: Sequence[str]) -> Optional[CommitRequestIntent]:
    """Parse `commit [--ai] [-a] [-m MSG] [-- PASSTHROUGH...]`.

    Returns:
        The parsed intent, or None when args are not a commit invocation
        this schema understands (unknown flags, stray positionals, missing
        option values).
    """
    if not args or args[0] not in COMMIT_NAMES:
        return None

    head, tail = split_at_separator(args[1:])
    try:
        ctx = commit_schema.make_context("commit", list(head))
    except (click.ClickException, click.exceptions.Exit, click.exceptions.Abort):
        return None

    return CommitRequestIntent(
        use_ai=bool(ctx.params.get("ai")),
        auto_stage=bool(ctx.params.get("stage_all")),
        message=ctx.params.get("message"),
        passthrough_args=tail,
    )


def classify(args: Sequence[str]) -> Classification:
    """Classify an invocation.

    Args:
        args: Arguments after the program name.

    Returns:
        Exactly one Classification variant. Never raises.
    """
    args = tuple(args)

    if has_flag(args, HELP_FLAGS):
        if has_flag(args, (AI_FLAG,)):
            return HelpWithExplain(strip_flag(args, AI_FLAG))
        return HelpPassthrough(args)

    intent = parse_commit_args(args)
    if intent is not None:
        return KnownSubcommand(intent)

    if has_flag(args, (AI_FLAG,)):
        effective = strip_flag(args, AI_FLAG) or DEFAULT_EXPLAIN_ARGS
        return GlobalExplain(effective)

    return Passthrough(args)
