"""Argument parser construction for the typa CLI."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from typa.models import QuoteLength, QuoteMode, TestOptions, TimeMode, WordsMode

DEFAULT_TIME_SECONDS = 60
MAX_WORD_COUNT = 10000

_QUOTE_ALIASES = {"verylong": QuoteLength.VERY_LONG, "very-long": QuoteLength.VERY_LONG}


def _ranged_int(minimum: int, maximum: int | None = None) -> Callable[[str], int]:
    """argparse ``type`` accepting integers in ``[minimum, maximum]``."""

    def parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
        if number < minimum or (maximum is not None and number > maximum):
            bounds = f">= {minimum}" if maximum is None else f"{minimum}..{maximum}"
            raise argparse.ArgumentTypeError(f"{number} is not in range {bounds}")
        return number

    return parse


def quote_selector(value: str) -> QuoteMode:
    """Parse ``-q``: a length name or a quote id."""
    if value.isdigit():
        return QuoteMode(quote_id=int(value))
    name = value.lower()
    if name in _QUOTE_ALIASES:
        return QuoteMode(length=_QUOTE_ALIASES[name])
    try:
        return QuoteMode(length=QuoteLength(name))
    except ValueError:
        choices = ", ".join(length.value for length in QuoteLength)
        raise argparse.ArgumentTypeError(
            f"invalid quote '{value}' (choose from {choices} or an id)"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="typa",
        description="typa - a terminal typing test",
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-t",
        "--time",
        type=_ranged_int(1),
        metavar="SECONDS",
        help="Time mode: duration in seconds (e.g. 15, 60, 120)",
    )
    mode_group.add_argument(
        "-w",
        "--words",
        type=_ranged_int(1, MAX_WORD_COUNT),
        metavar="COUNT",
        help=f"Words mode: word count (1 to {MAX_WORD_COUNT})",
    )
    mode_group.add_argument(
        "-q",
        "--quote",
        type=quote_selector,
        metavar="QUOTE",
        help='Quote mode: "short", "medium", "long", "very_long", "all" or an id',
    )

    parser.add_argument(
        "-l",
        "--language",
        default="english",
        help="Word list / quote collection to use (default: english)",
    )
    parser.add_argument(
        "-n",
        "--numbers",
        action="store_true",
        help="Include numbers in the test",
    )
    parser.add_argument(
        "-p",
        "--punctuation",
        action="store_true",
        help="Include punctuation in the test",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser(
        "languages",
        help="List bundled word lists and quote collections",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))


def options_from_args(args: argparse.Namespace) -> TestOptions:
    """Turn parsed arguments into test options. Time 60 when no mode is given."""
    if args.time is not None:
        mode: TimeMode | WordsMode | QuoteMode = TimeMode(args.time)
    elif args.words is not None:
        mode = WordsMode(args.words)
    elif args.quote is not None:
        mode = args.quote
    else:
        mode = TimeMode(DEFAULT_TIME_SECONDS)
    return TestOptions(
        mode=mode,
        language=args.language,
        include_numbers=args.numbers,
        include_punctuation=args.punctuation,
    )
