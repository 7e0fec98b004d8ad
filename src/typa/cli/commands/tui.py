"""TUI launch command."""

from __future__ import annotations

import argparse
import sys

from typa.cli.context import check_language_or_error
from typa.cli.parser import options_from_args
from typa.config import load_config
from typa.text import TextSource, TextSourceError


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the typing test."""
    from typa.tui.app import TypaApp

    options = options_from_args(args)
    if not check_language_or_error(options.language):
        return 1

    source = TextSource()
    try:
        # Surface a missing quote before the terminal switches to the app.
        source.fetch(
            options.mode,
            options.language,
            options.include_numbers,
            options.include_punctuation,
        )
    except TextSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app = TypaApp(options, config=load_config(), source=source)
    app.run()
    return app.return_code or 0
