"""List the bundled text sources."""

from __future__ import annotations

import argparse

from typa.cli.context import has_quotes
from typa.text import available_languages, load_words


def cmd_languages(args: argparse.Namespace) -> int:
    """Print each bundled language with its word count and quote support."""
    del args
    for language in available_languages():
        note = "words, quotes" if has_quotes(language) else "words"
        print(f"{language:<16} {len(load_words(language)):>6} {note}")
    return 0
