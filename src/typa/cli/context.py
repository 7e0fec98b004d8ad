"""Shared context helpers for CLI command modules."""

from __future__ import annotations

import sys

from typa.text import TextSourceError, available_languages, load_quotes, load_words


def check_language_or_error(language: str) -> bool:
    """Verify the word list exists, printing a user-facing error if not."""
    try:
        load_words(language)
    except TextSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        languages = ", ".join(available_languages()) or "none"
        print(f"  Available: {languages}", file=sys.stderr)
        return False
    return True


def has_quotes(language: str) -> bool:
    try:
        return bool(load_quotes(language))
    except TextSourceError:
        return False
