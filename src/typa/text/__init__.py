"""Text sources for typing tests: generated word streams and quotes."""

from typa.text.source import (
    Quote,
    TextSource,
    TextSourceError,
    available_languages,
    load_quotes,
    load_words,
)

__all__ = [
    "Quote",
    "TextSource",
    "TextSourceError",
    "available_languages",
    "load_quotes",
    "load_words",
]
