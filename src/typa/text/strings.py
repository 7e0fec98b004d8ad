"""String helpers shared by text generation and classification."""

from __future__ import annotations

QUOTE_CHARS = frozenset("\"“”„'’‘ʼ᾽")
DASH_CHARS = frozenset("-–—‐")
COMMA_CHARS = frozenset(",‚")

SENTENCE_TERMINATORS = (".", "!", "?")

# Single characters that map to a plain ASCII replacement.
_TYPOGRAPHY_REPLACEMENTS = {
    "“": '"',
    "”": '"',
    "„": '"',
    "’": "'",
    "‘": "'",
    "᾽": "'",
    "ʼ": "'",
    "‐": "-",
    "\u00a0": " ",
    "\u2007": " ",
    "\u202f": " ",
    "…": "...",
    "«": "<<",
    "»": ">>",
}


def chars_visually_equal(typed: str, expected: str) -> bool:
    """Return True if two characters look the same on a keyboard.

    Straight and curly quotes, the hyphen and the en/em dashes, and the
    comma-like characters are interchangeable, so typing ``-`` against
    ``—`` is not an error.
    """
    if typed == expected:
        return True
    for group in (QUOTE_CHARS, DASH_CHARS, COMMA_CHARS):
        if typed in group and expected in group:
            return True
    return False


def clean_typography_symbols(text: str) -> str:
    """Replace typographic symbols with characters found on a keyboard."""
    return "".join(_TYPOGRAPHY_REPLACEMENTS.get(char, char) for char in text)


def capitalize_word(word: str) -> str:
    """Uppercase the first alphabetic character, leaving any prefix intact."""
    for idx, char in enumerate(word):
        if char.isalpha():
            return word[:idx] + char.upper() + word[idx + 1 :]
    return word


def ends_with_terminator(word: str) -> bool:
    return word.endswith(SENTENCE_TERMINATORS)


def is_sentence_end(word: str) -> bool:
    """True for words closing a sentence. An ellipsis trails off instead."""
    return not word.endswith("...") and ends_with_terminator(word)
