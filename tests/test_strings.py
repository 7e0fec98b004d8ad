"""Tests for string helpers."""

import pytest

from typa.text.strings import (
    capitalize_word,
    chars_visually_equal,
    clean_typography_symbols,
    ends_with_terminator,
    is_sentence_end,
)


@pytest.mark.parametrize(
    ("typed", "expected"),
    [
        ("a", "a"),
        ("'", "’"),
        ('"', "“"),
        ('"', "”"),
        ("-", "—"),
        ("-", "–"),
        (",", "‚"),
    ],
)
def test_visually_equal(typed: str, expected: str) -> None:
    assert chars_visually_equal(typed, expected)


@pytest.mark.parametrize(("typed", "expected"), [("a", "b"), ("-", "'"), (",", ".")])
def test_visually_different(typed: str, expected: str) -> None:
    assert not chars_visually_equal(typed, expected)


def test_clean_typography_symbols() -> None:
    """Curly quotes, ellipses and odd spaces become keyboard characters."""
    assert clean_typography_symbols("“it’s…”") == "\"it's...\""
    assert clean_typography_symbols("a\u00a0b\u202fc") == "a b c"
    assert clean_typography_symbols("«x»") == "<<x>>"


def test_capitalize_word_skips_leading_punctuation() -> None:
    assert capitalize_word("hello") == "Hello"
    assert capitalize_word('"quoted"') == '"Quoted"'
    assert capitalize_word("(aside)") == "(Aside)"
    assert capitalize_word("42") == "42"


def test_sentence_end() -> None:
    assert ends_with_terminator("done.")
    assert is_sentence_end("done!")
    assert is_sentence_end("really?")
    assert not is_sentence_end("trailing...")
    assert ends_with_terminator("trailing...")
    assert not is_sentence_end("word,")
