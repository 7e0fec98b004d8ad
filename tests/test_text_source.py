"""Tests for bundled text sources and session text selection."""

import random

import pytest

from typa.models import QuoteLength, QuoteMode, TimeMode, WordsMode
from typa.text import (
    TextSource,
    TextSourceError,
    available_languages,
    load_quotes,
    load_words,
)
from typa.text.source import Quote, select_quote, time_mode_word_count


class TestBundledData:
    """The packaged word lists and quotes."""

    def test_english_is_available(self) -> None:
        assert "english" in available_languages()

    def test_english_words_load(self) -> None:
        words = load_words("english")
        assert len(words) > 100
        assert all(word.strip() == word and word for word in words)

    def test_quotes_have_unique_ids(self) -> None:
        quotes = load_quotes("english")
        ids = [quote.id for quote in quotes]
        assert len(ids) == len(set(ids))

    def test_quotes_have_no_typographic_symbols(self) -> None:
        for quote in load_quotes("english"):
            assert not set(quote.text) & set("“”’‘…")

    def test_unknown_language(self) -> None:
        with pytest.raises(TextSourceError):
            load_words("klingon")


class TestQuoteSelection:
    """Picking quotes by id or length."""

    QUOTES = (
        Quote(1, "x" * 50, "short one"),
        Quote(2, "x" * 200, "medium one"),
        Quote(3, "x" * 450, "long one"),
        Quote(4, "x" * 900, "very long one"),
    )

    def test_quote_categories(self) -> None:
        assert [q.category for q in self.QUOTES] == [
            QuoteLength.SHORT,
            QuoteLength.MEDIUM,
            QuoteLength.LONG,
            QuoteLength.VERY_LONG,
        ]

    def test_select_by_id(self) -> None:
        quote = select_quote(self.QUOTES, QuoteMode(quote_id=3), random.Random(0))
        assert quote.source == "long one"

    def test_select_missing_id(self) -> None:
        with pytest.raises(TextSourceError):
            select_quote(self.QUOTES, QuoteMode(quote_id=99), random.Random(0))

    @pytest.mark.parametrize(
        "length",
        [
            QuoteLength.SHORT,
            QuoteLength.MEDIUM,
            QuoteLength.LONG,
            QuoteLength.VERY_LONG,
        ],
    )
    def test_select_by_length(self, length: QuoteLength) -> None:
        quote = select_quote(self.QUOTES, QuoteMode(length=length), random.Random(0))
        assert quote.category is length

    def test_empty_bucket(self) -> None:
        with pytest.raises(TextSourceError):
            select_quote(
                self.QUOTES[:1], QuoteMode(length=QuoteLength.LONG), random.Random(0)
            )


class TestTextSource:
    """TextSource.fetch for each mode."""

    def test_words_mode(self) -> None:
        selection = TextSource(random.Random(1)).fetch(WordsMode(10), "english")
        assert len(selection.text.split(" ")) == 10
        assert selection.source == ""
        assert selection.quote_id is None

    def test_time_mode_generates_enough_words(self) -> None:
        selection = TextSource(random.Random(1)).fetch(TimeMode(30), "english")
        assert len(selection.text.split(" ")) == 150

    def test_time_mode_minimum(self) -> None:
        assert time_mode_word_count(1) == 50
        assert time_mode_word_count(60) == 300

    def test_quote_by_id(self) -> None:
        selection = TextSource().fetch(QuoteMode(quote_id=5), "english")
        assert selection.text == "Simplicity is prerequisite for reliability."
        assert selection.source == "Edsger W. Dijkstra"
        assert selection.quote_id == 5

    def test_short_quote(self) -> None:
        selection = TextSource(random.Random(2)).fetch(
            QuoteMode(length=QuoteLength.SHORT), "english"
        )
        assert len(selection.text) <= 100

    def test_punctuated_words(self) -> None:
        selection = TextSource(random.Random(3)).fetch(
            WordsMode(30), "english", include_punctuation=True
        )
        assert selection.text[0].isupper() or not selection.text[0].isalpha()
        assert selection.text.endswith((".", "!", "?"))

    def test_missing_quote_id(self) -> None:
        with pytest.raises(TextSourceError):
            TextSource().fetch(QuoteMode(quote_id=100000), "english")
