"""Bundled word lists and quotes, and selection of the text for a session."""

from __future__ import annotations

import json
import logging
import math
import random
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from typa.models import (
    Mode,
    QuoteLength,
    QuoteMode,
    TextSelection,
    TimeMode,
    WordsMode,
    quote_length_category,
)
from typa.text.generator import WordGenerator
from typa.text.punctuation import PunctuationRules
from typa.text.strings import clean_typography_symbols

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent

# Time tests get enough words for a 300 wpm typist.
TIME_MODE_WORDS_PER_SECOND = 5
MIN_TIME_MODE_WORDS = 50


class TextSourceError(Exception):
    """Raised when the requested language or quote cannot be supplied."""


@dataclass(frozen=True, slots=True)
class Quote:
    id: int
    text: str
    source: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def category(self) -> QuoteLength:
        return quote_length_category(self.length)


def _read_json(folder: str, language: str) -> dict:
    path = DATA_DIR / folder / f"{language}.json"
    if not path.is_file():
        raise TextSourceError(f"No {folder} file for language '{language}'")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TextSourceError(f"Malformed {folder} file for '{language}': {e}") from e
    if not isinstance(data, dict):
        raise TextSourceError(f"Malformed {folder} file for '{language}'")
    return data


def available_languages() -> list[str]:
    """Names of the bundled word lists."""
    return sorted(path.stem for path in (DATA_DIR / "languages").glob("*.json"))


@lru_cache(maxsize=8)
def load_words(language: str) -> tuple[str, ...]:
    data = _read_json("languages", language)
    words = tuple(str(word) for word in data.get("words", []) if str(word).strip())
    if not words:
        raise TextSourceError(f"Word list for '{language}' is empty")
    return words


@lru_cache(maxsize=8)
def load_quotes(language: str) -> tuple[Quote, ...]:
    data = _read_json("quotes", language)
    quotes = []
    for entry in data.get("quotes", []):
        text = clean_typography_symbols(str(entry.get("text", ""))).strip()
        if not text:
            continue
        quotes.append(
            Quote(id=int(entry["id"]), text=text, source=str(entry.get("source", "")))
        )
    return tuple(quotes)


def select_quote(
    quotes: tuple[Quote, ...], mode: QuoteMode, rng: random.Random
) -> Quote:
    """Pick a quote by id, or at random from the requested length bucket."""
    if mode.quote_id is not None:
        for quote in quotes:
            if quote.id == mode.quote_id:
                return quote
        raise TextSourceError(f"Quote id {mode.quote_id} not found")

    if mode.length is QuoteLength.ALL:
        pool = list(quotes)
    else:
        pool = [quote for quote in quotes if quote.category is mode.length]
    if not pool:
        raise TextSourceError(f"No {mode.length.label} quotes available")
    return rng.choice(pool)


def time_mode_word_count(seconds: int) -> int:
    return max(MIN_TIME_MODE_WORDS, math.ceil(seconds * TIME_MODE_WORDS_PER_SECOND))


class TextSource:
    """Supplies the target text for each new session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def fetch(
        self,
        mode: Mode,
        language: str = "english",
        include_numbers: bool = False,
        include_punctuation: bool = False,
    ) -> TextSelection:
        """Return a non-empty text for ``mode``.

        Raises:
            TextSourceError: The language or quote does not exist.
        """
        if isinstance(mode, QuoteMode):
            quote = select_quote(load_quotes(language), mode, self._rng)
            logger.info("Selected quote %d (%s)", quote.id, quote.category.value)
            return TextSelection(
                text=quote.text, source=quote.source, quote_id=quote.id
            )

        if isinstance(mode, WordsMode):
            count = mode.count
        elif isinstance(mode, TimeMode):
            count = time_mode_word_count(mode.seconds)
        else:
            raise TypeError(f"Unsupported mode: {mode!r}")

        rules = PunctuationRules(
            use_numbers=include_numbers, use_punctuation=include_punctuation
        )
        generator = WordGenerator(load_words(language), rules, self._rng)
        words = generator.generate(count)
        logger.info("Generated %d words from '%s'", len(words), language)
        return TextSelection(text=" ".join(words))
