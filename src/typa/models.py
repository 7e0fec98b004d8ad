"""Test modes and the text handed to a typing session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QuoteLength(Enum):
    """Quote length buckets, by character count."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "very_long"
    ALL = "all"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


# Upper bounds (inclusive) for each bucket; anything longer is VERY_LONG.
QUOTE_LENGTH_LIMITS: tuple[tuple[QuoteLength, int], ...] = (
    (QuoteLength.SHORT, 100),
    (QuoteLength.MEDIUM, 300),
    (QuoteLength.LONG, 600),
)


def quote_length_category(char_count: int) -> QuoteLength:
    """Bucket a quote by its length in characters."""
    for category, limit in QUOTE_LENGTH_LIMITS:
        if char_count <= limit:
            return category
    return QuoteLength.VERY_LONG


@dataclass(frozen=True, slots=True)
class TimeMode:
    """Type for a fixed number of seconds."""

    seconds: int

    def describe(self) -> str:
        return f"time {self.seconds}"


@dataclass(frozen=True, slots=True)
class WordsMode:
    """Type a fixed number of generated words."""

    count: int

    def describe(self) -> str:
        return f"word {self.count}"


@dataclass(frozen=True, slots=True)
class QuoteMode:
    """Type one quote, chosen by length bucket or by id."""

    length: QuoteLength = QuoteLength.ALL
    quote_id: int | None = None

    def describe(self) -> str:
        if self.quote_id is not None:
            return f"quote {self.quote_id}"
        return f"quote {self.length.label}"


Mode = TimeMode | WordsMode | QuoteMode


@dataclass(frozen=True, slots=True)
class TestOptions:
    """Everything needed to fetch the text for a new session."""

    __test__ = False  # not a pytest class

    mode: Mode
    language: str = "english"
    include_numbers: bool = False
    include_punctuation: bool = False

    def describe(self) -> str:
        """Human readable test type, e.g. ``time 60 english punctuation``."""
        parts = [self.mode.describe(), self.language]
        if self.include_punctuation:
            parts.append("punctuation")
        if self.include_numbers:
            parts.append("numbers")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class TextSelection:
    """Target text for one session plus where it came from."""

    text: str
    source: str = ""
    quote_id: int | None = None
