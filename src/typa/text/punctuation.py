"""Number and punctuation injection for generated word streams."""

from __future__ import annotations

import random
from dataclasses import dataclass

from typa.text.strings import capitalize_word, is_sentence_end

MIN_SENTENCE_WORDS = 6
MIN_COMMA_GAP = 3

NUMBER_PROBABILITY = 0.12
CONTRACTION_PROBABILITY = 0.35
PUNCTUATION_PROBABILITY = 0.20
DASH_PROBABILITY = 0.02

CONTRACTIONS: dict[str, tuple[str, ...]] = {
    "are": ("aren't",),
    "can": ("can't",),
    "cannot": ("can't",),
    "could": ("couldn't",),
    "did": ("didn't",),
    "does": ("doesn't",),
    "do": ("don't",),
    "had": ("hadn't",),
    "has": ("hasn't",),
    "have": ("haven't",),
    "is": ("isn't",),
    "it": ("it's", "it'll"),
    "i": ("i'm", "i'll", "i've", "i'd"),
    "you": ("you'll", "you're", "you've", "you'd"),
    "that": ("that's", "that'll", "that'd"),
    "must": ("mustn't", "must've"),
    "there": ("there's", "there'll", "there'd"),
    "he": ("he's", "he'll", "he'd"),
    "she": ("she's", "she'll", "she'd"),
    "we": ("we're", "we'll", "we'd", "we've"),
    "they": ("they're", "they'll", "they'd", "they've"),
    "should": ("shouldn't", "should've"),
    "was": ("wasn't",),
    "were": ("weren't",),
    "will": ("won't",),
    "would": ("wouldn't", "would've"),
    "let": ("let's",),
    "what": ("what's",),
    "who": ("who's",),
    "where": ("where's",),
    "how": ("how's",),
    "going": ("gonna", "goin'"),
    "got": ("gotta",),
    "want": ("wanna",),
}


@dataclass
class GenerationContext:
    """Running counters used to space out sentence ends and commas."""

    words_since_terminator: int = 0
    words_since_last_comma: int = MIN_COMMA_GAP

    def advance(self, placed_word: str) -> None:
        """Update the counters after a word is placed in the stream."""
        if is_sentence_end(placed_word):
            self.words_since_terminator = 0
            self.words_since_last_comma = MIN_COMMA_GAP
            return
        self.words_since_terminator += 1
        if placed_word.endswith(","):
            self.words_since_last_comma = 0
        else:
            self.words_since_last_comma += 1


@dataclass(frozen=True, slots=True)
class PunctuationRules:
    """Decides how a raw dictionary word is decorated before display."""

    use_numbers: bool = False
    use_punctuation: bool = False

    def apply(
        self,
        word: str,
        rng: random.Random,
        is_sentence_start: bool,
        ctx: GenerationContext,
    ) -> str:
        # Digits look wrong right after a sentence terminator.
        if self.use_numbers and not is_sentence_start:
            if rng.random() < NUMBER_PROBABILITY:
                return generate_number(rng)

        if not self.use_punctuation:
            return word

        if rng.random() < CONTRACTION_PROBABILITY:
            word = apply_contraction(word, rng)

        if rng.random() >= PUNCTUATION_PROBABILITY:
            return word

        can_end_sentence = ctx.words_since_terminator >= MIN_SENTENCE_WORDS
        can_comma = ctx.words_since_last_comma >= MIN_COMMA_GAP
        roll = rng.randrange(100)
        if roll < 25:
            return word + "," if can_comma else word
        if roll < 43:
            return word + "." if can_end_sentence else word
        if roll < 53:
            return word + ";" if can_end_sentence else word
        if roll < 58:
            return word + ":" if can_end_sentence else word
        if roll < 66:
            return word + "!" if can_end_sentence else word
        if roll < 74:
            return word + "?" if can_end_sentence else word
        if roll < 79:
            return word + "..."
        if roll < 90:
            return f'"{word}"'
        return f"({word})"

    def should_insert_dash(self, rng: random.Random) -> bool:
        return self.use_punctuation and rng.random() < DASH_PROBABILITY


def ordinal_suffix(n: int) -> str:
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def generate_number(rng: random.Random) -> str:
    """Return a number token: integer, ordinal, decimal, percent, negative or range."""
    roll = rng.randrange(100)
    if roll < 35:
        return str(rng.randint(0, 9999))
    if roll < 55:
        n = rng.randint(1, 100)
        return f"{n}{ordinal_suffix(n)}"
    if roll < 70:
        return f"{rng.randint(0, 99)}.{rng.randint(0, 9)}"
    if roll < 80:
        return f"{rng.randint(1, 100)}%"
    if roll < 90:
        return f"-{rng.randint(1, 999)}"
    low = rng.randint(1, 999)
    return f"{low}–{low + rng.randint(1, 100)}"


def match_casing(original: str, replacement: str) -> str:
    """Carry the casing of ``original`` over to ``replacement``."""
    letters = [char for char in original if char.isalpha()]
    # A lone "I" is not an acronym.
    if len(original) > 1 and letters and all(char.isupper() for char in letters):
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def apply_contraction(word: str, rng: random.Random) -> str:
    replacements = CONTRACTIONS.get(word.lower())
    if not replacements:
        return word
    return match_casing(word, rng.choice(replacements))


def apply_contextual_capitalization(
    new_words: list[str], existing_stream: list[str], use_punctuation: bool
) -> list[str]:
    """Capitalize the first new word when the stream so far ends a sentence."""
    if not use_punctuation or not new_words or not existing_stream:
        return new_words
    if is_sentence_end(existing_stream[-1]):
        return [capitalize_word(new_words[0]), *new_words[1:]]
    return new_words


def finalize_stream_punctuation(stream: list[str]) -> list[str]:
    """Make a punctuated stream read like prose.

    Capitalizes sentence starts, drops dashes that follow punctuation, and
    makes sure the stream closes with a terminator.
    """
    if not stream:
        return []

    words = [capitalize_word(stream[0])]
    for word in stream[1:]:
        previous = words[-1]
        if word in ("-", "—") and (
            previous in ("-", "—")
            or previous[-1:] in (".", "!", "?", ",", ";", ":", "(")
        ):
            continue
        if is_sentence_end(previous):
            word = capitalize_word(word)
        words.append(word)

    while len(words) > 1 and words[-1] in ("-", "—"):
        words.pop()
    last = words[-1]
    if last[-1:] in (",", ";", ":"):
        last = last[:-1]
    if last and not last.endswith((".", "!", "?")):
        last += "."
    words[-1] = last
    return [word for word in words if word]
