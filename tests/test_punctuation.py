"""Tests for number and punctuation injection."""

import random
import re

import pytest

from typa.text.punctuation import (
    MIN_COMMA_GAP,
    GenerationContext,
    PunctuationRules,
    apply_contextual_capitalization,
    apply_contraction,
    finalize_stream_punctuation,
    generate_number,
    match_casing,
    ordinal_suffix,
)

NUMBER_RE = re.compile(r"^(-?\d+|\d+(st|nd|rd|th)|\d+\.\d|\d+%|\d+–\d+)$")


@pytest.mark.parametrize(
    ("n", "suffix"),
    [
        (1, "st"),
        (2, "nd"),
        (3, "rd"),
        (4, "th"),
        (11, "th"),
        (12, "th"),
        (13, "th"),
        (21, "st"),
        (22, "nd"),
        (112, "th"),
    ],
)
def test_ordinal_suffix(n: int, suffix: str) -> None:
    assert ordinal_suffix(n) == suffix


def test_generated_numbers_have_known_shapes() -> None:
    rng = random.Random(7)
    for _ in range(300):
        assert NUMBER_RE.match(generate_number(rng))


class TestContractions:
    """Contraction replacement keeps casing."""

    def test_match_casing(self) -> None:
        assert match_casing("it", "it's") == "it's"
        assert match_casing("It", "it's") == "It's"
        assert match_casing("IT", "it's") == "IT'S"
        assert match_casing("I", "i'm") == "I'm"

    def test_unknown_word_unchanged(self) -> None:
        assert apply_contraction("keyboard", random.Random(1)) == "keyboard"

    def test_known_word_contracted(self) -> None:
        assert apply_contraction("can", random.Random(1)) == "can't"
        assert apply_contraction("Will", random.Random(1)) == "Won't"


class TestRules:
    """PunctuationRules.apply decisions."""

    def test_plain_rules_return_word(self) -> None:
        rules = PunctuationRules()
        rng = random.Random(3)
        ctx = GenerationContext()
        assert all(rules.apply("word", rng, False, ctx) == "word" for _ in range(50))

    def test_numbers_never_start_a_sentence(self) -> None:
        rules = PunctuationRules(use_numbers=True)
        rng = random.Random(5)
        ctx = GenerationContext()
        assert all(rules.apply("word", rng, True, ctx) == "word" for _ in range(200))

    def test_numbers_appear_mid_sentence(self) -> None:
        rules = PunctuationRules(use_numbers=True)
        rng = random.Random(5)
        ctx = GenerationContext()
        results = [rules.apply("word", rng, False, ctx) for _ in range(200)]
        assert any(NUMBER_RE.match(r) for r in results)

    def test_no_terminator_in_short_sentence(self) -> None:
        rules = PunctuationRules(use_punctuation=True)
        rng = random.Random(11)
        ctx = GenerationContext(words_since_terminator=0, words_since_last_comma=0)
        for _ in range(300):
            word = rules.apply("word", rng, False, ctx)
            assert word == "word" or word.endswith("...") or word[0] in "\"("

    def test_dash_only_with_punctuation(self) -> None:
        rng = random.Random(2)
        assert not any(
            PunctuationRules().should_insert_dash(rng) for _ in range(500)
        )


class TestGenerationContext:
    """Counters spacing out commas and sentence ends."""

    def test_sentence_end_resets_counters(self) -> None:
        ctx = GenerationContext(words_since_terminator=9, words_since_last_comma=0)
        ctx.advance("end.")
        assert ctx.words_since_terminator == 0
        assert ctx.words_since_last_comma == MIN_COMMA_GAP

    def test_comma_resets_comma_gap(self) -> None:
        ctx = GenerationContext()
        ctx.advance("pause,")
        assert ctx.words_since_last_comma == 0
        assert ctx.words_since_terminator == 1
        ctx.advance("go")
        assert ctx.words_since_last_comma == 1


class TestStreamFinishing:
    """Capitalization and final punctuation."""

    def test_contextual_capitalization(self) -> None:
        assert apply_contextual_capitalization(["dog"], ["ran."], True) == ["Dog"]
        assert apply_contextual_capitalization(["dog"], ["ran..."], True) == ["dog"]
        assert apply_contextual_capitalization(["dog"], ["ran."], False) == ["dog"]
        assert apply_contextual_capitalization(["dog"], [], True) == ["dog"]

    def test_finalize_capitalizes_and_terminates(self) -> None:
        assert finalize_stream_punctuation(["hello", "world,"]) == ["Hello", "world."]

    def test_finalize_capitalizes_after_terminator(self) -> None:
        stream = ["one.", "two", "three!"]
        assert finalize_stream_punctuation(stream) == ["One.", "Two", "three!"]

    def test_finalize_drops_trailing_dash(self) -> None:
        assert finalize_stream_punctuation(["a.", "b", "-"]) == ["A.", "B."]

    def test_finalize_drops_dash_after_punctuation(self) -> None:
        assert finalize_stream_punctuation(["a,", "-", "b"]) == ["A,", "b."]

    def test_finalize_empty(self) -> None:
        assert finalize_stream_punctuation([]) == []
