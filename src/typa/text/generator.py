"""Random word stream generation for time and word-count tests."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from typa.text.punctuation import (
    GenerationContext,
    PunctuationRules,
    apply_contextual_capitalization,
    finalize_stream_punctuation,
)
from typa.text.strings import is_sentence_end

logger = logging.getLogger(__name__)


class WordGenerator:
    """Builds word streams from a dictionary word list."""

    def __init__(
        self,
        words: Sequence[str],
        rules: PunctuationRules,
        rng: random.Random | None = None,
    ) -> None:
        if not words:
            raise ValueError("Word list is empty")
        self._words = list(words)
        self._rules = rules
        self._rng = rng or random.Random()

    @property
    def rules(self) -> PunctuationRules:
        return self._rules

    def unique_batch(self, count: int) -> list[str]:
        """Sample without replacement while the list lasts, then refill."""
        batch: list[str] = []
        while len(batch) < count:
            take = min(count - len(batch), len(self._words))
            sample = self._rng.sample(self._words, take)
            if batch and sample and sample[0] == batch[-1] and len(sample) > 1:
                sample[0], sample[-1] = sample[-1], sample[0]
            batch.extend(sample)
        return batch

    def generate(self, count: int) -> list[str]:
        """Return ``count`` tokens, decorated per the punctuation rules.

        Dashes count as tokens. Finalizing punctuation may drop a dash that
        follows a terminator, so a punctuated stream can come up short.
        """
        if count < 1:
            raise ValueError(f"Word count must be positive, got {count}")

        ctx = GenerationContext()
        stream: list[str] = []
        for raw in self.unique_batch(count):
            if len(stream) >= count:
                break
            is_sentence_start = not stream or is_sentence_end(stream[-1])
            word = self._rules.apply(raw, self._rng, is_sentence_start, ctx)
            new_words = apply_contextual_capitalization(
                [word], stream, self._rules.use_punctuation
            )
            stream.extend(new_words)
            ctx.advance(word)
            # Dashes never take the final slot.
            if len(stream) < count - 1 and self._rules.should_insert_dash(self._rng):
                stream.append("-")
                ctx.advance("-")

        stream = stream[:count]
        if self._rules.use_punctuation:
            stream = finalize_stream_punctuation(stream)
        logger.debug("Generated %d words (requested %d)", len(stream), count)
        return stream
