"""Speed and accuracy statistics.

One word is five characters. With ``t`` the elapsed time in minutes:

* ``wpm = max(0, (correct / 5 - uncorrected_errors) / t)``
* ``raw_wpm = (correct + incorrect + extra) / 5 / t``
* ``accuracy = 100 * correct / (correct + incorrect + extra)``, 100 when
  nothing has been typed.

Everything here is a pure function of a buffer snapshot and a duration.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from typa.engine.buffer import CharOutcome, ClassificationBuffer

CHARS_PER_WORD = 5

# A closing sample closer than this to the last whole-second sample is dropped.
MIN_FINAL_SAMPLE_GAP = 0.495


@dataclass(frozen=True, slots=True)
class CharCounts:
    correct: int = 0
    incorrect: int = 0
    extra: int = 0
    missed: int = 0

    @property
    def typed(self) -> int:
        return self.correct + self.incorrect + self.extra

    @classmethod
    def from_buffer(cls, buffer: ClassificationBuffer) -> "CharCounts":
        return cls(
            correct=buffer.count(CharOutcome.CORRECT),
            incorrect=buffer.count(CharOutcome.INCORRECT),
            extra=buffer.count(CharOutcome.EXTRA),
            missed=buffer.count(CharOutcome.MISSED),
        )


@dataclass(frozen=True, slots=True)
class WpmSample:
    """Speed at one point of the test, for the consistency score."""

    elapsed: float
    wpm: float
    raw_wpm: float
    errors: int


@dataclass(frozen=True, slots=True)
class SessionStats:
    """Statistics for a finished (or in-progress) session."""

    wpm: float
    raw_wpm: float
    accuracy: float
    counts: CharCounts
    uncorrected_errors: int
    elapsed_seconds: float
    consistency: float = 100.0
    correct_keystrokes: int = 0
    incorrect_keystrokes: int = 0

    @property
    def correct_chars(self) -> int:
        return self.counts.correct

    @property
    def incorrect_chars(self) -> int:
        return self.counts.incorrect

    @property
    def extra_chars(self) -> int:
        return self.counts.extra

    @property
    def missed_chars(self) -> int:
        return self.counts.missed

    @property
    def total_keystrokes(self) -> int:
        return self.correct_keystrokes + self.incorrect_keystrokes


def net_wpm(correct: int, uncorrected_errors: int, elapsed_seconds: float) -> float:
    if elapsed_seconds <= 0:
        return 0.0
    minutes = elapsed_seconds / 60.0
    return max(0.0, (correct / CHARS_PER_WORD - uncorrected_errors) / minutes)


def raw_wpm(typed: int, elapsed_seconds: float) -> float:
    if elapsed_seconds <= 0:
        return 0.0
    return typed / CHARS_PER_WORD / (elapsed_seconds / 60.0)


def accuracy(counts: CharCounts) -> float:
    if counts.typed == 0:
        return 100.0
    return 100.0 * counts.correct / counts.typed


def consistency(samples: Sequence[WpmSample]) -> float:
    """100 minus the population standard deviation of sampled wpm, in [0, 100]."""
    if len(samples) < 2:
        return 100.0
    values = [sample.wpm for sample in samples]
    mean = sum(values) / len(values)
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return min(100.0, max(0.0, 100.0 - math.sqrt(variance)))


def compute_stats(
    buffer: ClassificationBuffer,
    elapsed_seconds: float,
    *,
    samples: Sequence[WpmSample] = (),
    correct_keystrokes: int = 0,
    incorrect_keystrokes: int = 0,
) -> SessionStats:
    """Derive statistics from a buffer snapshot. Does not mutate the buffer."""
    counts = CharCounts.from_buffer(buffer)
    uncorrected = counts.incorrect
    return SessionStats(
        wpm=net_wpm(counts.correct, uncorrected, elapsed_seconds),
        raw_wpm=raw_wpm(counts.typed, elapsed_seconds),
        accuracy=accuracy(counts),
        counts=counts,
        uncorrected_errors=uncorrected,
        elapsed_seconds=elapsed_seconds,
        consistency=consistency(samples),
        correct_keystrokes=correct_keystrokes,
        incorrect_keystrokes=incorrect_keystrokes,
    )


class SpeedRecorder:
    """Collects one speed sample per whole second of typing.

    Samples are taken when a keystroke lands in a new second, plus one
    closing sample when the session finishes.
    """

    def __init__(self) -> None:
        self._samples: list[WpmSample] = []
        self._last_second: int | None = None
        self._previous_errors = 0

    @property
    def samples(self) -> tuple[WpmSample, ...]:
        return tuple(self._samples)

    def on_keystroke(
        self, buffer: ClassificationBuffer, elapsed_seconds: float, errors_so_far: int
    ) -> None:
        second = math.floor(elapsed_seconds)
        if second < 1:
            return
        if self._last_second is not None and second <= self._last_second:
            return
        self._last_second = second
        self._push(buffer, float(second), errors_so_far)

    def on_finish(
        self, buffer: ClassificationBuffer, elapsed_seconds: float, errors_so_far: int
    ) -> None:
        last_full = float(self._last_second or 0)
        if elapsed_seconds - last_full >= MIN_FINAL_SAMPLE_GAP:
            self._push(buffer, elapsed_seconds, errors_so_far)

    def _push(
        self, buffer: ClassificationBuffer, elapsed_seconds: float, errors_so_far: int
    ) -> None:
        if elapsed_seconds <= 0:
            return
        counts = CharCounts.from_buffer(buffer)
        self._samples.append(
            WpmSample(
                elapsed=elapsed_seconds,
                wpm=net_wpm(counts.correct, counts.incorrect, elapsed_seconds),
                raw_wpm=raw_wpm(counts.typed, elapsed_seconds),
                errors=errors_so_far - self._previous_errors,
            )
        )
        self._previous_errors = errors_so_far
