"""Tests for speed and accuracy statistics."""

import pytest

from typa.engine.buffer import ClassificationBuffer
from typa.engine.stats import (
    CharCounts,
    SpeedRecorder,
    WpmSample,
    accuracy,
    compute_stats,
    consistency,
    net_wpm,
    raw_wpm,
)


def _typed(target: str, keys: str) -> ClassificationBuffer:
    buffer = ClassificationBuffer(target)
    for key in keys:
        buffer.apply_char(key)
    return buffer


def _samples(*wpms: float) -> list[WpmSample]:
    return [
        WpmSample(elapsed=i + 1, wpm=w, raw_wpm=w, errors=0)
        for i, w in enumerate(wpms)
    ]


class TestComputeStats:
    """Stats derived from a buffer snapshot."""

    def test_perfect_run(self) -> None:
        """'the cat' typed correctly in 6 seconds."""
        stats = compute_stats(_typed("the cat", "the cat"), 6.0)
        assert stats.correct_chars == 7
        assert stats.wpm == pytest.approx(14.0)
        assert stats.raw_wpm == pytest.approx(14.0)
        assert stats.accuracy == 100.0

    def test_uncorrected_error(self) -> None:
        """'cat' typed as 'cxt' in 3 seconds."""
        stats = compute_stats(_typed("cat", "cxt"), 3.0)
        assert stats.correct_chars == 2
        assert stats.incorrect_chars == 1
        assert stats.uncorrected_errors == 1
        assert stats.wpm == 0.0
        assert stats.raw_wpm == pytest.approx(12.0)
        assert stats.accuracy == pytest.approx(66.67, abs=0.01)

    def test_zero_elapsed_gives_zero_speed(self) -> None:
        stats = compute_stats(_typed("cat", "cat"), 0.0)
        assert stats.wpm == 0.0
        assert stats.raw_wpm == 0.0

    def test_nothing_typed_is_full_accuracy(self) -> None:
        stats = compute_stats(ClassificationBuffer("cat"), 5.0)
        assert stats.accuracy == 100.0
        assert stats.counts == CharCounts()

    def test_missed_characters_are_counted_but_not_typed(self) -> None:
        stats = compute_stats(_typed("hello world", "he world"), 6.0)
        assert stats.missed_chars == 3
        assert stats.counts.typed == 8

    def test_does_not_mutate_buffer(self) -> None:
        buffer = _typed("cat", "cx")
        before = buffer.outcomes()
        compute_stats(buffer, 1.0)
        assert buffer.outcomes() == before

    def test_keystroke_totals(self) -> None:
        stats = compute_stats(
            _typed("cat", "cat"), 1.0, correct_keystrokes=3, incorrect_keystrokes=2
        )
        assert stats.total_keystrokes == 5


class TestFormulas:
    """Bounds of the individual formulas."""

    def test_net_wpm_never_negative(self) -> None:
        assert net_wpm(0, 50, 1.0) == 0.0

    def test_raw_wpm(self) -> None:
        assert raw_wpm(50, 60.0) == pytest.approx(10.0)

    def test_accuracy_bounds(self) -> None:
        assert accuracy(CharCounts(correct=0, incorrect=3)) == 0.0
        assert accuracy(CharCounts(correct=3, extra=1)) == pytest.approx(75.0)


class TestConsistency:
    """Consistency from per-second samples."""

    def test_too_few_samples(self) -> None:
        assert consistency([]) == 100.0
        assert consistency(_samples(80)) == 100.0

    def test_steady_speed(self) -> None:
        assert consistency(_samples(50, 50, 50)) == 100.0

    def test_population_stddev(self) -> None:
        assert consistency(_samples(40, 60)) == pytest.approx(90.0)

    def test_clamped_at_zero(self) -> None:
        assert consistency(_samples(0, 300)) == 0.0


class TestSpeedRecorder:
    """Per-second sampling."""

    def test_one_sample_per_whole_second(self) -> None:
        buffer = _typed("the cat", "the")
        recorder = SpeedRecorder()
        for elapsed in (0.5, 1.2, 1.8, 2.1):
            recorder.on_keystroke(buffer, elapsed, errors_so_far=0)
        assert [s.elapsed for s in recorder.samples] == [1.0, 2.0]

    def test_final_sample_needs_half_second_gap(self) -> None:
        buffer = _typed("the cat", "the")
        recorder = SpeedRecorder()
        recorder.on_keystroke(buffer, 2.1, errors_so_far=0)
        recorder.on_finish(buffer, 2.3, errors_so_far=0)
        assert len(recorder.samples) == 1

        recorder = SpeedRecorder()
        recorder.on_keystroke(buffer, 2.1, errors_so_far=0)
        recorder.on_finish(buffer, 2.6, errors_so_far=0)
        assert [s.elapsed for s in recorder.samples] == [2.0, 2.6]

    def test_errors_are_per_interval(self) -> None:
        buffer = _typed("the cat", "thx")
        recorder = SpeedRecorder()
        recorder.on_keystroke(buffer, 1.0, errors_so_far=1)
        recorder.on_keystroke(buffer, 2.0, errors_so_far=3)
        assert [s.errors for s in recorder.samples] == [1, 2]
