"""Per-character classification of typed input against the target text.

The buffer holds one slot per target character plus one slot per extra
character typed past the end of the target. Each slot carries a
``CharOutcome``; the renderer colors text from these outcomes and the
statistics are counted from them.

With word boundaries enabled, a space typed inside a word jumps to the next
word: the skipped characters become MISSED and the commit boundary moves past
the word. Backspace never crosses the commit boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from typa.text.strings import chars_visually_equal

logger = logging.getLogger(__name__)


class CharOutcome(Enum):
    """Classification of one buffer slot."""

    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    EXTRA = "extra"
    MISSED = "missed"


@dataclass(slots=True)
class Slot:
    outcome: CharOutcome = CharOutcome.PENDING
    # Only kept for INCORRECT and EXTRA slots.
    typed: str | None = None


@dataclass(frozen=True, slots=True)
class CursorDelta:
    """Cursor position before and after a keystroke."""

    before: int
    after: int

    @property
    def moved(self) -> int:
        return self.after - self.before


class ClassificationBuffer:
    """Tracks the outcome of every character position as keys arrive."""

    def __init__(self, target: str, *, word_boundaries: bool = True) -> None:
        self._target = target
        self._slots: list[Slot] = [Slot() for _ in target]
        self._cursor = 0
        self._commit_boundary = 0
        self._word_boundaries = word_boundaries

    @property
    def target(self) -> str:
        return self._target

    @property
    def target_length(self) -> int:
        return len(self._target)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def commit_boundary(self) -> int:
        """Lowest index backspace may rewind to."""
        return self._commit_boundary

    @property
    def extra_count(self) -> int:
        return len(self._slots) - len(self._target)

    def __len__(self) -> int:
        return len(self._slots)

    def outcome_at(self, index: int) -> CharOutcome:
        return self._slots[index].outcome

    def outcomes(self) -> tuple[CharOutcome, ...]:
        return tuple(slot.outcome for slot in self._slots)

    def typed_chars(self) -> tuple[str | None, ...]:
        return tuple(slot.typed for slot in self._slots)

    def count(self, outcome: CharOutcome) -> int:
        return sum(1 for slot in self._slots if slot.outcome is outcome)

    def apply_char(self, typed: str) -> CursorDelta:
        """Classify one typed character at the cursor and advance."""
        before = self._cursor
        if self._word_boundaries and typed == " ":
            self._apply_space()
        else:
            self._classify(typed)
        return CursorDelta(before, self._cursor)

    def apply_backspace(self) -> CursorDelta:
        """Step the cursor back one position, undoing its classification."""
        before = self._cursor
        if self._cursor == 0 or self._cursor <= self._commit_boundary:
            return CursorDelta(before, before)

        self._cursor -= 1
        if self._cursor >= len(self._target):
            self._slots.pop()
        else:
            slot = self._slots[self._cursor]
            slot.outcome = CharOutcome.PENDING
            slot.typed = None
        return CursorDelta(before, self._cursor)

    def finalize(self) -> int:
        """Mark untouched positions before the cursor as MISSED.

        Positions at or after the cursor stay PENDING. Returns the number of
        positions newly marked.
        """
        marked = 0
        for slot in self._slots[: min(self._cursor, len(self._target))]:
            if slot.outcome is CharOutcome.PENDING:
                slot.outcome = CharOutcome.MISSED
                marked += 1
        return marked

    def words_completed(self) -> int:
        """Number of target words the cursor has moved past."""
        n = len(self._target)
        if n == 0:
            return 0
        if self._cursor >= n:
            return len(self._target.split())
        return len(self._target[: self._cursor].split(" ")) - 1

    def _classify(self, typed: str) -> None:
        if self._cursor < len(self._target):
            slot = self._slots[self._cursor]
            if chars_visually_equal(typed, self._target[self._cursor]):
                slot.outcome = CharOutcome.CORRECT
                slot.typed = None
            else:
                slot.outcome = CharOutcome.INCORRECT
                slot.typed = typed
        else:
            self._slots.append(Slot(CharOutcome.EXTRA, typed))
        self._cursor += 1

    def _apply_space(self) -> None:
        n = len(self._target)
        if self._cursor >= n or self._target[self._cursor] == " ":
            self._classify(" ")
            if self._cursor <= n:
                self._commit_boundary = self._cursor
            return

        word_start = self._target.rfind(" ", 0, self._cursor) + 1
        if self._cursor == word_start:
            # Nothing typed in this word yet.
            return

        next_space = self._target.find(" ", self._cursor)
        word_end = n if next_space == -1 else next_space
        for slot in self._slots[self._cursor : word_end]:
            slot.outcome = CharOutcome.MISSED
        logger.debug(
            "Skipped to next word at %d, %d chars missed",
            word_end,
            word_end - self._cursor,
        )
        self._cursor = word_end
        if next_space != -1:
            self._classify(" ")
        self._commit_boundary = self._cursor
