"""Session controller: routes input events into the typing engine.

The controller owns exactly one session at a time (buffer, clock, speed
recorder and state). Restart throws the whole session away and fetches new
text, so nothing carries over between tests. Rendering code only reads
``frame()`` snapshots.
"""

from __future__ import annotations

import logging
import time
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from typa.engine.buffer import CharOutcome, ClassificationBuffer, CursorDelta
from typa.engine.clock import SessionClock
from typa.engine.events import (
    Backspace,
    InputEvent,
    KeyChar,
    Quit,
    Resize,
    Restart,
    Tick,
)
from typa.engine.session import (
    TERMINAL_STATES,
    EmptyTargetTextError,
    SessionState,
    validate_transition,
)
from typa.engine.stats import SessionStats, SpeedRecorder, compute_stats
from typa.engine.wrap import DEFAULT_VISIBLE_ROWS, WrapLayout
from typa.models import Mode, TestOptions, TextSelection, TimeMode

logger = logging.getLogger(__name__)

DEFAULT_TEXT_WIDTH = 62


class TextProvider(Protocol):
    """Anything that can hand out target text for a test."""

    def fetch(
        self,
        mode: Mode,
        language: str,
        include_numbers: bool,
        include_punctuation: bool,
    ) -> TextSelection: ...


@dataclass(frozen=True, slots=True)
class Frame:
    """Read-only snapshot of a session for the renderer."""

    state: SessionState
    options: TestOptions
    text: str
    source: str
    quote_id: int | None
    outcomes: tuple[CharOutcome, ...]
    typed: tuple[str | None, ...]
    cursor: int
    cursor_position: tuple[int, int]
    layout: WrapLayout
    visible_lines: range
    elapsed: float
    time_remaining: float | None
    words_typed: int
    words_total: int
    stats: SessionStats | None = None

    @property
    def finished(self) -> bool:
        return self.state is SessionState.FINISHED


class _Session:
    """Mutable state of one test. Replaced wholesale on restart."""

    def __init__(
        self,
        selection: TextSelection,
        mode_limit: float | None,
        now: Callable[[], float],
        word_boundaries: bool,
    ) -> None:
        self.selection = selection
        self.buffer = ClassificationBuffer(
            selection.text, word_boundaries=word_boundaries
        )
        self.clock = SessionClock(mode_limit=mode_limit, now=now)
        self.recorder = SpeedRecorder()
        self.state = SessionState.IDLE
        self.correct_keystrokes = 0
        self.incorrect_keystrokes = 0
        self.stats: SessionStats | None = None


def _is_control(char: str) -> bool:
    return len(char) != 1 or unicodedata.category(char) == "Cc"


class SessionController:
    """Drives the Idle -> Running -> Finished/Aborted lifecycle."""

    def __init__(
        self,
        provider: TextProvider,
        options: TestOptions,
        *,
        width: int = DEFAULT_TEXT_WIDTH,
        columns: int | None = None,
        now: Callable[[], float] = time.monotonic,
        word_boundaries: bool = True,
        visible_rows: int = DEFAULT_VISIBLE_ROWS,
    ) -> None:
        self._provider = provider
        self._options = options
        self._now = now
        self._word_boundaries = word_boundaries
        self._width = max(1, width)
        self._columns = None if columns is None else max(1, columns)
        self._visible_rows = visible_rows
        self._session = self._new_session()
        self._layout = self._build_layout()

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def options(self) -> TestOptions:
        return self._options

    @property
    def buffer(self) -> ClassificationBuffer:
        return self._session.buffer

    @property
    def clock(self) -> SessionClock:
        return self._session.clock

    @property
    def text(self) -> str:
        return self._session.selection.text

    @property
    def layout(self) -> WrapLayout:
        return self._layout

    @property
    def stats(self) -> SessionStats | None:
        """Final statistics, set once the session is Finished."""
        return self._session.stats

    def handle(self, event: InputEvent) -> SessionState:
        """Apply one input event and return the resulting state."""
        session = self._session
        if session.state is SessionState.ABORTED:
            return session.state

        if isinstance(event, Quit):
            self._quit()
        elif isinstance(event, Restart):
            self.restart()
        elif isinstance(event, Resize):
            self.resize(event.width, event.columns)
            self._check_expiry()
        elif isinstance(event, Tick):
            self._check_expiry()
        elif isinstance(event, KeyChar):
            self._on_char(event.char)
        elif isinstance(event, Backspace):
            self._on_backspace()
        else:
            logger.debug("Ignoring unsupported event %r", event)
        return self._session.state

    def restart(self) -> None:
        """Discard the current session and start a fresh Idle one."""
        self._transition(SessionState.IDLE)
        self._session = self._new_session()
        self._layout = self._build_layout()

    def resize(self, width: int, columns: int | None = None) -> None:
        """Re-wrap the text for a new width and optional display column cap."""
        width = max(1, width)
        if columns is not None:
            columns = max(1, columns)
        if width == self._width and columns == self._columns:
            return
        self._width = width
        self._columns = columns
        self._layout = self._build_layout()
        logger.debug("Relaid text at width %d (%d lines)", width, len(self._layout))

    def frame(self) -> Frame:
        session = self._session
        buffer = session.buffer
        line, column = self._layout.locate(buffer.cursor)
        return Frame(
            state=session.state,
            options=self._options,
            text=session.selection.text,
            source=session.selection.source,
            quote_id=session.selection.quote_id,
            outcomes=buffer.outcomes(),
            typed=buffer.typed_chars(),
            cursor=buffer.cursor,
            cursor_position=(line, column),
            layout=self._layout,
            visible_lines=self._layout.visible_window(line, self._visible_rows),
            elapsed=session.clock.elapsed(),
            time_remaining=session.clock.remaining(),
            words_typed=buffer.words_completed(),
            words_total=len(session.selection.text.split()),
            stats=session.stats,
        )

    def _new_session(self) -> _Session:
        options = self._options
        selection = self._provider.fetch(
            options.mode,
            options.language,
            options.include_numbers,
            options.include_punctuation,
        )
        if not selection.text:
            raise EmptyTargetTextError(
                f"No text to type for {options.describe()}"
            )
        mode_limit = (
            float(options.mode.seconds) if isinstance(options.mode, TimeMode) else None
        )
        logger.info(
            "New session: %s, %d chars", options.describe(), len(selection.text)
        )
        return _Session(selection, mode_limit, self._now, self._word_boundaries)

    def _build_layout(self) -> WrapLayout:
        return WrapLayout.build(
            self._session.selection.text, self._width, self._columns
        )

    def _transition(self, target: SessionState) -> None:
        session = self._session
        validate_transition(session.state, target)
        logger.debug("Session %s -> %s", session.state.value, target.value)
        session.state = target

    def _on_char(self, char: str) -> None:
        session = self._session
        if session.state in TERMINAL_STATES:
            return
        if self._check_expiry():
            return
        if _is_control(char):
            return

        if session.state is SessionState.IDLE:
            self._transition(SessionState.RUNNING)
            session.clock.start()

        delta = session.buffer.apply_char(char)
        self._count_keystroke(delta)
        session.recorder.on_keystroke(
            session.buffer, session.clock.elapsed(), session.incorrect_keystrokes
        )

        if session.buffer.cursor >= session.buffer.target_length:
            self._finish()
        else:
            self._check_expiry()

    def _on_backspace(self) -> None:
        session = self._session
        if session.state is not SessionState.RUNNING:
            return
        if self._check_expiry():
            return
        session.buffer.apply_backspace()

    def _count_keystroke(self, delta: CursorDelta) -> None:
        session = self._session
        if delta.moved == 0:
            return
        buffer = session.buffer
        if (
            delta.moved == 1
            and delta.before < buffer.target_length
            and buffer.outcome_at(delta.before) is CharOutcome.CORRECT
        ):
            session.correct_keystrokes += 1
        else:
            session.incorrect_keystrokes += 1

    def _check_expiry(self) -> bool:
        """Finish a running time test whose clock has run out."""
        session = self._session
        if session.state is SessionState.RUNNING and session.clock.is_expired():
            self._finish()
            return True
        return False

    def _finish(self) -> None:
        session = self._session
        elapsed = session.clock.stop(clamp_to_limit=True)
        missed = session.buffer.finalize()
        session.recorder.on_finish(
            session.buffer, elapsed, session.incorrect_keystrokes
        )
        session.stats = compute_stats(
            session.buffer,
            elapsed,
            samples=session.recorder.samples,
            correct_keystrokes=session.correct_keystrokes,
            incorrect_keystrokes=session.incorrect_keystrokes,
        )
        self._transition(SessionState.FINISHED)
        logger.info(
            "Session finished after %.2fs: %.1f wpm, %.1f%% accuracy, %d missed",
            elapsed,
            session.stats.wpm,
            session.stats.accuracy,
            missed,
        )

    def _quit(self) -> None:
        session = self._session
        if session.clock.started:
            session.clock.stop()
        self._transition(SessionState.ABORTED)
        logger.info("Session aborted")
