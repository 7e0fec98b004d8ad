"""Typing session engine: classification, timing, statistics and wrapping."""

from typa.engine.buffer import CharOutcome, ClassificationBuffer, CursorDelta
from typa.engine.clock import SessionClock
from typa.engine.controller import Frame, SessionController, TextProvider
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
    VALID_TRANSITIONS,
    EmptyTargetTextError,
    InvalidTransitionError,
    SessionState,
)
from typa.engine.stats import SessionStats, compute_stats
from typa.engine.wrap import LineSpan, WrapLayout, layout

__all__ = [
    "Backspace",
    "CharOutcome",
    "ClassificationBuffer",
    "CursorDelta",
    "EmptyTargetTextError",
    "Frame",
    "InputEvent",
    "InvalidTransitionError",
    "KeyChar",
    "LineSpan",
    "Quit",
    "Resize",
    "Restart",
    "SessionClock",
    "SessionController",
    "SessionState",
    "SessionStats",
    "TextProvider",
    "Tick",
    "VALID_TRANSITIONS",
    "WrapLayout",
    "compute_stats",
    "layout",
]
