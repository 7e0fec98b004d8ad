"""Typing text widget: the wrapped target text colored by outcome."""

from __future__ import annotations

from typing import Any

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from typa.config import Theme
from typa.engine import CharOutcome, Frame


def outcome_style(outcome: CharOutcome, theme: Theme) -> Style:
    """Style for one already-classified or pending character."""
    if outcome is CharOutcome.CORRECT:
        return Style(color=theme.text, bold=True)
    if outcome in (CharOutcome.INCORRECT, CharOutcome.EXTRA):
        return Style(color=theme.error, bold=True)
    # Pending and missed characters both read as untyped.
    return Style(color=theme.sub)


def caret_style(theme: Theme) -> Style:
    return Style(color=theme.sub, bgcolor=theme.caret)


def render_typing_lines(frame: Frame, theme: Theme) -> Text:
    """Render the visible window of the wrapped text.

    Incorrect characters show the target character, except where the target
    is a space, which shows what was typed so the mistake stays visible.
    Extra characters follow the last line. The caret is drawn as a block on
    the character at the cursor, or after the text once it is exhausted.
    """
    result = Text(no_wrap=True, overflow="crop")
    text = frame.text
    n = len(text)
    last_line = len(frame.layout) - 1
    caret = caret_style(theme)

    for row, line_number in enumerate(frame.visible_lines):
        if row:
            result.append("\n")
        start = frame.layout.lines[line_number].start
        for offset, char in enumerate(frame.layout.line_text(line_number)):
            index = start + offset
            if index == frame.cursor:
                result.append(char, caret)
                continue
            outcome = frame.outcomes[index]
            if outcome is CharOutcome.INCORRECT and char == " ":
                char = frame.typed[index] or char
            result.append(char, outcome_style(outcome, theme))

        if line_number == last_line:
            extra_style = outcome_style(CharOutcome.EXTRA, theme)
            for typed in frame.typed[n:]:
                result.append(typed or "", extra_style)
            if frame.cursor >= n:
                result.append(" ", caret)
    return result


class TypingArea(Static):
    """Three wrapped lines of the target text with the caret."""

    DEFAULT_CSS = """
    TypingArea {
        width: 100%;
        height: 3;
        background: transparent;
    }
    """

    def __init__(self, theme: Theme, **kwargs: Any) -> None:
        super().__init__("", **kwargs)
        self._colors = theme

    def show_frame(self, frame: Frame) -> None:
        self.update(render_typing_lines(frame, self._colors))
