"""typa TUI widgets."""

from typa.tui.widgets.results import ResultsPanel, render_results
from typa.tui.widgets.typing_area import TypingArea, render_typing_lines

__all__ = [
    "ResultsPanel",
    "TypingArea",
    "render_results",
    "render_typing_lines",
]
