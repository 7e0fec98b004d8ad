"""typa TUI screens."""

from typa.tui.screens.typing import TypingScreen

__all__ = ["TypingScreen"]
