"""CLI command handlers."""

from .languages import cmd_languages
from .tui import cmd_tui

__all__ = ["cmd_languages", "cmd_tui"]
