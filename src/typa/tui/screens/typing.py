"""Typing screen: the test itself and its results."""

import logging
from typing import Any

from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import Screen
from textual.widgets import Static

from typa.config import Theme
from typa.engine import (
    Backspace,
    KeyChar,
    Quit,
    Resize,
    Restart,
    SessionController,
    SessionState,
    TextProvider,
    Tick,
)
from typa.models import TestOptions
from typa.tui.utils import progress_label, text_width
from typa.tui.widgets import ResultsPanel, TypingArea

logger = logging.getLogger(__name__)

# Refresh rate for the countdown and time-up detection.
TICK_SECONDS = 0.1

KEY_HINTS = "tab: restart | esc: quit"


class TypingScreen(Screen[None]):
    """One typing test at a time, restartable with tab."""

    BINDINGS = [
        Binding("tab", "restart", "Restart", show=False, priority=True),
        Binding("escape", "quit_test", "Quit", show=False, priority=True),
        Binding("ctrl+q", "quit_test", "Quit", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    TypingScreen {
        align: center middle;
    }

    TypingScreen #brand {
        dock: top;
        width: 100%;
        height: 1;
        margin: 1 0 0 0;
        padding: 0 2;
    }

    TypingScreen #column {
        width: 80%;
        height: auto;
    }

    TypingScreen #progress {
        height: 1;
        text-style: bold;
    }

    TypingScreen #hints {
        dock: bottom;
        width: 100%;
        height: 1;
        text-align: center;
    }
    """

    def __init__(
        self,
        options: TestOptions,
        source: TextProvider,
        theme: Theme,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._colors = theme
        self.controller = SessionController(source, options)

    def compose(self) -> ComposeResult:
        yield Static(id="brand")
        with Center():
            with Vertical(id="column"):
                yield Static(id="progress")
                yield TypingArea(self._colors, id="typing-area")
                yield ResultsPanel(self._colors, id="results")
        yield Static(KEY_HINTS, id="hints")

    def on_mount(self) -> None:
        """Apply theme colours, size the text and start the ticker."""
        self.styles.background = self._colors.bg
        self.query_one("#progress", Static).styles.color = self._colors.main
        self.query_one("#hints", Static).styles.color = self._colors.sub
        width = text_width(self.app.size.width)
        self.controller.resize(width, columns=width)
        self.set_interval(TICK_SECONDS, self._on_tick)
        self._refresh_view()

    def on_key(self, event: events.Key) -> None:
        """Feed typed characters and backspace to the controller."""
        if event.key in ("backspace", "ctrl+h"):
            self.controller.handle(Backspace())
        elif event.is_printable and event.character:
            self.controller.handle(KeyChar(event.character))
        else:
            return
        event.stop()
        event.prevent_default()
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        width = text_width(event.size.width)
        self.controller.handle(Resize(width, event.size.height, columns=width))
        self._refresh_view()

    def action_restart(self) -> None:
        """Throw away the current test and start a new one."""
        self.controller.handle(Restart())
        logger.info("Restarted: %s", self.controller.options.describe())
        self._refresh_view()

    def action_quit_test(self) -> None:
        self.controller.handle(Quit())
        self.app.exit()

    def _on_tick(self) -> None:
        before = self.controller.state
        after = self.controller.handle(Tick())
        if before is SessionState.RUNNING or after is not before:
            self._refresh_view()

    def _refresh_view(self) -> None:
        frame = self.controller.frame()
        typing_area = self.query_one(TypingArea)
        results = self.query_one(ResultsPanel)
        progress = self.query_one("#progress", Static)
        # Chrome is hidden while typing.
        show_chrome = frame.state is not SessionState.RUNNING

        brand = Text("typa", Style(color=self._colors.main, bold=True))
        if show_chrome:
            brand.append(
                f" | {frame.options.describe()}", Style(color=self._colors.sub)
            )
        self.query_one("#brand", Static).update(brand)
        self.query_one("#hints", Static).display = show_chrome

        if frame.stats is not None:
            typing_area.display = False
            progress.display = False
            results.display = True
            results.show_results(frame.stats, frame)
            return

        results.display = False
        typing_area.display = True
        progress.display = True
        progress.update(progress_label(frame))
        typing_area.show_frame(frame)
