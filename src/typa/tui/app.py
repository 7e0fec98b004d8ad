"""Main typa TUI application."""

import logging
from typing import Any

from textual.app import App

from typa.config import AppConfig
from typa.engine import TextProvider
from typa.models import TestOptions
from typa.tui.screens.typing import TypingScreen

logger = logging.getLogger(__name__)


class TypaApp(App[None]):
    """Terminal typing test."""

    TITLE = "typa"
    SUB_TITLE = "terminal typing test"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        options: TestOptions,
        *,
        config: AppConfig,
        source: TextProvider,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.options = options
        self.app_config = config
        self._source = source

    def on_mount(self) -> None:
        """Open the typing screen for the requested test."""
        logger.info("Starting typing test: %s", self.options.describe())
        screen = TypingScreen(self.options, self._source, self.app_config.theme)
        self.push_screen(screen)
