"""Results panel shown when a test finishes."""

from __future__ import annotations

from typing import Any

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from typa.config import Theme
from typa.engine import Frame, SessionStats


def _pairs(parts: list[tuple[str, str]], theme: Theme) -> Text:
    """Join ``label: value`` pairs with `` | `` separators."""
    line = Text(justify="center")
    for i, (label, value) in enumerate(parts):
        prefix = f"{label}: " if i == 0 else f" | {label}: "
        line.append(prefix, Style(color=theme.sub))
        line.append(value, Style(color=theme.main))
    return line


def render_results(stats: SessionStats, frame: Frame, theme: Theme) -> Text:
    """Final statistics, test type and quote source, one item per line."""
    lines: list[Text] = []

    wpm_line = Text(justify="center")
    wpm_line.append("wpm: ", Style(color=theme.sub))
    wpm_line.append(f"{stats.wpm:.0f}", Style(color=theme.main, bold=True))
    lines.append(wpm_line)

    lines.append(
        _pairs(
            [
                ("acc", f"{stats.accuracy:.0f}%"),
                ("raw", f"{stats.raw_wpm:.0f}"),
                ("consistency", f"{stats.consistency:.0f}%"),
            ],
            theme,
        )
    )
    lines.append(
        _pairs(
            [
                ("cor", str(stats.correct_chars)),
                ("inc", str(stats.incorrect_chars)),
                ("ext", str(stats.extra_chars)),
                ("mis", str(stats.missed_chars)),
                ("time", f"{stats.elapsed_seconds:.1f}s"),
            ],
            theme,
        )
    )
    lines.append(
        _pairs(
            [
                (
                    "keys",
                    f"{stats.correct_keystrokes}/{stats.total_keystrokes}",
                ),
            ],
            theme,
        )
    )
    lines.append(_pairs([("test type", frame.options.describe())], theme))
    if frame.source:
        lines.append(_pairs([("source", frame.source)], theme))
    lines.append(Text("Press TAB to Restart", Style(color=theme.sub), justify="center"))

    return Text("\n", justify="center").join(lines)


class ResultsPanel(Static):
    """Bordered box holding the final statistics."""

    DEFAULT_CSS = """
    ResultsPanel {
        width: 100%;
        height: auto;
        border: round $panel;
        border-title-align: left;
        padding: 0 1;
    }
    """

    def __init__(self, theme: Theme, **kwargs: Any) -> None:
        super().__init__("", **kwargs)
        self._colors = theme
        self.border_title = "Result"

    def on_mount(self) -> None:
        self.styles.border = ("round", self._colors.sub_alt)

    def show_results(self, stats: SessionStats, frame: Frame) -> None:
        self.update(render_results(stats, frame, self._colors))
