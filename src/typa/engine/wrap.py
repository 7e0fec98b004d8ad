"""Word wrapping of the target text for the current terminal width.

A layout is a list of half-open ``LineSpan`` ranges over the flat target
string. Lines break between words and only word characters count toward
the width: each word keeps its trailing spaces on the line it ends. A single
word wider than the line is split at the width.

When the text is drawn in a fixed number of terminal columns, ``max_columns``
also caps the drawn extent of each line, counting the spaces between words
but not the spaces after the line's last word.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass

_TOKEN_RE = re.compile(r"\S+ *| +")

DEFAULT_VISIBLE_ROWS = 3


@dataclass(frozen=True, slots=True)
class LineSpan:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def layout(
    text: str, width: int, *, max_columns: int | None = None
) -> list[LineSpan]:
    """Greedy wrap of ``text`` into lines holding at most ``width`` word characters.

    Only the characters of words are charged against the width; the spaces
    between and after words ride along with the word before them. With
    ``max_columns`` a line also breaks before a word that would end past that
    column. Widths below 1 are treated as 1. Empty text gives a single empty
    span.
    """
    width = max(1, width)
    if max_columns is not None:
        max_columns = max(1, max_columns)
    split_at = width if max_columns is None else min(width, max_columns)
    if not text:
        return [LineSpan(0, 0)]

    lines: list[LineSpan] = []
    line_start = 0
    used = 0

    for match in _TOKEN_RE.finditer(text):
        start = match.start()
        body = len(match.group().rstrip(" "))
        if body == 0:
            continue

        too_wide = max_columns is not None and start - line_start + body > max_columns
        if used and (used + body > width or too_wide):
            lines.append(LineSpan(line_start, start))
            line_start = start
            used = 0

        while body > split_at:
            if start > line_start:
                lines.append(LineSpan(line_start, start))
            lines.append(LineSpan(start, start + split_at))
            start += split_at
            line_start = start
            body -= split_at

        used += body

    lines.append(LineSpan(line_start, len(text)))
    return lines


class WrapLayout:
    """A computed layout plus flat index to ``(line, column)`` lookup."""

    def __init__(self, text: str, width: int, max_columns: int | None = None) -> None:
        self.text = text
        self.width = max(1, width)
        self.max_columns = max_columns
        self.lines = layout(text, self.width, max_columns=max_columns)
        self._starts = [line.start for line in self.lines]

    @classmethod
    def build(
        cls, text: str, width: int, max_columns: int | None = None
    ) -> "WrapLayout":
        return cls(text, width, max_columns)

    def __len__(self) -> int:
        return len(self.lines)

    def line_text(self, line: int) -> str:
        span = self.lines[line]
        return self.text[span.start : span.end]

    def locate(self, index: int) -> tuple[int, int]:
        """Map a flat index to ``(line, column)``.

        Indices at or past the end of the text (extra characters) land on
        the last line, past its final character.

        Raises:
            ValueError: ``index`` is negative.
        """
        if index < 0:
            raise ValueError(f"Index must be non-negative, got {index}")
        line = bisect.bisect_right(self._starts, index) - 1
        if index >= len(self.text):
            line = len(self.lines) - 1
        line = max(0, line)
        return line, index - self.lines[line].start

    def visible_window(
        self, active_line: int, rows: int = DEFAULT_VISIBLE_ROWS
    ) -> range:
        """Line numbers to draw, keeping the active line second from the top."""
        rows = max(1, rows)
        first = max(0, active_line - 1)
        return range(first, min(len(self.lines), first + rows))
