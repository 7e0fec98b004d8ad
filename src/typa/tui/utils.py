"""TUI utility functions for typa."""

import math

from typa.engine import Frame

# Share of the terminal width given to the text column.
TEXT_COLUMN_PERCENT = 80
# Columns kept free on the right so the caret never wraps.
CARET_MARGIN = 2


def format_timer(seconds: int) -> str:
    """Format a countdown: plain seconds below a minute, ``M:SS`` above.

    Args:
        seconds: Whole seconds left.

    Returns:
        ``"45"``, ``"1:05"``, ``"60:00"``...
    """
    seconds = max(0, seconds)
    if seconds >= 60:
        minutes, secs = divmod(seconds, 60)
        return f"{minutes}:{secs:02d}"
    return str(seconds)


def text_width(terminal_width: int) -> int:
    """Wrap width for the typing text on a terminal ``terminal_width`` wide."""
    return max(1, terminal_width * TEXT_COLUMN_PERCENT // 100 - CARET_MARGIN)


def progress_label(frame: Frame) -> str:
    """Seconds left for time tests, ``typed/total`` words otherwise."""
    if frame.time_remaining is not None:
        return format_timer(math.ceil(frame.time_remaining))
    return f"{frame.words_typed}/{frame.words_total}"
