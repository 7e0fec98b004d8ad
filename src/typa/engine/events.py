"""Input events fed to the session controller by the terminal layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyChar:
    """A printable character typed by the user."""

    char: str


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class Resize:
    """New text width; ``columns`` caps how wide a drawn line may be."""

    width: int
    height: int = 0
    columns: int | None = None


@dataclass(frozen=True, slots=True)
class Tick:
    """Periodic refresh; lets the controller notice an expired clock."""


@dataclass(frozen=True, slots=True)
class Restart:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


InputEvent = KeyChar | Backspace | Resize | Tick | Restart | Quit
