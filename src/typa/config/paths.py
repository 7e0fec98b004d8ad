"""Centralized path management for typa.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/typa (default: ~/.config/typa)
- State: $XDG_STATE_HOME/typa (default: ~/.local/state/typa)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

APP_NAME = "typa"


def _xdg_home(variable: str, *fallback: str) -> Path:
    """Resolve an XDG base directory, falling back to a path under home."""
    value = os.environ.get(variable)
    return Path(value) if value else Path.home().joinpath(*fallback)


@dataclass
class TypaPaths:
    """Where typa reads its config and writes its log."""

    # XDG directories (computed once at init)
    _config_home: Path = field(
        default_factory=lambda: _xdg_home("XDG_CONFIG_HOME", ".config")
    )
    _state_home: Path = field(
        default_factory=lambda: _xdg_home("XDG_STATE_HOME", ".local", "state")
    )

    @property
    def config_dir(self) -> Path:
        """Config: ~/.config/typa/"""
        return self._config_home / APP_NAME

    @property
    def config_file(self) -> Path:
        """Theme and preferences: ~/.config/typa/config.yaml"""
        return self.config_dir / "config.yaml"

    @property
    def state_dir(self) -> Path:
        """State: ~/.local/state/typa/"""
        return self._state_home / APP_NAME

    @property
    def debug_log(self) -> Path:
        """Debug log: ~/.local/state/typa/debug.log"""
        return self.state_dir / "debug.log"

    def ensure_state_dir(self) -> None:
        self.state_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
_paths: TypaPaths | None = None


def get_paths() -> TypaPaths:
    """Get the paths singleton, resolving XDG variables on first call."""
    global _paths
    if _paths is None:
        _paths = TypaPaths()
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
