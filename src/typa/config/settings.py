"""Theme and application configuration.

Read once at startup from ``$XDG_CONFIG_HOME/typa/config.yaml``::

    theme:
      bg: "#2c2e34"
      main: "#e2b714"
      subAlt: "#45474d"

Missing keys take the defaults below. A malformed file is logged and
ignored rather than stopping the app.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from typa.config.paths import get_paths

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Alternative spellings accepted in the theme mapping.
_THEME_ALIASES = {"subAlt": "sub_alt", "sub-alt": "sub_alt"}


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR_RE.match(value))


@dataclass(frozen=True, slots=True)
class Theme:
    """Colours used by the typing screen."""

    bg: str = "#2c2e34"  # background
    main: str = "#e2b714"  # timer and highlights
    caret: str = "#e2b714"  # cursor block
    text: str = "#d1d0c5"  # correctly typed text
    sub: str = "#646669"  # text not typed yet
    sub_alt: str = "#45474d"  # footer and borders
    error: str = "#ca4754"  # incorrect and extra characters

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Theme":
        """Build a theme from a config mapping, keeping defaults for bad values."""
        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for raw_key, value in data.items():
            key = _THEME_ALIASES.get(str(raw_key), str(raw_key))
            if key not in known:
                logger.debug("Ignoring unknown theme key %r", raw_key)
                continue
            if not is_hex_color(value):
                logger.warning("Invalid colour for theme.%s: %r", key, value)
                continue
            values[key] = value
        return cls(**values)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable configuration handed to the app at startup."""

    theme: Theme = field(default_factory=Theme)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "AppConfig":
        theme_data = data.get("theme") or {}
        if not isinstance(theme_data, dict):
            logger.warning("Config 'theme' must be a mapping, using defaults")
            theme_data = {}
        return cls(theme=Theme.from_mapping(theme_data))


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from ``path`` (default: the XDG config file).

    A missing file gives the defaults; unreadable or malformed files are
    logged and also give the defaults.
    """
    config_path = path or get_paths().config_file
    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return AppConfig()

    try:
        raw_data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        if raw_data is None:
            return AppConfig()
        if not isinstance(raw_data, dict):
            raise ValueError("Config file must contain a mapping")
        config = AppConfig.from_mapping(raw_data)
        logger.info("Loaded config from %s", config_path)
        return config
    except (ValueError, yaml.YAMLError, OSError) as e:
        logger.warning("Failed to load config from %s: %s", config_path, e)
        return AppConfig()
