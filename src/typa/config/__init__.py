"""Configuration management for typa."""
from __future__ import annotations

from typa.config.paths import TypaPaths, get_paths, reset_paths
from typa.config.settings import AppConfig, Theme, load_config

__all__ = [
    "AppConfig",
    "Theme",
    "TypaPaths",
    "get_paths",
    "load_config",
    "reset_paths",
]
