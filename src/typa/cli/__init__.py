"""typa CLI package."""

from .app import dispatch, run
from .parser import build_parser, options_from_args, parse_args

__all__ = ["build_parser", "dispatch", "options_from_args", "parse_args", "run"]
