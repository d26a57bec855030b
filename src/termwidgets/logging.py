"""
Logging utilities for termwidgets.

Widgets log their state transitions under the ``termwidgets`` logger so a
host application can surface them without touching the terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_root_logger = logging.getLogger("termwidgets")
_root_logger.addHandler(logging.NullHandler())

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_saved_level: int | None = None


def _resolve_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for termwidgets.

    Interactive widgets usually own stdout, so the stream handler writes to
    stderr unless told otherwise. Pass *file* to keep logs off the terminal
    entirely.

    Args:
        level: Log level name or number
        format: Custom log format string
        stream: Output stream (defaults to stderr)
        file: Optional file path to write logs

    Example:
        from termwidgets.logging import setup_logging

        setup_logging("DEBUG", file="widgets.log")
    """
    level = _resolve_level(level)
    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    formatter = logging.Formatter(format or DEFAULT_FORMAT)

    if file:
        handler: logging.Handler = logging.FileHandler(file)
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "tui.selector") or a full dotted
            module path starting with ``termwidgets.``

    Returns:
        Logger instance
    """
    if name == "termwidgets" or name.startswith("termwidgets."):
        return logging.getLogger(name)
    return logging.getLogger(f"termwidgets.{name}")


def set_level(level: str | int) -> None:
    """Set the log level for termwidgets."""
    _root_logger.setLevel(_resolve_level(level))


def disable() -> None:
    """Disable all logging for termwidgets, including child loggers."""
    global _saved_level
    if _saved_level is None:
        _saved_level = _root_logger.level
    _root_logger.setLevel(logging.CRITICAL + 1)


def enable() -> None:
    """Re-enable logging for termwidgets at the level it had before."""
    global _saved_level
    if _saved_level is not None:
        _root_logger.setLevel(_saved_level)
        _saved_level = None
