"""
Terminal widgets driven by a host update loop.

Provides a paginated selector, a validated text prompt, a stage-runner
progress bar, and the key parsing and styling helpers they share.
"""
from __future__ import annotations

from termwidgets.tui.component import Command, CommandLike, Component, is_terminal
from termwidgets.tui.formatters import (
    DecorationFormatter,
    FinishedFormatter,
    IndexedRowFormatter,
    PageFooter,
    PlainRowFormatter,
    RowFormatter,
    TextHeader,
)
from termwidgets.tui.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from termwidgets.tui.keys import Key, parse_key
from termwidgets.tui.progressbar import ProgressBar, StageResult
from termwidgets.tui.prompt import Prompt, accept_all, not_blank
from termwidgets.tui.selector import Selector
from termwidgets.tui.text_field import EchoMode, TextField

__all__ = [
    # Core
    "Command",
    "CommandLike",
    "Component",
    "is_terminal",
    # Keys
    "Key",
    "parse_key",
    "KeybindingsManager",
    "DEFAULT_KEYBINDINGS",
    # Widgets
    "Selector",
    "Prompt",
    "TextField",
    "EchoMode",
    "ProgressBar",
    "StageResult",
    # Formatters
    "RowFormatter",
    "PlainRowFormatter",
    "IndexedRowFormatter",
    "DecorationFormatter",
    "TextHeader",
    "PageFooter",
    "FinishedFormatter",
    # Validators
    "accept_all",
    "not_blank",
]
