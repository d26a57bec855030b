"""
termwidgets - paginated selector, prompt and progress bar widgets for
terminal applications.

Example:
    from termwidgets import Program, Selector

    selector = Selector(["feat", "fix", "docs"], page_size=2)
    Program(selector, events=["down", "enter"]).run()
    if not selector.canceled:
        print(selector.selected)
"""

from termwidgets.config import (
    Palette,
    ProgressBarConfig,
    PromptConfig,
    SelectorConfig,
    WidgetsConfig,
)
from termwidgets.errors import TermWidgetsError, ValidationError
from termwidgets.runtime import Program
from termwidgets.tui import (
    Command,
    EchoMode,
    IndexedRowFormatter,
    Key,
    KeybindingsManager,
    PageFooter,
    PlainRowFormatter,
    ProgressBar,
    Prompt,
    RowFormatter,
    Selector,
    TextHeader,
    not_blank,
    parse_key,
)

__version__ = "0.1.0"

__all__ = [
    # Widgets
    "Selector",
    "Prompt",
    "ProgressBar",
    "Program",
    "Command",
    "EchoMode",
    # Formatting
    "RowFormatter",
    "PlainRowFormatter",
    "IndexedRowFormatter",
    "TextHeader",
    "PageFooter",
    # Input
    "Key",
    "KeybindingsManager",
    "parse_key",
    "not_blank",
    # Config
    "WidgetsConfig",
    "SelectorConfig",
    "PromptConfig",
    "ProgressBarConfig",
    "Palette",
    # Errors
    "TermWidgetsError",
    "ValidationError",
]
