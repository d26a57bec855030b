"""
Formatting strategies for the selector.

Rows are rendered by :class:`RowFormatter` objects that receive the item and
its *global* index in the backing list, so numbering stays continuous across
pages.  Header and footer formatters receive the selector itself and may
read any of its public state.  Plain callables with the same signatures are
accepted wherever a formatter is expected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from termwidgets.tui.ansi import font_color

if TYPE_CHECKING:
    from termwidgets.tui.selector import Selector

T = TypeVar("T")

DEFAULT_HEADER = "Use the arrow keys to navigate: ↓ ↑ → ←"
DEFAULT_FOOTER = "Current page number details: %d/%d"
DEFAULT_CURSOR = "»"
DEFAULT_FINISHED = "Current selected: %s\n"
DEFAULT_INDEX_FORMAT = "[%d]"

COLOR_HEADER = "15"
COLOR_FOOTER = "15"
COLOR_CURSOR = "2"
COLOR_FINISHED = "2"
COLOR_SELECTED = "14"
COLOR_UNSELECTED = "8"


def _paint(text: str, color: str | None) -> str:
    return font_color(text, color) if color else text


def accepts_index(index_format: str) -> bool:
    """True if *index_format* interpolates a single row number."""
    try:
        index_format % 1
    except (TypeError, ValueError):
        return False
    return True


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

class RowFormatter(ABC, Generic[T]):
    """Renders one visible row of the selector."""

    @abstractmethod
    def format(self, item: T, index: int) -> str:
        """Return the text for *item*, which sits at *index* in the full list."""
        ...


class PlainRowFormatter(RowFormatter[T]):
    """``str(item)``, optionally coloured."""

    def __init__(self, color: str | None = None) -> None:
        self.color = color

    def format(self, item: T, index: int) -> str:
        return _paint(str(item), self.color)


class IndexedRowFormatter(RowFormatter[T]):
    """
    Prefix each row with its 1-based position in the full list.

    >>> IndexedRowFormatter("%d.").format("fix", 1)
    '2. fix'
    """

    def __init__(self, index_format: str = DEFAULT_INDEX_FORMAT, color: str | None = None) -> None:
        if not accepts_index(index_format):
            index_format = DEFAULT_INDEX_FORMAT
        self.index_format = index_format
        self.color = color

    def format(self, item: T, index: int) -> str:
        return _paint(f"{self.index_format % (index + 1)} {item}", self.color)


class CallableRowFormatter(RowFormatter[T]):
    """Adapter for a ``(item, index) -> str`` function."""

    def __init__(self, func: Callable[[T, int], str]) -> None:
        self.func = func

    def format(self, item: T, index: int) -> str:
        return self.func(item, index)


def as_row_formatter(value: RowFormatter[T] | Callable[[T, int], str] | None,
                     default: RowFormatter[T]) -> RowFormatter[T]:
    """Coerce *value* into a row formatter, using *default* for ``None``."""
    if value is None:
        return default
    if isinstance(value, RowFormatter):
        return value
    if callable(value):
        return CallableRowFormatter(value)
    raise TypeError(f"Expected a RowFormatter or callable, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Header / footer
# ---------------------------------------------------------------------------

class DecorationFormatter(ABC):
    """Renders a header or footer block from the selector state."""

    @abstractmethod
    def format(self, selector: Selector[Any]) -> str:
        """Return the block's text; it may span several lines."""
        ...


class TextHeader(DecorationFormatter):
    """Static header text."""

    def __init__(self, text: str = DEFAULT_HEADER, color: str | None = COLOR_HEADER) -> None:
        self.text = text
        self.color = color

    @classmethod
    def with_append(cls, extra: str, color: str | None = COLOR_HEADER) -> TextHeader:
        """The default header with *extra* on the line below it."""
        return cls(f"{DEFAULT_HEADER}\n{extra}", color)

    def format(self, selector: Selector[Any]) -> str:
        return _paint(self.text, self.color)


class PageFooter(DecorationFormatter):
    """
    Footer showing the cursor position as ``current/total``.

    A template with two ``%d`` placeholders receives the 1-based global
    index and the list length; any other template is printed as-is.
    """

    def __init__(self, template: str = DEFAULT_FOOTER, color: str | None = COLOR_FOOTER) -> None:
        self.template = template
        self.color = color

    def format(self, selector: Selector[Any]) -> str:
        total = len(selector)
        position = selector.index + 1 if total else 0
        text = self.template
        if text.count("%d") == 2:
            try:
                text = text % (position, total)
            except (TypeError, ValueError):
                # not a usable template: show it verbatim
                text = self.template
        return _paint(text, self.color)


class CallableDecoration(DecorationFormatter):
    """Adapter for a ``(selector) -> str`` function."""

    def __init__(self, func: Callable[[Selector[Any]], str]) -> None:
        self.func = func

    def format(self, selector: Selector[Any]) -> str:
        return self.func(selector)


def as_decoration(value: DecorationFormatter | Callable[[Selector[Any]], str] | str | None,
                  default: DecorationFormatter) -> DecorationFormatter:
    """Coerce *value* into a decoration; strings become static text."""
    if value is None:
        return default
    if isinstance(value, DecorationFormatter):
        return value
    if isinstance(value, str):
        return TextHeader(value, color=None)
    if callable(value):
        return CallableDecoration(value)
    raise TypeError(f"Expected a formatter, callable or str, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Finished state
# ---------------------------------------------------------------------------

class FinishedFormatter(Generic[T]):
    """Text shown in place of the list once a choice is confirmed."""

    def __init__(self, template: str = DEFAULT_FINISHED, color: str | None = COLOR_FINISHED) -> None:
        self.template = template
        self.color = color

    def format(self, item: T | None) -> str:
        text = self.template
        if "%s" in text:
            try:
                text = text % (item,)
            except (TypeError, ValueError):
                text = text.replace("%s", str(item))
        return _paint(text, self.color)


class CallableFinished(FinishedFormatter[T]):
    """Adapter for an ``(item) -> str`` function."""

    def __init__(self, func: Callable[[T | None], str]) -> None:
        super().__init__(color=None)
        self.func = func

    def format(self, item: T | None) -> str:
        return self.func(item)


def as_finished(value: FinishedFormatter[T] | Callable[[T | None], str] | str | None,
                default: FinishedFormatter[T]) -> FinishedFormatter[T]:
    """Coerce *value* into a finished formatter; strings become templates."""
    if value is None:
        return default
    if isinstance(value, FinishedFormatter):
        return value
    if isinstance(value, str):
        return FinishedFormatter(value, color=None)
    if callable(value):
        return CallableFinished(value)
    raise TypeError(f"Expected a FinishedFormatter, callable or str, got {type(value).__name__}")
