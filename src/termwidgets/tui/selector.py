"""
Paginated single-choice selector.

The selector shows a fixed-size window of ``page_size`` rows over a backing
list of any length and tracks two cursors: the global index of the selected
item and the row the cursor occupies inside the window.  The window always
starts at ``index - page_index``::

    items:   a  b  c  d  e  f  g  h  i
                [b  c  d  e]               page_size=4, offset=1
                       ^                   index=3, page_index=2

Moving past the last visible row slides the window by one item, paging
slides it by a whole page without moving the cursor row, and digit keys jump
straight to a visible row.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from termwidgets.logging import get_logger
from termwidgets.tui.ansi import display_width, font_color, style
from termwidgets.tui.component import Command, CommandLike, Component
from termwidgets.tui.formatters import (
    COLOR_CURSOR,
    COLOR_SELECTED,
    COLOR_UNSELECTED,
    DEFAULT_CURSOR,
    DecorationFormatter,
    FinishedFormatter,
    IndexedRowFormatter,
    PageFooter,
    PlainRowFormatter,
    RowFormatter,
    TextHeader,
    as_decoration,
    as_finished,
    as_row_formatter,
)
from termwidgets.tui.keybindings import KeybindingsManager
from termwidgets.tui.keys import Key

if TYPE_CHECKING:
    from termwidgets.config import SelectorConfig

logger = get_logger(__name__)

T = TypeVar("T")

_JUMP_DIGITS = "123456789"


class Selector(Component, Generic[T]):
    """
    Interactive paginated list.

    Parameters
    ----------
    items:
        The backing list.  It is copied; the selector never inspects the
        items except to format them.
    page_size:
        Rows visible at once.  Values outside ``1..len(items)`` fall back to
        ``len(items)``.
    cursor:
        Glyph marking the selected row.
    cursor_color:
        Colour for the glyph, ``None`` for no styling.
    header, footer:
        Decoration formatters, callables taking the selector, or static
        strings.
    selected, unselected:
        Row formatters (or ``(item, index) -> str`` callables) for the
        cursor row and every other row.  *index* is the item's position in
        the full list.
    finished:
        Formatter, callable or ``%s`` template shown after confirmation.
    keybindings:
        Action bindings; defaults to :class:`KeybindingsManager` defaults.

    Missing options are filled with defaults rather than rejected.
    """

    def __init__(
        self,
        items: Sequence[T],
        page_size: int = 0,
        *,
        cursor: str | None = None,
        cursor_color: str | None = COLOR_CURSOR,
        header: DecorationFormatter | Callable[[Selector[Any]], str] | str | None = None,
        selected: RowFormatter[T] | Callable[[T, int], str] | None = None,
        unselected: RowFormatter[T] | Callable[[T, int], str] | None = None,
        footer: DecorationFormatter | Callable[[Selector[Any]], str] | str | None = None,
        finished: FinishedFormatter[T] | Callable[[T | None], str] | str | None = None,
        keybindings: KeybindingsManager | None = None,
    ) -> None:
        super().__init__()
        self._items: tuple[T, ...] = tuple(items)

        total = len(self._items)
        if page_size < 1 or page_size > total:
            page_size = total
        self._page_size: int = page_size
        self._window: tuple[T, ...] = self._items[:page_size]
        self._index: int = 0
        self._page_index: int = 0

        self._canceled: bool = False
        self._finished: bool = False

        self.cursor: str = cursor or DEFAULT_CURSOR
        self.cursor_color = cursor_color
        self.header = as_decoration(header, TextHeader())
        self.footer = as_decoration(footer, PageFooter())
        self.selected_formatter: RowFormatter[T] = as_row_formatter(
            selected, PlainRowFormatter(COLOR_SELECTED)
        )
        self.unselected_formatter: RowFormatter[T] = as_row_formatter(
            unselected, PlainRowFormatter(COLOR_UNSELECTED)
        )
        self.finished_formatter: FinishedFormatter[T] = as_finished(finished, FinishedFormatter())
        self.keybindings = keybindings or KeybindingsManager()

    @classmethod
    def from_config(cls, items: Sequence[T], config: SelectorConfig, **overrides: Any) -> Selector[T]:
        """
        Build a selector from a :class:`~termwidgets.config.SelectorConfig`.

        Keyword *overrides* (formatters, usually) are passed through to the
        constructor and win over the config.
        """
        kwargs: dict[str, Any] = {
            "cursor": config.cursor,
            "cursor_color": config.palette.cursor,
            "header": TextHeader(config.header, config.palette.header),
            "footer": PageFooter(config.footer, config.palette.footer),
            "selected": PlainRowFormatter(config.palette.selected),
            "unselected": PlainRowFormatter(config.palette.unselected),
            "finished": FinishedFormatter(config.finished, config.palette.finished),
            "keybindings": KeybindingsManager(config.keybindings or None),
        }
        if config.index_format:
            kwargs["selected"] = IndexedRowFormatter(config.index_format, config.palette.selected)
            kwargs["unselected"] = IndexedRowFormatter(config.index_format, config.palette.unselected)
        kwargs.update(overrides)
        return cls(items, config.page_size, **kwargs)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[T, ...]:
        """The full backing list."""
        return self._items

    @property
    def page_size(self) -> int:
        """Rows visible at once, after clamping."""
        return self._page_size

    @property
    def index(self) -> int:
        """Global index of the selected item."""
        return self._index

    @property
    def page_index(self) -> int:
        """Row of the cursor inside the visible window."""
        return self._page_index

    @property
    def offset(self) -> int:
        """Index in :attr:`items` of the first visible row."""
        return self._index - self._page_index

    @property
    def page_items(self) -> tuple[T, ...]:
        """The items currently visible."""
        return self._window

    @property
    def selected(self) -> T | None:
        """The item under the cursor, or ``None`` for an empty list."""
        if not self._items:
            return None
        return self._items[self._index]

    @property
    def canceled(self) -> bool:
        """True once the user canceled; :attr:`selected` is then meaningless."""
        return self._canceled

    @property
    def finished(self) -> bool:
        """True once the user confirmed a choice."""
        return self._finished

    @property
    def active(self) -> bool:
        return not (self._canceled or self._finished)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move_down(self) -> None:
        """Move the cursor one row down, sliding the window at its bottom edge."""
        last_row = self._page_size - 1
        last_item = len(self._items) - 1

        if self._page_index < last_row:
            self._page_index += 1
            if self._index < last_item:
                self._index += 1
            self.invalidate()
            return

        # cursor sits on the last visible row: the window follows it
        if self._index < last_item:
            self._index += 1
            self._window = self._items[self._index + 1 - self._page_size:self._index + 1]
            self.invalidate()

    def move_up(self) -> None:
        """Move the cursor one row up, sliding the window at its top edge."""
        if self._page_index > 0:
            self._page_index -= 1
            if self._index > 0:
                self._index -= 1
            self.invalidate()
            return

        if self._index > 0:
            self._index -= 1
            self._window = self._items[self._index:self._index + self._page_size]
            self.invalidate()

    def page_forward(self) -> None:
        """
        Slide the window one page forward, keeping the cursor row.

        When less than a full page remains the window stops flush with the
        end of the list and the index moves by the same, shorter distance.
        """
        start, end = self._bounds()
        total = len(self._items)
        if end >= total:
            return

        if total - end >= self._page_size:
            step = self._page_size
        else:
            step = total - end
        self._index += step
        self._window = self._items[start + step:end + step]
        self.invalidate()

    def page_back(self) -> None:
        """
        Slide the window one page back, keeping the cursor row.

        Within a page of the start the window snaps to the first page.
        """
        start, end = self._bounds()
        if start <= 0:
            return

        if start >= self._page_size:
            step = self._page_size
        else:
            step = start
        self._index -= step
        self._window = self._items[start - step:end - step]
        self.invalidate()

    def jump_to(self, row: int) -> None:
        """
        Put the cursor on visible *row* (1-based) without scrolling.

        Rows past the end of the window are ignored.
        """
        target = row - 1
        if target < 0 or target > self._page_size - 1:
            return
        self._index += target - self._page_index
        self._page_index = target
        self.invalidate()

    def _bounds(self) -> tuple[int, int]:
        """Start (inclusive) and end (exclusive) of the window in :attr:`items`."""
        start = self._index - self._page_index
        return start, start + self._page_size

    # ------------------------------------------------------------------
    # Host contract
    # ------------------------------------------------------------------

    def update(self, msg: Any) -> CommandLike | None:
        """Apply a key press; returns ``DONE``/``QUIT`` when the session ends."""
        if not self.active:
            return None
        if isinstance(msg, str):
            msg = Key.named(msg)
        if not isinstance(msg, Key):
            return None
        return self.handle_input(msg)

    def handle_input(self, key: Key) -> Command | None:
        """Dispatch one key press to the matching selector operation."""
        action = self.keybindings.find_action(key)

        if action == "cancel":
            self._canceled = True
            self.invalidate()
            logger.debug("selector canceled at index %d", self._index)
            return Command.QUIT
        if action == "confirm":
            self._finished = True
            self.invalidate()
            logger.debug("selector confirmed index %d", self._index)
            return Command.DONE

        if action == "down":
            self.move_down()
        elif action == "up":
            self.move_up()
        elif action == "page_forward":
            self.page_forward()
        elif action == "page_back":
            self.page_back()
        elif key.char and key.char in _JUMP_DIGITS and not (key.ctrl or key.alt):
            self.jump_to(int(key.char))
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int = 0) -> list[str]:
        """
        Render the header, the visible rows and the footer.

        Rows are not truncated to *width*; formatters decide their length.
        """
        if self._finished:
            return self.finished_formatter.format(self.selected).split("\n")

        cursor = font_color(self.cursor, self.cursor_color) if self.cursor_color else self.cursor
        padding = " " * (display_width(self.cursor) + 1)
        offset = self.offset

        rows: list[str] = []
        for i, item in enumerate(self._window):
            if i == self._page_index:
                rows.append(f"{cursor} {self.selected_formatter.format(item, i + offset)}")
            else:
                rows.append(padding + self.unselected_formatter.format(item, i + offset))
        if not rows:
            rows.append(style("  (no items)", dim=True))

        lines = self.header.format(self).split("\n")
        lines.append("")
        lines.extend(rows)
        lines.append("")
        lines.extend(self.footer.format(self).split("\n"))
        return lines
