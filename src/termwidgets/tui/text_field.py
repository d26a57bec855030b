"""
Single-line editable text field.

The building block under :class:`~termwidgets.tui.prompt.Prompt`: cursor
movement, editing, readline-style kills, a character limit, horizontal
scrolling and password masking.
"""

from __future__ import annotations

from enum import Enum

from termwidgets.tui.ansi import style
from termwidgets.tui.component import Component
from termwidgets.tui.keys import Key

MASK_CHAR = "*"


class EchoMode(Enum):
    """How typed characters are displayed."""

    NORMAL = "normal"
    PASSWORD = "password"
    NONE = "none"

    @classmethod
    def parse(cls, value: EchoMode | str | None) -> EchoMode:
        """Accept an enum member or its name/value; anything else is NORMAL."""
        if isinstance(value, EchoMode):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                return cls.NORMAL
        return cls.NORMAL


def mask(text: str) -> str:
    """One mask character per character of *text*."""
    return MASK_CHAR * len(text)


class TextField(Component):
    """
    Single-line text editor.

    Parameters
    ----------
    prompt:
        Text shown before the editable area.
    char_limit:
        Maximum number of characters; ``0`` or less means unlimited.
    width:
        Visible columns for the text; the field scrolls horizontally to
        keep the cursor in view.  ``0`` or less means unlimited.
    echo_mode:
        Display mode for the typed characters.
    """

    def __init__(
        self,
        prompt: str = "> ",
        char_limit: int = 0,
        width: int = 0,
        echo_mode: EchoMode = EchoMode.NORMAL,
    ) -> None:
        super().__init__()
        self.prompt = prompt
        self.char_limit = char_limit
        self.width = width
        self.echo_mode = echo_mode
        self.focused = True

        self._buffer: list[str] = []
        self._cursor: int = 0

    @property
    def value(self) -> str:
        """Current text content."""
        return "".join(self._buffer)

    @value.setter
    def value(self, text: str) -> None:
        if self.char_limit > 0:
            text = text[:self.char_limit]
        self._buffer = list(text)
        self._cursor = len(self._buffer)
        self.invalidate()

    @property
    def cursor(self) -> int:
        """Cursor position as a character offset into :attr:`value`."""
        return self._cursor

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _display_text(self) -> str:
        if self.echo_mode is EchoMode.PASSWORD:
            return mask(self.value)
        if self.echo_mode is EchoMode.NONE:
            return ""
        return self.value

    def render(self, width: int = 0) -> list[str]:
        """Render the prompt and text with the cursor cell underlined."""
        text = self._display_text()
        cursor = min(self._cursor, len(text))

        start = 0
        if self.width > 0 and cursor > self.width - 1:
            start = cursor - self.width + 1
        visible = text[start:start + self.width] if self.width > 0 else text
        cursor_in_view = cursor - start

        before = visible[:cursor_in_view]
        cursor_char = visible[cursor_in_view] if cursor_in_view < len(visible) else " "
        after = visible[cursor_in_view + 1:]

        if self.focused:
            cursor_char = style(cursor_char, underline=True)
        return [f"{self.prompt}{before}{cursor_char}{after}"]

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def update(self, msg: object) -> None:
        if isinstance(msg, Key):
            self.handle_input(msg)
        return None

    def handle_input(self, key: Key) -> bool:  # noqa: C901
        """Apply an editing key; returns ``True`` if the key was used."""
        if not self.focused:
            return False

        name = key.name

        if name == "left" and not key.ctrl:
            self._move_to(self._cursor - 1)
        elif name == "right" and not key.ctrl:
            self._move_to(self._cursor + 1)
        elif name == "left":
            self._move_to(self._word_boundary_left())
        elif name == "right":
            self._move_to(self._word_boundary_right())
        elif name in ("home", "ctrl+a"):
            self._move_to(0)
        elif name in ("end", "ctrl+e"):
            self._move_to(len(self._buffer))
        elif name == "backspace":
            if self._cursor > 0:
                self._cursor -= 1
                del self._buffer[self._cursor]
                self.invalidate()
        elif name in ("delete", "ctrl+d"):
            if self._cursor < len(self._buffer):
                del self._buffer[self._cursor]
                self.invalidate()
        elif name == "ctrl+k":
            self._buffer = self._buffer[:self._cursor]
            self.invalidate()
        elif name == "ctrl+u":
            self._buffer = self._buffer[self._cursor:]
            self._cursor = 0
            self.invalidate()
        elif name == "ctrl+w":
            boundary = self._word_boundary_left()
            del self._buffer[boundary:self._cursor]
            self._cursor = boundary
            self.invalidate()
        elif key.is_printable:
            return self.insert(key.char)
        else:
            return False
        return True

    def insert(self, text: str) -> bool:
        """Insert *text* at the cursor, dropping what exceeds the limit."""
        if self.char_limit > 0:
            text = text[:max(0, self.char_limit - len(self._buffer))]
        if not text:
            return False
        self._buffer[self._cursor:self._cursor] = list(text)
        self._cursor += len(text)
        self.invalidate()
        return True

    def _move_to(self, position: int) -> None:
        position = max(0, min(position, len(self._buffer)))
        if position != self._cursor:
            self._cursor = position
            self.invalidate()

    def _word_boundary_left(self) -> int:
        pos = self._cursor - 1
        while pos >= 0 and not self._buffer[pos].isalnum():
            pos -= 1
        while pos >= 0 and self._buffer[pos].isalnum():
            pos -= 1
        return pos + 1

    def _word_boundary_right(self) -> int:
        pos = self._cursor
        length = len(self._buffer)
        while pos < length and not self._buffer[pos].isalnum():
            pos += 1
        while pos < length and self._buffer[pos].isalnum():
            pos += 1
        return pos
