"""
Single-line prompt with live validation.

Renders as::

    ✔ Please Input: hello

The prefix turns into ``✘`` while the validator rejects the input; pressing
Enter on invalid input shows the validator's message on the next line
instead of finishing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from termwidgets.errors import ValidationError
from termwidgets.logging import get_logger
from termwidgets.tui.ansi import font_color
from termwidgets.tui.component import Command, CommandLike, Component
from termwidgets.tui.keys import Key
from termwidgets.tui.text_field import EchoMode, TextField, mask

if TYPE_CHECKING:
    from termwidgets.config import PromptConfig

logger = get_logger(__name__)

DEFAULT_PROMPT = "Please Input: "
DEFAULT_OK_PREFIX = "✔"
DEFAULT_ERR_PREFIX = "✘"

COLOR_PROMPT = "2"
COLOR_OK = "2"
COLOR_ERR = "1"

Validator = Callable[[str], None]


def accept_all(value: str) -> None:
    """Validator that accepts any input."""
    return None


def not_blank(value: str) -> None:
    """Reject empty or whitespace-only input."""
    if not value.strip():
        raise ValidationError("input is empty")


class Prompt(Component):
    """
    Text prompt widget.

    Parameters
    ----------
    prompt:
        Label before the input, including any trailing space.  Defaults to
        a green ``"Please Input: "``.
    validate:
        Called with the current value after every key; raising
        :class:`ValueError` (including :class:`ValidationError`) marks the
        input invalid.
    ok_prefix, err_prefix:
        Markers shown before the label for valid and invalid input.
    echo_mode:
        How typed characters are displayed.
    char_limit, width:
        Passed to the underlying :class:`TextField`; ``0`` means unlimited.
    """

    def __init__(
        self,
        prompt: str | None = None,
        validate: Validator | None = None,
        *,
        ok_prefix: str | None = None,
        err_prefix: str | None = None,
        echo_mode: EchoMode | str = EchoMode.NORMAL,
        char_limit: int = 0,
        width: int = 0,
    ) -> None:
        super().__init__()
        self.prompt = prompt or font_color(DEFAULT_PROMPT, COLOR_PROMPT)
        self.validate = validate or accept_all
        self.ok_prefix = ok_prefix or DEFAULT_OK_PREFIX
        self.err_prefix = err_prefix or DEFAULT_ERR_PREFIX
        self.echo_mode = EchoMode.parse(echo_mode)

        self._field = TextField(
            prompt=self.prompt,
            char_limit=char_limit,
            width=width,
            echo_mode=self.echo_mode,
        )

        self._error: Exception | None = None
        self._show_error: bool = False
        self._canceled: bool = False
        self._finished: bool = False

    @classmethod
    def from_config(cls, config: PromptConfig, validate: Validator | None = None) -> Prompt:
        return cls(
            prompt=config.prompt,
            validate=validate,
            ok_prefix=config.ok_prefix,
            err_prefix=config.err_prefix,
            echo_mode=config.echo_mode,
            char_limit=config.char_limit,
            width=config.width,
        )

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    @property
    def value(self) -> str:
        """The text entered so far."""
        return self._field.value

    @property
    def error(self) -> Exception | None:
        """The current validation error, if any."""
        return self._error

    @property
    def canceled(self) -> bool:
        return self._canceled

    @property
    def finished(self) -> bool:
        return self._finished

    # ------------------------------------------------------------------
    # Host contract
    # ------------------------------------------------------------------

    def update(self, msg: Any) -> CommandLike | None:
        if self._canceled or self._finished:
            return None

        if isinstance(msg, Exception):
            self._error = msg
            self._show_error = True
            self.invalidate()
            return None

        if isinstance(msg, str):
            msg = Key.named(msg)
        if not isinstance(msg, Key):
            return None

        if msg.name == "ctrl+c":
            self._canceled = True
            self.invalidate()
            logger.debug("prompt canceled")
            return Command.QUIT

        if msg.name == "enter":
            self._run_validator()
            if self._error is None:
                self._finished = True
                self.invalidate()
                logger.debug("prompt finished")
                return Command.DONE
            self._show_error = True
            self.invalidate()
            return None

        if msg.is_printable:
            self._show_error = False
            self._error = None

        self._field.handle_input(msg)
        self._run_validator()
        self.invalidate()
        return None

    def _run_validator(self) -> None:
        try:
            self.validate(self._field.value)
        except ValueError as exc:
            self._error = exc
        else:
            self._error = None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int = 0) -> list[str]:
        if self._finished:
            ok = font_color(self.ok_prefix, COLOR_OK)
            if self.echo_mode is EchoMode.PASSWORD:
                shown = mask(self.value)
            elif self.echo_mode is EchoMode.NONE:
                shown = ""
            else:
                shown = self.value
            return [f"{ok} {self.prompt}{shown}"]

        field_line = self._field.render(width)[0]
        if self._error is None:
            return [f"{font_color(self.ok_prefix, COLOR_OK)} {field_line}"]

        lines = [f"{font_color(self.err_prefix, COLOR_ERR)} {field_line}"]
        if self._show_error:
            lines.append(font_color(f"{self.err_prefix} ERROR: {self._error}", COLOR_ERR))
        return lines
