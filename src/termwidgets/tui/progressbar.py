"""
Stage-runner progress bar.

Each stage is a callable returning a status message.  The bar hands the host
one stage at a time as a command; the host runs it and feeds the
:class:`StageResult` back through :meth:`ProgressBar.update`.  A stage that
raises stops the run and its exception is kept on :attr:`ProgressBar.error`.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from termwidgets.logging import get_logger
from termwidgets.tui.ansi import color_ramp, font_color, style
from termwidgets.tui.component import Command, CommandLike, Component
from termwidgets.tui.keys import Key

if TYPE_CHECKING:
    from termwidgets.config import ProgressBarConfig

logger = get_logger(__name__)

FULL_CHAR = "█"
EMPTY_CHAR = "░"
RAMP_START = "#B14FFF"
RAMP_END = "#00FFA3"
DEFAULT_WIDTH = 40

COLOR_INFO = "2"
COLOR_ERROR = "9"
COLOR_EMPTY = "241"

_QUIT_KEYS = ("q", "esc", "ctrl+c")

Stage = Callable[[], str]


@dataclass(frozen=True)
class StageResult:
    """Outcome of running one stage."""

    index: int
    message: str = ""
    error: Exception | None = None


def run_stage(stages: Sequence[Stage], index: int) -> StageResult:
    """Run ``stages[index]``, capturing any exception it raises."""
    try:
        message = stages[index]()
    except Exception as exc:  # noqa: BLE001
        logger.debug("stage %d failed: %s", index, exc)
        return StageResult(index=index, error=exc)
    return StageResult(index=index, message=message)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def render_bar(width: int, percent: float) -> str:
    """
    Render ``width`` cells, ``percent`` of them filled, plus the percentage.

    Filled cells follow a purple-to-green gradient.
    """
    filled = min(width, _round_half_up(width * percent))
    ramp = color_ramp(RAMP_START, RAMP_END, width) if filled else []
    full = "".join(style(FULL_CHAR, fg=ramp[i]) for i in range(filled))
    empty = style(EMPTY_CHAR, fg=COLOR_EMPTY) * (width - filled)
    return f"{full}{empty} {_round_half_up(percent * 100):3d}"


class ProgressBar(Component):
    """
    Progress bar that steps once per completed stage.

    Parameters
    ----------
    stages:
        Callables run in order; each returns the message to display.
    width:
        Bar width in cells; ``0`` means the default of 40.
    init_message:
        Message shown before the first stage completes.
    """

    def __init__(
        self,
        stages: Sequence[Stage] = (),
        width: int = 0,
        init_message: str = "",
    ) -> None:
        super().__init__()
        self.stages: tuple[Stage, ...] = tuple(stages)
        self.width = width if width > 0 else DEFAULT_WIDTH
        self.init_message = init_message

        self._stage_index: int = 0
        self._completed: int = 0
        self._message: str = init_message
        self._error: Exception | None = None
        self._loaded: bool = False

    @classmethod
    def from_config(cls, stages: Sequence[Stage], config: ProgressBarConfig) -> ProgressBar:
        return cls(stages, width=config.width, init_message=config.init_message)

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    @property
    def error(self) -> Exception | None:
        """Exception raised by the failing stage, if any."""
        return self._error

    @property
    def index(self) -> int:
        """Index of the stage currently (or last) executed."""
        return self._stage_index

    @property
    def progress(self) -> float:
        """Fraction of stages completed, between 0 and 1."""
        if not self.stages:
            return 0.0
        return self._completed / len(self.stages)

    @property
    def loaded(self) -> bool:
        """True once every stage has completed."""
        return self._loaded

    @property
    def message(self) -> str:
        return self._message

    # ------------------------------------------------------------------
    # Host contract
    # ------------------------------------------------------------------

    def _next_stage(self) -> CommandLike:
        index = self._stage_index
        return lambda: run_stage(self.stages, index)

    def init(self) -> CommandLike | None:
        if not self.stages:
            return None
        return self._next_stage()

    def update(self, msg: Any) -> CommandLike | None:
        if isinstance(msg, str):
            msg = Key.named(msg)
        if isinstance(msg, Key) and msg.name in _QUIT_KEYS:
            return Command.QUIT

        if not isinstance(msg, StageResult) or self._loaded or self._error is not None:
            return None

        self.invalidate()
        if msg.error is not None:
            self._error = msg.error
            self._stage_index = msg.index
            return Command.QUIT

        self._message = msg.message
        self._completed += 1
        if self._completed >= len(self.stages):
            self._loaded = True
            logger.debug("all %d stages completed", len(self.stages))
            return Command.QUIT

        self._stage_index = min(msg.index + 1, len(self.stages) - 1)
        return self._next_stage()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int = 0) -> list[str]:
        if self._error is not None:
            status = font_color(str(self._error), COLOR_ERROR)
        else:
            status = font_color(self._message, COLOR_INFO)
        return [
            "",
            f"  {status}",
            "",
            f"  {render_bar(self.width, self.progress)}%",
        ]
