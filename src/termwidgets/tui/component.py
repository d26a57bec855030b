"""
Base class and command types for widgets.

A widget never drives itself.  The host runtime calls :meth:`Component.init`
once, then :meth:`Component.update` for every message (usually a
:class:`~termwidgets.tui.keys.Key`) and :meth:`Component.view` after each
update.  ``init`` and ``update`` may hand back a command for the host.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any, Union


class Command(Enum):
    """Terminal signals a widget returns to its host."""

    QUIT = "quit"
    """Stop the loop; the widget was canceled or cannot continue."""

    DONE = "done"
    """Stop the loop; the widget finished with a result."""


# Either a terminal signal or a zero-argument callable whose return value the
# host feeds back into ``update`` as the next message.
CommandLike = Union[Command, Callable[[], Any]]


def is_terminal(cmd: CommandLike | None) -> bool:
    """True if *cmd* asks the host to end the session."""
    return isinstance(cmd, Command)


class Component(ABC):
    """
    Base class for widgets.

    Subclasses implement :meth:`render`, which returns pre-styled lines and
    must not change widget state, and usually :meth:`update`.  Components
    track a *dirty* flag so a host can skip redrawing unchanged widgets;
    state-changing operations call :meth:`invalidate` and the host resets
    the flag once it has drawn a frame.
    """

    def __init__(self) -> None:
        self._dirty: bool = True

    # ------------------------------------------------------------------
    # Host contract
    # ------------------------------------------------------------------

    def init(self) -> CommandLike | None:
        """Startup hook, called once before the first message."""
        return None

    def update(self, msg: Any) -> CommandLike | None:
        """
        React to a message from the host.

        Returns
        -------
        CommandLike | None
            A command for the host, or ``None`` to keep going.
        """
        return None

    @abstractmethod
    def render(self, width: int = 0) -> list[str]:
        """
        Render the widget into a list of text lines.

        Parameters
        ----------
        width:
            Available columns; ``0`` means unconstrained.
        """
        ...

    def view(self, width: int = 0) -> str:
        """The rendered lines joined into one string."""
        return "\n".join(self.render(width))

    # ------------------------------------------------------------------
    # Dirty tracking
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        """Mark the component as needing a re-render."""
        self._dirty = True

    @property
    def dirty(self) -> bool:
        """Whether the component changed since the host last drew it."""
        return self._dirty

    @dirty.setter
    def dirty(self, value: bool) -> None:
        self._dirty = value
