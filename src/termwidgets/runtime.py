"""
Synchronous host driver.

``Program`` plays the host runtime's part for a widget: it calls the
startup hook, feeds events one at a time, runs the callable commands a
widget returns, and redraws after every update.  It does not touch terminal
modes; feed it decoded keys, raw byte reads or key descriptors.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TextIO

from termwidgets.logging import get_logger
from termwidgets.tui.component import Command, CommandLike, Component, is_terminal
from termwidgets.tui.keys import parse_key

logger = get_logger(__name__)


class Program:
    """
    Drive *widget* with *events* until it terminates or the events run out.

    Parameters
    ----------
    widget:
        The component to drive.
    events:
        Messages to deliver.  ``bytes`` are decoded with
        :func:`~termwidgets.tui.keys.parse_key`; anything else is passed
        through unchanged.
    output:
        Optional stream receiving each frame; frames are always kept in
        :attr:`frames`.
    width:
        Columns passed to the widget's renderer.
    """

    def __init__(
        self,
        widget: Component,
        events: Iterable[Any] = (),
        output: TextIO | None = None,
        width: int = 0,
    ) -> None:
        self.widget = widget
        self.events = events
        self.output = output
        self.width = width
        self.frames: list[str] = []
        self.result: Command | None = None

    def run(self) -> Component:
        """Run the loop and return the widget for inspection."""
        cmd = self._drain(self.widget.init())
        self._draw()

        if not is_terminal(cmd):
            for event in self.events:
                msg = parse_key(event) if isinstance(event, bytes) else event
                cmd = self._drain(self.widget.update(msg))
                self._draw()
                if is_terminal(cmd):
                    break

        self.result = cmd if isinstance(cmd, Command) else None
        logger.debug("program ended with %s", self.result)
        return self.widget

    def _drain(self, cmd: CommandLike | None) -> CommandLike | None:
        """Execute callable commands, feeding their results back in."""
        while cmd is not None and not is_terminal(cmd):
            msg = cmd()
            cmd = self.widget.update(msg)
            if not is_terminal(cmd):
                self._draw()
        return cmd

    def _draw(self) -> None:
        frame = self.widget.view(self.width)
        self.frames.append(frame)
        self.widget.dirty = False
        if self.output is not None:
            self.output.write(frame + "\n")
            self.output.flush()
