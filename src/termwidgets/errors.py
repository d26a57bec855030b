"""Exception types raised by termwidgets."""

from __future__ import annotations


class TermWidgetsError(Exception):
    """Base class for termwidgets errors."""


class ValidationError(TermWidgetsError, ValueError):
    """
    Raised by prompt validators when the current input is not acceptable.

    The message is shown to the user beneath the prompt, so keep it short.
    """
