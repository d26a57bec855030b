"""
ANSI styling and text measurement helpers.

Widgets produce plain strings with embedded SGR sequences; the host writes
them verbatim.  Colours may be given as xterm-256 indices (``"14"``), hex
strings (``"#7aa2f7"``), colour names (``"red"``) or ready-made escape
sequences.  A colour that cannot be parsed is dropped rather than failing
the render.
"""

from __future__ import annotations

import re

from rich.cells import cell_len
from rich.color import Color, ColorParseError, ColorType, blend_rgb

from termwidgets.logging import get_logger

ESC = "\033"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

logger = get_logger(__name__)

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

_STYLE_CODES: dict[str, int] = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
}


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _parse_color(color: str) -> Color:
    """
    Parse an xterm-256 index, a hex string (hash optional, 3 or 6 digits)
    or a colour name with ``rich``.  Raises :class:`ValueError` if invalid.
    """
    spec = color.strip()
    if spec.isdigit():
        spec = f"color({int(spec)})"
    else:
        match = _HEX_RE.fullmatch(spec)
        if match:
            digits = match.group(1)
            if len(digits) == 3:
                digits = "".join(c * 2 for c in digits)
            spec = f"#{digits}"
    try:
        return Color.parse(spec)
    except ColorParseError as exc:
        raise ValueError(f"Invalid colour: {color!r}") from exc


def color_sequence(color: str, *, background: bool = False) -> str:
    """
    Return the SGR sequence selecting *color*.

    >>> color_sequence("2")
    '\\x1b[38;5;2m'
    >>> color_sequence("#ff0000")
    '\\x1b[38;2;255;0;0m'
    >>> color_sequence("red")
    '\\x1b[38;5;1m'
    """
    if color.startswith(ESC):
        return color
    base = 48 if background else 38
    parsed = _parse_color(color)
    if parsed.type is ColorType.TRUECOLOR and parsed.triplet is not None:
        r, g, b = parsed.triplet
        return f"{CSI}{base};2;{r};{g};{b}m"
    if parsed.number is None:
        # terminal default colour
        return ""
    return f"{CSI}{base};5;{parsed.number}m"


def is_valid_color(color: str) -> bool:
    """True if :func:`color_sequence` accepts *color*."""
    try:
        color_sequence(color)
    except ValueError:
        return False
    return True


def color_ramp(start: str, end: str, steps: int) -> list[str]:
    """
    Return *steps* hex colours blending from *start* towards *end*.

    The last entry stops one step short of *end*, so a bar of ``steps``
    cells never quite reaches the final colour.
    """
    a = Color.parse(start).get_truecolor()
    b = Color.parse(end).get_truecolor()
    return [blend_rgb(a, b, i / steps).hex for i in range(steps)]


# ---------------------------------------------------------------------------
# Styling
# ---------------------------------------------------------------------------

def style(
    text: str,
    *,
    fg: str | None = None,
    bg: str | None = None,
    bold: bool = False,
    dim: bool = False,
    italic: bool = False,
    underline: bool = False,
) -> str:
    """
    Wrap *text* in SGR sequences followed by a ``RESET``.

    Returns *text* unchanged when no attribute is requested.
    """
    parts: list[str] = []
    for color, background in ((fg, False), (bg, True)):
        if color is None:
            continue
        try:
            sequence = color_sequence(color, background=background)
        except ValueError:
            logger.debug("dropping invalid colour %r", color)
            continue
        if sequence:
            parts.append(sequence)

    attrs = {"bold": bold, "dim": dim, "italic": italic, "underline": underline}
    parts.extend(f"{CSI}{_STYLE_CODES[name]}m" for name, on in attrs.items() if on)

    if not parts:
        return text
    return f"{''.join(parts)}{text}{RESET}"


def font_color(text: str, color: str) -> str:
    """Bold *text* in *color*; the house style for widget decorations."""
    return style(text, fg=color, bold=True)


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences from *text*."""
    return _ANSI_RE.sub("", text)


def display_width(text: str) -> int:
    """
    Number of terminal columns *text* occupies.

    Escape sequences count as zero and wide (CJK, emoji) characters as two.
    """
    return cell_len(strip_ansi(text))
