"""
Key parsing for terminal input.

The host runtime reads raw bytes from the terminal; ``parse_key`` turns one
read into a ``Key`` that widgets dispatch on.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Key:
    """
    Parsed representation of a single key press.

    Attributes
    ----------
    name:
        Symbolic name for special keys (``'enter'``, ``'up'``,
        ``'page_down'``, ``'ctrl+c'``).  For printable characters this
        equals *char*.
    char:
        The literal character, if any.
    ctrl, alt, shift:
        Modifier flags.
    """

    name: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_printable(self) -> bool:
        """True for plain characters that an editor should insert."""
        return bool(self.char) and self.char.isprintable() and not self.ctrl and not self.alt

    @classmethod
    def char_key(cls, ch: str) -> Key:
        """Build the key for a single typed character."""
        if ch == " ":
            return KEY_SPACE
        return cls(name=ch, char=ch)

    @classmethod
    def named(cls, name: str) -> Key:
        """
        Build a key from a descriptor such as ``'down'``, ``'q'`` or ``'ctrl+c'``.

        Lets hosts and tests feed widgets without raw terminal bytes.
        Leading ``ctrl+``, ``alt+`` and ``shift+`` prefixes set the modifier
        flags, producing the same key :func:`parse_key` would.
        """
        if len(name) == 1:
            return cls.char_key(name)

        mods: set[str] = set()
        base = name
        while True:
            head, sep, rest = base.partition("+")
            if not (sep and rest and head.lower() in _MODIFIERS):
                break
            mods.add(head.lower())
            base = rest

        if not mods:
            return _SPECIAL.get(base) or cls(name=base)
        if len(base) == 1:
            # parse_key reports ctrl+letter and alt+char under a combined name
            char = base.lower() if "ctrl" in mods else base
            return cls(
                name="+".join(sorted(mods) + [char]),
                char=char,
                ctrl="ctrl" in mods,
                alt="alt" in mods,
                shift="shift" in mods,
            )
        return cls(name=base, ctrl="ctrl" in mods, alt="alt" in mods, shift="shift" in mods)


KEY_ENTER = Key(name="enter", char="\r")
KEY_TAB = Key(name="tab", char="\t")
KEY_ESCAPE = Key(name="esc")
KEY_BACKSPACE = Key(name="backspace")
KEY_DELETE = Key(name="delete")
KEY_SPACE = Key(name="space", char=" ")

KEY_UP = Key(name="up")
KEY_DOWN = Key(name="down")
KEY_LEFT = Key(name="left")
KEY_RIGHT = Key(name="right")
KEY_HOME = Key(name="home")
KEY_END = Key(name="end")
KEY_PAGE_UP = Key(name="page_up")
KEY_PAGE_DOWN = Key(name="page_down")

KEY_CTRL_C = Key(name="ctrl+c", char="c", ctrl=True)

_MODIFIERS = ("ctrl", "alt", "shift")

# descriptors whose key carries a character
_SPECIAL: dict[str, Key] = {
    "enter": KEY_ENTER,
    "tab": KEY_TAB,
    "space": KEY_SPACE,
}


# Final byte of ``ESC [ <final>`` / ``ESC O <final>`` sequences
_FINAL_BYTE: dict[str, Key] = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
}

# ``ESC [ <n> ~`` sequences
_TILDE: dict[int, Key] = {
    1: KEY_HOME,
    3: KEY_DELETE,
    4: KEY_END,
    5: KEY_PAGE_UP,
    6: KEY_PAGE_DOWN,
    7: KEY_HOME,
    8: KEY_END,
}

_UNKNOWN = Key(name="unknown")


def _with_modifier(base: Key, code: int) -> Key:
    """Apply an xterm ``;N`` modifier (``N = 1 + shift + 2*alt + 4*ctrl``)."""
    bits = code - 1
    return Key(
        name=base.name,
        char=base.char,
        shift=bool(bits & 1),
        alt=bool(bits & 2),
        ctrl=bool(bits & 4),
    )


def parse_key(data: bytes) -> Key:
    """
    Parse one terminal read into a ``Key``.

    Recognises printable UTF-8 characters, Ctrl+letter bytes, Alt+char,
    CSI and SS3 cursor sequences, ``<n>~`` sequences (page up/down, home,
    end, delete) and xterm modifier suffixes.  Anything else parses as a
    key named ``'unknown'``.
    """
    if not data:
        return _UNKNOWN

    if data[:1] == b"\x1b":
        if len(data) == 1:
            return KEY_ESCAPE
        if data[1:2] == b"[":
            return _parse_csi(data[2:])
        if data[1:2] == b"O":
            return _FINAL_BYTE.get(data[2:3].decode("ascii", "replace"), _UNKNOWN)
        if len(data) == 2:
            ch = chr(data[1])
            if ch.isprintable():
                return Key(name=f"alt+{ch}", char=ch, alt=True)
        return _UNKNOWN

    byte = data[0]
    if byte in (0x0D, 0x0A):
        return KEY_ENTER
    if byte == 0x09:
        return KEY_TAB
    if byte in (0x7F, 0x08):
        return KEY_BACKSPACE
    if 1 <= byte <= 26:
        letter = chr(byte + 96)
        return Key(name=f"ctrl+{letter}", char=letter, ctrl=True)
    if byte < 0x20:
        return _UNKNOWN

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return _UNKNOWN
    if len(text) == 1 and text.isprintable():
        return Key.char_key(text)
    return _UNKNOWN


def _parse_csi(payload: bytes) -> Key:
    """Parse the bytes following ``ESC [``."""
    try:
        text = payload.decode("ascii")
    except UnicodeDecodeError:
        return _UNKNOWN
    if not text:
        return _UNKNOWN

    final, params = text[-1], text[:-1].split(";") if len(text) > 1 else []

    if final == "~":
        base = _TILDE.get(_safe_int(params[0]) if params else -1)
        if base is None:
            return _UNKNOWN
        if len(params) == 2 and _safe_int(params[1]) is not None:
            return _with_modifier(base, _safe_int(params[1]))
        return base

    base = _FINAL_BYTE.get(final)
    if base is None:
        return _UNKNOWN
    if len(params) == 2 and _safe_int(params[1]) is not None:
        return _with_modifier(base, _safe_int(params[1]))
    return base


def _safe_int(s: str) -> int | None:
    try:
        return int(s)
    except (ValueError, TypeError):
        return None
