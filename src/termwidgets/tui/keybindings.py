"""
Keybinding management.

Maps logical widget actions (``confirm``, ``page_forward``...) to key
descriptors and supports user overrides loaded from a JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from termwidgets.logging import get_logger
from termwidgets.tui.keys import Key

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Default keybinding map
# ---------------------------------------------------------------------------

DEFAULT_KEYBINDINGS: dict[str, list[str]] = {
    "cancel": ["q", "ctrl+c"],
    "confirm": ["enter"],
    "down": ["down"],
    "up": ["up"],
    "page_forward": ["right", "page_down", "l", "k"],
    "page_back": ["left", "page_up", "h", "j"],
}

DEFAULT_KEYBINDINGS_PATH = Path.home() / ".termwidgets" / "keybindings.json"


def _normalise_key_descriptor(descriptor: str) -> str:
    """
    Normalise a human-readable key descriptor to a canonical form.

    ``"Ctrl+Shift+M"`` -> ``"ctrl+shift+m"``; a bare ``"+"`` stays ``"+"``.
    """
    if descriptor.strip() == "+":
        return "+"
    parts = [p.strip().lower() for p in descriptor.split("+")]
    modifiers = sorted(parts[:-1])
    return "+".join(modifiers + [parts[-1]])


def _key_to_descriptor(key: Key) -> str:
    """
    Convert a parsed :class:`Key` into a canonical descriptor string.

    Letter case is folded, so ``Q`` matches a ``q`` binding.

    >>> _key_to_descriptor(Key(name="ctrl+c", char="c", ctrl=True))
    'ctrl+c'
    >>> _key_to_descriptor(Key(name="page_down", shift=True))
    'shift+page_down'
    """
    base = key.name
    if "+" in base and base != "+":
        base = base.rsplit("+", 1)[-1]
    mods = [m for m, on in (("alt", key.alt), ("ctrl", key.ctrl), ("shift", key.shift)) if on]
    return "+".join(sorted(mods) + [base.lower()])


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class KeybindingsManager:
    """
    Maps logical action names to key descriptors.

    Parameters
    ----------
    user_overrides:
        Action name to descriptor list; each listed action replaces its
        default bindings entirely.
    """

    def __init__(self, user_overrides: dict[str, list[str]] | None = None) -> None:
        self._bindings: dict[str, list[str]] = dict(DEFAULT_KEYBINDINGS)
        if user_overrides:
            self._bindings.update(user_overrides)

        # descriptor -> action; when two actions share a key the first wins
        self._lookup: dict[str, str] = {}
        for action, descriptors in self._bindings.items():
            for descriptor in descriptors:
                self._lookup.setdefault(_normalise_key_descriptor(descriptor), action)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> KeybindingsManager:
        """
        Load keybindings from a JSON file.

        When *config_path* is ``None`` the file at
        ``~/.termwidgets/keybindings.json`` is used if it exists.  The file
        maps action names to lists of key descriptors::

            {"cancel": ["esc", "ctrl+c"], "page_forward": ["space"]}

        Unreadable or malformed files fall back to the defaults.
        """
        path = Path(config_path) if config_path is not None else DEFAULT_KEYBINDINGS_PATH
        if not path.is_file():
            return cls()

        try:
            raw: Any = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring keybindings file %s: %s", path, exc)
            return cls()

        return cls(user_overrides=coerce_overrides(raw))

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def find_action(self, key: Key | str) -> str | None:
        """Return the action bound to *key*, or ``None``."""
        if isinstance(key, str):
            return self._lookup.get(_normalise_key_descriptor(key))
        return self._lookup.get(_key_to_descriptor(key))

    def matches(self, key: Key | str, action: str) -> bool:
        """Return ``True`` if *key* triggers *action*."""
        return self.find_action(key) == action

    def get_keys(self, action: str) -> list[str]:
        """Descriptors bound to *action*, as written in the configuration."""
        return list(self._bindings.get(action, []))


def coerce_overrides(raw: Any) -> dict[str, list[str]] | None:
    if not isinstance(raw, dict):
        logger.warning("Keybindings override must be a JSON object, got %s", type(raw).__name__)
        return None
    overrides: dict[str, list[str]] = {}
    for action, keys in raw.items():
        if isinstance(keys, list) and all(isinstance(k, str) for k in keys):
            overrides[action] = keys
        else:
            logger.warning("Ignoring malformed binding for action %r", action)
    return overrides
