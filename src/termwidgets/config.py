"""
Configuration models for termwidgets.

Widget options can be built programmatically or loaded from YAML, so an
application can ship its prompts' wording, colours and keys as data.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from termwidgets.logging import get_logger, set_level
from termwidgets.tui.ansi import is_valid_color
from termwidgets.tui.formatters import (
    COLOR_CURSOR,
    COLOR_FINISHED,
    COLOR_FOOTER,
    COLOR_HEADER,
    COLOR_SELECTED,
    COLOR_UNSELECTED,
    DEFAULT_CURSOR,
    DEFAULT_FINISHED,
    DEFAULT_FOOTER,
    DEFAULT_HEADER,
    DEFAULT_INDEX_FORMAT,
    accepts_index,
)
from termwidgets.tui.keybindings import coerce_overrides

logger = get_logger(__name__)


def _known(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Keep only the keys *cls* declares; unknown keys are ignored."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass
class Palette:
    """
    Colours for selector decorations.

    Values are xterm-256 indices (``"14"``) or hex strings; an empty string
    or ``None`` turns styling off for that part.
    """

    header: str | None = COLOR_HEADER
    footer: str | None = COLOR_FOOTER
    cursor: str | None = COLOR_CURSOR
    finished: str | None = COLOR_FINISHED
    selected: str | None = COLOR_SELECTED
    unselected: str | None = COLOR_UNSELECTED

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Palette:
        defaults = {f.name: f.default for f in fields(cls)}
        cleaned: dict[str, str | None] = {}
        for name, value in _known(cls, data).items():
            if value in (None, ""):
                cleaned[name] = None
            elif is_valid_color(str(value)):
                cleaned[name] = str(value)
            else:
                logger.warning("Ignoring invalid %s colour %r", name, value)
                cleaned[name] = defaults[name]
        return cls(**cleaned)



@dataclass
class SelectorConfig:
    """
    Selector options.

    Example YAML::

        selector:
          page_size: 5
          cursor: ">"
          header: "Pick a commit type:"
          index_format: "[%d]"
          keybindings:
            cancel: ["esc", "ctrl+c"]
          palette:
            selected: "#7aa2f7"
    """

    page_size: int = 0  # 0 or too large => whole list
    cursor: str = DEFAULT_CURSOR
    header: str = DEFAULT_HEADER
    footer: str = DEFAULT_FOOTER  # two %d => "current/total"
    finished: str = DEFAULT_FINISHED  # %s => selected item
    index_format: str | None = None  # e.g. "[%d]" to number rows
    keybindings: dict[str, list[str]] = field(default_factory=dict)
    palette: Palette = field(default_factory=Palette)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SelectorConfig:
        data = _known(cls, data)
        palette = Palette.from_dict(data.pop("palette", None) or {})
        keybindings = coerce_overrides(data.pop("keybindings", None) or {}) or {}
        page_size = data.pop("page_size", 0)
        try:
            page_size = int(page_size)
        except (TypeError, ValueError):
            page_size = 0
        index_format = data.get("index_format")
        if index_format is not None and not accepts_index(str(index_format)):
            logger.warning("Ignoring invalid index_format %r", index_format)
            data["index_format"] = DEFAULT_INDEX_FORMAT
        return cls(page_size=page_size, keybindings=keybindings, palette=palette, **data)


@dataclass
class PromptConfig:
    """Prompt options; ``0`` limits mean unlimited."""

    prompt: str = "Please Input: "
    ok_prefix: str = "✔"
    err_prefix: str = "✘"
    echo_mode: str = "normal"  # "normal", "password" or "none"
    char_limit: int = 0
    width: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PromptConfig:
        return cls(**_known(cls, data))


@dataclass
class ProgressBarConfig:
    """Progress bar options."""

    width: int = 40
    init_message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProgressBarConfig:
        return cls(**_known(cls, data))


@dataclass
class WidgetsConfig:
    """Top-level configuration grouping every widget's options."""

    selector: SelectorConfig = field(default_factory=SelectorConfig)
    prompt: PromptConfig = field(default_factory=PromptConfig)
    progressbar: ProgressBarConfig = field(default_factory=ProgressBarConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WidgetsConfig:
        """Create config from a dictionary."""
        return cls(
            selector=SelectorConfig.from_dict(data.get("selector") or {}),
            prompt=PromptConfig.from_dict(data.get("prompt") or {}),
            progressbar=ProgressBarConfig.from_dict(data.get("progressbar") or {}),
            log_level=data.get("log_level", "WARNING"),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> WidgetsConfig:
        """Load config from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> WidgetsConfig:
        """Load config from a YAML string."""
        return cls.from_dict(yaml.safe_load(content) or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a plain dictionary."""
        return asdict(self)

    def apply_logging(self) -> None:
        """Set the ``termwidgets`` logger to :attr:`log_level`."""
        set_level(self.log_level)
