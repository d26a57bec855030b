"""Shared pytest fixtures for termwidgets tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from termwidgets.tui.formatters import PageFooter, PlainRowFormatter
from termwidgets.tui.selector import Selector


@pytest.fixture
def nine_items() -> list[str]:
    """Nine distinct items, long enough to need paging at page size 4."""
    return [f"item{i}" for i in range(9)]


@pytest.fixture
def plain_selector() -> Callable[..., Selector[str]]:
    """Factory for selectors that render without colour codes."""

    def factory(items: list[str], page_size: int = 0, **kwargs: object) -> Selector[str]:
        options: dict[str, object] = {
            "cursor_color": None,
            "header": "header",
            "footer": PageFooter("%d/%d", color=None),
            "selected": PlainRowFormatter(),
            "unselected": PlainRowFormatter(),
        }
        options.update(kwargs)
        return Selector(items, page_size, **options)

    return factory

