"""Tests for ANSI styling and width helpers."""

from __future__ import annotations

import pytest

from termwidgets.tui.ansi import (
    RESET,
    color_ramp,
    color_sequence,
    display_width,
    font_color,
    is_valid_color,
    strip_ansi,
    style,
)


class TestStyle:
    def test_no_attributes_returns_text(self) -> None:
        assert style("plain") == "plain"

    def test_256_colour_index(self) -> None:
        assert color_sequence("14") == "\x1b[38;5;14m"
        assert color_sequence("14", background=True) == "\x1b[48;5;14m"

    def test_hex_colour(self) -> None:
        assert color_sequence("#ff8800") == "\x1b[38;2;255;136;0m"
        assert color_sequence("#f80") == "\x1b[38;2;255;136;0m"

    @pytest.mark.parametrize("bad", ["256", "#12", "zz"])
    def test_invalid_colour(self, bad: str) -> None:
        with pytest.raises(ValueError):
            color_sequence(bad)

    def test_colour_names_use_rich_palette(self) -> None:
        assert color_sequence("red") == "\x1b[38;5;1m"
        assert color_sequence("ff8800") == "\x1b[38;2;255;136;0m"
        assert is_valid_color("bright_blue") is True
        assert is_valid_color("not-a-colour") is False

    def test_default_colour_adds_no_sequence(self) -> None:
        assert color_sequence("default") == ""
        assert style("x", fg="default") == "x"

    @pytest.mark.parametrize("bad", ["256", "#12", "zz"])
    def test_style_drops_invalid_colour(self, bad: str) -> None:
        assert style("x", fg=bad) == "x"
        assert style("x", fg=bad, bold=True) == "\x1b[1mx" + RESET

    def test_font_color_is_bold(self) -> None:
        styled = font_color("hi", "2")
        assert styled == "\x1b[38;5;2m\x1b[1mhi" + RESET


class TestMeasurement:
    def test_strip_ansi(self) -> None:
        assert strip_ansi(style("x", fg="1", underline=True)) == "x"

    def test_display_width_ignores_escapes(self) -> None:
        assert display_width(font_color("abc", "2")) == 3

    def test_display_width_counts_wide_characters(self) -> None:
        assert display_width("»") == 1
        assert display_width("中文") == 4


class TestColorRamp:
    def test_length_and_start(self) -> None:
        ramp = color_ramp("#B14FFF", "#00FFA3", 5)
        assert len(ramp) == 5
        assert ramp[0] == "#b14fff"
        assert ramp[-1] != "#00ffa3"

    def test_empty_ramp(self) -> None:
        assert color_ramp("#000000", "#ffffff", 0) == []
