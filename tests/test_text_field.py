"""Tests for the single-line TextField editor."""

from __future__ import annotations

from termwidgets.tui.ansi import strip_ansi
from termwidgets.tui.keys import KEY_BACKSPACE, KEY_DELETE, KEY_END, KEY_HOME, KEY_LEFT, Key
from termwidgets.tui.text_field import EchoMode, TextField


def type_text(field: TextField, text: str) -> None:
    for ch in text:
        field.handle_input(Key.char_key(ch))


class TestEditing:
    def test_typing_appends(self) -> None:
        field = TextField()
        type_text(field, "hello world")
        assert field.value == "hello world"
        assert field.cursor == 11

    def test_insert_at_cursor(self) -> None:
        field = TextField()
        type_text(field, "hllo")
        field.handle_input(KEY_HOME)
        field.handle_input(Key(name="right"))
        type_text(field, "e")
        assert field.value == "hello"

    def test_backspace_and_delete(self) -> None:
        field = TextField()
        field.value = "abcd"
        field.handle_input(KEY_BACKSPACE)
        assert field.value == "abc"
        field.handle_input(KEY_HOME)
        field.handle_input(KEY_DELETE)
        assert field.value == "bc"

    def test_backspace_at_start_is_noop(self) -> None:
        field = TextField()
        field.value = "ab"
        field.handle_input(KEY_HOME)
        field.handle_input(KEY_BACKSPACE)
        assert field.value == "ab"

    def test_kill_commands(self) -> None:
        field = TextField()
        field.value = "one two three"
        field.handle_input(Key(name="ctrl+w", char="w", ctrl=True))
        assert field.value == "one two "

        field.handle_input(KEY_LEFT)
        field.handle_input(KEY_LEFT)
        field.handle_input(Key(name="ctrl+k", char="k", ctrl=True))
        assert field.value == "one tw"

        field.handle_input(Key(name="ctrl+u", char="u", ctrl=True))
        assert field.value == ""
        assert field.cursor == 0

    def test_word_movement(self) -> None:
        field = TextField()
        field.value = "alpha beta"
        field.handle_input(Key(name="left", ctrl=True))
        assert field.cursor == 6
        field.handle_input(KEY_HOME)
        field.handle_input(Key(name="right", ctrl=True))
        assert field.cursor == 5

    def test_char_limit(self) -> None:
        field = TextField(char_limit=3)
        type_text(field, "abcdef")
        assert field.value == "abc"
        assert field.handle_input(Key.char_key("z")) is False

    def test_value_setter_honours_limit(self) -> None:
        field = TextField(char_limit=2)
        field.value = "abc"
        assert field.value == "ab"

    def test_unhandled_keys(self) -> None:
        field = TextField()
        assert field.handle_input(Key(name="tab", char="\t")) is False


class TestRender:
    def test_prompt_and_cursor_cell(self) -> None:
        field = TextField(prompt="$ ")
        field.value = "ls"
        assert strip_ansi(field.render()[0]) == "$ ls "

    def test_cursor_mid_text(self) -> None:
        field = TextField(prompt="> ")
        field.value = "abc"
        field.handle_input(KEY_LEFT)
        assert field.render()[0] == "> ab\x1b[4mc\x1b[0m"

    def test_horizontal_scroll(self) -> None:
        field = TextField(prompt="> ", width=3)
        field.value = "abcdef"
        assert strip_ansi(field.render()[0]) == "> ef "
        field.handle_input(KEY_HOME)
        assert strip_ansi(field.render()[0]) == "> abc"
        field.handle_input(KEY_END)
        assert strip_ansi(field.render()[0]) == "> ef "

    def test_password_mask(self) -> None:
        field = TextField(prompt="> ", echo_mode=EchoMode.PASSWORD)
        field.value = "secret"
        assert strip_ansi(field.render()[0]) == "> ****** "

    def test_echo_none(self) -> None:
        field = TextField(prompt="> ", echo_mode=EchoMode.NONE)
        field.value = "secret"
        assert strip_ansi(field.render()[0]) == ">  "


class TestEchoMode:
    def test_parse(self) -> None:
        assert EchoMode.parse("Password") is EchoMode.PASSWORD
        assert EchoMode.parse(EchoMode.NONE) is EchoMode.NONE
        assert EchoMode.parse("bogus") is EchoMode.NORMAL
        assert EchoMode.parse(None) is EchoMode.NORMAL
