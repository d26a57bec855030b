"""Tests for the validated Prompt widget."""

from __future__ import annotations

import pytest

from termwidgets.config import PromptConfig
from termwidgets.errors import ValidationError
from termwidgets.tui.ansi import strip_ansi
from termwidgets.tui.component import Command
from termwidgets.tui.prompt import Prompt, accept_all, not_blank
from termwidgets.tui.text_field import EchoMode


def type_text(prompt: Prompt, text: str) -> None:
    for ch in text:
        assert prompt.update(ch) is None


class TestValidators:
    def test_accept_all(self) -> None:
        assert accept_all("") is None

    def test_not_blank(self) -> None:
        not_blank("x")
        with pytest.raises(ValidationError, match="input is empty"):
            not_blank("   ")


class TestPromptInput:
    def test_enter_finishes_valid_input(self) -> None:
        prompt = Prompt("Name: ")
        type_text(prompt, "ada")
        assert prompt.update("enter") is Command.DONE
        assert prompt.finished is True
        assert prompt.value == "ada"

    def test_enter_on_invalid_input_shows_error(self) -> None:
        prompt = Prompt("Name: ", validate=not_blank)
        assert prompt.update("enter") is None
        assert prompt.finished is False
        assert isinstance(prompt.error, ValidationError)

        lines = [strip_ansi(line) for line in prompt.render()]
        assert lines[0].startswith("✘ Name: ")
        assert lines[1] == "✘ ERROR: input is empty"

    def test_typing_hides_error_message(self) -> None:
        prompt = Prompt("Name: ", validate=not_blank)
        prompt.update("enter")
        prompt.update("a")
        assert prompt.error is None
        assert len(prompt.render()) == 1
        assert prompt.update("enter") is Command.DONE

    def test_validator_runs_after_every_key(self) -> None:
        def digits_only(value: str) -> None:
            if not value.isdigit():
                raise ValueError("digits only")

        prompt = Prompt("Age: ", validate=digits_only)
        type_text(prompt, "4x")
        assert str(prompt.error) == "digits only"
        # error marker, but no message until Enter
        assert len(prompt.render()) == 1
        assert strip_ansi(prompt.render()[0]).startswith("✘")

        prompt.update("backspace")
        assert prompt.error is None
        assert strip_ansi(prompt.render()[0]).startswith("✔ Age: 4")

    def test_ctrl_c_cancels(self) -> None:
        prompt = Prompt("Name: ")
        type_text(prompt, "x")
        assert prompt.update("ctrl+c") is Command.QUIT
        assert prompt.canceled is True
        assert prompt.update("y") is None
        assert prompt.value == "x"

    def test_exception_message_is_displayed(self) -> None:
        prompt = Prompt("Name: ")
        prompt.update(RuntimeError("terminal went away"))
        lines = [strip_ansi(line) for line in prompt.render()]
        assert lines[1] == "✘ ERROR: terminal went away"

    def test_default_prompt_text(self) -> None:
        prompt = Prompt()
        assert strip_ansi(prompt.render()[0]).startswith("✔ Please Input: ")


class TestFinishedView:
    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (EchoMode.NORMAL, "✔ Pass: hunter2"),
            (EchoMode.PASSWORD, "✔ Pass: *******"),
            (EchoMode.NONE, "✔ Pass: "),
        ],
    )
    def test_echo_modes(self, mode: EchoMode, expected: str) -> None:
        prompt = Prompt("Pass: ", echo_mode=mode)
        type_text(prompt, "hunter2")
        prompt.update("enter")
        assert strip_ansi(prompt.view()) == expected

    def test_custom_prefixes(self) -> None:
        prompt = Prompt("Q: ", ok_prefix="+", err_prefix="-", validate=not_blank)
        assert strip_ansi(prompt.render()[0]).startswith("+ Q: ")
        prompt.update("enter")
        assert strip_ansi(prompt.render()[1]) == "- ERROR: input is empty"


class TestFromConfig:
    def test_options_are_applied(self) -> None:
        config = PromptConfig(prompt="Token: ", echo_mode="password", char_limit=4)
        prompt = Prompt.from_config(config, validate=not_blank)
        type_text(prompt, "abcdef")
        assert prompt.value == "abcd"
        assert prompt.echo_mode is EchoMode.PASSWORD
        prompt.update("enter")
        assert strip_ansi(prompt.view()) == "✔ Token: ****"
