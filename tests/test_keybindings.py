"""Tests for keybinding management."""

import json
import logging

from termwidgets.tui.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from termwidgets.tui.keys import Key, parse_key


class TestKeybindingsManager:
    """Tests for KeybindingsManager."""

    def test_defaults_loaded(self) -> None:
        manager = KeybindingsManager()
        for action, descriptors in DEFAULT_KEYBINDINGS.items():
            assert manager.get_keys(action) == descriptors

    def test_matches_with_string_descriptor(self) -> None:
        manager = KeybindingsManager()
        assert manager.matches("ctrl+c", "cancel") is True
        assert manager.matches("Ctrl+C", "cancel") is True
        assert manager.matches("ctrl+d", "cancel") is False

    def test_matches_with_key_object(self) -> None:
        manager = KeybindingsManager()
        assert manager.matches(parse_key(b"\x03"), "cancel") is True
        assert manager.matches(parse_key(b"\x1b[6~"), "page_forward") is True

    def test_letter_case_is_folded(self) -> None:
        """Upper-case letters trigger the same action as lower-case ones."""
        manager = KeybindingsManager()
        assert manager.find_action(Key(name="L", char="L")) == "page_forward"

    def test_modifiers_must_match(self) -> None:
        manager = KeybindingsManager()
        assert manager.find_action(Key(name="down", ctrl=True)) is None

    def test_unknown_action(self) -> None:
        manager = KeybindingsManager()
        assert manager.matches("q", "nonexistent") is False
        assert manager.get_keys("nonexistent") == []

    def test_user_overrides_replace_defaults(self) -> None:
        manager = KeybindingsManager(user_overrides={"cancel": ["esc"]})
        assert manager.matches("esc", "cancel") is True
        assert manager.matches("q", "cancel") is False
        assert manager.matches("enter", "confirm") is True

    def test_shared_key_goes_to_first_action(self) -> None:
        manager = KeybindingsManager(user_overrides={"down": ["down", "q"]})
        assert manager.find_action("q") == "cancel"
        assert manager.matches("q", "down") is False

    def test_get_keys_returns_descriptors(self) -> None:
        manager = KeybindingsManager()
        assert manager.get_keys("page_back") == ["left", "page_up", "h", "j"]

    def test_find_action_returns_none_for_unbound(self) -> None:
        manager = KeybindingsManager()
        assert manager.find_action("x") is None


class TestKeybindingsLoad:
    def test_load_from_file(self, tmp_path) -> None:
        path = tmp_path / "keybindings.json"
        path.write_text(json.dumps({"confirm": ["enter", "space"]}), encoding="utf-8")

        manager = KeybindingsManager.load(path)
        assert manager.matches(Key.named(" "), "confirm") is True
        assert manager.matches("q", "cancel") is True

    def test_missing_file_uses_defaults(self, tmp_path) -> None:
        manager = KeybindingsManager.load(tmp_path / "absent.json")
        assert manager.get_keys("cancel") == DEFAULT_KEYBINDINGS["cancel"]

    def test_malformed_file_falls_back(self, tmp_path, caplog) -> None:
        path = tmp_path / "keybindings.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="termwidgets"):
            manager = KeybindingsManager.load(path)

        assert manager.get_keys("confirm") == ["enter"]
        assert "Ignoring keybindings file" in caplog.text

    def test_malformed_entries_are_skipped(self, tmp_path) -> None:
        path = tmp_path / "keybindings.json"
        path.write_text(json.dumps({"cancel": "esc", "up": ["w"]}), encoding="utf-8")

        manager = KeybindingsManager.load(path)
        assert manager.get_keys("cancel") == ["q", "ctrl+c"]
        assert manager.matches("w", "up") is True
