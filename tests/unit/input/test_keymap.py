"""Tests for key-token to intent mapping."""

from __future__ import annotations

import unittest

from lazyhex import engine as eng
from lazyhex.keymap import key_to_intent


class NormalKeymapTests(unittest.TestCase):
    def test_navigation_keys(self) -> None:
        cases = {
            "UP": eng.UP,
            "k": eng.UP,
            "DOWN": eng.DOWN,
            "j": eng.DOWN,
            "LEFT": eng.LEFT,
            "RIGHT": eng.RIGHT,
            "PAGE_UP": eng.PAGE_UP,
            "PAGE_DOWN": eng.PAGE_DOWN,
            " ": eng.PAGE_DOWN,
            "HOME": eng.HOME,
            "g": eng.HOME,
            "END": eng.END,
            "G": eng.END,
        }
        for key, kind in cases.items():
            with self.subTest(key=key):
                self.assertEqual(key_to_intent(key, command_active=False).kind, kind)

    def test_mode_keys(self) -> None:
        self.assertEqual(key_to_intent(":", command_active=False).kind, eng.ENTER_COMMAND_MODE)
        self.assertEqual(key_to_intent("q", command_active=False).kind, eng.QUIT)
        self.assertEqual(key_to_intent("?", command_active=False).kind, eng.TOGGLE_HELP)
        self.assertEqual(key_to_intent("CTRL_C", command_active=False).kind, eng.QUIT)

    def test_unbound_keys(self) -> None:
        self.assertIsNone(key_to_intent("z", command_active=False))
        self.assertIsNone(key_to_intent("", command_active=False))
        self.assertIsNone(key_to_intent("ENTER", command_active=False))
        self.assertIsNone(key_to_intent("CTRL_U", command_active=False))


class CommandKeymapTests(unittest.TestCase):
    def test_printable_keys_become_text(self) -> None:
        for key in ("q", "g", "0", "x", ":", " "):
            with self.subTest(key=key):
                intent = key_to_intent(key, command_active=True)
                self.assertEqual(intent.kind, eng.COMMAND_CHAR)
                self.assertEqual(intent.char, key)

    def test_editing_keys(self) -> None:
        self.assertEqual(key_to_intent("ENTER", command_active=True).kind, eng.COMMAND_ENTER)
        self.assertEqual(key_to_intent("ESC", command_active=True).kind, eng.COMMAND_ESCAPE)
        self.assertEqual(key_to_intent("BACKSPACE", command_active=True).kind, eng.COMMAND_BACKSPACE)

    def test_control_keys_while_typing(self) -> None:
        self.assertEqual(key_to_intent("CTRL_C", command_active=True).kind, eng.COMMAND_ESCAPE)
        self.assertEqual(key_to_intent("CTRL_U", command_active=True).kind, eng.COMMAND_CLEAR)

    def test_navigation_tokens_are_ignored_while_typing(self) -> None:
        for key in ("UP", "PAGE_DOWN", "\t", "\x01"):
            with self.subTest(key=key):
                self.assertIsNone(key_to_intent(key, command_active=True))


if __name__ == "__main__":
    unittest.main()
