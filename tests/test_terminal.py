"""Tests for terminal mode transitions.

termios/tty calls are mocked so the tests never touch the real terminal.
"""

from __future__ import annotations

import unittest
from unittest import mock

from lazyhex.terminal import TerminalController


class TerminalControllerTests(unittest.TestCase):
    def _controller(self) -> TerminalController:
        with mock.patch("lazyhex.terminal.termios.tcgetattr", return_value=["saved"]):
            return TerminalController(stdin_fd=3, stdout_fd=4)

    def test_raw_mode_enters_and_restores(self) -> None:
        controller = self._controller()
        with mock.patch("lazyhex.terminal.tty.setraw") as setraw, mock.patch(
            "lazyhex.terminal.termios.tcsetattr"
        ) as tcsetattr, mock.patch("lazyhex.terminal.os.write") as write:
            with controller.raw_mode():
                setraw.assert_called_once()
                self.assertEqual(write.call_args.args, (4, b"\x1b[?1049h\x1b[?25l"))
            self.assertEqual(write.call_args.args, (4, b"\x1b[?25h\x1b[?1049l"))
            self.assertEqual(tcsetattr.call_args.args[0], 3)
            self.assertEqual(tcsetattr.call_args.args[2], ["saved"])

    def test_raw_mode_restores_on_error(self) -> None:
        controller = self._controller()
        with mock.patch("lazyhex.terminal.tty.setraw"), mock.patch(
            "lazyhex.terminal.termios.tcsetattr"
        ) as tcsetattr, mock.patch("lazyhex.terminal.os.write"):
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")
        tcsetattr.assert_called_once()


if __name__ == "__main__":
    unittest.main()
