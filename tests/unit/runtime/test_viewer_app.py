"""Tests for viewer bootstrap: dump fallback and loop wiring."""

from __future__ import annotations

import io
import unittest
from pathlib import Path
from unittest import mock

from lazyhex.runtime import app
from lazyhex.source import MemoryByteSource
from lazyhex.ui_theme import PLAIN_THEME


class StartupNoticeTests(unittest.TestCase):
    def test_startup_notice_mentions_size(self) -> None:
        self.assertEqual(app.startup_notice(Path("a.bin"), 12).text, "File: 'a.bin' (Size: 12 bytes)")
        self.assertEqual(app.startup_notice(Path("a.bin"), 0).text, "File: 'a.bin' is empty")


class DumpSourceTests(unittest.TestCase):
    def test_plain_dump_writes_all_rows(self) -> None:
        out = io.StringIO()
        with mock.patch("lazyhex.runtime.app.sys.stdout", out):
            app.dump_source(MemoryByteSource(b"Hello, world!\n" * 2), 0, 16, None)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("00000000  48 65 6C 6C 6F"))
        self.assertTrue(lines[1].startswith("00000010  "))

    def test_colored_dump_resets_each_row(self) -> None:
        out = io.StringIO()
        with mock.patch("lazyhex.runtime.app.sys.stdout", out):
            app.dump_source(MemoryByteSource(b"abc"), 0, 16, "monokai")
        self.assertTrue(out.getvalue().endswith("\033[0m\n"))


class RunViewerTests(unittest.TestCase):
    def test_nopager_dumps_instead_of_starting_loop(self) -> None:
        source = MemoryByteSource(b"xyz")
        with mock.patch.object(app, "dump_source") as dump, mock.patch.object(app, "run_main_loop") as loop:
            app.run_viewer(source, Path("x"), 0, 16, "monokai", no_color=True, nopager=True)
        dump.assert_called_once_with(source, 0, 16, None)
        loop.assert_not_called()

    def test_dump_start_past_end_is_clamped_to_last_byte(self) -> None:
        out = io.StringIO()
        with mock.patch("lazyhex.runtime.app.sys.stdout", out):
            app.run_viewer(MemoryByteSource(bytes(64)), Path("x"), 1000, 16, "monokai", no_color=True, nopager=True)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("0000003F  00"))

    def test_non_tty_stdin_dumps(self) -> None:
        source = MemoryByteSource(b"xyz")
        with mock.patch("lazyhex.runtime.app.sys") as fake_sys, mock.patch(
            "lazyhex.runtime.app.os.isatty", return_value=False
        ), mock.patch.object(app, "dump_source") as dump, mock.patch.object(app, "run_main_loop") as loop:
            fake_sys.stdin.fileno.return_value = 0
            fake_sys.stdout.fileno.return_value = 1
            app.run_viewer(source, Path("x"), 1, 8, "monokai", no_color=False, nopager=False)
        dump.assert_called_once_with(source, 1, 8, None)
        loop.assert_not_called()

    def test_interactive_session_wires_engine_and_loop(self) -> None:
        source = MemoryByteSource(bytes(100))
        terminal = mock.MagicMock()
        terminal.size.return_value = mock.Mock(columns=80, lines=10)
        with mock.patch("lazyhex.runtime.app.sys") as fake_sys, mock.patch(
            "lazyhex.runtime.app.os.isatty", return_value=True
        ), mock.patch.object(app, "TerminalController", return_value=terminal), mock.patch.object(
            app, "run_main_loop"
        ) as loop:
            fake_sys.stdin.fileno.return_value = 0
            fake_sys.stdout.fileno.return_value = 1
            app.run_viewer(source, Path("data.bin"), 40, 16, "monokai", no_color=True, nopager=False)

        loop.assert_called_once()
        engine, session, used_terminal, stdin_fd, timing, callbacks = loop.call_args.args
        self.assertIs(used_terminal, terminal)
        self.assertEqual(stdin_fd, 0)
        self.assertEqual(engine.viewport.offset, 40)
        self.assertEqual(engine.viewport.visible_lines, 8)
        self.assertEqual(engine.notice.text, "File: 'data.bin' (Size: 100 bytes)")
        self.assertIs(session.source, source)
        self.assertIs(session.theme, PLAIN_THEME)
        self.assertIsNone(session.style)
        self.assertEqual(timing.notice_seconds, app.NOTICE_SECONDS)
        self.assertIs(callbacks.terminal_size, terminal.size)


if __name__ == "__main__":
    unittest.main()
