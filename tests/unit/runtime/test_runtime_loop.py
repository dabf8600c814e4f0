"""Tests for the interactive event loop.

The loop is driven with a fake terminal and a scripted key sequence; rendered
contexts are captured instead of written.
"""

from __future__ import annotations

import os
import unittest
from contextlib import contextmanager
from pathlib import Path

from lazyhex.engine import NavigationEngine
from lazyhex.mode import NOTICE_INFO, Notice
from lazyhex.render import RenderContext
from lazyhex.runtime import RuntimeLoopCallbacks, RuntimeLoopTiming, ViewerSession, run_main_loop
from lazyhex.source import MemoryByteSource
from lazyhex.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


def _run(
    engine: NavigationEngine,
    keys: list,
    lines: int = 10,
    notice_seconds: float = 60.0,
) -> tuple[list[RenderContext], _FakeTerminal]:
    rendered: list[RenderContext] = []
    script = list(keys)

    def read_key(_fd: int, _timeout_ms: int | None) -> str:
        if not script:
            return "q"
        key = script.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    terminal = _FakeTerminal()
    source = MemoryByteSource(bytes(range(256)) * 4)
    run_main_loop(
        engine,
        ViewerSession(path=Path("data.bin"), source=source, theme=PLAIN_THEME, style=None),
        terminal,
        0,
        RuntimeLoopTiming(key_timeout_ms=10, notice_seconds=notice_seconds),
        RuntimeLoopCallbacks(
            read_key=read_key,
            render=lambda context, _source: rendered.append(context),
            terminal_size=lambda: os.terminal_size((80, lines)),
        ),
    )
    return rendered, terminal


class RuntimeLoopTests(unittest.TestCase):
    def test_visible_rows_follow_terminal_height(self) -> None:
        engine = NavigationEngine(1024, visible_lines=1)
        rendered, terminal = _run(engine, [], lines=10)

        self.assertEqual(engine.viewport.visible_lines, 8)
        self.assertEqual(rendered[0].model.visible_lines, 8)
        self.assertEqual(rendered[0].width, 80)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_keys_drive_engine_until_quit(self) -> None:
        engine = NavigationEngine(1024, visible_lines=8)
        rendered, _terminal = _run(engine, ["j", "PAGE_DOWN", "", ":", "q", "ENTER"])

        self.assertTrue(engine.quit_requested)
        self.assertEqual(engine.viewport.offset, 16 + 8 * 16)
        self.assertIn(":q", [f":{ctx.model.command_buffer}" for ctx in rendered if ctx.model.command_buffer])

    def test_idle_timeouts_do_not_redraw(self) -> None:
        engine = NavigationEngine(1024, visible_lines=8)
        rendered, _terminal = _run(engine, ["", "", ""])
        self.assertEqual(len(rendered), 1)

    def test_keyboard_interrupt_is_ignored(self) -> None:
        engine = NavigationEngine(1024, visible_lines=8)
        _run(engine, [KeyboardInterrupt(), "j"])
        self.assertEqual(engine.viewport.offset, 16)
        self.assertTrue(engine.quit_requested)

    def test_unbound_keys_are_ignored(self) -> None:
        engine = NavigationEngine(1024, visible_lines=8)
        rendered, _terminal = _run(engine, ["z", "\t"])
        self.assertEqual(engine.viewport.offset, 0)
        self.assertEqual(len(rendered), 1)

    def test_help_toggle_shrinks_hex_rows(self) -> None:
        engine = NavigationEngine(1024, visible_lines=8)
        rendered, _terminal = _run(engine, ["?", ""], lines=20)
        self.assertTrue(rendered[-1].model.show_help)
        self.assertEqual(rendered[-1].model.visible_lines, 18 - 5)

    def test_notices_expire(self) -> None:
        engine = NavigationEngine(1024, visible_lines=8)
        engine.set_notice(Notice(NOTICE_INFO, "hello"))
        rendered, _terminal = _run(engine, ["", ""], notice_seconds=0.0)
        self.assertEqual(rendered[0].model.notice, Notice(NOTICE_INFO, "hello"))
        self.assertIsNone(rendered[-1].model.notice)


if __name__ == "__main__":
    unittest.main()
