"""Main interactive event loop for the terminal UI.

Coordinates resize detection, notice expiry, rendering and input dispatch.
Behavior lives in the engine; this module only wires I/O to it.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..engine import KeyIntent, NavigationEngine
from ..keymap import key_to_intent
from ..mode import CommandMode, Notice
from ..render import RenderContext, content_rows_for_height
from ..source import ByteSource
from ..terminal import TerminalController
from ..ui_theme import UITheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_timeout_ms: int
    notice_seconds: float


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop``.

    Keeping terminal reads/writes injectable lets tests drive the loop with a
    scripted key sequence.
    """

    read_key: Callable[[int, int | None], str]
    render: Callable[[RenderContext, ByteSource], None]
    terminal_size: Callable[[], os.terminal_size]


@dataclass(frozen=True)
class ViewerSession:
    """Fixed per-session presentation inputs."""

    path: Path
    source: ByteSource
    theme: UITheme
    style: str | None


def run_main_loop(
    engine: NavigationEngine,
    session: ViewerSession,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive TUI loop until the engine reports a quit.

    Each iteration syncs visible rows with the terminal height, expires stale
    notices, redraws when needed, then waits briefly for one key.
    """
    ops = callbacks
    dirty = True
    last_columns = -1
    tracked_notice: Notice | None = None
    notice_until = 0.0

    with terminal.raw_mode():
        while True:
            term = ops.terminal_size()
            rows = content_rows_for_height(term.lines, engine.show_help)
            if rows != engine.viewport.visible_lines:
                engine.handle(KeyIntent.resize(rows))
                dirty = True
            if term.columns != last_columns:
                last_columns = term.columns
                dirty = True

            now = time.monotonic()
            if engine.notice is not tracked_notice:
                tracked_notice = engine.notice
                notice_until = now + timing.notice_seconds
            elif tracked_notice is not None and now >= notice_until:
                engine.clear_notice()
                tracked_notice = None
                dirty = True

            if dirty:
                context = RenderContext(
                    model=engine.render_model(),
                    path=session.path,
                    width=term.columns,
                    theme=session.theme,
                    style=session.style,
                )
                ops.render(context, session.source)
                dirty = False

            try:
                key = ops.read_key(stdin_fd, timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            intent = key_to_intent(key, isinstance(engine.mode, CommandMode))
            if intent is None:
                continue
            dirty = True
            if engine.handle(intent):
                logger.debug("quit requested")
                break
