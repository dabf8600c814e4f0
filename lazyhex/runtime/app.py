"""Runtime composition layer for lazyhex.

Builds the engine for an opened byte source, wires terminal I/O into the
loop, or prints a plain dump when there is no interactive terminal.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..engine import NavigationEngine
from ..hexdump import iter_dump
from ..input import read_key
from ..mode import NOTICE_INFO, Notice
from ..render import content_rows_for_height, render_frame
from ..source import ByteSource
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from ..viewport import create_viewport
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, ViewerSession, run_main_loop

logger = logging.getLogger(__name__)

KEY_TIMEOUT_MS = 120
NOTICE_SECONDS = 5.0


def startup_notice(path: Path, file_length: int) -> Notice:
    if file_length == 0:
        return Notice(NOTICE_INFO, f"File: '{path}' is empty")
    return Notice(NOTICE_INFO, f"File: '{path}' (Size: {file_length} bytes)")


def dump_source(
    source: ByteSource,
    start_offset: int,
    bytes_per_line: int,
    style: str | None,
) -> None:
    """Write rows from ``start_offset`` to EOF straight to stdout."""
    for row in iter_dump(source, start_offset, bytes_per_line, style):
        sys.stdout.write(row)
        if style is not None:
            sys.stdout.write("\033[0m")
        sys.stdout.write("\n")
    sys.stdout.flush()


def run_viewer(
    source: ByteSource,
    path: Path,
    start_offset: int,
    bytes_per_line: int,
    style: str,
    no_color: bool,
    nopager: bool,
    theme_name: str | None = None,
) -> None:
    """Run the interactive viewer over ``source`` or dump it when non-interactive."""
    if nopager or not os.isatty(sys.stdin.fileno()):
        colored = not no_color and os.isatty(sys.stdout.fileno())
        # Same start clamping as the interactive view.
        start = create_viewport(source.length(), start_offset, bytes_per_line).offset
        dump_source(source, start, bytes_per_line, style if colored else None)
        return

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=sys.stdout.fileno())
    term = terminal.size()
    file_length = source.length()
    engine = NavigationEngine(
        file_length,
        start_offset=start_offset,
        bytes_per_line=bytes_per_line,
        visible_lines=content_rows_for_height(term.lines, False),
    )
    engine.set_notice(startup_notice(path, file_length))
    logger.debug(
        "starting viewer on %s (%d bytes) at offset %d, %d bytes per line",
        path,
        file_length,
        engine.viewport.offset,
        bytes_per_line,
    )

    session = ViewerSession(
        path=path,
        source=source,
        theme=resolve_theme(theme_name, no_color=no_color),
        style=None if no_color else style,
    )
    run_main_loop(
        engine,
        session,
        terminal,
        stdin_fd,
        RuntimeLoopTiming(key_timeout_ms=KEY_TIMEOUT_MS, notice_seconds=NOTICE_SECONDS),
        RuntimeLoopCallbacks(
            read_key=read_key,
            render=render_frame,
            terminal_size=terminal.size,
        ),
    )
