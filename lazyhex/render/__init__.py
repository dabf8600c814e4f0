"""Rendering engine for the hex view.

Turns a ``RenderModel`` plus the bytes it points at into one ANSI frame:
header, hex rows, optional help panel and a status/command footer.
Frame composition is side-effect free; ``render_frame`` writes it out.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..ansi import clip_ansi_line, pad_ansi_line
from ..engine import RenderModel
from ..hexdump import render_rows
from ..offsets import format_offset
from ..source import ByteSource
from ..ui_theme import UITheme
from .help import help_panel_lines, help_panel_row_count

APP_TITLE = "lazyhex"
EMPTY_FILE_TEXT = "<empty file>"


@dataclass(frozen=True)
class RenderContext:
    model: RenderModel
    path: Path
    width: int
    theme: UITheme
    style: str | None = None


def build_status_line(left_text: str, width: int, right_text: str = "│ ? Help") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _position_percent(model: RenderModel) -> float:
    if model.file_length <= 0:
        return 100.0
    return (model.visible_range[1] / model.file_length) * 100.0


def header_text(path: Path, file_length: int) -> str:
    return f"{APP_TITLE} - {path} (Size: {file_length} bytes)"


def footer_text(model: RenderModel) -> str:
    """Plain footer text for the current mode and notice."""
    if model.command_buffer is not None:
        return f":{model.command_buffer}"
    if model.notice is not None:
        return model.notice.text
    return f"Offset: {format_offset(model.offset)} | Press ':' for command, 'q' to quit, '?' for help"


def _footer_line(model: RenderModel, width: int, theme: UITheme) -> str:
    usable = max(1, width - 1)
    if model.command_buffer is not None:
        prompt = f"{theme.prompt}:{theme.reset}"
        cursor = f"{theme.cursor}_{theme.reset}" if theme.cursor else "_"
        return clip_ansi_line(f"{prompt}{model.command_buffer}{cursor}", usable)

    start, end = model.visible_range
    right = f"│ {start}-{end}/{model.file_length} {_position_percent(model):5.1f}%"
    status = build_status_line(footer_text(model), width, right)
    style = theme.status
    if model.notice is not None and model.notice.is_error:
        style = theme.error
    return f"{style}{status}{theme.reset}"


def build_frame(context: RenderContext, source: ByteSource) -> str:
    """Compose a full frame for ``context`` reading visible bytes from ``source``."""
    model = context.model
    theme = context.theme
    width = max(1, context.width)
    line_width = max(1, width - 1)
    out: list[str] = ["\033[H\033[J"]

    header = pad_ansi_line(header_text(context.path, model.file_length), line_width)
    out.append(f"{theme.title}{header}{theme.reset}\r\n")

    start, end = model.visible_range
    rows = render_rows(source.read_range(start, end - start), start, model.bytes_per_line, context.style)
    if model.file_length == 0:
        rows = [f"{theme.dim}{EMPTY_FILE_TEXT}{theme.reset}"]
    for row in range(model.visible_lines):
        if row < len(rows):
            text = clip_ansi_line(rows[row], line_width)
            out.append(text)
            if "\033" in text:
                out.append("\033[0m")
        out.append("\r\n")

    if model.show_help:
        for line in help_panel_lines(theme):
            text = clip_ansi_line(line, line_width)
            out.append(text)
            if "\033" in text:
                out.append("\033[0m")
            out.append("\r\n")

    out.append(_footer_line(model, width, theme))
    return "".join(out)


def content_rows_for_height(term_lines: int, show_help: bool) -> int:
    """Hex rows that fit under the header and above help panel and footer."""
    return max(1, term_lines - 2 - help_panel_row_count(show_help))


def render_frame(context: RenderContext, source: ByteSource) -> None:
    frame = build_frame(context, source)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_frame",
    "build_status_line",
    "content_rows_for_height",
    "footer_text",
    "header_text",
    "render_frame",
]
