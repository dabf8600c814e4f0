"""Column measurement for lines that carry ANSI colour codes.

Escape sequences occupy no columns and are never cut in half.
"""

from __future__ import annotations

import re
import unicodedata

CSI_RE = re.compile(r"(\x1b\[[0-9;?]*[ -/]*[@-~])")


def char_width(ch: str) -> int:
    """Columns taken by ``ch``: 0 for combining marks, 2 for wide glyphs."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def strip_ansi(text: str) -> str:
    return CSI_RE.sub("", text)


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to ``max_cols`` visible columns, keeping every escape."""
    if max_cols <= 0:
        return ""
    kept: list[str] = []
    used = 0
    full = False
    # re.split with a capture group alternates plain text and escapes.
    for idx, part in enumerate(CSI_RE.split(text)):
        if idx % 2:
            kept.append(part)
            continue
        if full:
            continue
        for ch in part:
            used += char_width(ch)
            if used > max_cols:
                full = True
                break
            kept.append(ch)
    return "".join(kept)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns, then right-pad it with spaces."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
