"""Viewport model: which bytes are on screen and how position changes.

Every operation is a pure transition returning a new ``ViewportState``.
All results are clamped so the offset never leaves the file and never goes
negative; an empty file always reports offset ``0``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_BYTES_PER_LINE = 16


@dataclass(frozen=True)
class ViewportState:
    """Position of the viewport over a file of fixed length."""

    offset: int
    bytes_per_line: int
    visible_lines: int
    file_length: int

    @property
    def page_size(self) -> int:
        return self.bytes_per_line * self.visible_lines


def max_offset(state: ViewportState) -> int:
    """Largest offset that still points at a byte of the file."""
    return max(0, state.file_length - 1)


def end_offset(state: ViewportState) -> int:
    """Offset used by ``goto_end`` and as the forward paging limit.

    This is the start of the last full line of the file, so the end of the
    file is always shown on the top row rather than scrolled off-screen.
    """
    return max(0, state.file_length - state.bytes_per_line)


def _clamp(state: ViewportState, offset: int) -> ViewportState:
    return replace(state, offset=max(0, min(offset, max_offset(state))))


def create_viewport(
    file_length: int,
    start_offset: int = 0,
    bytes_per_line: int = DEFAULT_BYTES_PER_LINE,
    visible_lines: int = 1,
) -> ViewportState:
    """Build the initial viewport, clamping ``start_offset`` to the file."""
    if file_length < 0:
        raise ValueError("file length must be >= 0")
    state = ViewportState(
        offset=max(0, start_offset),
        bytes_per_line=DEFAULT_BYTES_PER_LINE,
        visible_lines=max(1, visible_lines),
        file_length=file_length,
    )
    return set_bytes_per_line(state, bytes_per_line)


def set_bytes_per_line(state: ViewportState, bytes_per_line: int) -> ViewportState:
    """Apply a row width and re-clamp the offset against it."""
    if bytes_per_line < 1:
        raise ValueError("bytes per line must be >= 1")
    return _clamp(replace(state, bytes_per_line=bytes_per_line), state.offset)


def move_by_bytes(state: ViewportState, delta: int) -> ViewportState:
    return _clamp(state, state.offset + delta)


def move_by_lines(state: ViewportState, delta: int) -> ViewportState:
    return _clamp(state, state.offset + delta * state.bytes_per_line)


def move_by_pages(state: ViewportState, delta: int) -> ViewportState:
    """Shift by whole pages.

    Paging forward stops at ``end_offset``. A viewport already past that
    point (placed there by an explicit goto) stays where it is instead of
    jumping backwards.
    """
    target = state.offset + delta * state.page_size
    if delta > 0:
        target = min(target, max(end_offset(state), state.offset))
    return _clamp(state, target)


def goto_start(state: ViewportState) -> ViewportState:
    return replace(state, offset=0)


def goto_end(state: ViewportState) -> ViewportState:
    return _clamp(state, end_offset(state))


def goto_offset(state: ViewportState, offset: int) -> ViewportState:
    return _clamp(state, offset)


def visible_range(state: ViewportState) -> tuple[int, int]:
    """Return the half-open ``(start, end)`` byte range shown on screen."""
    start = state.offset
    end = min(start + state.page_size, state.file_length)
    return start, max(start, end)


def resize(state: ViewportState, visible_lines: int) -> ViewportState:
    """Change the number of rows on screen; the offset is left alone."""
    return replace(state, visible_lines=max(1, visible_lines))
