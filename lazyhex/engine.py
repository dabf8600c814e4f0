"""Navigation engine: applies decoded intents to viewport and mode.

The engine is the only owner of ``ViewportState`` and ``Mode``. It processes
one intent at a time to completion and exposes a frozen ``RenderModel`` for
whatever draws the screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import mode as modes
from . import viewport as vp
from .mode import CommandMode, Mode, Notice
from .offsets import format_offset
from .viewport import ViewportState

logger = logging.getLogger(__name__)

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
HOME = "HOME"
END = "END"
ENTER_COMMAND_MODE = "ENTER_COMMAND_MODE"
COMMAND_CHAR = "COMMAND_CHAR"
COMMAND_BACKSPACE = "COMMAND_BACKSPACE"
COMMAND_ESCAPE = "COMMAND_ESCAPE"
COMMAND_ENTER = "COMMAND_ENTER"
COMMAND_CLEAR = "COMMAND_CLEAR"
QUIT = "QUIT"
RESIZE = "RESIZE"
TOGGLE_HELP = "TOGGLE_HELP"

MOVEMENT_KINDS = frozenset({UP, DOWN, LEFT, RIGHT, PAGE_UP, PAGE_DOWN, HOME, END})
COMMAND_KINDS = frozenset({COMMAND_CHAR, COMMAND_BACKSPACE, COMMAND_ESCAPE, COMMAND_ENTER, COMMAND_CLEAR})
INTENT_KINDS = MOVEMENT_KINDS | COMMAND_KINDS | {ENTER_COMMAND_MODE, QUIT, RESIZE, TOGGLE_HELP}

# Character-shaped intents and the text they type in command mode.
COMMAND_TEXT = {QUIT: "q", ENTER_COMMAND_MODE: ":", TOGGLE_HELP: "?"}


@dataclass(frozen=True)
class KeyIntent:
    """One already-decoded user action.

    ``char`` is only meaningful for ``COMMAND_CHAR`` and ``lines`` only for
    ``RESIZE``.
    """

    kind: str
    char: str = ""
    lines: int = 0

    def __post_init__(self) -> None:
        if self.kind not in INTENT_KINDS:
            raise ValueError(f"unknown intent kind: {self.kind!r}")
        if self.kind == COMMAND_CHAR and len(self.char) != 1:
            raise ValueError("COMMAND_CHAR needs exactly one character")

    @classmethod
    def command_char(cls, ch: str) -> KeyIntent:
        return cls(COMMAND_CHAR, char=ch)

    @classmethod
    def resize(cls, lines: int) -> KeyIntent:
        return cls(RESIZE, lines=lines)


@dataclass(frozen=True)
class RenderModel:
    """Read-only snapshot of everything a renderer needs."""

    visible_range: tuple[int, int]
    mode: Mode
    command_buffer: str | None
    notice: Notice | None
    offset: int
    file_length: int
    bytes_per_line: int
    visible_lines: int
    show_help: bool = False


class NavigationEngine:
    """Coordinate viewport movement, mode transitions and notices."""

    def __init__(
        self,
        file_length: int,
        start_offset: int = 0,
        bytes_per_line: int = vp.DEFAULT_BYTES_PER_LINE,
        visible_lines: int = 1,
    ) -> None:
        self._viewport = vp.create_viewport(
            file_length,
            start_offset=start_offset,
            bytes_per_line=bytes_per_line,
            visible_lines=visible_lines,
        )
        self._mode: Mode = modes.NORMAL
        self._notice: Notice | None = None
        self._quit_requested = False
        self.show_help = False

    @property
    def viewport(self) -> ViewportState:
        return self._viewport

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def notice(self) -> Notice | None:
        return self._notice

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def set_notice(self, notice: Notice | None) -> None:
        if notice is not None:
            logger.debug("notice [%s]: %s", notice.kind, notice.text)
        self._notice = notice

    def clear_notice(self) -> None:
        self._notice = None

    def _info(self, text: str) -> None:
        self.set_notice(Notice(modes.NOTICE_INFO, text))

    def handle(self, intent: KeyIntent) -> bool:
        """Apply one intent; return ``True`` once quit has been requested."""
        if intent.kind == RESIZE:
            self._viewport = vp.resize(self._viewport, intent.lines)
            logger.debug("resized to %d visible lines", self._viewport.visible_lines)
        elif isinstance(self._mode, CommandMode):
            self._handle_command_mode(intent)
        else:
            self._handle_normal_mode(intent)
        return self._quit_requested

    def _handle_command_mode(self, intent: KeyIntent) -> None:
        kind = intent.kind
        if kind == COMMAND_CHAR:
            self._mode = modes.append_char(self._mode, intent.char)
        elif kind in COMMAND_TEXT:
            # Keys bound in normal mode are plain text while typing a command.
            self._mode = modes.append_char(self._mode, COMMAND_TEXT[kind])
        elif kind == COMMAND_CLEAR:
            self._mode = modes.clear_buffer(self._mode)
        elif kind == COMMAND_BACKSPACE:
            self._mode = modes.backspace(self._mode)
        elif kind == COMMAND_ESCAPE:
            self._mode = modes.escape(self._mode)
            self._info("Normal mode")
        elif kind == COMMAND_ENTER:
            self._mode, outcome = modes.submit(self._mode)
            self._apply_outcome(outcome)

    def _handle_normal_mode(self, intent: KeyIntent) -> None:
        kind = intent.kind
        if kind == QUIT:
            self._quit_requested = True
        elif kind == ENTER_COMMAND_MODE:
            self._mode = modes.enter_command(self._mode)
            self.clear_notice()
        elif kind == TOGGLE_HELP:
            self.show_help = not self.show_help
        elif kind in MOVEMENT_KINDS:
            self._move(kind)

    def _move(self, kind: str) -> None:
        state = self._viewport
        if kind == UP:
            state = vp.move_by_lines(state, -1)
        elif kind == DOWN:
            state = vp.move_by_lines(state, 1)
        elif kind == LEFT:
            state = vp.move_by_bytes(state, -1)
        elif kind == RIGHT:
            state = vp.move_by_bytes(state, 1)
        elif kind == PAGE_UP:
            state = vp.move_by_pages(state, -1)
        elif kind == PAGE_DOWN:
            state = vp.move_by_pages(state, 1)
        elif kind == HOME:
            state = vp.goto_start(state)
        elif kind == END:
            state = vp.goto_end(state)
        self._viewport = state

        if kind == HOME:
            self._info("Moved to start of file")
        elif kind == END:
            self._info("Moved to end of file")
        else:
            self._info(f"Moved to {format_offset(state.offset)}")

    def _apply_outcome(self, outcome: modes.CommandOutcome) -> None:
        if outcome.quit:
            self._quit_requested = True
            return
        if outcome.goto_offset is not None:
            self._viewport = vp.goto_offset(self._viewport, outcome.goto_offset)
            self._info(f"Jumped to offset {format_offset(self._viewport.offset)}")
        elif outcome.page_delta is not None:
            self._viewport = vp.move_by_pages(self._viewport, outcome.page_delta)
            sign = "+" if outcome.page_delta >= 0 else "-"
            self._info(
                f"Moved {sign}{abs(outcome.page_delta)} pages to "
                f"{format_offset(self._viewport.offset)}"
            )
        if outcome.notice is not None:
            self.set_notice(outcome.notice)

    def render_model(self) -> RenderModel:
        state = self._viewport
        command_buffer = self._mode.buffer if isinstance(self._mode, CommandMode) else None
        return RenderModel(
            visible_range=vp.visible_range(state),
            mode=self._mode,
            command_buffer=command_buffer,
            notice=self._notice,
            offset=state.offset,
            file_length=state.file_length,
            bytes_per_line=state.bytes_per_line,
            visible_lines=state.visible_lines,
            show_help=self.show_help,
        )
