"""Normal/command mode state machine and command-line execution.

Modes are a tagged variant: ``NormalMode`` or ``CommandMode(buffer)``.
A command buffer therefore cannot exist outside command mode.
Transitions are pure; ``execute_command`` only describes what should happen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .offsets import OffsetParseError, parse_offset

logger = logging.getLogger(__name__)

NOTICE_INFO = "info"
NOTICE_INVALID_OFFSET = "invalid_offset"
NOTICE_UNKNOWN_COMMAND = "unknown_command"

QUIT_COMMANDS = frozenset({"q", "quit"})
GOTO_COMMANDS = frozenset({"g", "goto"})
PAGE_COMMAND = "page"


@dataclass(frozen=True)
class NormalMode:
    pass


@dataclass(frozen=True)
class CommandMode:
    buffer: str = ""


Mode = Union[NormalMode, CommandMode]

NORMAL = NormalMode()


@dataclass(frozen=True)
class Notice:
    """Short recoverable-error or status message shown in the footer."""

    kind: str
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind != NOTICE_INFO


@dataclass(frozen=True)
class CommandOutcome:
    """Effect of executing one command line.

    At most one of ``goto_offset``/``page_delta`` is set. ``quit`` wins over
    everything else.
    """

    quit: bool = False
    goto_offset: int | None = None
    page_delta: int | None = None
    notice: Notice | None = None


def enter_command(mode: Mode) -> Mode:
    if isinstance(mode, CommandMode):
        return mode
    return CommandMode("")


def append_char(mode: Mode, ch: str) -> Mode:
    if not isinstance(mode, CommandMode):
        return mode
    return CommandMode(mode.buffer + ch)


def backspace(mode: Mode) -> Mode:
    """Delete the last buffer character; an empty buffer leaves command mode."""
    if not isinstance(mode, CommandMode):
        return mode
    if not mode.buffer:
        return NORMAL
    return CommandMode(mode.buffer[:-1])


def clear_buffer(mode: Mode) -> Mode:
    if not isinstance(mode, CommandMode):
        return mode
    return CommandMode("")


def escape(mode: Mode) -> Mode:
    return NORMAL


def submit(mode: Mode) -> tuple[Mode, CommandOutcome]:
    """Leave command mode and execute whatever was typed."""
    if not isinstance(mode, CommandMode):
        return mode, CommandOutcome()
    return NORMAL, execute_command(mode.buffer)


def _invalid_offset(error: OffsetParseError) -> CommandOutcome:
    return CommandOutcome(notice=Notice(NOTICE_INVALID_OFFSET, f"Error: {error}"))


def _unknown_command(text: str) -> CommandOutcome:
    return CommandOutcome(notice=Notice(NOTICE_UNKNOWN_COMMAND, text))


def _goto_outcome(token: str) -> CommandOutcome:
    try:
        target = parse_offset(token)
    except OffsetParseError as exc:
        return _invalid_offset(exc)
    return CommandOutcome(goto_offset=target)


def _page_outcome(args: list[str]) -> CommandOutcome:
    usage = "Error: Invalid page command. Use 'page', 'page +N' or 'page -N'."
    if not args:
        return CommandOutcome(page_delta=1)
    if len(args) != 1:
        return _unknown_command(usage)
    arg = args[0]
    sign = arg[:1]
    count = arg[1:]
    if sign not in {"+", "-"} or not count.isascii() or not count.isdigit():
        return _unknown_command(usage)
    pages = int(count)
    return CommandOutcome(page_delta=pages if sign == "+" else -pages)


def execute_command(buffer: str) -> CommandOutcome:
    """Interpret one command line.

    Recognized forms: ``q``/``quit``, ``g <offset>``/``goto <offset>``,
    ``page [+N|-N]`` and a bare offset. Names are case-sensitive.
    """
    text = buffer.strip()
    logger.debug("executing command %r", text)
    if not text:
        return CommandOutcome(notice=Notice(NOTICE_INFO, "No command entered."))

    parts = text.split()
    name, args = parts[0], parts[1:]

    if name in QUIT_COMMANDS and not args:
        return CommandOutcome(quit=True)

    if name in GOTO_COMMANDS:
        if len(args) != 1:
            return _invalid_offset(
                OffsetParseError(" ".join(args), f"usage: {name} <offset>")
            )
        return _goto_outcome(args[0])

    if name == PAGE_COMMAND:
        return _page_outcome(args)

    if not args:
        try:
            target = parse_offset(name)
        except OffsetParseError:
            pass
        else:
            return CommandOutcome(goto_offset=target)

    return _unknown_command(f"Unknown command: {text}")
