"""Raw-mode and alternate-screen handling for one viewer session."""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

# Alternate screen on, cursor hidden; and the reverse, in reverse order.
ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_SCREEN = b"\x1b[?25h\x1b[?1049l"
FALLBACK_SIZE = (80, 24)


class TerminalController:
    """Switch the controlling terminal into the viewer's screen and back.

    The tty attributes in effect at construction are what ``leave`` restores,
    so build the controller before anything else touches the terminal.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._original_attrs = termios.tcgetattr(stdin_fd)

    def enter(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_SCREEN)

    def leave(self) -> None:
        os.write(self.stdout_fd, LEAVE_SCREEN)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._original_attrs)

    def size(self) -> os.terminal_size:
        return shutil.get_terminal_size(FALLBACK_SIZE)

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the body on the viewer screen; the terminal is restored on any exit."""
        self.enter()
        try:
            yield self
        finally:
            self.leave()
