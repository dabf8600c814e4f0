"""Help panel content.

Stores keybinding text for the normal-mode help panel. Presentation only.
"""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_HEADING = "KEYS"

HELP_ENTRIES: tuple[tuple[tuple[str, str], ...], ...] = (
    (("Up/Down k/j", "line"), ("Left/Right h/l", "byte")),
    (("PgUp/PgDn b/Space", "page"), ("Home/End g/G", "start/end")),
    ((":g 0x10", "goto offset"), (":page +N/-N", "pages")),
    (("?", "help"), ("q :q", "quit")),
)


def help_panel_lines(theme: UITheme) -> list[str]:
    """Return styled help rows, heading first."""
    lines = [f"{theme.heading}{HELP_HEADING}{theme.reset}"]
    for entries in HELP_ENTRIES:
        parts = [f"{theme.key}{key}{theme.reset} {theme.dim}{label}{theme.reset}" for key, label in entries]
        lines.append("  ".join(parts))
    return lines


def help_panel_row_count(show_help: bool) -> int:
    return 1 + len(HELP_ENTRIES) if show_help else 0
