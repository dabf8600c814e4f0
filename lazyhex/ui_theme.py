"""ANSI palettes for the viewer chrome.

A theme colours the title bar, footer, command prompt and help panel. The hex
rows are coloured separately by the Pygments style.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UITheme:
    name: str
    reset: str
    title: str
    status: str
    prompt: str
    cursor: str
    error: str
    heading: str
    key: str
    dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;7m",
    status="\033[1m",
    prompt="\033[1;38;5;214m",
    cursor="\033[7m",
    error="\033[1;38;5;196m",
    heading="\033[1;4m",
    key="\033[38;5;214m",
    dim="\033[2m",
)

AMBER_THEME = UITheme(
    name="amber",
    reset="\033[0m",
    title="\033[1;38;5;16;48;5;214m",
    status="\033[38;5;214m",
    prompt="\033[1;38;5;220m",
    cursor="\033[48;5;214m",
    error="\033[1;38;5;160m",
    heading="\033[1;38;5;220m",
    key="\033[38;5;222m",
    dim="\033[2;38;5;136m",
)

# Used for --no-color: every escape is empty so frames are plain text.
PLAIN_THEME = UITheme("plain", "", "", "", "", "", "", "", "", "")

THEMES = {theme.name: theme for theme in (DEFAULT_THEME, AMBER_THEME)}


def theme_names() -> list[str]:
    return sorted(THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Pick the palette for ``name``.

    ``no_color`` wins over any name. Unknown names fall back to the default
    theme rather than failing at startup.
    """
    if no_color:
        return PLAIN_THEME
    if not name:
        return DEFAULT_THEME
    theme = THEMES.get(name.strip().lower())
    if theme is None:
        logger.debug("unknown theme %r, using %s", name, DEFAULT_THEME.name)
        return DEFAULT_THEME
    return theme
