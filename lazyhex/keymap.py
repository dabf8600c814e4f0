"""Key-token to intent mapping.

Normal mode uses a fixed binding table; command mode turns printable keys
into ``COMMAND_CHAR`` intents so that every letter (``q`` included) is text.
"""

from __future__ import annotations

from . import engine
from .engine import KeyIntent

NORMAL_KEY_BINDINGS: dict[str, str] = {
    "UP": engine.UP,
    "k": engine.UP,
    "DOWN": engine.DOWN,
    "j": engine.DOWN,
    "LEFT": engine.LEFT,
    "h": engine.LEFT,
    "RIGHT": engine.RIGHT,
    "l": engine.RIGHT,
    "PAGE_UP": engine.PAGE_UP,
    "b": engine.PAGE_UP,
    "PAGE_DOWN": engine.PAGE_DOWN,
    " ": engine.PAGE_DOWN,
    "f": engine.PAGE_DOWN,
    "HOME": engine.HOME,
    "g": engine.HOME,
    "END": engine.END,
    "G": engine.END,
    ":": engine.ENTER_COMMAND_MODE,
    "q": engine.QUIT,
    "Q": engine.QUIT,
    "CTRL_C": engine.QUIT,
    "?": engine.TOGGLE_HELP,
}

COMMAND_KEY_BINDINGS: dict[str, str] = {
    "ENTER": engine.COMMAND_ENTER,
    "ESC": engine.COMMAND_ESCAPE,
    "CTRL_C": engine.COMMAND_ESCAPE,
    "CTRL_U": engine.COMMAND_CLEAR,
    "BACKSPACE": engine.COMMAND_BACKSPACE,
}


def _is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def key_to_intent(key: str, command_active: bool) -> KeyIntent | None:
    """Map one key token to an intent, or ``None`` when the key is unbound."""
    if not key:
        return None
    if command_active:
        kind = COMMAND_KEY_BINDINGS.get(key)
        if kind is not None:
            return KeyIntent(kind)
        if _is_text_key(key):
            return KeyIntent.command_char(key)
        return None
    kind = NORMAL_KEY_BINDINGS.get(key)
    if kind is None:
        return None
    return KeyIntent(kind)
