"""Offset token parsing and formatting.

Accepts decimal tokens and ``0x``/``0X``-prefixed hexadecimal tokens.
Parsing is pure; malformed input raises ``OffsetParseError``.
"""

from __future__ import annotations

MAX_OFFSET = 2**64 - 1

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class OffsetParseError(ValueError):
    """Raised when a token is not a valid unsigned byte offset."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"invalid offset {token!r}: {reason}")
        self.token = token
        self.reason = reason


def parse_offset(token: str) -> int:
    """Parse ``token`` into an unsigned byte offset.

    ``int()`` alone is too lenient here: it accepts signs, underscores and
    non-ASCII digits, none of which are valid offsets.
    """
    text = token.strip()
    if not text:
        raise OffsetParseError(token, "empty offset")

    if text[:2] in {"0x", "0X"}:
        digits = text[2:]
        allowed = _HEX_DIGITS
        base = 16
    else:
        digits = text
        allowed = _DECIMAL_DIGITS
        base = 10

    if not digits:
        raise OffsetParseError(token, "missing hex digits")
    if any(ch not in allowed for ch in digits):
        kind = "hexadecimal" if base == 16 else "decimal"
        raise OffsetParseError(token, f"not a {kind} number")

    value = int(digits, base)
    if value > MAX_OFFSET:
        raise OffsetParseError(token, "offset out of range")
    return value


def format_offset(offset: int) -> str:
    """Render ``offset`` the way notices and the status line show it."""
    return f"0x{offset:X}"
