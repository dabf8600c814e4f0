"""Hex/ASCII row formatting and Pygments colouring.

Rows look like ``00000010  48 65 6C 6C 6F  |Hello|``: an upper-case offset,
space-separated byte pairs padded to the full row width, then the ASCII
gutter with non-printable bytes shown as ``.``.
"""

from __future__ import annotations

from collections.abc import Iterator

from pygments import format as pygments_format
from pygments.formatters import Terminal256Formatter
from pygments.styles import get_style_by_name
from pygments.token import Comment, Name, Number, Punctuation, String, Whitespace
from pygments.util import ClassNotFound

from .source import ByteSource

DEFAULT_STYLE = "monokai"
OFFSET_DIGITS = 8
DUMP_CHUNK_LINES = 4096
NON_PRINTABLE = "."

Token = tuple[object, str]

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def is_printable_byte(value: int) -> bool:
    return 0x20 <= value <= 0x7E


def ascii_gutter(data: bytes) -> str:
    return "".join(chr(b) if is_printable_byte(b) else NON_PRINTABLE for b in data)


def _hex_cells_width(bytes_per_line: int) -> int:
    return max(0, bytes_per_line * 3 - 1)


def row_tokens(offset: int, data: bytes, bytes_per_line: int) -> list[Token]:
    """Tokenize one row so a Pygments formatter can colour it."""
    tokens: list[Token] = [(Name.Label, f"{offset:0{OFFSET_DIGITS}X}"), (Whitespace, "  ")]
    for idx, value in enumerate(data):
        if idx:
            tokens.append((Whitespace, " "))
        tokens.append((Number.Hex, f"{value:02X}"))
    used = len(data) * 3 - 1 if data else 0
    tokens.append((Whitespace, " " * (_hex_cells_width(bytes_per_line) - used) + "  "))

    tokens.append((Punctuation, "|"))
    run: list[str] = []
    run_printable = True
    for value in data:
        printable = is_printable_byte(value)
        if run and printable != run_printable:
            tokens.append((String if run_printable else Comment, "".join(run)))
            run = []
        run_printable = printable
        run.append(chr(value) if printable else NON_PRINTABLE)
    if run:
        tokens.append((String if run_printable else Comment, "".join(run)))
    tokens.append((Punctuation, "|"))
    return tokens


def format_row(offset: int, data: bytes, bytes_per_line: int) -> str:
    """Return the uncoloured text of one row."""
    return "".join(text for _, text in row_tokens(offset, data, bytes_per_line))


def row_width(bytes_per_line: int) -> int:
    """Column width of a full row for ``bytes_per_line`` bytes."""
    return OFFSET_DIGITS + 2 + _hex_cells_width(bytes_per_line) + 2 + bytes_per_line + 2


def normalize_style(style: str) -> str:
    """Validate a Pygments style name, falling back to ``DEFAULT_STYLE``."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_row(offset: int, data: bytes, bytes_per_line: int, style: str = DEFAULT_STYLE) -> str:
    """Return one row with ANSI colours from the Pygments ``style``."""
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_format(row_tokens(offset, data, bytes_per_line), formatter)


def render_rows(
    data: bytes,
    start: int,
    bytes_per_line: int,
    style: str | None = None,
) -> list[str]:
    """Split ``data`` (read from ``start``) into formatted rows.

    ``style=None`` produces plain text.
    """
    rows: list[str] = []
    for idx in range(0, len(data), bytes_per_line):
        chunk = data[idx : idx + bytes_per_line]
        if style is None:
            rows.append(format_row(start + idx, chunk, bytes_per_line))
        else:
            rows.append(colorize_row(start + idx, chunk, bytes_per_line, style))
    return rows


def iter_dump(
    source: ByteSource,
    start: int,
    bytes_per_line: int,
    style: str | None = None,
    chunk_lines: int = DUMP_CHUNK_LINES,
) -> Iterator[str]:
    """Yield rows from ``start`` to the end of ``source`` in bounded reads."""
    total = source.length()
    chunk_size = bytes_per_line * max(1, chunk_lines)
    offset = max(0, start)
    while offset < total:
        data = source.read_range(offset, chunk_size)
        if not data:
            break
        yield from render_rows(data, offset, bytes_per_line, style)
        offset += len(data)
