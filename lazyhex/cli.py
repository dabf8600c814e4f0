"""Command-line front door for lazyhex.

Parses CLI options, merges them with config defaults and opens the file.
Then dispatches into the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_bytes_per_line, load_style_name, load_theme_name
from .hexdump import DEFAULT_STYLE
from .offsets import OffsetParseError, parse_offset
from .runtime import run_viewer
from .source import FileByteSource
from .ui_theme import theme_names
from .viewport import DEFAULT_BYTES_PER_LINE

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _offset(value: str) -> int:
    """argparse type for decimal or ``0x`` hexadecimal offsets."""
    try:
        return parse_offset(value)
    except OffsetParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyhex",
        description="A hex viewer for binary files in the terminal.",
    )
    parser.add_argument("path", metavar="FILE", help="Path to the file to view.")
    parser.add_argument(
        "-s",
        "--start",
        type=_offset,
        default=0,
        help="Starting offset, decimal or hexadecimal (e.g. 0x1A or 26).",
    )
    parser.add_argument(
        "-w",
        "--bytes-per-line",
        type=_positive_int,
        default=None,
        help=f"Bytes shown per line (default: config or {DEFAULT_BYTES_PER_LINE}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name used to colour rows.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print a hex dump directly without the viewer.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; without one nothing is configured."""
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch lazyhex on one file.

    Missing paths, directories and unreadable files end the process with a
    message before any terminal state is touched.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if path.is_dir():
        raise SystemExit(f"Not a file: {path}")

    bytes_per_line = args.bytes_per_line or load_bytes_per_line() or DEFAULT_BYTES_PER_LINE
    style = args.style or load_style_name() or DEFAULT_STYLE
    theme_name = args.theme or load_theme_name()

    try:
        source = FileByteSource.open(path)
    except OSError as exc:
        raise SystemExit(f"Failed to open file '{path}': {exc.strerror or exc}") from exc

    with source:
        run_viewer(source, path, args.start, bytes_per_line, style, args.no_color, args.nopager, theme_name)


if __name__ == "__main__":
    main()
