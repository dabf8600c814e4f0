"""lazyhex: page through the bytes of a file in the terminal."""

from __future__ import annotations

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> None:
    """Run the ``lazyhex`` command; imported lazily so the package imports fast."""
    from .cli import main as _main

    _main(argv)


__all__ = ["__version__", "main"]
