"""Byte sources the viewer reads from.

``ByteSource`` is the capability the renderer depends on: a fixed length and
bounded range reads. ``FileByteSource`` reads a real file with seek/read and
remembers the last range; ``MemoryByteSource`` serves an in-memory buffer.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Protocol

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    def length(self) -> int:
        ...

    def read_range(self, start: int, length: int) -> bytes:
        ...


def _bounded_length(total: int, start: int, length: int) -> int:
    if start < 0 or length <= 0 or start >= total:
        return 0
    return min(length, total - start)


class MemoryByteSource:
    """Serve bytes from a buffer already in memory."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def length(self) -> int:
        return len(self._data)

    def read_range(self, start: int, length: int) -> bytes:
        count = _bounded_length(len(self._data), start, length)
        return self._data[start : start + count]


class FileByteSource:
    """Seek-and-read access to a file whose length is fixed at open time.

    Reads never extend past the length captured when the file was opened,
    even if the file grows afterwards.
    """

    def __init__(self, handle: BinaryIO, path: Path | None = None) -> None:
        self._handle = handle
        self.path = path
        self._length = os.fstat(handle.fileno()).st_size
        self._cached_range: tuple[int, int] | None = None
        self._cached_bytes = b""

    @classmethod
    def open(cls, path: Path) -> FileByteSource:
        """Open ``path`` for reading; ``OSError`` propagates to the caller."""
        return cls(open(path, "rb"), path=path)

    def length(self) -> int:
        return self._length

    def read_range(self, start: int, length: int) -> bytes:
        count = _bounded_length(self._length, start, length)
        if count == 0:
            return b""
        if self._cached_range == (start, count):
            return self._cached_bytes

        self._handle.seek(start)
        chunks: list[bytes] = []
        remaining = count
        while remaining > 0:
            chunk = self._handle.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        logger.debug("read %d bytes at 0x%X", len(data), start)

        self._cached_range = (start, count)
        self._cached_bytes = data
        return data

    def close(self) -> None:
        self._handle.close()
        self._cached_range = None
        self._cached_bytes = b""

    def __enter__(self) -> FileByteSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
