"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and the cursor/paging keys of common terminals.
Escape sequences for keys the viewer does not bind are consumed whole and
come back as ``""``, the same token as an idle timeout.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
# Longest parameter/intermediate run accepted before a CSI is dropped.
MAX_CSI_LENGTH = 16
_PENDING_BYTES: list[bytes] = []

# ESC [ <n> ~ sequences (vt220 style), keyed by the first parameter.
_TILDE_KEYS = {
    "1": "HOME",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
}

# ESC [ <letter> and ESC O <letter> sequences.
_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, first: bytes) -> str:
    """Complete a multi-byte UTF-8 character started by ``first``."""
    lead = first[0]
    if lead >= 0xF0:
        needed = 3
    elif lead >= 0xE0:
        needed = 2
    elif lead >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = first
    for _ in range(needed):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> str:
    """Decode the rest of ``ESC [``, reading through the final byte.

    Modifier parameters (``ESC [ 1 ; 5 C``, ``ESC [ 5 ; 3 ~``) are ignored, so
    modified keys decode to the plain key.
    """
    params = bytearray()
    while True:
        byte = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if byte is None:
            # A bare ESC [ is Alt+[; a truncated sequence is dropped.
            return "" if params else "ESC"
        if 0x40 <= byte[0] <= 0x7E:
            break
        params += byte
        if len(params) > MAX_CSI_LENGTH:
            return ""

    if byte == b"~":
        first = params.decode("ascii", errors="replace").split(";")[0]
        return _TILDE_KEYS.get(first, "")
    return _FINAL_KEYS.get(byte, "")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``; ``""`` means nothing arrived in time."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\x03":
        return "CTRL_C"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\x15":
        return "CTRL_U"
    if ch in {b"\r", b"\n"}:
        return "ENTER"

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _read_utf8_tail(fd, ch)
        return ch.decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            _PENDING_BYTES.append(seq)
            return "ESC"
        return _FINAL_KEYS.get(final, "")
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    return _read_csi(fd)
