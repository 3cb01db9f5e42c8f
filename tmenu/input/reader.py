"""Low-level terminal input decoding.

Reads raw bytes from a keyboard file descriptor and translates them into
key tokens. Recognized CSI/SS3 sequences become navigation tokens; anything
else that starts with ESC collapses to ``NONE``.
"""

from __future__ import annotations

import os
import select

from . import keys

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_CSI_PARAMETER_BYTES = 16

_CSI_KEYS: dict[tuple[bytes, bytes], str] = {
    (b"", b"A"): keys.UP,
    (b"", b"B"): keys.DOWN,
    (b"", b"C"): keys.RIGHT,
    (b"", b"D"): keys.LEFT,
    (b"", b"H"): keys.HOME,
    (b"", b"F"): keys.END,
    (b"1", b"~"): keys.HOME,
    (b"7", b"~"): keys.HOME,
    (b"4", b"~"): keys.END,
    (b"8", b"~"): keys.END,
    (b"5", b"~"): keys.PAGE_UP,
    (b"6", b"~"): keys.PAGE_DOWN,
}

_SS3_KEYS: dict[bytes, str] = {
    b"A": keys.UP,
    b"B": keys.DOWN,
    b"C": keys.RIGHT,
    b"D": keys.LEFT,
    b"H": keys.HOME,
    b"F": keys.END,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _decode_csi(fd: int) -> str:
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return keys.NONE
        if 0x40 <= part[0] <= 0x7E:
            return _CSI_KEYS.get((params, part), keys.NONE)
        params += part
        if len(params) > MAX_CSI_PARAMETER_BYTES:
            return keys.NONE


def read_key(fd: int) -> str:
    """Block for the next key on ``fd`` and return its token.

    End of stream yields ``EOF``. A lone ESC with no follow-up byte inside
    ``ESC_SEQUENCE_TIMEOUT_MS`` yields ``ESC``.
    """
    ch = os.read(fd, 1)
    if not ch:
        return keys.EOF
    if ch != b"\x1b":
        return chr(ch[0])

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return keys.ESC
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return keys.NONE
        return _SS3_KEYS.get(final, keys.NONE)
    return keys.NONE
