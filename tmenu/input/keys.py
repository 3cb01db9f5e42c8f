"""Logical key tokens produced by the decoder.

Plain input bytes pass through as one-character strings (``chr(byte)``), so
``"a"`` is the letter and ``"\\x03"`` is Ctrl-C. Decoded escape sequences and
stream conditions use the multi-character names below.
"""

from __future__ import annotations

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
HOME = "HOME"
END = "END"
ESC = "ESC"
NONE = "NONE"
EOF = "EOF"

TAB = "\t"
ENTER_CR = "\r"
ENTER_LF = "\n"
BACKSPACE_KEYS = frozenset({"\x7f", "\x08"})


def ctrl(letter: str) -> str:
    """Return the control character produced by Ctrl+``letter``."""
    return chr(ord(letter.upper()) & 0x1F)


def is_printable_byte(key: str) -> bool:
    """Whether ``key`` is a single printable ASCII byte (space through ``~``)."""
    return len(key) == 1 and 0x20 <= ord(key) <= 0x7E


def key_byte(key: str) -> int:
    """Raw byte value of a pass-through key."""
    return ord(key)
