"""Byte-level matchers used by the search engine.

Both matchers are pure functions over ``bytes``. Case-insensitive matching
folds ASCII letters only; other bytes compare verbatim.
"""

from __future__ import annotations

_ASCII_UPPER = bytes(range(ord("A"), ord("Z") + 1))
_ASCII_LOWER = bytes(range(ord("a"), ord("z") + 1))
_ASCII_FOLD = bytes.maketrans(_ASCII_UPPER, _ASCII_LOWER)


def fold_ascii(data: bytes) -> bytes:
    """Lower-case ASCII letters in ``data``."""
    return data.translate(_ASCII_FOLD)


def substring_match(entry: bytes, query: bytes, case_sensitive: bool = True) -> bool:
    """Return whether ``query`` occurs as a contiguous run inside ``entry``.

    Candidates are the positions of the query's first byte; each is verified
    against the remaining bytes. Positions too close to the end of ``entry``
    to hold the whole query are never considered.
    """
    if not query:
        return True
    if not case_sensitive:
        entry = fold_ascii(entry)
        query = fold_ascii(query)

    head = query[:1]
    last_start = len(entry) - len(query)
    pos = entry.find(head, 0, last_start + 1) if last_start >= 0 else -1
    while pos != -1:
        if entry.startswith(query, pos):
            return True
        pos = entry.find(head, pos + 1, last_start + 1)
    return False


def fuzzy_match(entry: bytes, query: bytes, case_sensitive: bool = True) -> bool:
    """Return whether ``query`` is an in-order subsequence of ``entry``."""
    if not case_sensitive:
        entry = fold_ascii(entry)
        query = fold_ascii(query)

    pos = 0
    for byte in query:
        found = entry.find(bytes((byte,)), pos)
        if found == -1:
            return False
        pos = found + 1
    return True
