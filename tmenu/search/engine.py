"""Directional nearest-match search over indexed entries.

Searches never wrap around and never rank: they report the ``count``-th entry
matching the live query when walking from ``start`` in one direction. Calls
keep no cursor between them, so callers can rebuild a whole context window by
asking for successive counts.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol

from .matching import fuzzy_match, substring_match

QUERY_CAPACITY = 1023


class Direction(IntEnum):
    BACKWARD = -1
    FORWARD = 1


class Algorithm(Enum):
    SUBSTRING = "substring"
    FUZZY = "fuzzy"

    @property
    def tag(self) -> str:
        return "SUB" if self is Algorithm.SUBSTRING else "FUZ"

    def toggled(self) -> Algorithm:
        return Algorithm.FUZZY if self is Algorithm.SUBSTRING else Algorithm.SUBSTRING


class CaseRule(Enum):
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    @property
    def flag(self) -> str:
        return "I" if self is CaseRule.SENSITIVE else "i"

    def toggled(self) -> CaseRule:
        return CaseRule.INSENSITIVE if self is CaseRule.SENSITIVE else CaseRule.SENSITIVE


_MATCHERS: dict[Algorithm, Callable[[bytes, bytes, bool], bool]] = {
    Algorithm.SUBSTRING: substring_match,
    Algorithm.FUZZY: fuzzy_match,
}


@dataclass
class SearchConfig:
    """Active matching rules, toggled while searching."""

    algorithm: Algorithm = Algorithm.SUBSTRING
    case: CaseRule = CaseRule.SENSITIVE


class SearchQuery:
    """Capacity-bounded byte buffer edited one byte at a time."""

    def __init__(self, initial: bytes = b"", capacity: int = QUERY_CAPACITY) -> None:
        self.capacity = max(0, capacity)
        self._buf = bytearray(initial[: self.capacity])

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def text(self) -> bytes:
        return bytes(self._buf)

    def append(self, byte: int) -> bool:
        """Append one byte; return ``False`` (unchanged) when at capacity."""
        if len(self._buf) >= self.capacity:
            return False
        self._buf.append(byte)
        return True

    def pop(self) -> bool:
        """Remove the last byte; return ``False`` when already empty."""
        if not self._buf:
            return False
        self._buf.pop()
        return True

    def clear(self) -> None:
        self._buf.clear()


class EntrySource(Protocol):
    def __len__(self) -> int: ...

    def read(self, index: int) -> bytes: ...


class SearchEngine:
    """Nearest-match queries over ``entries`` using a shared query and config."""

    def __init__(self, entries: EntrySource, query: SearchQuery, config: SearchConfig) -> None:
        self.entries = entries
        self.query = query
        self.config = config

    def matches(self, index: int) -> bool:
        """Test one entry's display content against the active rules."""
        query = self.query.text
        if not query:
            return True
        matcher = _MATCHERS[self.config.algorithm]
        return matcher(self.entries.read(index), query, self.config.case is CaseRule.SENSITIVE)

    def find_match(
        self,
        start: int,
        direction: Direction,
        skip_self: bool,
        count: int,
        fallback: int | None,
    ) -> int | None:
        """Return the ``count``-th match walking from ``start``, else ``fallback``.

        With ``skip_self`` the scan begins one step past ``start``. With an
        empty query every entry matches, so the result is plain offset
        arithmetic bounds-checked against the entry range.
        """
        total = len(self.entries)
        count = max(1, count)
        step = int(direction)
        if not self.query.text:
            index = start + step * (int(skip_self) + count - 1)
            if index < 0 or index >= total:
                return fallback
            return index

        found = 0
        index = start + step if skip_self else start
        while 0 <= index < total:
            if self.matches(index):
                found += 1
                if found == count:
                    return index
            index += step
        return fallback

    def step(self, start: int, direction: Direction, count: int) -> int:
        """Move up to ``count`` matches away from ``start``, clamped at the last one reached.

        Returns ``start`` when no match exists in ``direction``.
        """
        total = len(self.entries)
        count = max(1, count)
        move = int(direction)
        if not self.query.text:
            return max(0, min(total - 1, start + move * count))

        reached = start
        found = 0
        index = start + move
        while 0 <= index < total and found < count:
            if self.matches(index):
                found += 1
                reached = index
            index += move
        return reached

    def snap(self, start: int) -> int | None:
        """Nearest match at or after ``start``, else nearest before it, else ``None``."""
        total = len(self.entries)
        if total == 0:
            return None
        start = max(0, min(total - 1, start))
        index = self.find_match(start, Direction.FORWARD, False, 1, None)
        if index is None:
            index = self.find_match(start, Direction.BACKWARD, True, 1, None)
        return index

    def first(self) -> int | None:
        if not len(self.entries):
            return None
        return self.find_match(0, Direction.FORWARD, False, 1, None)

    def last(self) -> int | None:
        total = len(self.entries)
        if not total:
            return None
        return self.find_match(total - 1, Direction.BACKWARD, False, 1, None)
