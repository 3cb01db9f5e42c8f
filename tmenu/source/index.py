"""Byte-offset index over a line-oriented backing store.

The index is built in a single streaming pass and is read-only afterwards.
Entry ``i`` covers bytes ``[offsets[i], offsets[i + 1])``; the final offset is
a sentinel equal to the total number of bytes consumed.
"""

from __future__ import annotations

from typing import BinaryIO

TERMINATOR = b"\n"
INITIAL_CAPACITY = 100
READ_CHUNK_BYTES = 1024


class EntryIndex:
    """Growable table of strictly increasing entry boundary offsets."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        self._capacity = max(1, capacity)
        self._offsets: list[int] = [0] * self._capacity
        self._size = 0
        self._sealed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        """Number of entries (one less than the number of stored offsets)."""
        return max(0, self._size - 1)

    @property
    def total_bytes(self) -> int:
        return self._offsets[self._size - 1] if self._size else 0

    @property
    def offsets(self) -> tuple[int, ...]:
        return tuple(self._offsets[: self._size])

    def append(self, offset: int) -> None:
        """Record one boundary, doubling capacity when the table is full."""
        if self._sealed:
            raise RuntimeError("entry index is read-only after build")
        if self._size and offset <= self._offsets[self._size - 1]:
            raise ValueError(f"offset {offset} does not follow previous boundary")
        if self._size >= self._capacity:
            self._offsets.extend([0] * self._capacity)
            self._capacity *= 2
        self._offsets[self._size] = offset
        self._size += 1

    def seal(self) -> None:
        self._sealed = True

    def _check(self, index: int) -> None:
        if index < 0 or index >= len(self):
            raise IndexError(f"entry {index} out of range [0, {len(self) - 1}]")

    def start(self, index: int) -> int:
        self._check(index)
        return self._offsets[index]

    def length(self, index: int) -> int:
        """Byte length of entry ``index`` including its terminator, if any."""
        self._check(index)
        return self._offsets[index + 1] - self._offsets[index]


def build_index(
    stream: BinaryIO,
    sink: BinaryIO | None = None,
    capacity: int = INITIAL_CAPACITY,
) -> EntryIndex:
    """Stream ``stream`` once and return the sealed index of its lines.

    A boundary is recorded right after every terminator byte. The sentinel is
    always appended, so a trailing line without terminator stays addressable.
    When ``sink`` is given every byte read is also copied into it.
    """
    index = EntryIndex(capacity)
    start = pos = 0
    while True:
        chunk = stream.readline(READ_CHUNK_BYTES)
        if not chunk:
            break
        if sink is not None:
            sink.write(chunk)
        pos += len(chunk)
        if chunk.endswith(TERMINATOR):
            index.append(start)
            start = pos
    if pos > start:
        index.append(start)
    index.append(pos)
    index.seal()
    return index
