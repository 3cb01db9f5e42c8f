"""On-demand retrieval of single entries from the backing store."""

from __future__ import annotations

from typing import BinaryIO

from ..errors import SourceReadError
from .index import TERMINATOR, EntryIndex


class LineReader:
    """Read entry bytes by index; nothing is cached between calls."""

    def __init__(self, stream: BinaryIO, index: EntryIndex) -> None:
        self.stream = stream
        self.index = index

    def __len__(self) -> int:
        return len(self.index)

    def length(self, index: int) -> int:
        return self.index.length(index)

    def read_raw(self, index: int) -> bytes:
        """Return entry bytes exactly as stored, terminator included."""
        size = self.index.length(index)
        start = self.index.start(index)
        try:
            self.stream.seek(start)
            data = self.stream.read(size)
        except OSError as exc:
            raise SourceReadError(f"cannot read entry {index}: {exc.strerror or exc}") from exc
        if len(data) != size:
            raise SourceReadError(f"short read for entry {index}: expected {size} bytes, got {len(data)}")
        return data

    def read(self, index: int) -> bytes:
        """Return entry bytes for display, with one trailing terminator removed."""
        data = self.read_raw(index)
        if data.endswith(TERMINATOR):
            return data[: -len(TERMINATOR)]
        return data
