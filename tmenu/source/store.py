"""Backing-store lifecycle for candidate data.

A named file is opened read-only and indexed in place. Piped standard input is
spooled into an anonymous temporary file while it is indexed, because entries
are re-read on demand and a pipe cannot seek.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from ..errors import SourceOpenError
from .index import EntryIndex, build_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackingStore:
    """Open seekable stream plus the index built over it."""

    stream: BinaryIO
    index: EntryIndex
    label: str


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


@contextlib.contextmanager
def open_backing_store(path: Path | None, stdin: BinaryIO | None = None) -> Iterator[BackingStore]:
    """Open, index and yield the backing store; close it on every exit path.

    ``path`` of ``None`` spools ``stdin`` (default: ``sys.stdin.buffer``).
    """
    if path is not None:
        label = str(path)
        try:
            stream = open(path, "rb")
        except OSError as exc:
            raise SourceOpenError(f"cannot open {label}: {_describe(exc)}") from exc
    else:
        label = "<stdin>"
        try:
            stream = tempfile.TemporaryFile(prefix="tmenu-")
        except OSError as exc:
            raise SourceOpenError(f"cannot create spool file: {_describe(exc)}") from exc

    with stream:
        try:
            if path is not None:
                index = build_index(stream)
            else:
                source = stdin if stdin is not None else sys.stdin.buffer
                index = build_index(source, sink=stream)
                stream.flush()
            stream.seek(0)
        except OSError as exc:
            raise SourceOpenError(f"cannot read {label}: {_describe(exc)}") from exc
        logger.debug("indexed %d entries (%d bytes) from %s", len(index), index.total_bytes, label)
        yield BackingStore(stream=stream, index=index, label=label)
