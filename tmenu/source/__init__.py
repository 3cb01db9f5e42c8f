"""Candidate source layer: offset index, backing store, and line reader."""

from __future__ import annotations

from .index import INITIAL_CAPACITY, TERMINATOR, EntryIndex, build_index
from .reader import LineReader
from .store import BackingStore, open_backing_store

__all__ = [
    "BackingStore",
    "EntryIndex",
    "INITIAL_CAPACITY",
    "LineReader",
    "TERMINATOR",
    "build_index",
    "open_backing_store",
]
