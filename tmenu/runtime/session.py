"""Explicit session state shared by the modes and the main loop.

One ``Session`` holds everything that changes while the menu runs: active
mode, selection, query, search rules and terminal width. Only the main loop
mutates it, one key at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..search import Algorithm, SearchConfig, SearchEngine, SearchQuery
from ..source import LineReader
from .modes import BROWSE, SEARCH, Mode

DEFAULT_WIDTH = 80


@dataclass(frozen=True)
class ContextWindow:
    """Number of entries drawn above (``before``) and below (``after``) the selection."""

    before: int = 1
    after: int = 1

    @classmethod
    def centered(cls, total: int) -> ContextWindow:
        """Split ``total`` context rows, giving the odd one to ``after``."""
        total = max(0, total)
        before = total // 2
        return cls(before=before, after=total - before)

    @property
    def height(self) -> int:
        return self.before + self.after + 1

    @property
    def page_size(self) -> int:
        return self.height


@dataclass
class Session:
    reader: LineReader
    engine: SearchEngine
    context: ContextWindow = field(default_factory=ContextWindow)
    multi_output: bool = False
    mode: Mode = BROWSE
    selection: int | None = 0
    width: int = DEFAULT_WIDTH

    @classmethod
    def create(
        cls,
        reader: LineReader,
        context: ContextWindow | None = None,
        config: SearchConfig | None = None,
        multi_output: bool = False,
    ) -> Session:
        """Build a browse-mode session with an empty query over ``reader``."""
        engine = SearchEngine(reader, SearchQuery(), config if config is not None else SearchConfig())
        return cls(
            reader=reader,
            engine=engine,
            context=context if context is not None else ContextWindow(),
            multi_output=multi_output,
            selection=0 if len(reader) else None,
        )

    @property
    def query(self) -> SearchQuery:
        return self.engine.query

    @property
    def config(self) -> SearchConfig:
        return self.engine.config

    @property
    def entry_count(self) -> int:
        return len(self.reader)

    def clamp(self, index: int) -> int:
        return max(0, min(self.entry_count - 1, index))

    def resnap(self) -> None:
        """Re-derive the selection from the live query: nearest forward match, else backward."""
        start = self.selection if self.selection is not None else 0
        self.selection = self.engine.snap(start)

    def enter_search(self, algorithm: Algorithm) -> None:
        self.config.algorithm = algorithm
        self.mode = SEARCH
        self.resnap()

    def enter_browse(self) -> None:
        self.mode = BROWSE
        if self.selection is None and self.entry_count:
            self.selection = 0

    def selected_raw(self) -> bytes | None:
        """Raw bytes of the selected entry (terminator kept), or ``None`` when unset."""
        if self.selection is None:
            return None
        return self.reader.read_raw(self.selection)
