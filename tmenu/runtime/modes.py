"""Browse and search modes plus the global key dispatch.

The mode set is closed: ``BrowseMode`` and ``SearchMode`` each implement the
full ``Mode`` contract (prompt, window, key handling, cleanup) and are used as
the singletons ``BROWSE`` and ``SEARCH``. Keys that act the same in every mode
are handled by ``dispatch_key`` before the active mode sees them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from ..input import keys
from ..render import TerminalSink, WindowRow, clear_window, display_width, draw_window, fit_tail
from ..search import Algorithm, Direction

if TYPE_CHECKING:
    from .session import Session


class Action(Enum):
    """Loop-level outcome of one key."""

    CONTINUE = "continue"
    QUIT = "quit"
    ABORT = "abort"
    CONFIRM = "confirm"
    REDRAW = "redraw"


_LINE_MOVES: dict[str, Direction] = {
    keys.UP: Direction.BACKWARD,
    keys.ctrl("p"): Direction.BACKWARD,
    keys.ctrl("k"): Direction.BACKWARD,
    keys.DOWN: Direction.FORWARD,
    keys.ctrl("n"): Direction.FORWARD,
}
# columns kept for the selected entry when a long query shares its row
ENTRY_MIN_COLUMNS = 10

_PAGE_MOVES: dict[str, Direction] = {
    keys.PAGE_UP: Direction.BACKWARD,
    keys.PAGE_DOWN: Direction.FORWARD,
}


class Mode(ABC):
    name: str

    @abstractmethod
    def prompt(self, session: Session) -> str:
        """Text drawn in front of the selected row."""

    @abstractmethod
    def window(self, session: Session) -> list[WindowRow]:
        """Rows from ``-before`` to ``+after`` around the selection."""

    @abstractmethod
    def handle_key(self, session: Session, key: str) -> Action:
        """Apply a key not consumed by ``dispatch_key``."""

    @abstractmethod
    def cleanup(self, session: Session, sink: TerminalSink) -> None:
        """Erase whatever ``render`` left on screen."""

    @abstractmethod
    def move(self, session: Session, direction: Direction, count: int) -> None:
        """Move the selection ``count`` steps in ``direction`` without wrapping."""

    @abstractmethod
    def jump_first(self, session: Session) -> None: ...

    @abstractmethod
    def jump_last(self, session: Session) -> None: ...

    def render(self, session: Session, sink: TerminalSink) -> None:
        draw_window(sink, self.window(session), self.prompt(session), session.reader.read, session.width)

    def navigate(self, session: Session, key: str) -> bool:
        """Handle navigation keys shared by both modes; return whether ``key`` was one."""
        if key in _LINE_MOVES:
            self.move(session, _LINE_MOVES[key], 1)
        elif key in _PAGE_MOVES:
            self.move(session, _PAGE_MOVES[key], session.context.page_size)
        elif key == keys.HOME:
            self.jump_first(session)
        elif key == keys.END:
            self.jump_last(session)
        else:
            return False
        return True


class BrowseMode(Mode):
    name = "browse"

    def prompt(self, session: Session) -> str:
        return "(browse): "

    def window(self, session: Session) -> list[WindowRow]:
        selected = session.selection if session.selection is not None else 0
        total = session.entry_count
        rows: list[WindowRow] = []
        for relative in range(-session.context.before, session.context.after + 1):
            index = selected + relative
            rows.append((relative, index if 0 <= index < total else None))
        return rows

    def move(self, session: Session, direction: Direction, count: int) -> None:
        selected = session.selection if session.selection is not None else 0
        session.selection = session.clamp(selected + int(direction) * count)

    def jump_first(self, session: Session) -> None:
        session.selection = 0

    def jump_last(self, session: Session) -> None:
        session.selection = session.clamp(session.entry_count - 1)

    def handle_key(self, session: Session, key: str) -> Action:
        if key == "q":
            return Action.QUIT
        if key == "k":
            self.move(session, Direction.BACKWARD, 1)
        elif key == "j":
            self.move(session, Direction.FORWARD, 1)
        elif key == "g":
            self.jump_first(session)
        elif key == "G":
            self.jump_last(session)
        else:
            self.navigate(session, key)
        return Action.CONTINUE

    def cleanup(self, session: Session, sink: TerminalSink) -> None:
        clear_window(sink, session.context.height)


class SearchMode(Mode):
    name = "search"

    def prompt(self, session: Session) -> str:
        config = session.config
        head = f"(search[{config.case.flag}:{config.algorithm.tag}]) "
        tail = " : "
        budget = session.width - ENTRY_MIN_COLUMNS - display_width(head) - display_width(tail)
        query = fit_tail(session.query.text.decode("ascii", errors="replace"), max(budget, 0))
        return f"{head}{query}{tail}"

    def window(self, session: Session) -> list[WindowRow]:
        selected = session.selection
        engine = session.engine
        rows: list[WindowRow] = []
        for relative in range(-session.context.before, session.context.after + 1):
            if selected is None:
                index = None
            elif relative < 0:
                index = engine.find_match(selected, Direction.BACKWARD, True, -relative, None)
            elif relative == 0:
                index = selected
            else:
                index = engine.find_match(selected, Direction.FORWARD, True, relative, None)
            rows.append((relative, index))
        return rows

    def move(self, session: Session, direction: Direction, count: int) -> None:
        if session.selection is None:
            return
        session.selection = session.engine.step(session.selection, direction, count)

    def jump_first(self, session: Session) -> None:
        first = session.engine.first()
        if first is not None:
            session.selection = first

    def jump_last(self, session: Session) -> None:
        last = session.engine.last()
        if last is not None:
            session.selection = last

    def handle_key(self, session: Session, key: str) -> Action:
        if self.navigate(session, key):
            return Action.CONTINUE

        query = session.query
        config = session.config
        if key == keys.TAB:
            config.case = config.case.toggled()
        elif key == keys.ctrl("t"):
            config.algorithm = config.algorithm.toggled()
        elif key in keys.BACKSPACE_KEYS:
            query.pop()
        elif keys.is_printable_byte(key):
            query.append(keys.key_byte(key))
        else:
            return Action.CONTINUE
        session.resnap()
        return Action.CONTINUE

    def cleanup(self, session: Session, sink: TerminalSink) -> None:
        clear_window(sink, session.context.height)


BROWSE = BrowseMode()
SEARCH = SearchMode()


def dispatch_key(session: Session, key: str) -> Action:
    """Apply ``key`` to ``session`` and report what the loop should do next."""
    if key == keys.EOF or key == keys.ctrl("d"):
        return Action.QUIT
    if key == keys.ctrl("c"):
        return Action.ABORT
    if key == keys.ctrl("s"):
        session.enter_search(Algorithm.SUBSTRING)
        return Action.CONTINUE
    if key == keys.ctrl("f"):
        session.enter_search(Algorithm.FUZZY)
        return Action.CONTINUE
    if key in (keys.ctrl("b"), keys.ctrl("q"), keys.ESC):
        session.enter_browse()
        return Action.CONTINUE
    if key == keys.ctrl("l"):
        return Action.REDRAW
    if key == keys.ctrl("w"):
        session.query.clear()
        if session.mode is SEARCH:
            session.resnap()
        return Action.CONTINUE
    if key in (keys.ENTER_CR, keys.ENTER_LF):
        return Action.CONFIRM if session.selection is not None else Action.CONTINUE
    if key == keys.NONE:
        return Action.CONTINUE
    return session.mode.handle_key(session, key)
