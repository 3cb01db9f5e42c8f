"""Main interactive loop.

Each tick polls the terminal width, renders the active mode, blocks for one
key and applies it. Rendering and input never overlap. The active mode's
cleanup runs on every exit path, inside raw mode, before the terminal is
restored.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import BinaryIO, Protocol

from ..errors import OutputError
from ..render import TerminalSink
from .modes import Action, dispatch_key
from .session import Session

EXIT_OK = 0
EXIT_ABORTED = 130


class Terminal(Protocol):
    def raw_mode(self): ...

    def columns(self) -> int: ...


def run_main_loop(
    session: Session,
    terminal: Terminal,
    sink: TerminalSink,
    output: BinaryIO,
    read_key: Callable[[], str],
) -> int:
    """Run until quit, abort, or a single-output confirm; return the exit status.

    Confirmed entries are written to ``output`` as raw bytes, one write per
    confirm, after the window has been erased. A failed write ends the
    session with ``OutputError``.
    """
    with terminal.raw_mode():
        try:
            while True:
                session.width = terminal.columns()
                session.mode.render(session, sink)
                action = dispatch_key(session, read_key())

                if action is Action.QUIT:
                    return EXIT_OK
                if action is Action.ABORT:
                    return EXIT_ABORTED
                if action is Action.REDRAW:
                    sink.clear_screen_home()
                elif action is Action.CONFIRM:
                    data = session.selected_raw()
                    if data is None:
                        continue
                    session.mode.cleanup(session, sink)
                    try:
                        output.write(data)
                        output.flush()
                    except OSError as exc:
                        raise OutputError(f"cannot write selection: {exc.strerror or exc}") from exc
                    if not session.multi_output:
                        return EXIT_OK
        finally:
            session.mode.cleanup(session, sink)
