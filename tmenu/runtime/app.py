"""Runtime composition layer for tmenu.

Opens the backing store, builds the session, acquires the keyboard and
terminal, and starts the loop. Every resource is scoped so it is released on
quit, confirm, end of input and fatal errors alike.
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path
from typing import BinaryIO, TextIO

from ..input import read_key
from ..render import AnsiSink
from ..search import SearchConfig
from ..source import LineReader, open_backing_store
from .loop import EXIT_OK, run_main_loop
from .session import ContextWindow, Session
from .terminal import TerminalController, open_keyboard

logger = logging.getLogger(__name__)


def run_menu(
    path: Path | None,
    context: ContextWindow,
    multi_output: bool = False,
    search_config: SearchConfig | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one interactive selection over ``path`` (or spooled standard input).

    Returns the process exit status. Empty input returns immediately without
    touching the terminal.
    """
    output = stdout if stdout is not None else sys.stdout.buffer
    sink = AnsiSink(stderr if stderr is not None else sys.stderr)

    with open_backing_store(path, stdin) as store:
        entry_count = len(store.index)
        logger.info("Loaded %d entries", entry_count)
        if entry_count == 0:
            return EXIT_OK

        reader = LineReader(store.stream, store.index)
        session = Session.create(reader, context=context, config=search_config, multi_output=multi_output)
        with open_keyboard(stdin_is_data=path is None) as keyboard_fd:
            terminal = TerminalController(keyboard_fd, sink)
            status = run_main_loop(session, terminal, sink, output, partial(read_key, keyboard_fd))
    logger.debug("session ended with status %d", status)
    return status
