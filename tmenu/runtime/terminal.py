"""Terminal control helpers for the menu session.

Owns raw-mode lifecycle and the keyboard source. The original tty attributes
are captured up front and restored on every exit path through ``raw_mode``.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import sys
import termios
import tty
from collections.abc import Iterator

from ..errors import TerminalError
from ..render import TerminalSink

CONTROLLING_TTY = "/dev/tty"


class TerminalController:
    """Manage raw-mode transitions on the keyboard tty."""

    def __init__(self, fd: int, sink: TerminalSink) -> None:
        """Capture tty state for ``fd``; chrome is written through ``sink``."""
        self.fd = fd
        self.sink = sink
        try:
            self._saved_tty_state = termios.tcgetattr(fd)
        except termios.error as exc:
            raise TerminalError(f"cannot get terminal attributes: {exc}") from exc

    def enable_raw_mode(self) -> None:
        """Enter raw input mode while keeping newline translation on output."""
        try:
            tty.setraw(self.fd, termios.TCSANOW)
            attrs = termios.tcgetattr(self.fd)
            attrs[1] |= termios.OPOST | termios.ONLCR
            termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        except termios.error as exc:
            raise TerminalError(f"cannot set terminal attributes: {exc}") from exc
        self.sink.hide_cursor()
        self.sink.flush()

    def restore(self) -> None:
        """Show the cursor and put back the captured tty attributes."""
        self.sink.show_cursor()
        self.sink.flush()
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved_tty_state)
        except termios.error as exc:
            raise TerminalError(f"cannot restore terminal attributes: {exc}") from exc

    def columns(self) -> int:
        """Current terminal width, polled once per tick."""
        try:
            return max(1, os.get_terminal_size(self.fd).columns)
        except OSError:
            return max(1, shutil.get_terminal_size((80, 24)).columns)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/restore calls."""
        try:
            self.enable_raw_mode()
            yield
        finally:
            self.restore()


@contextlib.contextmanager
def open_keyboard(stdin_is_data: bool, stdin_fd: int | None = None) -> Iterator[int]:
    """Yield a file descriptor to read keys from.

    Standard input serves as the keyboard when it is a tty that does not carry
    candidate data. Otherwise the controlling terminal is opened separately
    and closed again on exit.
    """
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if not stdin_is_data and os.isatty(stdin_fd):
        yield stdin_fd
        return

    try:
        fd = os.open(CONTROLLING_TTY, os.O_RDONLY)
    except OSError as exc:
        raise TerminalError(f"cannot open {CONTROLLING_TTY}: {exc.strerror or exc}") from exc
    try:
        yield fd
    finally:
        os.close(fd)
