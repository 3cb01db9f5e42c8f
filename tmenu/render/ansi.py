"""Terminal capability sink and its ANSI/CSI encoding.

Rendering code talks to ``TerminalSink`` only. ``AnsiSink`` turns each
capability into the matching escape sequence on a text stream (standard error
by default, so piped standard output only ever carries selections).
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

CSI = "\x1b["


class TerminalSink(Protocol):
    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def clear_line(self) -> None: ...

    def cursor_up(self, count: int = 1) -> None: ...

    def cursor_down(self, count: int = 1) -> None: ...

    def cursor_left(self, count: int = 1) -> None: ...

    def cursor_right(self, count: int = 1) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def bold(self) -> None: ...

    def reset_style(self) -> None: ...

    def clear_screen_home(self) -> None: ...

    def goto(self, row: int, col: int) -> None: ...


class AnsiSink:
    """Encode terminal capabilities as CSI sequences on ``stream``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def clear_line(self) -> None:
        # Erase to end of line, then return to column 0.
        self.stream.write(f"{CSI}K\r")

    def _move(self, final: str, count: int) -> None:
        if count > 0:
            self.stream.write(f"{CSI}{final}" * count)

    def cursor_up(self, count: int = 1) -> None:
        self._move("A", count)

    def cursor_down(self, count: int = 1) -> None:
        self._move("B", count)

    def cursor_right(self, count: int = 1) -> None:
        self._move("C", count)

    def cursor_left(self, count: int = 1) -> None:
        self._move("D", count)

    def hide_cursor(self) -> None:
        self.stream.write(f"{CSI}?25l")

    def show_cursor(self) -> None:
        self.stream.write(f"{CSI}?25h")

    def bold(self) -> None:
        self.stream.write(f"{CSI}1m")

    def reset_style(self) -> None:
        self.stream.write(f"{CSI}0m")

    def clear_screen_home(self) -> None:
        self.stream.write(f"{CSI}2J")
        self.goto(1, 1)

    def goto(self, row: int, col: int) -> None:
        """Move to 1-based ``row``/``col``; smaller values clamp to 1."""
        self.stream.write(f"{CSI}{max(1, row)};{max(1, col)}H")
