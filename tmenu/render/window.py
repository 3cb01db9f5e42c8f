"""Context-window drawing.

A window is an ordered list of ``(relative_position, entry_index | None)``
rows. Drawing overwrites each row in place and parks the cursor back on the
first row, so the window stays anchored between ticks. Widths are terminal
columns, not code points: a row that wrapped would shift the anchor.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Sequence

from .ansi import TerminalSink

WindowRow = tuple[int, int | None]
TRUNCATION_MARKER = ".."


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def display_text(raw: bytes) -> str:
    """Decode entry bytes for display; control characters become ``?``."""
    text = raw.decode("utf-8", errors="replace").replace("\t", " ")
    return "".join("?" if (ord(ch) < 0x20 or ord(ch) == 0x7F) else ch for ch in text)


def _tail_within(text: str, max_cols: int) -> str:
    """Longest suffix of ``text`` occupying at most ``max_cols`` columns."""
    cols = 0
    start = len(text)
    while start > 0:
        ch_width = char_display_width(text[start - 1])
        if cols + ch_width > max_cols:
            break
        cols += ch_width
        start -= 1
    return text[start:]


def fit_tail(text: str, width: int) -> str:
    """Fit ``text`` into ``width`` columns, keeping its tail when too long.

    An oversized line is shown as ``TRUNCATION_MARKER`` followed by its last
    characters, so matches near the end of long lines stay visible.
    """
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    keep = width - len(TRUNCATION_MARKER)
    if keep <= 0:
        return TRUNCATION_MARKER[:width]
    return TRUNCATION_MARKER + _tail_within(text, keep)


def draw_window(
    sink: TerminalSink,
    rows: Sequence[WindowRow],
    prompt: str,
    read_entry: Callable[[int], bytes],
    width: int,
) -> None:
    """Draw ``rows`` with ``prompt`` in front of the selected (position 0) row.

    A prompt wider than ``width`` is itself cut to its tail, so no row wraps.
    """
    prompt = fit_tail(prompt, width)
    prompt_width = display_width(prompt)
    pad = " " * prompt_width
    text_width = width - prompt_width
    for relative, index in rows:
        sink.clear_line()
        selected = relative == 0
        if selected:
            sink.bold()
            sink.write(prompt)
        else:
            sink.write(pad)
        if index is not None:
            sink.write(fit_tail(display_text(read_entry(index)), text_width))
        if selected:
            sink.reset_style()
        sink.write("\n")
    sink.cursor_up(len(rows))
    sink.flush()


def clear_window(sink: TerminalSink, height: int) -> None:
    """Blank ``height`` rows below the anchor and return to it."""
    for _ in range(height):
        sink.clear_line()
        sink.write("\n")
    sink.cursor_up(height)
    sink.flush()
