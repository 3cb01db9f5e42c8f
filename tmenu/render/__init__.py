"""Rendering surface: capability sink plus context-window drawing."""

from __future__ import annotations

from .ansi import AnsiSink, TerminalSink
from .window import (
    TRUNCATION_MARKER,
    WindowRow,
    char_display_width,
    clear_window,
    display_text,
    display_width,
    draw_window,
    fit_tail,
)

__all__ = [
    "AnsiSink",
    "TRUNCATION_MARKER",
    "TerminalSink",
    "WindowRow",
    "char_display_width",
    "clear_window",
    "display_text",
    "display_width",
    "draw_window",
    "fit_tail",
]
