"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (``run_menu``) and the
lower-level loop, session and mode contracts used by tests and composition
code.
"""

from __future__ import annotations


def run_menu(*args, **kwargs):
    """Lazily import the menu entrypoint to avoid terminal imports on package import."""
    from .app import run_menu as _run_menu

    return _run_menu(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_main_loop",
    "run_menu",
]
