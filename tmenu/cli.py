"""Command-line front door for tmenu.

Parses CLI options, merges them with persisted defaults, and dispatches into
the interactive runtime. Fatal errors become a one-line diagnostic on
standard error and a non-zero exit status.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .errors import OutputError, TmenuError
from .runtime import run_menu
from .runtime.config import load_context_lines, load_multi_output, load_search_config
from .runtime.loop import EXIT_ABORTED
from .runtime.session import ContextWindow

EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for context line counts."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmenu",
        description="Pick a line from FILE (or standard input) in an interactive terminal menu.",
        epilog=(
            "keys: Ctrl-S substring search, Ctrl-F fuzzy search, Ctrl-B browse, "
            "Tab toggle case, Ctrl-T toggle algorithm, Enter confirm, Ctrl-D/q quit, Ctrl-C abort"
        ),
    )
    parser.add_argument("path", nargs="?", metavar="FILE", help="Candidate file. Defaults to standard input.")
    parser.add_argument("-m", dest="multi_output", action="store_true", help="Keep running after each confirm.")
    parser.add_argument("-v", dest="verbose", action="store_true", help="Print diagnostics to standard error.")
    parser.add_argument("-a", dest="before", type=_non_negative_int, metavar="N", help="Context lines above the selection.")
    parser.add_argument("-b", dest="after", type=_non_negative_int, metavar="N", help="Context lines below the selection.")
    parser.add_argument(
        "-c",
        dest="context",
        type=_non_negative_int,
        metavar="N",
        help="Total context lines, split evenly above and below.",
    )
    return parser


def resolve_context(args: argparse.Namespace) -> ContextWindow:
    """Combine ``-c``/``-a``/``-b`` with configured defaults; explicit flags win."""
    before, after = load_context_lines()
    if args.context is not None:
        centered = ContextWindow.centered(args.context)
        before, after = centered.before, centered.after
    if args.before is not None:
        before = args.before
    if args.after is not None:
        after = args.after
    return ContextWindow(before=before, after=after)


def _discard_stdout() -> None:
    """Point stdout at the null device so interpreter shutdown does not retry a broken pipe."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the menu, and exit with its status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="tmenu: %(message)s",
        stream=sys.stderr,
    )

    path = Path(args.path) if args.path is not None else None
    context = resolve_context(args)
    logger.debug("context window: %d before, %d after", context.before, context.after)
    try:
        status = run_menu(
            path,
            context,
            multi_output=args.multi_output or load_multi_output(),
            search_config=load_search_config(),
        )
    except TmenuError as exc:
        print(f"tmenu: {exc}", file=sys.stderr)
        if isinstance(exc, OutputError) and isinstance(exc.__cause__, BrokenPipeError):
            _discard_stdout()
        raise SystemExit(EXIT_FAILURE) from exc
    except KeyboardInterrupt:
        raise SystemExit(EXIT_ABORTED) from None
    raise SystemExit(status)


if __name__ == "__main__":
    main()
