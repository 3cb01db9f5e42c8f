"""Exception hierarchy for fatal tmenu failures.

Every error here ends the session: the runtime restores the terminal first,
then the CLI reports ``str(exc)`` on standard error and exits non-zero.
"""

from __future__ import annotations


class TmenuError(Exception):
    """Base class for fatal errors reported as ``tmenu: <message>``."""


class SourceOpenError(TmenuError):
    """Candidate source could not be opened or spooled."""


class SourceReadError(TmenuError):
    """Backing store read or seek failed while the session was running."""


class TerminalError(TmenuError):
    """Terminal attributes could not be read/changed or no tty is available."""


class OutputError(TmenuError):
    """Confirmed entry could not be written to standard output."""
