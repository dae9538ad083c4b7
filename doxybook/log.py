"""Console messages: informational output and coloured warnings and errors."""

from __future__ import annotations

import sys
from typing import TextIO

_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[39m"

_quiet = False


def _colored(stream: TextIO, color: str, msg: str) -> None:
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        print(f"{color}{msg}{_RESET}", file=stream, flush=True)
    else:
        print(msg, file=stream, flush=True)


def info(msg: str) -> None:
    """Print an informational message unless quiet mode is on."""
    if _quiet:
        return
    print(msg, file=sys.stdout, flush=True)


def warning(msg: str) -> None:
    """Print a warning to standard error, yellow on a terminal."""
    _colored(sys.stderr, _YELLOW, msg)


def error(msg: str) -> None:
    """Print an error to standard error, red on a terminal."""
    _colored(sys.stderr, _RED, msg)


def set_quiet_mode(quiet: bool) -> None:
    """Turn suppression of informational messages on or off."""
    global _quiet
    _quiet = bool(quiet)