"""Fatal error reporting for the command line."""

import sys
from typing import NoReturn, TextIO


def format_error(error: BaseException) -> str:
    """Return a one-line, human-readable description of ``error``."""
    message = " ".join(str(error).split())
    return message or type(error).__name__


def exit_with_message(error: BaseException, stream: TextIO | None = None) -> NoReturn:
    """Write ``error`` to the diagnostic stream, then exit with status 1.

    The message is flushed before the exit is requested.
    """
    stream = stream or sys.stderr
    stream.write(format_error(error) + "\n")
    stream.flush()
    raise SystemExit(1)


__all__ = ["format_error", "exit_with_message"]
