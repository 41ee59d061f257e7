"""Console output for sync reports and diagnostics."""

import os
import sys

from rich.console import Console


def printable(text: str) -> str:
    """Make a string safe to write to the terminal.

    File names that are not valid in the filesystem encoding are read with
    ``surrogateescape``; their raw bytes are shown as backslash escapes.

    Examples:
        >>> printable("caf\\udce9.txt")
        'caf\\\\xe9.txt'
        >>> printable("report.csv")
        'report.csv'
    """
    return os.fsencode(text).decode(sys.getfilesystemencoding(), "backslashreplace")


class OutputFormatter:
    """Writes the sync report to stdout and diagnostics to stderr.

    Report lines are fixed-width tabular text, so they are emitted verbatim:
    no markup, highlighting, emoji codes or wrapping.
    """

    def __init__(self) -> None:
        self.console = Console(highlight=False, emoji=False)
        self.err_console = Console(stderr=True, highlight=False, emoji=False)

    def print(self, text: str = "") -> None:
        """Print one report line."""
        self.console.print(printable(text), markup=False, soft_wrap=True)

    def warning(self, message: str) -> None:
        """Print a warning diagnostic."""
        self.err_console.print(
            f"Warning: {printable(message)}",
            style="yellow",
            markup=False,
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        """Print an error diagnostic."""
        self.err_console.print(
            f"Error: {printable(message)}",
            style="bold red",
            markup=False,
            soft_wrap=True,
        )
