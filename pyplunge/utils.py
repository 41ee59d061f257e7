"""Utility functions for pyplunge."""

import os
from collections.abc import Iterable

from .exceptions import PathTooLongError

# =============================================================================
# Constants for path handling
# =============================================================================

# Platform directory separator used for composing and splitting paths
SEPARATOR: str = os.sep

# Upper bound on the length of any composed path
MAX_PATH_LENGTH: int = 4096

# Width of one line of tabular output
MAX_LINE_LENGTH: int = 78


# =============================================================================
# Input line utilities
# =============================================================================


def trim(text: str) -> str:
    """Remove leading and trailing white-space from a string.

    Args:
        text: String to trim

    Returns:
        String without surrounding white-space

    Examples:
        >>> trim("  docs/readme.txt \\n")
        'docs/readme.txt'
        >>> trim("   ")
        ''
    """
    return text.strip()


def read_relative_paths(lines: Iterable[str], sep: str = SEPARATOR) -> list[str]:
    """Read relative file paths, one per line.

    Blank lines are ignored and surrounding white-space is trimmed. Forward
    slashes are replaced with ``sep`` when it differs, so input lists can be
    shared between platforms.

    Args:
        lines: Line source (a file object, a list of strings, ...)
        sep: Directory separator of the target platform

    Returns:
        List of relative paths in input order

    Raises:
        PathTooLongError: If a line exceeds MAX_PATH_LENGTH
    """
    paths: list[str] = []

    for line in lines:
        path = trim(line)
        if not path:
            continue
        if len(path) > MAX_PATH_LENGTH:
            raise PathTooLongError(path, MAX_PATH_LENGTH)
        if sep != "/":
            path = path.replace("/", sep)
        paths.append(path)

    return paths
