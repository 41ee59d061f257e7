"""Path composition and display formatting.

All functions here work on plain strings with an explicit directory
separator, so they behave identically on every platform and can be tested
with either separator.
"""

from .exceptions import PathTooLongError
from .utils import MAX_LINE_LENGTH, MAX_PATH_LENGTH, SEPARATOR

# Number of dots replacing the elided middle of a shortened path
_DOT_FILL = 3

# Minimum number of leading characters kept when shortening a path
_MIN_PREFIX = 6


def build_absolute(base_dir: str, relative_path: str, sep: str = SEPARATOR) -> str:
    """Build an absolute path from a directory and a relative path.

    Exactly one separator is inserted between the two parts, unless
    ``base_dir`` already ends with one.

    Args:
        base_dir: Directory path
        relative_path: Path relative to ``base_dir``
        sep: Directory separator

    Returns:
        Combined path

    Raises:
        PathTooLongError: If the result exceeds MAX_PATH_LENGTH

    Examples:
        >>> build_absolute("/data/src", "docs/a.txt", sep="/")
        '/data/src/docs/a.txt'
        >>> build_absolute("/data/src/", "docs/a.txt", sep="/")
        '/data/src/docs/a.txt'
    """
    if base_dir.endswith(sep):
        path = base_dir + relative_path
    else:
        path = base_dir + sep + relative_path

    if len(path) > MAX_PATH_LENGTH:
        raise PathTooLongError(path, MAX_PATH_LENGTH)
    return path


def format_path(path: str, width: int, sep: str = SEPARATOR) -> str:
    """Fit a relative path into a fixed-width output field.

    When ``width`` is narrower than a full line, the path occupies at most
    ``width - 3`` characters and the rest of the field is padded with
    alternating spaces and dots, leading the eye to the status column.
    At full line width the path may use the whole width and no padding is
    added; the caller ends the line.

    A path that does not fit keeps its trailing segment (starting at the
    last separator) and has its middle replaced with dots.

    Args:
        path: Relative path to display
        width: Field width in characters
        sep: Directory separator

    Returns:
        Formatted field text

    Raises:
        ValueError: If ``width`` leaves no room for a shortened path

    Examples:
        >>> format_path("a.txt", 12, sep="/")
        'a.txt . . . '
        >>> format_path("alpha/beta/gamma/delta.txt", 20, sep="/")
        'alph.../delta.txt . '
    """
    padded = width < MAX_LINE_LENGTH
    field = width - _DOT_FILL if padded else width
    if field < _MIN_PREFIX:
        raise ValueError(f"Field width too small: {width}")

    length = len(path)
    if length > field:
        # Find the last separator, but keep a minimum prefix in front of it
        start = length - 1
        while start > _MIN_PREFIX and path[start] != sep:
            start -= 1
        while field - (length - start) < _MIN_PREFIX:
            start += 1
        keep = field - (length - start)
        text = path[: keep - _DOT_FILL] + "." * _DOT_FILL + path[start:]
    else:
        text = path

    if padded:
        text += "".join(
            " " if (width - pos) % 2 else "." for pos in range(len(text), width)
        )
    return text
