"""Whole-file I/O primitives and directory listing."""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .exceptions import FileReadError, FileWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """A single entry of a directory listing."""

    name: str
    """Entry name (without path)"""

    is_dir: bool
    """Whether the entry is a directory (symlinks are not followed)"""


def iter_directory(path: str) -> Iterator[DirectoryEntry]:
    """Iterate over the entries of a directory.

    The iterator is lazy and not restartable. The underlying directory handle
    is closed when the iterator is exhausted, fails, or is discarded. The
    ``.`` and ``..`` pseudo-entries are never yielded.

    Args:
        path: Directory to list

    Yields:
        DirectoryEntry for each entry

    Raises:
        OSError: If the directory cannot be opened or read
    """
    with os.scandir(path) as entries:
        for entry in entries:
            yield DirectoryEntry(
                name=entry.name, is_dir=entry.is_dir(follow_symlinks=False)
            )


def read_whole_file(path: str, expected_size: int) -> bytes:
    """Read exactly ``expected_size`` bytes from a file.

    Args:
        path: File to read
        expected_size: Number of bytes the file is expected to hold

    Returns:
        File contents

    Raises:
        FileReadError: If the file cannot be opened or holds fewer bytes
    """
    try:
        with open(path, "rb") as f:
            data = f.read(expected_size)
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    if len(data) < expected_size:
        raise FileReadError(
            path, f"short read ({len(data)} of {expected_size} bytes)"
        )
    return data


def write_whole_file(path: str, data: bytes) -> None:
    """Write a buffer to a file, creating missing parent directories.

    Args:
        path: File to write (replaced if it exists)
        data: Bytes to write

    Raises:
        FileWriteError: If the parent directories cannot be created or the
            buffer cannot be written in full
    """
    target = Path(path)

    try:
        # Ensure parent directory exists
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileWriteError(path, e.strerror or str(e)) from e

    try:
        with open(target, "wb") as f:
            written = f.write(data)
    except OSError as e:
        raise FileWriteError(path, e.strerror or str(e)) from e

    if written < len(data):
        raise FileWriteError(path, f"short write ({written} of {len(data)} bytes)")
    logger.debug(f"Wrote {written} bytes to {path}")
