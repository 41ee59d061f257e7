"""pyplunge - synchronize newer files from a source directory into a destination."""

from .exceptions import (
    FileOperationError,
    FileReadError,
    FileWriteError,
    PathTooLongError,
    PlungeError,
)
from .sync import ComparisonOutcome, SyncConfig, SyncEngine

__version__ = "1.0.0"

__all__ = [
    "SyncEngine",
    "SyncConfig",
    "ComparisonOutcome",
    "PlungeError",
    "PathTooLongError",
    "FileOperationError",
    "FileReadError",
    "FileWriteError",
]
