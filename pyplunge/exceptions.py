"""Exceptions for pyplunge."""


class PlungeError(Exception):
    """Base exception for all pyplunge errors."""


class PathTooLongError(PlungeError):
    """Raised when a composed or input path exceeds the maximum path length.

    This is a fatal condition: the run is aborted.
    """

    def __init__(self, path: str, limit: int):
        self.path = path
        self.limit = limit
        super().__init__(f"Path exceeds {limit} characters: {path[:64]}...")


class FileOperationError(PlungeError):
    """Base exception for per-file I/O failures.

    Args:
        path: Path of the file the operation failed on
        reason: Human-readable reason for the failure
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FileReadError(FileOperationError):
    """Raised when a source file cannot be read in full."""


class FileWriteError(FileOperationError):
    """Raised when a destination file cannot be written in full."""
