"""File copy operation for sync."""

import logging
import os
import time

from ..exceptions import FileOperationError
from ..file_io import read_whole_file, write_whole_file
from ..output import OutputFormatter

logger = logging.getLogger(__name__)


class SyncOperations:
    """Copies source files over their destination counterparts."""

    def __init__(self, output: OutputFormatter):
        """Initialize sync operations.

        Args:
            output: Output formatter for diagnostics
        """
        self.output = output

    def copy_file(self, src: str, dst: str, size: int, mtime_ns: int) -> bool:
        """Copy a file and give the copy the source's modification time.

        The whole file is buffered in memory. Propagating the source mtime
        makes the next comparison of the pair come out as the same age.
        If only that last step fails, the copy stands and a warning is
        printed; a later run will copy the file again.

        Args:
            src: Absolute path of the source file
            dst: Absolute path of the destination file
            size: Size of the source file in bytes
            mtime_ns: Modification time of the source file (nanoseconds)

        Returns:
            True if the file contents were copied, False otherwise
        """
        try:
            data = read_whole_file(src, size)
            write_whole_file(dst, data)
        except FileOperationError as e:
            self.output.error(str(e))
            return False

        try:
            os.utime(dst, ns=(time.time_ns(), mtime_ns))
        except OSError as e:
            self.output.warning(f"{dst}: could not set modification time: {e}")
        else:
            logger.debug(f"Copied {src} -> {dst} ({size} bytes)")

        return True
