"""File comparison logic for sync operations."""

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

_NS_PER_SECOND = 1_000_000_000


class ComparisonOutcome(str, Enum):
    """Relationship between a source file and its destination counterpart."""

    ERROR = "error"
    """A stat call failed for a reason other than absence"""

    SRC_NOT_FOUND = "src_not_found"
    """Source file does not exist"""

    SRC_NOT_A_FILE = "src_not_a_file"
    """Source exists but is not a regular file"""

    DST_NOT_FOUND = "dst_not_found"
    """Destination file does not exist"""

    DST_NOT_A_FILE = "dst_not_a_file"
    """Destination exists but is not a regular file"""

    SAME_AGE = "same_age"
    """Both files have the same modification time"""

    DST_NEWER = "dst_newer"
    """Destination file is newer than the source"""

    SRC_NEWER_AND_LARGER = "src_newer_and_larger"
    """Source file is newer and larger than the destination"""

    SRC_NEWER = "src_newer"
    """Source file is newer but not larger than the destination"""


@dataclass
class FileComparison:
    """Result of comparing a source/destination file pair."""

    outcome: ComparisonOutcome
    """Classification of the pair"""

    size: Optional[int] = None
    """Source file size in bytes (set once the source is known to be a file)"""

    mtime_ns: Optional[int] = None
    """Source modification time in nanoseconds (set with ``size``)"""

    error: Optional[OSError] = None
    """Stat failure behind an ERROR outcome"""


class FileComparator:
    """Compares a source file with its destination by mtime and size.

    Modification times are compared at whole-second resolution, so copies on
    filesystems with coarser or finer timestamp precision compare as the
    same age once the source mtime has been propagated.
    """

    def compare(self, src: str, dst: str) -> FileComparison:
        """Compare a source file with a destination file.

        Args:
            src: Absolute path of the source file
            dst: Absolute path of the destination file

        Returns:
            FileComparison describing the pair
        """
        try:
            src_stat = os.stat(src)
        except FileNotFoundError:
            return FileComparison(ComparisonOutcome.SRC_NOT_FOUND)
        except OSError as e:
            logger.debug(f"stat failed for source {src}: {e}")
            return FileComparison(ComparisonOutcome.ERROR, error=e)

        if not stat.S_ISREG(src_stat.st_mode):
            return FileComparison(ComparisonOutcome.SRC_NOT_A_FILE)

        size = src_stat.st_size
        mtime_ns = src_stat.st_mtime_ns

        try:
            dst_stat = os.stat(dst)
        except FileNotFoundError:
            return FileComparison(
                ComparisonOutcome.DST_NOT_FOUND, size=size, mtime_ns=mtime_ns
            )
        except OSError as e:
            logger.debug(f"stat failed for destination {dst}: {e}")
            return FileComparison(
                ComparisonOutcome.ERROR, size=size, mtime_ns=mtime_ns, error=e
            )

        if not stat.S_ISREG(dst_stat.st_mode):
            return FileComparison(
                ComparisonOutcome.DST_NOT_A_FILE, size=size, mtime_ns=mtime_ns
            )

        outcome = self._compare_existing_files(src_stat, dst_stat)
        return FileComparison(outcome, size=size, mtime_ns=mtime_ns)

    def _compare_existing_files(
        self, src_stat: os.stat_result, dst_stat: os.stat_result
    ) -> ComparisonOutcome:
        """Compare two regular files by modification time, then size."""
        src_mtime = src_stat.st_mtime_ns // _NS_PER_SECOND
        dst_mtime = dst_stat.st_mtime_ns // _NS_PER_SECOND

        if src_mtime == dst_mtime:
            return ComparisonOutcome.SAME_AGE
        if src_mtime < dst_mtime:
            return ComparisonOutcome.DST_NEWER

        # Source is newer
        if src_stat.st_size > dst_stat.st_size:
            return ComparisonOutcome.SRC_NEWER_AND_LARGER
        return ComparisonOutcome.SRC_NEWER
