"""Destination scanning for purge reports."""

import logging
import os

from ..file_io import DirectoryEntry, iter_directory
from ..output import OutputFormatter
from ..paths import build_absolute, format_path
from ..utils import MAX_LINE_LENGTH, SEPARATOR

logger = logging.getLogger(__name__)


class PurgeScanner:
    """Finds destination entries that have no counterpart in the source.

    Candidates are reported, never deleted. The scan walks the destination
    tree and checks each entry against a skip list of absolute source paths
    known to exist, falling back to a stat of the source path. A directory
    missing from the source is reported once and not descended into.

    Examples:
        >>> # /dst holds a.txt, sub/b.txt and sub/c.txt
        >>> scanner = PurgeScanner(OutputFormatter())
        >>> skip = ["/src/a.txt", "/src/sub/b.txt"]
        >>> scanner.purge("/src", "/dst", len("/dst/"), skip)
        ['sub/c.txt']
    """

    def __init__(self, output: OutputFormatter, sep: str = SEPARATOR):
        """Initialize purge scanner.

        Args:
            output: Output formatter for the report and diagnostics
            sep: Directory separator
        """
        self.output = output
        self.sep = sep

    def purge(
        self, src_dir: str, dst_dir: str, offset: int, skip_list: list[str]
    ) -> list[str]:
        """Report destination entries missing from the source tree.

        Args:
            src_dir: Source directory corresponding to ``dst_dir``
            dst_dir: Destination directory to scan
            offset: Index into absolute destination paths at which the
                displayed (destination-relative) path starts
            skip_list: Absolute source paths known to exist (not modified)

        Returns:
            Reported destination-relative paths, in report order
        """
        reported: list[str] = []
        self._purge_directory(src_dir, dst_dir, offset, skip_list, reported)
        return reported

    def _purge_directory(
        self,
        src_dir: str,
        dst_dir: str,
        offset: int,
        skip_list: list[str],
        reported: list[str],
    ) -> None:
        try:
            for entry in iter_directory(dst_dir):
                self._purge_entry(entry, src_dir, dst_dir, offset, skip_list, reported)
        except OSError as e:
            self.output.error(f"cannot read directory {dst_dir}: {e.strerror or e}")

    def _is_known(
        self, entry: DirectoryEntry, src_path: str, skip_list: list[str]
    ) -> bool:
        """Check the skip list for an entry.

        A directory is known if some skip entry lies inside it. The prefix
        includes the trailing separator so ``foo2/`` never matches ``foo/``.
        """
        if entry.is_dir:
            prefix = src_path + self.sep
            return any(path.startswith(prefix) for path in skip_list)
        return src_path in skip_list

    def _purge_entry(
        self,
        entry: DirectoryEntry,
        src_dir: str,
        dst_dir: str,
        offset: int,
        skip_list: list[str],
        reported: list[str],
    ) -> None:
        src_path = build_absolute(src_dir, entry.name, self.sep)
        known = self._is_known(entry, src_path, skip_list)

        if not known:
            try:
                os.stat(src_path)
            except FileNotFoundError:
                pass
            except OSError as e:
                self.output.error(f"cannot stat {src_path}: {e.strerror or e}")
                return
            else:
                known = True

        if known and not entry.is_dir:
            return

        dst_path = build_absolute(dst_dir, entry.name, self.sep)
        if not known:
            relative_path = dst_path[offset:]
            logger.debug(f"Purge candidate: {relative_path}")
            self.output.print(format_path(relative_path, MAX_LINE_LENGTH, self.sep))
            reported.append(relative_path)
        else:
            self._purge_directory(src_path, dst_path, offset, skip_list, reported)
