"""Core sync engine for executing sync operations."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, cast

from ..output import OutputFormatter
from ..paths import build_absolute, format_path
from ..utils import MAX_LINE_LENGTH, SEPARATOR
from .comparator import ComparisonOutcome, FileComparator
from .config import SyncConfig
from .operations import SyncOperations
from .scanner import PurgeScanner

logger = logging.getLogger(__name__)

# =============================================================================
# Report layout
# =============================================================================

TERSE_HEADING = (
    "                         Pathname                                 Status\n"
    "----------------------------------------------------------  ------------------"
)

VERBOSE_HEADING = (
    "                     Pathname                             Status        Action\n"
    "--------------------------------------------------  ------------------  ------"
)

PURGE_HEADING = "The following files in DEST may need to be purged:"

# Width of the path column (path, padding and gap before the status column)
TERSE_PATH_WIDTH = MAX_LINE_LENGTH - 18
VERBOSE_PATH_WIDTH = MAX_LINE_LENGTH - 26


# =============================================================================
# Decision table
# =============================================================================


@dataclass(frozen=True)
class OutcomeAction:
    """What to do with a file for a given comparison outcome."""

    copy: bool
    """Whether the source file is copied over the destination"""

    verbose_label: str
    """Status line in verbose mode"""

    terse_label: Optional[str] = None
    """Status line in terse mode (None: the file is not listed)"""


OUTCOME_ACTIONS: Mapping[ComparisonOutcome, OutcomeAction] = MappingProxyType(
    {
        ComparisonOutcome.ERROR: OutcomeAction(False, "Error"),
        ComparisonOutcome.SRC_NOT_FOUND: OutcomeAction(False, "Src not found — Skip"),
        ComparisonOutcome.SRC_NOT_A_FILE: OutcomeAction(
            False, "Src not a file — Skip"
        ),
        ComparisonOutcome.DST_NOT_FOUND: OutcomeAction(
            True, "Dst not found — Copy", "New"
        ),
        ComparisonOutcome.DST_NOT_A_FILE: OutcomeAction(
            False, "Dst not a file — Skip"
        ),
        ComparisonOutcome.SAME_AGE: OutcomeAction(False, "Same age — Skip"),
        ComparisonOutcome.DST_NEWER: OutcomeAction(False, "Dst newer! — Skip"),
        ComparisonOutcome.SRC_NEWER_AND_LARGER: OutcomeAction(
            True, "Src newer & larger — Copy", "Newer and larger"
        ),
        ComparisonOutcome.SRC_NEWER: OutcomeAction(
            True, "Src newer — Copy", "Newer (not larger)"
        ),
    }
)


class SyncEngine:
    """Core sync engine that copies newer files from SOURCE into DEST.

    Examples:
        >>> engine = SyncEngine("/data/src", "/data/dst", SyncConfig(dry_run=True))
        >>> stats = engine.run(["report.csv", "docs/notes.txt"])
        >>> print(f"Would copy {stats['copies']} files")
    """

    def __init__(
        self,
        src_dir: str,
        dst_dir: str,
        config: SyncConfig,
        output: Optional[OutputFormatter] = None,
        sep: str = SEPARATOR,
    ):
        """Initialize sync engine.

        Args:
            src_dir: Source directory
            dst_dir: Destination directory
            config: Run options
            output: Output formatter for the report and diagnostics
            sep: Directory separator
        """
        self.src_dir = src_dir
        self.dst_dir = dst_dir
        self.config = config
        self.sep = sep
        self.output = output or OutputFormatter()
        self.comparator = FileComparator()
        self.operations = SyncOperations(self.output)
        self.scanner = PurgeScanner(self.output, sep=sep)

    def run(self, relative_paths: list[str]) -> dict:
        """Sync a list of files and optionally report purge candidates.

        Nothing is printed when the list is empty.

        Args:
            relative_paths: Paths relative to both SOURCE and DEST

        Returns:
            Dictionary with sync statistics

        Raises:
            PathTooLongError: If a composed path exceeds the maximum length
        """
        stats = self._create_empty_stats()
        if not relative_paths:
            return stats

        # Step 1: Heading
        self.output.print()
        self.output.print(VERBOSE_HEADING if self.config.verbose else TERSE_HEADING)

        # Step 2: Compare and copy each file
        for relative_path in relative_paths:
            self.process_file(relative_path, stats)

        # Step 3: Purge report
        if self.config.purge:
            self.output.print()
            self.output.print(PURGE_HEADING)
            stats["purge_candidates"] = len(self.purge(relative_paths))

        self.output.print()
        logger.debug(f"Sync finished: {stats}")
        return stats

    def process_file(
        self, relative_path: str, stats: Optional[dict] = None
    ) -> ComparisonOutcome:
        """Compare one file pair, report it, and copy it if needed.

        Args:
            relative_path: Path relative to both SOURCE and DEST
            stats: Statistics dictionary (modified in place)

        Returns:
            Comparison outcome for the file
        """
        src = build_absolute(self.src_dir, relative_path, self.sep)
        dst = build_absolute(self.dst_dir, relative_path, self.sep)
        comparison = self.comparator.compare(src, dst)
        outcome = comparison.outcome
        action = OUTCOME_ACTIONS[outcome]
        logger.debug(f"{relative_path}: {outcome.value}")

        if comparison.error is not None:
            self.output.error(str(comparison.error))

        if self.config.verbose:
            label: Optional[str] = action.verbose_label
            width = VERBOSE_PATH_WIDTH
        else:
            label = action.terse_label
            width = TERSE_PATH_WIDTH
        if label is not None:
            self.output.print(format_path(relative_path, width, self.sep) + label)

        copied = False
        if action.copy and not self.config.dry_run:
            copied = self.operations.copy_file(
                src, dst, cast(int, comparison.size), cast(int, comparison.mtime_ns)
            )

        if stats is not None:
            stats["processed"] += 1
            stats["outcomes"][outcome.value] += 1
            if outcome == ComparisonOutcome.ERROR:
                stats["errors"] += 1
            elif not action.copy:
                stats["skips"] += 1
            elif self.config.dry_run or copied:
                stats["copies"] += 1
            else:
                stats["errors"] += 1

        return outcome

    def purge(self, relative_paths: list[str]) -> list[str]:
        """Report DEST entries that have no counterpart in SOURCE.

        Args:
            relative_paths: Paths known to exist in SOURCE

        Returns:
            Reported paths, relative to DEST
        """
        skip_list = [
            build_absolute(self.src_dir, path, self.sep) for path in relative_paths
        ]
        offset = len(self.dst_dir)
        if not self.dst_dir.endswith(self.sep):
            offset += 1
        return self.scanner.purge(self.src_dir, self.dst_dir, offset, skip_list)

    def _create_empty_stats(self) -> dict:
        """Create an empty statistics dictionary.

        Returns:
            Dictionary with zero counts for all stat categories
        """
        return {
            "processed": 0,
            "copies": 0,
            "skips": 0,
            "errors": 0,
            "purge_candidates": 0,
            "outcomes": {outcome.value: 0 for outcome in ComparisonOutcome},
        }
