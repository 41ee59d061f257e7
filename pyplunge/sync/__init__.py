"""Sync engine for pyplunge - one-way copy of newer files and purge reports."""

from .comparator import ComparisonOutcome, FileComparator, FileComparison
from .config import SyncConfig
from .engine import OUTCOME_ACTIONS, OutcomeAction, SyncEngine
from .operations import SyncOperations
from .scanner import PurgeScanner

__all__ = [
    "SyncEngine",
    "SyncConfig",
    "SyncOperations",
    "FileComparator",
    "FileComparison",
    "ComparisonOutcome",
    "OutcomeAction",
    "OUTCOME_ACTIONS",
    "PurgeScanner",
]
