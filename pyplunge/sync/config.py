"""Run configuration for sync operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SyncConfig:
    """Options fixed for the lifetime of a sync run."""

    verbose: bool = False
    """Print a status line for every file, not just copied ones"""

    dry_run: bool = False
    """Report what would be copied without copying"""

    purge: bool = False
    """Report destination entries with no counterpart in the source"""
