"""Unit tests for utility functions."""

import io

import pytest

from pyplunge.exceptions import PathTooLongError
from pyplunge.utils import MAX_PATH_LENGTH, read_relative_paths, trim


class TestTrim:
    """Tests for trim function."""

    def test_strips_surrounding_whitespace(self):
        """Test leading and trailing white-space is removed."""
        assert trim("  docs/a.txt\t\r\n") == "docs/a.txt"

    def test_keeps_inner_whitespace(self):
        """Test white-space inside the string is kept."""
        assert trim(" my docs/a b.txt ") == "my docs/a b.txt"

    def test_whitespace_only(self):
        """Test a white-space-only string trims to empty."""
        assert trim(" \t\n") == ""


class TestReadRelativePaths:
    """Tests for read_relative_paths function."""

    def test_reads_one_path_per_line(self):
        """Test each line becomes one path, in order."""
        lines = io.StringIO("a.txt\nsub/b.txt\nsub/deep/c.txt\n")
        assert read_relative_paths(lines, sep="/") == [
            "a.txt",
            "sub/b.txt",
            "sub/deep/c.txt",
        ]

    def test_skips_blank_lines_and_trims(self):
        """Test blank lines are dropped and paths trimmed."""
        lines = ["\n", "   a.txt  \n", "\t\n", "b.txt"]
        assert read_relative_paths(lines, sep="/") == ["a.txt", "b.txt"]

    def test_converts_forward_slashes(self):
        """Test forward slashes become the platform separator."""
        lines = ["sub/deep/c.txt\n"]
        assert read_relative_paths(lines, sep="\\") == ["sub\\deep\\c.txt"]

    def test_duplicates_are_kept(self):
        """Test duplicate lines are not removed."""
        assert read_relative_paths(["a.txt", "a.txt"], sep="/") == ["a.txt", "a.txt"]

    def test_empty_input(self):
        """Test empty input gives an empty list."""
        assert read_relative_paths([], sep="/") == []

    def test_overlong_line_raises(self):
        """Test a line longer than the path limit is fatal."""
        with pytest.raises(PathTooLongError):
            read_relative_paths(["x" * (MAX_PATH_LENGTH + 1)], sep="/")
