"""Unit tests for whole-file I/O and directory listing."""

import os

import pytest

from pyplunge.exceptions import FileReadError, FileWriteError
from pyplunge.file_io import (
    DirectoryEntry,
    iter_directory,
    read_whole_file,
    write_whole_file,
)


class TestReadWholeFile:
    """Tests for read_whole_file function."""

    def test_reads_expected_size(self, tmp_path):
        """Test the whole file is returned."""
        path = tmp_path / "a.bin"
        path.write_bytes(b"\x00\x01\x02hello")

        assert read_whole_file(str(path), 8) == b"\x00\x01\x02hello"

    def test_empty_file(self, tmp_path):
        """Test an empty file reads as empty bytes."""
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        assert read_whole_file(str(path), 0) == b""

    def test_short_read_raises(self, tmp_path):
        """Test a file smaller than expected is a read failure."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"abc")

        with pytest.raises(FileReadError, match="short read"):
            read_whole_file(str(path), 10)

    def test_missing_file_raises(self, tmp_path):
        """Test a missing file is a read failure."""
        with pytest.raises(FileReadError) as exc_info:
            read_whole_file(str(tmp_path / "missing.txt"), 1)
        assert exc_info.value.path == str(tmp_path / "missing.txt")


class TestWriteWholeFile:
    """Tests for write_whole_file function."""

    def test_writes_file(self, tmp_path):
        """Test the buffer is written in full."""
        path = tmp_path / "out.txt"

        write_whole_file(str(path), b"content")

        assert path.read_bytes() == b"content"

    def test_creates_parent_directories(self, tmp_path):
        """Test missing ancestors are created recursively."""
        path = tmp_path / "a" / "b" / "c" / "out.txt"

        write_whole_file(str(path), b"deep")

        assert path.read_bytes() == b"deep"

    def test_replaces_existing_file(self, tmp_path):
        """Test an existing file is overwritten."""
        path = tmp_path / "out.txt"
        path.write_bytes(b"old content that is longer")

        write_whole_file(str(path), b"new")

        assert path.read_bytes() == b"new"

    def test_parent_is_file_raises(self, tmp_path):
        """Test a file in place of a parent directory is a write failure."""
        (tmp_path / "blocker").write_text("not a directory")

        with pytest.raises(FileWriteError):
            write_whole_file(str(tmp_path / "blocker" / "out.txt"), b"data")


class TestIterDirectory:
    """Tests for iter_directory function."""

    def test_lists_files_and_directories(self, tmp_path):
        """Test entries are yielded with their directory flag."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()

        entries = sorted(iter_directory(str(tmp_path)), key=lambda e: e.name)

        assert entries == [
            DirectoryEntry(name="a.txt", is_dir=False),
            DirectoryEntry(name="sub", is_dir=True),
        ]

    def test_no_pseudo_entries(self, tmp_path):
        """Test '.' and '..' are never yielded."""
        (tmp_path / "a.txt").write_text("a")

        names = [e.name for e in iter_directory(str(tmp_path))]

        assert "." not in names
        assert ".." not in names

    def test_empty_directory(self, tmp_path):
        assert list(iter_directory(str(tmp_path))) == []

    def test_missing_directory_raises(self, tmp_path):
        """Test listing a missing directory raises on first iteration."""
        with pytest.raises(FileNotFoundError):
            list(iter_directory(str(tmp_path / "missing")))

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_to_directory_is_not_a_directory(self, tmp_path):
        """Test symlinks are reported without following them."""
        (tmp_path / "real").mkdir()
        try:
            os.symlink(tmp_path / "real", tmp_path / "link")
        except OSError:
            pytest.skip("cannot create symlinks")

        entries = {e.name: e.is_dir for e in iter_directory(str(tmp_path))}

        assert entries == {"real": True, "link": False}
