"""Unit tests for file helpers.

Each test has exactly one assertion.
"""

import pytest

from linmatch.utils.helpers import expand_file_path, read_text_file, write_file_safely

# pylint: disable=missing-function-docstring


class TestWriteFileSafely:
    """Test file writing with parent directory creation."""

    def test_creates_missing_parent_directories(self, tmp_path) -> None:
        target = tmp_path / "a" / "b" / "out.txt"
        write_file_safely(target, lambda f: f.write("hit"))
        assert target.read_text(encoding="utf-8") == "hit"

    def test_parent_that_is_a_file_raises(self, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OSError):
            write_file_safely(blocker / "out.txt", lambda f: f.write("hit"))


class TestReadHelpers:
    """Test path expansion and text reading."""

    def test_empty_path_expands_to_none(self) -> None:
        assert expand_file_path("") is None

    def test_reads_utf8_text(self, tmp_path) -> None:
        source = tmp_path / "text.txt"
        source.write_text("naïve", encoding="utf-8")
        assert read_text_file(source) == "naïve"
