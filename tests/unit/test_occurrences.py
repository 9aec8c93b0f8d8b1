"""Unit tests for occurrence extraction and the search facade.

Each test has exactly one assertion.
"""

import dataclasses

from loguru import logger
import pytest

from linmatch.core import (
    Algorithm,
    MatchAnchor,
    count_occurrences,
    find_occurrences,
    occurrence_ends,
    occurrence_starts,
    search,
)
from linmatch.utils.logging import setup_logger

# pylint: disable=missing-function-docstring


class TestOccurrenceEnds:
    """Test detection of full-length entries."""

    def test_finds_full_length_entries(self) -> None:
        assert occurrence_ends([1, 2, 3, 0, 0, 0, 1, 2, 3], 3) == [2, 8]

    def test_zero_length_pattern_has_no_occurrences(self) -> None:
        assert occurrence_ends([0, 0, 0], 0) == []

    def test_partial_values_are_ignored(self) -> None:
        assert occurrence_ends([1, 2, 1, 2], 3) == []


class TestOccurrenceStarts:
    """Test normalization of both anchoring conventions."""

    def test_end_anchor_is_shifted_to_start(self) -> None:
        assert occurrence_starts([1, 2, 3, 0, 0, 0, 1, 2, 3], 3, MatchAnchor.END) == [0, 6]

    def test_start_anchor_is_unchanged(self) -> None:
        assert occurrence_starts([3, 0, 0, 0, 0, 0, 3, 0, 0], 3, MatchAnchor.START) == [0, 6]


class TestSearch:
    """Test the algorithm-agnostic search entry point."""

    def test_defaults_to_kmp(self) -> None:
        assert search("abc", "b").algorithm is Algorithm.KMP

    def test_kmp_result_keeps_raw_array(self) -> None:
        result = search("ABCXYZABC", "ABC", Algorithm.KMP)
        assert result.match_array == (1, 2, 3, 0, 0, 0, 1, 2, 3)

    def test_z_result_keeps_raw_array(self) -> None:
        result = search("aaaaa", "aa", Algorithm.Z)
        assert result.match_array == (2, 2, 2, 2, 1)

    def test_kmp_anchor_is_end(self) -> None:
        assert search("abc", "b", Algorithm.KMP).anchor is MatchAnchor.END

    def test_z_anchor_is_start(self) -> None:
        assert search("abc", "b", Algorithm.Z).anchor is MatchAnchor.START

    def test_result_is_frozen(self) -> None:
        result = search("abc", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.pattern_length = 5  # type: ignore[misc]

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_overlapping_occurrences(self, algorithm: Algorithm) -> None:
        assert find_occurrences("aaaaa", "aa", algorithm) == [0, 1, 2, 3]

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_empty_pattern_has_no_occurrences(self, algorithm: Algorithm) -> None:
        assert find_occurrences("abc", "", algorithm) == []

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_count_occurrences(self, algorithm: Algorithm) -> None:
        assert count_occurrences("GEEKS FOR GEEKS", "GEEK", algorithm) == 2


class TestSearchDebugLogging:
    """Test the per-search debug summary."""

    def test_debug_handler_receives_match_count(self) -> None:
        messages: list[str] = []
        setup_logger()
        logger.add(lambda message: messages.append(str(message)), level="DEBUG")
        search("GEEKS FOR GEEKS", "GEEK", Algorithm.Z)
        assert any("2 full match(es)" in message for message in messages)

    def test_no_summary_without_debug_handler(self) -> None:
        messages: list[str] = []
        setup_logger(verbose=True)
        logger.add(lambda message: messages.append(str(message)), level="INFO")
        search("GEEKS FOR GEEKS", "GEEK", Algorithm.Z)
        assert not messages
