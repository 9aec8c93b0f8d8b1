"""Occurrence extraction shared by the KMP and Z scanners.

The two scanners produce per-index arrays with different anchoring: KMP
records a full-length value where an occurrence ends, the Z scanner where it
starts. This module turns either array into occurrence start positions and
exposes a single ``search`` entry point that can use either algorithm.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from linmatch.core.kmp import kmp_search
from linmatch.core.types import Algorithm, MatchAnchor, Scanner
from linmatch.core.z_algorithm import z_algorithm_search
from linmatch.utils.logging import is_debug_enabled

SCANNERS: dict[Algorithm, tuple[Scanner, MatchAnchor]] = {
    Algorithm.KMP: (kmp_search, MatchAnchor.END),
    Algorithm.Z: (z_algorithm_search, MatchAnchor.START),
}


def occurrence_ends(match_array: Sequence[int], pattern_length: int) -> list[int]:
    """Return indices whose match value equals the full pattern length."""
    if pattern_length == 0:
        return []
    return [i for i, value in enumerate(match_array) if value == pattern_length]


def occurrence_starts(
    match_array: Sequence[int], pattern_length: int, anchor: MatchAnchor
) -> list[int]:
    """Convert a scanner's match array into occurrence start positions.

    Args:
        match_array: Output of ``kmp_search`` or ``z_algorithm_search``
        pattern_length: Length of the pattern that produced the array
        anchor: Where the scanner records full matches

    Returns:
        Ascending list of start indices into the text
    """
    hits = occurrence_ends(match_array, pattern_length)
    if anchor is MatchAnchor.END:
        return [i - pattern_length + 1 for i in hits]
    return hits


@dataclass(frozen=True)
class SearchResult:
    """Match array produced by one algorithm plus the occurrences it encodes."""

    algorithm: Algorithm
    pattern_length: int
    match_array: tuple[int, ...]

    @property
    def anchor(self) -> MatchAnchor:
        """Anchoring convention of ``match_array``."""
        return SCANNERS[self.algorithm][1]

    @property
    def occurrences(self) -> list[int]:
        """Start indices of every full occurrence, overlapping ones included."""
        return occurrence_starts(self.match_array, self.pattern_length, self.anchor)


def search(
    text: Sequence, pattern: Sequence, algorithm: Algorithm = Algorithm.KMP
) -> SearchResult:
    """Scan ``text`` for ``pattern`` with the chosen algorithm.

    Args:
        text: The text to scan
        pattern: The pattern to search for
        algorithm: Scanner to use

    Returns:
        SearchResult holding the raw match array
    """
    scanner, _anchor = SCANNERS[algorithm]
    match_array = scanner(text, pattern)
    # Full-match count is only computed for DEBUG handlers
    if is_debug_enabled():
        logger.debug(
            f"{algorithm.value}: scanned {len(text)} items for pattern of length "
            f"{len(pattern)}, {len(occurrence_ends(match_array, len(pattern)))} full match(es)"
        )
    return SearchResult(
        algorithm=algorithm,
        pattern_length=len(pattern),
        match_array=tuple(match_array),
    )


def find_occurrences(
    text: Sequence, pattern: Sequence, algorithm: Algorithm = Algorithm.KMP
) -> list[int]:
    """Return start indices of every occurrence of ``pattern`` in ``text``."""
    return search(text, pattern, algorithm).occurrences


def count_occurrences(
    text: Sequence, pattern: Sequence, algorithm: Algorithm = Algorithm.KMP
) -> int:
    """Return the number of (possibly overlapping) occurrences."""
    return len(find_occurrences(text, pattern, algorithm))
