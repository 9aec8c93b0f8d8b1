"""Core matching algorithms for LinMatch."""

from .config import Config, load_config
from .kmp import compute_lps, kmp_search
from .occurrences import (
    SCANNERS,
    SearchResult,
    count_occurrences,
    find_occurrences,
    occurrence_ends,
    occurrence_starts,
    search,
)
from .types import Algorithm, MatchAnchor, Scanner
from .z_algorithm import compute_z_array, z_algorithm_search

__all__ = [
    "Algorithm",
    "Config",
    "MatchAnchor",
    "SCANNERS",
    "Scanner",
    "SearchResult",
    "compute_lps",
    "compute_z_array",
    "count_occurrences",
    "find_occurrences",
    "kmp_search",
    "load_config",
    "occurrence_ends",
    "occurrence_starts",
    "search",
    "z_algorithm_search",
]
