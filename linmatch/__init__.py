"""LinMatch - linear-time exact string matching.

KMP prefix-function and Z-algorithm matchers with a shared occurrence API.
"""

from linmatch.core import (
    Algorithm,
    Config,
    MatchAnchor,
    SearchResult,
    compute_lps,
    compute_z_array,
    count_occurrences,
    find_occurrences,
    kmp_search,
    load_config,
    occurrence_starts,
    search,
    z_algorithm_search,
)
from linmatch.utils.logging import setup_logger

# Names used in the algorithm literature
computeLPS = compute_lps
kmpSearch = kmp_search
computeZArray = compute_z_array
zAlgorithmSearch = z_algorithm_search

__version__ = "0.1.0"
__all__ = [
    "Algorithm",
    "Config",
    "MatchAnchor",
    "SearchResult",
    "compute_lps",
    "compute_z_array",
    "computeLPS",
    "computeZArray",
    "count_occurrences",
    "find_occurrences",
    "kmpSearch",
    "kmp_search",
    "load_config",
    "occurrence_starts",
    "search",
    "setup_logger",
    "zAlgorithmSearch",
    "z_algorithm_search",
]
