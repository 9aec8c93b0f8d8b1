"""Type definitions for LinMatch."""

from collections.abc import Callable, Sequence
from enum import Enum


class Algorithm(Enum):
    """Exact matching algorithm used to scan a text."""

    KMP = "kmp"
    Z = "z"


class MatchAnchor(Enum):
    """Which end of an occurrence a full-length match value is recorded at."""

    END = "end"  # KMP state array
    START = "start"  # Z-search array


# Every scanner takes (text, pattern) and returns one integer per text index
Scanner = Callable[[Sequence, Sequence], list[int]]
