"""Knuth-Morris-Pratt prefix function and scanner.

The scanner reports match progress per text index rather than a list of hits:
``result[i]`` is the length of the pattern prefix matched after consuming
``text[i]``. A value equal to ``len(pattern)`` marks an occurrence ending at ``i``.
"""

from collections.abc import Sequence


def compute_lps(pattern: Sequence) -> list[int]:
    """Compute the longest-proper-prefix-suffix (LPS) array of a pattern.

    ``lps[i]`` is the length of the longest proper prefix of ``pattern[0..i]``
    that is also a suffix of it. ``lps[0]`` is always 0.

    Args:
        pattern: The pattern to preprocess

    Returns:
        LPS array with one entry per pattern character (empty for empty pattern)
    """
    m = len(pattern)
    lps = [0] * m
    i = 1
    j = 0  # Length of the current matched prefix

    while i < m:
        if pattern[i] == pattern[j]:
            j += 1
            lps[i] = j
            i += 1
        elif j != 0:
            # Fall back without advancing i
            j = lps[j - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Scan text with the KMP automaton and record match state per position.

    After a successful comparison the matched length is stored at the index
    just consumed. On a mismatch with no partial match the current index is
    recorded as 0. After a full match the state falls back through the LPS
    array so overlapping occurrences are still reported.

    Args:
        text: The text to scan
        pattern: The pattern to search for

    Returns:
        Match-state array of ``len(text)`` entries, or an empty list when the
        pattern is empty
    """
    n = len(text)
    m = len(pattern)
    if m == 0:
        return []

    lps = compute_lps(pattern)
    states = [0] * n
    i = 0  # Index into text
    j = 0  # Index into pattern

    while i < n:
        if pattern[j] == text[i]:
            j += 1
            states[i] = j
            i += 1

        if j == m:
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                states[i] = 0
                i += 1

    return states
