"""Z-array construction and Z-algorithm scanning.

Both functions maintain an inclusive window ``[left, right]`` over the scanned
sequence that is known to match a prefix of the reference sequence. Positions
inside the window reuse previously computed Z values instead of re-comparing.
"""

from collections.abc import Sequence


def _extend_window(
    scanned: Sequence, reference: Sequence, left: int, right: int, limit: int
) -> int:
    """Advance ``right`` while ``scanned[right]`` matches ``reference[right - left]``.

    Args:
        scanned: Sequence the window lives in
        reference: Sequence whose prefix is being matched
        left: Start of the window
        right: First index not yet confirmed
        limit: Maximum window length (length of the reference)

    Returns:
        First index past the matching run
    """
    end = len(scanned)
    while right < end and right - left < limit and scanned[right] == reference[right - left]:
        right += 1
    return right


def compute_z_array(s: Sequence) -> list[int]:
    """Compute the Z-array of a sequence.

    ``z[i]`` is the length of the longest substring starting at ``i`` that is
    also a prefix of ``s``. By convention ``z[0] == len(s)``.

    Args:
        s: The sequence to preprocess

    Returns:
        Z-array of ``len(s)`` entries (empty for empty input)
    """
    n = len(s)
    if n == 0:
        return []

    z = [0] * n
    z[0] = n
    left = right = 0

    for i in range(1, n):
        if i > right:
            left = right = i
            right = _extend_window(s, s, left, right, n)
            z[i] = right - left
            right -= 1
        else:
            k = i - left
            if z[k] < right - i + 1:
                z[i] = z[k]
            else:
                left = i
                right = _extend_window(s, s, left, right, n)
                z[i] = right - left
                right -= 1

    return z


def z_algorithm_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Compute, for each text index, the longest pattern prefix starting there.

    This is the Z-array construction run over ``text`` with the pattern's own
    Z-array as the lookup table. The window never grows past the pattern length.

    Args:
        text: The text to scan
        pattern: The pattern to search for

    Returns:
        Array of ``len(text)`` entries; ``result[i] == len(pattern)`` marks an
        occurrence starting at ``i``. All zeros when the pattern is empty.
    """
    text_len = len(text)
    pattern_len = len(pattern)
    z = [0] * text_len
    if pattern_len == 0:
        return z

    z_pattern = compute_z_array(pattern)
    left, right = 0, -1

    for i in range(text_len):
        if i > right:
            left = right = i
            right = _extend_window(text, pattern, left, right, pattern_len)
            z[i] = right - left
            right -= 1
        else:
            k = i - left
            if z_pattern[k] < right - i + 1:
                z[i] = z_pattern[k]
            else:
                left = i
                right = _extend_window(text, pattern, left, right, pattern_len)
                z[i] = right - left
                right -= 1

    return z
