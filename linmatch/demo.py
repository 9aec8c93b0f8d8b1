"""Sample runs of the four matching primitives."""

from collections.abc import Callable

from linmatch.core import compute_lps, compute_z_array, kmp_search, z_algorithm_search
from linmatch.reports import format_array

SAMPLE_PREFIX_PATTERN = "AABAACAABAA"
SAMPLE_Z_STRING = "aabaabcaxaabaabcy"
SAMPLE_TEXT = "ABABDABACDABABCABAB"
SAMPLE_PATTERN = "ABABCABAB"


def lps_sample() -> list[str]:
    return [
        f"Pattern: {SAMPLE_PREFIX_PATTERN}",
        f"LPS Array: {format_array(compute_lps(SAMPLE_PREFIX_PATTERN))}",
    ]


def kmp_search_sample() -> list[str]:
    return [
        f"Text: {SAMPLE_TEXT}",
        f"Pattern: {SAMPLE_PATTERN}",
        f"KMP State Array: {format_array(kmp_search(SAMPLE_TEXT, SAMPLE_PATTERN))}",
    ]


def z_array_sample() -> list[str]:
    return [
        f"String: {SAMPLE_Z_STRING}",
        f"Z-array: {format_array(compute_z_array(SAMPLE_Z_STRING))}",
    ]


def z_search_sample() -> list[str]:
    return [
        f"Text: {SAMPLE_TEXT}",
        f"Pattern: {SAMPLE_PATTERN}",
        f"Z-search Array: {format_array(z_algorithm_search(SAMPLE_TEXT, SAMPLE_PATTERN))}",
    ]


def run_demo(emit: Callable[[str], None] = print) -> list[str]:
    """Emit every sample run, separated by blank lines.

    Args:
        emit: Receives each output line (defaults to ``print``)

    Returns:
        All emitted lines
    """
    lines: list[str] = []
    for sample in (lps_sample, kmp_search_sample, z_array_sample, z_search_sample):
        if lines:
            lines.append("")
        lines.extend(sample())
    for line in lines:
        emit(line)
    return lines
