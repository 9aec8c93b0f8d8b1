"""Unit tests for the sample runs.

Each test has exactly one assertion.
"""

from linmatch.demo import kmp_search_sample, lps_sample, run_demo, z_array_sample, z_search_sample

# pylint: disable=missing-function-docstring


class TestSamples:
    """Test each sample's output."""

    def test_lps_sample(self) -> None:
        assert lps_sample()[-1] == "LPS Array: 0 1 0 1 2 0 1 2 3 4 5"

    def test_kmp_search_sample(self) -> None:
        assert kmp_search_sample()[-1] == (
            "KMP State Array: 1 2 3 4 0 1 2 3 0 0 1 2 3 4 5 6 7 8 9"
        )

    def test_z_array_sample(self) -> None:
        assert z_array_sample()[-1] == "Z-array: 17 1 0 3 1 0 0 1 0 7 1 0 3 1 0 0 0"

    def test_z_search_sample(self) -> None:
        assert z_search_sample()[-1] == (
            "Z-search Array: 4 0 2 0 0 3 0 1 0 0 9 0 2 0 0 4 0 2 0"
        )


class TestRunDemo:
    """Test the combined demo output."""

    def test_emits_every_returned_line(self) -> None:
        emitted: list[str] = []
        assert run_demo(emitted.append) == emitted

    def test_samples_are_separated_by_blank_lines(self) -> None:
        assert run_demo(lambda _line: None).count("") == 3
