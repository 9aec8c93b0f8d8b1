"""Human-readable and JSON rendering of search results."""

import json
from pathlib import Path
from typing import Any, Iterable, TextIO

from loguru import logger

from linmatch.search import SegmentReport
from linmatch.utils import write_file_safely


def format_array(values: Iterable[int]) -> str:
    """Render an integer array as space-separated values."""
    return " ".join(str(value) for value in values)


def format_report(reports: list[SegmentReport], show_array: bool = False) -> list[str]:
    """Render one block of lines per scanned segment.

    Args:
        reports: Segment reports from ``run_search``
        show_array: Include each algorithm's raw match array

    Returns:
        Output lines without trailing newlines
    """
    lines: list[str] = []
    for report in reports:
        label = "Text" if report.line_number is None else f"Line {report.line_number}"
        lines.append(f"{label}: {format_array(report.occurrences) or '-'}")
        if show_array:
            for algorithm, result in report.results.items():
                lines.append(f"  {algorithm.value}: {format_array(result.match_array)}")
        if not report.consistent:
            lines.append("  ✗ algorithms disagree")
    return lines


def build_json_report(pattern: str, reports: list[SegmentReport]) -> dict[str, Any]:
    """Build the JSON-serializable summary of a run."""
    segments = []
    for report in reports:
        segments.append(
            {
                "line": report.line_number,
                "length": len(report.text),
                "occurrences": report.occurrences,
                "consistent": report.consistent,
                "arrays": {
                    algorithm.value: list(result.match_array)
                    for algorithm, result in report.results.items()
                },
            }
        )
    return {
        "pattern": pattern,
        "total_occurrences": sum(len(segment["occurrences"]) for segment in segments),
        "segments": segments,
    }


def write_json_report(
    output_path: str | Path, pattern: str, reports: list[SegmentReport]
) -> None:
    """Write the JSON report of a run to ``output_path``."""
    data = build_json_report(pattern, reports)

    def write_content(f: TextIO) -> None:
        json.dump(data, f, indent=2)
        f.write("\n")

    write_file_safely(output_path, write_content, "writing JSON report")
    logger.info(f"✓ Report written to {output_path}")
