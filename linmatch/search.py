"""Search runner: loads the configured text and scans it with the selected algorithms."""

from dataclasses import dataclass, field
import time

from loguru import logger
from tqdm import tqdm

from linmatch.core import Algorithm, Config, SearchResult, search
from linmatch.utils import read_text_file


@dataclass
class SegmentReport:
    """Results for one scanned segment (the whole text, or a single line)."""

    line_number: int | None
    text: str
    results: dict[Algorithm, SearchResult] = field(default_factory=dict)

    @property
    def occurrences(self) -> list[int]:
        """Occurrence starts from the first algorithm that ran."""
        if not self.results:
            return []
        return next(iter(self.results.values())).occurrences

    @property
    def consistent(self) -> bool:
        """True if every algorithm found the same occurrence starts."""
        found = [result.occurrences for result in self.results.values()]
        return all(starts == found[0] for starts in found[1:])


def load_text(config: Config) -> str:
    """Return the inline text, or the contents of ``text_file``."""
    if config.text is not None:
        return config.text
    if config.text_file:
        return read_text_file(config.text_file)
    raise ValueError("No text to scan: set text or text_file")


def split_segments(text: str, by_line: bool) -> list[tuple[int | None, str]]:
    """Split text into numbered lines, or keep it whole.

    Only ``\\n`` ends a line (a trailing ``\\r`` is dropped), so other control
    characters such as form feeds stay inside their line.
    """
    if not by_line:
        return [(None, text)]
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    return list(enumerate(lines, start=1))


def scan_segment(
    line_number: int | None, text: str, pattern: str, algorithms: list[Algorithm]
) -> SegmentReport:
    """Run every algorithm on one segment and flag disagreements."""
    report = SegmentReport(line_number=line_number, text=text)
    for algorithm in algorithms:
        report.results[algorithm] = search(text, pattern, algorithm)

    if not report.consistent:
        location = f"line {line_number}" if line_number is not None else "text"
        logger.error(f"✗ Algorithms disagree on {location}:")
        for algorithm, result in report.results.items():
            logger.error(f"  {algorithm.value}: {result.occurrences}")
    return report


def run_search(config: Config) -> list[SegmentReport]:
    """Scan the configured text for the configured pattern.

    Args:
        config: Validated configuration with a pattern and a text source

    Returns:
        One SegmentReport per scanned segment
    """
    if config.pattern is None:
        raise ValueError("No pattern to search for")

    start_time = time.time()
    text = load_text(config)
    segments = split_segments(text, config.lines)
    algorithms = config.algorithms

    if config.verbose and config.lines:
        segments_iter = tqdm(segments, desc="Scanning lines", unit="line")
    else:
        segments_iter = segments

    reports = [
        scan_segment(line_number, segment, config.pattern, algorithms)
        for line_number, segment in segments_iter
    ]

    total = sum(len(report.occurrences) for report in reports)
    elapsed = time.time() - start_time
    logger.info(
        f"Found {total} occurrence(s) of a {len(config.pattern)}-character pattern "
        f"in {len(reports)} segment(s) using {', '.join(a.value for a in algorithms)} "
        f"({elapsed:.3f}s)"
    )
    return reports
