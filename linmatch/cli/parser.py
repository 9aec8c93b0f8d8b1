"""Command-line interface for the LinMatch project."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="linmatch",
        description="Find exact pattern occurrences with the KMP or Z algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Occurrences of a pattern in inline text (KMP)
  %(prog)s --pattern ABC --text ABCXYZABC

  # Z algorithm over a file, one result per line, with raw arrays
  %(prog)s -p needle -f haystack.txt --algorithm z --lines --show-array

  # Run both algorithms and cross-check their occurrences
  %(prog)s -p aa -t aaaaa --algorithm both -v

  # Print the sample runs
  %(prog)s --demo

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "pattern": "ABABCABAB",
  "text_file": "samples/text.txt",
  "algorithm": "both",
  "lines": true,
  "output": "reports/matches.json",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input
    parser.add_argument("-p", "--pattern", type=str, help="Pattern to search for")
    parser.add_argument("-t", "--text", type=str, help="Text to scan")
    parser.add_argument("-f", "--text-file", type=str, help="UTF-8 file to scan")

    # Algorithm
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        choices=["kmp", "z", "both"],
        default="kmp",
        help="Scanner to use (both: run KMP and Z and compare occurrences)",
    )
    parser.add_argument(
        "--lines", action="store_true", help="Scan each line of the text separately"
    )
    parser.add_argument(
        "--show-array", action="store_true", help="Print the raw per-index match arrays"
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Write a JSON report to this path")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Flags
    parser.add_argument("--demo", action="store_true", help="Print the sample runs and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
