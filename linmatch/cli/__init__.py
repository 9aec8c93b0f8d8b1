"""Command-line interface for LinMatch."""

from linmatch.cli.parser import create_parser

__all__ = ["create_parser"]
