"""Utility functions for LinMatch."""

from linmatch.utils.helpers import (
    expand_file_path,
    read_text_file,
    write_file_safely,
)
from linmatch.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "add_log_file_handler",
    "expand_file_path",
    "read_text_file",
    "setup_logger",
    "write_file_safely",
]
