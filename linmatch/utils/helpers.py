"""File helpers with consistent error reporting."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | None) -> str | None:
    """Expand ``~`` in a file path; returns None for an empty path."""
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_text_file(file_path: str | Path) -> str:
    """Read a UTF-8 text file, logging a readable error before re-raising.

    Args:
        file_path: Path to the file (may contain ~)

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If reading is denied
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    file_str = expand_file_path(str(file_path)) or str(file_path)
    try:
        with open(file_str, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"✗ Text file not found: {file_str}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading text file: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading text file {file_str}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write a UTF-8 file through ``content_writer``, creating missing parent directories.

    Args:
        file_path: Path to the file to write (may contain ~)
        content_writer: Callable that takes a file handle and writes content
        operation_name: Description of the operation for error messages

    Raises:
        PermissionError: If the directory or file cannot be written
        OSError: For any other filesystem failure
    """
    path = Path(expand_file_path(str(file_path)) or str(file_path))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied {operation_name}: {path}")
        logger.error("  Please check file and directory permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error {operation_name} {path}: {e}")
        raise
