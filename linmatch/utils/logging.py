"""Logging configuration for LinMatch using loguru."""

from pathlib import Path
import sys

from loguru import logger

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
PLAIN_FORMAT = "<level>{message}</level>"


def resolve_level(verbose: bool = False, debug: bool = False) -> str:
    """Map the verbose/debug flags to a loguru level name (debug wins)."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Replace loguru's default handler with a stderr handler for the CLI.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages with timestamps and locations
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=DEBUG_FORMAT if debug else PLAIN_FORMAT,
        level=resolve_level(verbose, debug),
        colorize=True,
    )


def is_debug_enabled() -> bool:
    """Check if any configured handler accepts DEBUG messages."""
    # pylint: disable=protected-access
    for handler in logger._core.handlers.values():
        if handler.levelno <= 10:
            return True
    return False


def add_log_file_handler(log_file: str | Path, verbose: bool = False, debug: bool = False) -> None:
    """Add an uncolored file sink next to the existing handlers.

    Args:
        log_file: Path to log file (parent directories are created)
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages
    """
    if debug:
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
    else:
        file_format = "{message}"

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        format=file_format,
        level=resolve_level(verbose, debug),
        colorize=False,
        encoding="utf-8",
    )
