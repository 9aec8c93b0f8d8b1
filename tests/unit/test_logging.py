"""Unit tests for loguru configuration.

Each test has exactly one assertion.
"""

from loguru import logger

from linmatch.utils.logging import (
    add_log_file_handler,
    is_debug_enabled,
    resolve_level,
    setup_logger,
)

# pylint: disable=missing-function-docstring


class TestResolveLevel:
    """Test flag-to-level mapping."""

    def test_default_is_warning(self) -> None:
        assert resolve_level() == "WARNING"

    def test_verbose_is_info(self) -> None:
        assert resolve_level(verbose=True) == "INFO"

    def test_debug_overrides_verbose(self) -> None:
        assert resolve_level(verbose=True, debug=True) == "DEBUG"


class TestSetupLogger:
    """Test handler installation."""

    def test_debug_handler_enables_debug(self) -> None:
        setup_logger(debug=True)
        assert is_debug_enabled() is True

    def test_default_handler_disables_debug(self) -> None:
        setup_logger()
        assert is_debug_enabled() is False

    def test_file_handler_writes_messages(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "linmatch.log"
        setup_logger()
        add_log_file_handler(log_file, verbose=True)
        logger.info("scan finished")
        logger.remove()
        assert "scan finished" in log_file.read_text(encoding="utf-8")
