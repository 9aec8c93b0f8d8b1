"""Shared pytest fixtures."""

import sys

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default stderr handler after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
