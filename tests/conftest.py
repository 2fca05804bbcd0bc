"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_bdrate_logger():
    """Isolate tests from handlers bound to a previous CliRunner's stderr."""
    logger = logging.getLogger("bdrate")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
