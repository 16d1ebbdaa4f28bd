"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they don't outlive a test's streams."""
    yield
    logger = logging.getLogger("eng_blogs")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
