"""Shared fixtures."""
import logging

import pytest

from roman_arabic_calculator.common.logger import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers added by configure_logging so they never outlive a test's captured stderr."""
    yield
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
