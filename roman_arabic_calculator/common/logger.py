"""Package-wide logger writing to stderr."""
import logging
import sys

LOGGER_NAME = "roman_arabic_calculator"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
# Stay silent until configure_logging() is called by the entry point
logger.addHandler(logging.NullHandler())


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a stderr handler to the package logger and set its level.

    Calling it again replaces the previous stream handler, so the entry point
    and the tests can both configure it safely.

    :param str level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    :return: The configured package logger
    :rtype: logging.Logger
    """
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
