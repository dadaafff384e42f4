"""
Express Starter Logging Utilities

Simple logging setup using Python's standard logging library.

Usage:
    from express_starter.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Copying template")
    logger.debug("Rewrite target missing, skipping")
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "express_starter"
DEFAULT_FORMAT = '[%(asctime)s] %(levelname)-8s | %(name)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Loggers below ``express_starter`` propagate to the package logger, which
    is the only one that carries a handler (see ``setup_logging``).

    Args:
        name: Logger name (typically __name__)
        level: Optional log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        logging.Logger instance
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper()))
    return logger


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None,
    date_format: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger for CLI use.

    Logs go to stderr so they never mix with the CLI's own output. Calling
    this again replaces the previous handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom log format
        date_format: Custom date format
    """
    if level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT
    ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    return logger
