"""Logging configuration for netflix-migrate."""

import logging
import sys
from contextlib import contextmanager
from typing import Generator

# Standard log format for netflix-migrate
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s | %(message)s"

ROOT_LOGGER_NAME = "netflix_migrate"

# Common log level constants
DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def setup_logging(
    level: int = logging.WARNING,
    verbose: bool = False,
    simple: bool = False,
) -> None:
    """Configure root logger to write to stderr.

    Standard output is reserved for exported rating data, so log records
    always go to stderr.

    Args:
        level: Base logging level (default WARNING).
        verbose: If True, override level to DEBUG.
        simple: If True, use simple format without timestamps.
    """
    if verbose:
        level = DEBUG
    log_format = LOG_FORMAT_SIMPLE if simple else LOG_FORMAT
    logging.basicConfig(level=level, format=log_format, stream=sys.stderr)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, INFO))


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name. If None, returns the root netflix_migrate logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or ROOT_LOGGER_NAME)


@contextmanager
def log_level(level: int, logger_name: str | None = None) -> Generator[None, None, None]:
    """Context manager to temporarily change log level.

    Args:
        level: Temporary log level to set.
        logger_name: Logger name to modify. If None, modifies root logger.

    Example:
        with log_level(logging.DEBUG, "netflix_migrate.pipeline"):
            # Debug logging enabled for pipeline modules
            await pipeline.run(request)
    """
    logger = logging.getLogger(logger_name)
    original_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(original_level)


__all__ = [
    "setup_logging",
    "get_logger",
    "log_level",
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "ROOT_LOGGER_NAME",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]
