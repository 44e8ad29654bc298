"""
Logging infrastructure.

Provides logging utilities for the infrastructure layer.
"""
import logging


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``ordering`` logger hierarchy.

    Every module logs through ``logging.getLogger(__name__)``, so one
    handler on the package logger covers the whole application.

    Args:
        level: Log level name (DEBUG, INFO, ...)

    Returns:
        The configured package logger
    """
    logger = get_logger("ordering")
    logger.setLevel(level.upper())
    return logger
