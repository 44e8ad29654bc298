"""Tests for logging setup."""
import logging

from ordering.infrastructure.logging import LOG_FORMAT, configure_logging, get_logger


def test_get_logger_adds_single_handler():
    logger = get_logger("ordering.tests.single_handler")
    get_logger("ordering.tests.single_handler")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("ordering")
    previous = logger.level
    try:
        configured = configure_logging("debug")

        assert configured is logger
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
