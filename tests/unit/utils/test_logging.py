"""Unit tests for logger setup."""

import logging
import colorlog
import pytest

from transcript_server.utils.logging import get_logger, resolve_level

pytestmark = pytest.mark.unit


def test_logger_has_single_colored_handler():
    logger = get_logger("transcript_server.test_single", "DEBUG")
    logger = get_logger("transcript_server.test_single", "DEBUG")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, colorlog.ColoredFormatter)


def test_default_level_is_info():
    assert get_logger("transcript_server.test_default").level == logging.INFO


@pytest.mark.parametrize("name,expected", [
    ("warning", logging.WARNING),
    ("ERROR", logging.ERROR),
    ("verbose", logging.INFO),
    (None, logging.INFO),
])
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected
