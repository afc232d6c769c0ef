# tests/test_logging.py

import logging

import pytest
from rich.logging import RichHandler

from calconv.logging import ThirdPartyPrefixFilter, config_console_handler, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(name):
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def test_prefix_filter():
    f = ThirdPartyPrefixFilter()
    own = _record("calconv.display.presets")
    other = _record("urllib3.connectionpool")
    assert f.filter(own) and own.prefix == ""
    assert f.filter(other) and other.prefix == "[urllib3]"


def test_console_handler_levels():
    assert config_console_handler().level == logging.WARNING
    assert config_console_handler(level=logging.INFO).level == logging.INFO
    handler = config_console_handler(level=logging.INFO, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert isinstance(handler, RichHandler)


@pytest.mark.parametrize(
    "verbosity,expected",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_setup_logging_verbosity(root_logger, verbosity, expected):
    handler = setup_logging(verbosity=verbosity, color=False)
    assert handler in root_logger.handlers
    assert handler.level == expected
    assert root_logger.level == expected


def test_debug_mode(root_logger):
    handler = setup_logging(debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    assert root_logger.level == logging.DEBUG
