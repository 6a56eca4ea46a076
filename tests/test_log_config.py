import sys
from io import StringIO

import pytest
from loguru import logger

from leapwire.log_config import configure_logging


def test_configure_logging_default_level():
    """Test configure_logging with default INFO level and stderr sink."""
    logger.remove()
    configure_logging()

    assert len(logger._core.handlers) == 1
    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level("INFO").no


def test_configure_logging_custom_level_is_case_insensitive():
    logger.remove()
    configure_logging(level="debug")
    handler_id = list(logger._core.handlers.keys())[-1]
    handler = logger._core.handlers[handler_id]
    assert handler._levelno == logger.level("DEBUG").no


def test_configure_logging_removes_existing_handlers():
    """Test that configure_logging removes pre-existing handlers."""
    logger.remove()
    logger.add(lambda _: None, level="ERROR")
    logger.add(lambda _: None, level="ERROR")
    assert len(logger._core.handlers) == 2

    configure_logging(level="WARNING")

    assert len(logger._core.handlers) == 1


def test_configure_logging_custom_sink_filters_by_level():
    """Messages below the configured level do not reach the sink."""
    sink = StringIO()
    configure_logging(level="WARNING", sink=sink)

    logger.info("should not appear")
    logger.warning("dataforseo: retrying request")

    output = sink.getvalue()
    assert "should not appear" not in output
    assert "dataforseo: retrying request" in output
    assert "WARNING" in output


@pytest.fixture(autouse=True)
def reset_logger_after_test():
    """Fixture to reset Loguru to a default state after each test in this module."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="INFO")
