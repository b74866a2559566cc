import logging

import pytest

from flightgraph import adapt_graphs
from flightgraph.config import Settings
from flightgraph.utils.logging import configure_logging, configure_logging_from_settings, logger


@pytest.fixture
def restore_logger():
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_logging_is_idempotent(restore_logger):
    configure_logging(True, "DEBUG")
    configure_logging(True, "DEBUG")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG

    configure_logging(False)
    assert logger.level > logging.CRITICAL


def test_level_taken_from_settings(restore_logger):
    configure_logging_from_settings(Settings(log_level="ERROR"))
    assert logger.level == logging.ERROR


def test_dropped_fields_logged_at_debug(flight_log, caplog):
    caplog.set_level(logging.DEBUG, logger="flightgraph")
    adapt_graphs(flight_log, [{"label": "x", "fields": [{"name": "servo[5]"}]}])
    assert "servo[5]" in caplog.text
