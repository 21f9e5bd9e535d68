# File: tests/utils/test_logging_config.py
"""Tests for the logging setup."""

import logging
import os

import pytest

from strawbale_construction.utils.logging_config import StrawbaleLogger, get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_logger_has_trace_method():
    logger = get_logger("strawbale_construction.tests")

    assert hasattr(logger, "trace")
    assert logging.getLevelName(StrawbaleLogger.TRACE_LEVEL) == "TRACE"


def test_trace_records_below_debug(caplog):
    logger = get_logger("strawbale_construction.tests.trace")

    with caplog.at_level(StrawbaleLogger.TRACE_LEVEL, logger="strawbale_construction.tests.trace"):
        logger.trace("bale at 800")

    assert [record.levelname for record in caplog.records] == ["TRACE"]


def test_logger_level(restore_root_logger):
    logger = get_logger("strawbale_construction.tests.level", logging.WARNING)

    assert logger.level == logging.WARNING


def test_configure_writes_log_file(tmp_path, restore_root_logger):
    log_file = StrawbaleLogger.configure(debug_mode=True, log_dir=str(tmp_path))

    assert log_file is not None
    assert os.path.dirname(log_file) == str(tmp_path)
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 2


def test_configure_console_only(tmp_path, restore_root_logger):
    log_file = StrawbaleLogger.configure(log_dir=str(tmp_path / "logs"), console_only=True)

    assert log_file is None
    assert not (tmp_path / "logs").exists()
    assert len(restore_root_logger.handlers) == 1
