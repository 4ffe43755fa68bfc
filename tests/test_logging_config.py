"""Tests for the package logging setup."""

import logging

from LoggingConfig import setup_logging, get_logger


def test_repeated_setup_keeps_one_handler():
    setup_logging()
    logger = setup_logging(logging.INFO)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_module_loggers_write_to_log_file(tmp_path):
    log_file = tmp_path / "session.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    get_logger("tests").info("matrix loaded")
    for handler in logger.handlers:
        handler.flush()
    assert "matrixtool.tests: matrix loaded" in log_file.read_text(encoding="utf-8")
    setup_logging()
