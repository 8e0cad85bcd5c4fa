"""Tests for backend logging configuration."""

from __future__ import annotations

import logging

from backend.logging_setup import LOGGER_NAME, configure


def test_configure_is_idempotent():
    configure(level="DEBUG")
    lg = configure(level="INFO")
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.INFO
    assert len(lg.handlers) == 1
    assert lg.propagate is False


def test_module_loggers_inherit_configuration():
    configure(level="WARNING")
    child = logging.getLogger("backend.scraper.fetcher")
    assert child.getEffectiveLevel() == logging.WARNING


def test_log_file_handler(tmp_path):
    log_file = tmp_path / "analyzer.log"
    lg = configure(level="INFO", log_file=log_file)
    assert len(lg.handlers) == 2

    logging.getLogger("backend.analysis").info("hello file")
    for handler in lg.handlers:
        handler.flush()

    assert "hello file" in log_file.read_text(encoding="utf-8")
