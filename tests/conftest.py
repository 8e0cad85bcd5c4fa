"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest

from backend.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_backend_logger():
    """Drop handlers bound to streams captured by a previous test."""
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.propagate = True
