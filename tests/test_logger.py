"""Tests for logging configuration (utils/logger.py)."""

import logging

import pytest

from correlationvector.engine import CorrelationVectorEngine
from correlationvector.settings import CorrelationVectorSettings
from correlationvector.utils.logger import get_logger


def test_get_logger_configures_once():
    """Test repeated calls don't attach duplicate handlers."""
    logger = get_logger("correlationvector.tests.once")
    get_logger("correlationvector.tests.once")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)


def test_get_logger_propagates_to_host():
    """Test records reach the host application's handlers."""
    logger = get_logger("correlationvector.tests.propagate")

    assert logger.propagate is True
    assert not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    )


def test_get_logger_leaves_level_unset(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    logger = get_logger("correlationvector.tests.unset")

    assert logger.level == logging.NOTSET


def test_get_logger_level_override():
    logger = get_logger("correlationvector.tests.debug", level="debug")

    assert logger.level == logging.DEBUG


def test_get_logger_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    logger = get_logger("correlationvector.tests.env")

    assert logger.level == logging.WARNING


def test_freeze_is_logged_at_debug(caplog: pytest.LogCaptureFixture):
    """Test running out of room is a debug event seen by host handlers."""
    engine = CorrelationVectorEngine(settings=CorrelationVectorSettings())
    received = "ABCDEFGHIJKLMNOP." + "1" * 45

    with caplog.at_level(logging.DEBUG, logger="correlationvector.engine"):
        engine.extend(received)

    freeze_records = [r for r in caplog.records if "freezing" in r.getMessage()]
    assert len(freeze_records) == 1
    assert freeze_records[0].levelno == logging.DEBUG
    assert freeze_records[0].name == "correlationvector.engine"
