"""Tests for shared utilities."""

import logging

import pytest

from ledger_ai.core.utils import get_logger, suppress_logs


def test_suppress_logs_silences_info(log_records: pytest.LogCaptureFixture) -> None:
    """Info records inside the block are dropped, warnings still come through."""
    logger = get_logger("ledger-ai.test")
    logger.addHandler(log_records.handler)
    with suppress_logs():
        logger.info("hidden")
        logger.warning("visible")
    logger.info("after")
    logger.removeHandler(log_records.handler)
    messages = [r.message for r in log_records.records]
    if messages != ["visible", "after"]:
        msg = f"Expected ['visible', 'after'], got {messages}"
        raise AssertionError(msg)


def test_suppress_logs_restores_after_exception() -> None:
    """Logging is re-enabled even when the wrapped block raises."""
    previous = logging.root.manager.disable
    with pytest.raises(RuntimeError), suppress_logs():
        msg = "boom"
        raise RuntimeError(msg)
    if logging.root.manager.disable != previous:
        msg = f"Expected disable level {previous}, got {logging.root.manager.disable}"
        raise AssertionError(msg)
