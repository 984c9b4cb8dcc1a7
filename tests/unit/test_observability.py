"""Unit tests for the package's own diagnostics in ``observability``."""

from __future__ import annotations

import logging

import pytest

from lib_context_log import get_logger
from lib_context_log.observability import log_info, make_event, trace_append


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_structured_context_on_records(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="lib_context_log")
    log_info("configured", level="INFO")
    record = caplog.records[-1]
    assert record.getMessage() == "configured"
    assert getattr(record, "context") == {"level": "INFO"}


def test_make_event_names_appender_type() -> None:
    class Sink:
        pass

    event = make_event(Sink(), "WARN", None, "hi")
    assert event == {"appender": "Sink", "level": "WARN", "fields": {}, "msg": "hi"}


def test_trace_append_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_context_log")
    trace_append(object(), "INFO", {"a": 1}, "hello")
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "append"
    assert getattr(record, "context")["fields"] == {"a": 1}
