"""Shared fixtures keeping process-wide defaults isolated between tests."""

from __future__ import annotations

import io

import pytest

from lib_context_log import Level, LogContext
from lib_context_log.adapters.stream.writer import StreamAppender
from lib_context_log.application.defaults import reset_defaults
from lib_context_log.testing import RecordingAppender


@pytest.fixture(autouse=True)
def isolated_defaults():
    """Start every test from the built-in defaults, ignoring the real environment."""

    reset_defaults(environ={})
    yield
    reset_defaults(environ={})


@pytest.fixture()
def sink() -> RecordingAppender:
    return RecordingAppender()


@pytest.fixture()
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def stream_ctx(buffer: io.StringIO) -> LogContext:
    """Debug-level context writing lines into ``buffer``."""

    return LogContext(level=Level.DEBUG, appender=StreamAppender(buffer))
