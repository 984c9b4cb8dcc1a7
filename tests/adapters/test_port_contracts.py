"""Every shipped appender must satisfy the :class:`Appender` port."""

from __future__ import annotations

import io
import logging

import pytest
import structlog

from lib_context_log.adapters.stdlib.handler import LoggingAppender
from lib_context_log.adapters.stream.writer import StreamAppender
from lib_context_log.adapters.structured.binding import StructlogAppender
from lib_context_log.application import ports
from lib_context_log.testing import RecordingAppender


@pytest.mark.parametrize(
    "factory",
    [
        lambda: StreamAppender(io.StringIO()),
        lambda: LoggingAppender(logging.getLogger("contract")),
        lambda: StructlogAppender(structlog.get_logger("contract")),
        RecordingAppender,
    ],
)
def test_appenders_satisfy_port(factory) -> None:
    assert isinstance(factory(), ports.Appender)


def test_objects_without_append_do_not_satisfy_port() -> None:
    assert not isinstance(object(), ports.Appender)
