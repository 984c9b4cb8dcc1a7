from __future__ import annotations

import pytest
import structlog
from structlog.testing import capture_logs

from lib_context_log import Level
from lib_context_log.adapters.structured.binding import StructlogAppender


@pytest.mark.parametrize(
    ("level", "method"),
    [
        (Level.PANIC, "critical"),
        (Level.FATAL, "critical"),
        (Level.ERROR, "error"),
        (Level.WARN, "warning"),
        (Level.INFO, "info"),
        (Level.DEBUG, "debug"),
    ],
)
def test_levels_map_onto_structlog_methods(level: Level, method: str) -> None:
    with capture_logs() as logs:
        StructlogAppender(structlog.get_logger()).append(None, level, {}, "hello")
    assert logs == [{"event": "hello", "log_level": method}]


def test_fields_are_bound_as_context() -> None:
    with capture_logs() as logs:
        StructlogAppender().append(None, Level.WARN, {"size": 1, "location": "Austin"}, "Hello Mary")
    assert logs == [{"event": "Hello Mary", "size": 1, "location": "Austin", "log_level": "warning"}]
