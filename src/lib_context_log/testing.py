"""Testing helpers that keep log output observable and failure paths predictable.

Purpose
    Give test suites (ours and consumers') an in-memory appender, and give the
    CLI a deterministic way to exercise the ``PANIC`` path.

Contents
    - ``RecordingAppender``: keeps every appended entry in memory.
    - ``FAILURE_MESSAGE``: stable message used when forcing a failure.
    - ``i_should_fail``: emits a ``PANIC`` entry so callers can assert on the
      propagated :class:`~lib_context_log.domain.errors.PanicError`.
"""

from __future__ import annotations

from typing import Any, Final, Mapping

from .application.dispatch import dispatch
from .domain.context import LogContext
from .domain.levels import Level

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message emitted when ``i_should_fail`` triggers a failure sequence."""


class RecordingAppender:
    """Appender that stores ``(level, fields, msg)`` tuples in :attr:`records`.

    Fields are copied on receipt so later mutation by the caller does not
    rewrite history.
    """

    def __init__(self) -> None:
        self.records: list[tuple[Level, dict[str, Any], str]] = []
        self.contexts: list[LogContext] = []

    def append(self, ctx: LogContext, level: Level, fields: Mapping[str, Any], msg: str) -> None:
        self.contexts.append(ctx)
        self.records.append((level, dict(fields), msg))

    @property
    def messages(self) -> list[str]:
        return [msg for _, _, msg in self.records]

    def clear(self) -> None:
        self.records.clear()
        self.contexts.clear()


def i_should_fail(appender: RecordingAppender | None = None) -> None:
    """Emit :data:`FAILURE_MESSAGE` at ``PANIC`` level.

    Why
        Validates that higher-level orchestrators preserve the
        :class:`~lib_context_log.domain.errors.PanicError` raised after the
        appender has seen the entry.
    Side Effects
        Appends one record to *appender* (a fresh :class:`RecordingAppender`
        when omitted) and raises.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    lib_context_log.domain.errors.PanicError: i should fail
    """

    sink = appender if appender is not None else RecordingAppender()
    dispatch(LogContext(level=Level.PANIC, appender=sink), Level.PANIC, None, FAILURE_MESSAGE)
