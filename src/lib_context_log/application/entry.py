"""Fluent accumulator of explicit fields.

Purpose
-------
Attach structured fields at the call site before the context is known, then
emit with one of the level methods.

Contents
--------
* :data:`ERROR_KEY` – field name used by :meth:`Entry.with_error`.
* :class:`Entry` – the builder.

System Role
-----------
Created through :func:`lib_context_log.core.with_field` and friends. Level
methods forward to :func:`lib_context_log.application.dispatch.dispatch`.
An entry is owned by the code that built it: mutating it from several threads
needs outside locking, emitting it repeatedly once built does not.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from ..domain.context import LogContext
from ..domain.levels import Level
from .dispatch import dispatch

ERROR_KEY: Final[str] = "error"


class Entry:
    """Explicit fields waiting for a level method.

    Builder methods update the fields in place (last write wins) and return
    the same instance. Every level method is an independent dispatch: field
    sources that consume explicit fields work on a per-call copy.

    Examples
    --------
    >>> from lib_context_log.testing import RecordingAppender
    >>> sink = RecordingAppender()
    >>> ctx = LogContext(level=Level.INFO, appender=sink)
    >>> Entry().with_field("size", 2).with_fields({"size": 3, "city": "Austin"}).warn(ctx, "Hello %s", "Mary")
    >>> sink.records
    [(<Level.WARN: 3>, {'size': 3, 'city': 'Austin'}, 'Hello Mary')]
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields: dict[str, Any] = dict(fields) if fields else {}

    def __repr__(self) -> str:
        return f"Entry({self._fields!r})"

    @property
    def fields(self) -> dict[str, Any]:
        """Return a copy of the accumulated fields."""

        return dict(self._fields)

    def with_field(self, key: str, value: Any) -> Entry:
        self._fields[key] = value
        return self

    def with_fields(self, fields: Mapping[str, Any]) -> Entry:
        self._fields.update(fields)
        return self

    def with_error(self, err: BaseException) -> Entry:
        """Store ``str(err)`` under :data:`ERROR_KEY`."""

        self._fields[ERROR_KEY] = str(err)
        return self

    def log(self, ctx: LogContext | None, level: Level, *args: Any) -> None:
        dispatch(ctx, Level(level), self._fields, *args)

    def debug(self, ctx: LogContext | None, *args: Any) -> None:
        dispatch(ctx, Level.DEBUG, self._fields, *args)

    def info(self, ctx: LogContext | None, *args: Any) -> None:
        dispatch(ctx, Level.INFO, self._fields, *args)

    def print(self, ctx: LogContext | None, *args: Any) -> None:
        """Alias of :meth:`info`."""

        dispatch(ctx, Level.INFO, self._fields, *args)

    def warn(self, ctx: LogContext | None, *args: Any) -> None:
        dispatch(ctx, Level.WARN, self._fields, *args)

    def error(self, ctx: LogContext | None, *args: Any) -> None:
        dispatch(ctx, Level.ERROR, self._fields, *args)

    def fatal(self, ctx: LogContext | None, *args: Any) -> None:
        """Emit at ``FATAL``, then raise ``SystemExit(1)``."""

        dispatch(ctx, Level.FATAL, self._fields, *args)

    def panic(self, ctx: LogContext | None, *args: Any) -> None:
        """Emit at ``PANIC``, then raise :class:`~lib_context_log.domain.errors.PanicError`."""

        dispatch(ctx, Level.PANIC, self._fields, *args)
