"""Composition root for ``lib_context_log``.

Purpose
-------
Provide the public, context-first logging functions and the factories for
entries and context-bound loggers. Everything here is a thin phrase over
:func:`lib_context_log.application.dispatch.dispatch`.

Contents
--------
* :func:`debug` / :func:`info` / :func:`print_` / :func:`warn` /
  :func:`error` / :func:`fatal` / :func:`panic` – level functions taking the
  context first.
* :func:`log` – the same with the level as an argument.
* :func:`with_field` / :func:`with_fields` / :func:`with_error` – start a
  fresh :class:`Entry`.
* :func:`new` – build a :class:`Logger` bound to one context.
* :func:`background` – return :data:`BACKGROUND`, or the configured default
  context.

System Role
-----------
Consumers import from here (or from the package root). ``print_`` carries a
trailing underscore so the builtin is not shadowed on ``from ... import *``.

Examples
--------
>>> import io
>>> from lib_context_log.adapters.stream.writer import StreamAppender
>>> buf = io.StringIO()
>>> ctx = LogContext(level=Level.ERROR, appender=StreamAppender(buf))
>>> error(ctx, "Hello %s", "Bob")
>>> info(ctx, "Hello %s", "Alice")
>>> error(ctx, "Hello %s %s", "Mary", "Kay")
>>> print(buf.getvalue(), end="")
[ERROR] Hello Bob
[ERROR] Hello Mary Kay
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .application.defaults import Defaults, configure_defaults, get_defaults, reset_defaults
from .application.dispatch import appender_of, dispatch, field_source_of, level_of
from .application.entry import ERROR_KEY, Entry
from .application.logger import Logger
from .application.ports import Appender
from .domain.context import BACKGROUND, LogContext
from .domain.errors import InvalidLevel, LogError, MissingAppender, PanicError
from .domain.fields import ContextualFields, FieldSource, LazyFields, StaticFields, as_field_source
from .domain.levels import Level, parse_level


def log(ctx: LogContext | None, level: Level, *args: Any) -> None:
    """Emit *args* at *level* through *ctx*."""

    dispatch(ctx, Level(level), None, *args)


def debug(ctx: LogContext | None, *args: Any) -> None:
    """Emit a ``DEBUG`` entry."""

    dispatch(ctx, Level.DEBUG, None, *args)


def info(ctx: LogContext | None, *args: Any) -> None:
    """Emit an ``INFO`` entry."""

    dispatch(ctx, Level.INFO, None, *args)


def print_(ctx: LogContext | None, *args: Any) -> None:
    """Emit an ``INFO`` entry (alias of :func:`info`)."""

    dispatch(ctx, Level.INFO, None, *args)


def warn(ctx: LogContext | None, *args: Any) -> None:
    """Emit a ``WARN`` entry."""

    dispatch(ctx, Level.WARN, None, *args)


def error(ctx: LogContext | None, *args: Any) -> None:
    """Emit an ``ERROR`` entry."""

    dispatch(ctx, Level.ERROR, None, *args)


def fatal(ctx: LogContext | None, *args: Any) -> None:
    """Emit a ``FATAL`` entry, then raise ``SystemExit(1)``.

    The exit happens only when the entry passes the level gate.
    """

    dispatch(ctx, Level.FATAL, None, *args)


def panic(ctx: LogContext | None, *args: Any) -> None:
    """Emit a ``PANIC`` entry, then raise :class:`PanicError` with the message.

    Examples
    --------
    >>> from lib_context_log.testing import RecordingAppender
    >>> sink = RecordingAppender()
    >>> try:
    ...     panic(LogContext(appender=sink), "Hello %s", "Bob")
    ... except PanicError as exc:
    ...     print(exc.message, sink.messages)
    Hello Bob ['Hello Bob']
    """

    dispatch(ctx, Level.PANIC, None, *args)


def with_field(key: str, value: Any) -> Entry:
    """Return a new :class:`Entry` holding ``key=value``."""

    return Entry({key: value})


def with_fields(fields: Mapping[str, Any]) -> Entry:
    """Return a new :class:`Entry` holding a copy of *fields*."""

    return Entry(fields)


def with_error(err: BaseException) -> Entry:
    """Return a new :class:`Entry` holding ``str(err)`` under :data:`ERROR_KEY`.

    Examples
    --------
    >>> with_error(ValueError("disk full")).fields
    {'error': 'disk full'}
    """

    return Entry().with_error(err)


def new(ctx: LogContext | None = None) -> Logger:
    """Return a :class:`Logger` bound to *ctx*."""

    return Logger(ctx)


def background() -> LogContext:
    """Return the context used for ``None``: the configured default context."""

    return get_defaults().context


__all__ = [
    "Appender",
    "BACKGROUND",
    "ContextualFields",
    "Defaults",
    "ERROR_KEY",
    "Entry",
    "FieldSource",
    "InvalidLevel",
    "LazyFields",
    "Level",
    "LogContext",
    "LogError",
    "Logger",
    "MissingAppender",
    "PanicError",
    "StaticFields",
    "appender_of",
    "as_field_source",
    "background",
    "configure_defaults",
    "debug",
    "error",
    "fatal",
    "field_source_of",
    "get_defaults",
    "info",
    "level_of",
    "log",
    "new",
    "panic",
    "parse_level",
    "print_",
    "reset_defaults",
    "warn",
    "with_error",
    "with_field",
    "with_fields",
]
