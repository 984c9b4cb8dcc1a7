"""Dispatch engine: decide, merge, format, emit.

Purpose
-------
Implement the single control path every log call goes through, plus the
context accessors it relies on.

Contents
--------
* :func:`level_of` / :func:`appender_of` / :func:`field_source_of` – typed
  lookups with process-default fallback.
* :func:`dispatch` – the decide-merge-format-emit sequence.

System Role
-----------
Level functions in :mod:`lib_context_log.core`, :class:`Entry` and
:class:`Logger` all forward here. The engine is synchronous and re-entrant;
the only blocking is whatever the appender does.
"""

from __future__ import annotations

import os
import sys
import threading
from types import MappingProxyType
from typing import Any, Mapping, NoReturn

from ..domain.context import BACKGROUND, LogContext
from ..domain.errors import MissingAppender, PanicError
from ..domain.fields import ContextualFields, FieldSource
from ..domain.levels import Level
from ..observability import trace_append
from .defaults import Defaults, get_defaults
from .formatting import format_message
from .merge import resolve_fields
from .ports import Appender

_NO_FIELDS: Mapping[str, Any] = MappingProxyType({})


def level_of(ctx: LogContext | None, defaults: Defaults | None = None) -> Level:
    """Return the threshold attached to *ctx*, else the default level.

    Examples
    --------
    >>> level_of(LogContext().with_level(Level.INFO))
    <Level.INFO: 4>
    """

    defaults = defaults or get_defaults()
    ctx = defaults.context if ctx is None else ctx
    return defaults.level if ctx.level is None else ctx.level


def appender_of(ctx: LogContext | None, defaults: Defaults | None = None) -> Appender | None:
    """Return the appender attached to *ctx*, else the default appender.

    :data:`~lib_context_log.domain.context.BACKGROUND` always resolves to the
    default appender.
    """

    defaults = defaults or get_defaults()
    ctx = defaults.context if ctx is None else ctx
    if ctx is BACKGROUND or ctx.appender is None:
        return defaults.appender
    return ctx.appender


def field_source_of(ctx: LogContext | None, defaults: Defaults | None = None) -> FieldSource | None:
    """Return the field source attached to *ctx*, if any."""

    defaults = defaults or get_defaults()
    ctx = defaults.context if ctx is None else ctx
    return ctx.field_source


def dispatch(
    ctx: LogContext | None,
    level: Level,
    fields: Mapping[str, Any] | None,
    *args: Any,
    templated: bool = True,
) -> None:
    """Emit one entry through the appender resolved from *ctx*.

    Why
    ----
    Keeps filtering, field resolution, formatting and the FATAL/PANIC
    follow-up in one place so every calling convention behaves the same.

    What
    ----
    1. ``None`` becomes the default context and *level* is coerced to
       :class:`Level` (an unknown integer raises ``ValueError``).
    2. Entries less severe than the threshold return immediately: no field
       source call, no formatting, no appender call.
    3. A missing appender raises :class:`MissingAppender`.
    4. Explicit *fields* are merged with the context's field source
       (context fields win). Only a contextual source, which may delete keys,
       receives a copy; the caller's mapping is never modified.
    5. *args* are formatted; *templated* ``False`` forces print-style joining.
    6. The appender receives ``(ctx, level, fields, msg)``.
    7. ``FATAL`` then ends the process with status 1: ``SystemExit(1)`` on
       the main thread, an immediate exit after flushing the standard streams
       elsewhere. ``PANIC`` raises :class:`PanicError` carrying the message
       in the calling thread.

    Examples
    --------
    >>> from lib_context_log.testing import RecordingAppender
    >>> sink = RecordingAppender()
    >>> ctx = LogContext(level=Level.ERROR, appender=sink)
    >>> dispatch(ctx, Level.ERROR, None, "Hello %s", "Bob")
    >>> dispatch(ctx, Level.INFO, None, "Hello %s", "Alice")
    >>> sink.messages
    ['Hello Bob']
    """

    defaults = get_defaults()
    if ctx is None:
        ctx = defaults.context
    level = Level(level)

    if level > level_of(ctx, defaults):
        return

    appender = appender_of(ctx, defaults)
    if appender is None:
        raise MissingAppender()

    source = field_source_of(ctx, defaults)
    if isinstance(source, ContextualFields):
        explicit = dict(fields) if fields else {}
    else:
        explicit = fields or _NO_FIELDS
    resolved = resolve_fields(explicit, source, ctx, level, args)
    msg = format_message(args, templated=templated)

    if defaults.debug:
        trace_append(appender, level, resolved, msg)
    appender.append(ctx, level, resolved, msg)

    if level == Level.FATAL:
        _exit_fatal()
    if level == Level.PANIC:
        raise PanicError(msg)


def _exit_fatal() -> NoReturn:
    """End the process with status 1.

    The main thread raises ``SystemExit(1)`` so hosts and tests can intercept
    it. ``threading`` discards ``SystemExit`` raised in any other thread, so a
    worker flushes the standard streams and exits the process directly.
    """

    if threading.current_thread() is threading.main_thread():
        raise SystemExit(1)
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()
    os._exit(1)
