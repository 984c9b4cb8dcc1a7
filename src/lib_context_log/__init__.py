"""Public package surface for the context-aware logging facade.

Application code logs through small level functions that take a
:class:`LogContext` first; the context decides the threshold, the appender
that renders the entry, and any fields added to every entry. See
:mod:`lib_context_log.core` for the full list.
"""

from __future__ import annotations

from .core import (
    BACKGROUND,
    ERROR_KEY,
    Appender,
    ContextualFields,
    Defaults,
    Entry,
    FieldSource,
    InvalidLevel,
    LazyFields,
    Level,
    LogContext,
    LogError,
    Logger,
    MissingAppender,
    PanicError,
    StaticFields,
    appender_of,
    as_field_source,
    background,
    configure_defaults,
    debug,
    error,
    fatal,
    field_source_of,
    get_defaults,
    info,
    level_of,
    log,
    new,
    panic,
    parse_level,
    print_,
    reset_defaults,
    warn,
    with_error,
    with_field,
    with_fields,
)
from .observability import get_logger
from .testing import i_should_fail

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
    "get_logger",
    "i_should_fail",
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
