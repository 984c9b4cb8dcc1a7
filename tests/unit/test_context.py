"""Copy-on-derive behaviour of :class:`LogContext`."""

from __future__ import annotations

import dataclasses

import pytest

from lib_context_log import BACKGROUND, Level, LogContext, StaticFields
from lib_context_log.domain.fields import ContextualFields, LazyFields
from lib_context_log.testing import RecordingAppender


def test_derivation_never_mutates_parent() -> None:
    parent = LogContext().with_level(Level.ERROR)
    child = parent.with_level(Level.DEBUG).with_appender(RecordingAppender()).with_fields({"a": 1})

    assert parent.level is Level.ERROR
    assert parent.appender is None
    assert parent.field_source is None
    assert child.level is Level.DEBUG
    assert isinstance(child.field_source, StaticFields)


def test_context_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        BACKGROUND.level = Level.DEBUG  # type: ignore[misc]


def test_values_are_read_only_and_inherited() -> None:
    ctx = LogContext().with_value("request_id", "r-1")
    child = ctx.with_value("user", "bob")

    assert child.value("request_id") == "r-1"
    assert child.value("user") == "bob"
    assert ctx.value("user") is None
    assert ctx.value("user", "nobody") == "nobody"
    with pytest.raises(TypeError):
        ctx.values["user"] = "eve"  # type: ignore[index]


def test_with_fields_replaces_previous_source() -> None:
    ctx = LogContext().with_fields({"a": 1}).with_fields(lambda: {"b": 2})
    assert isinstance(ctx.field_source, LazyFields)


def test_with_fields_classifies_contextual_callables() -> None:
    ctx = LogContext().with_fields(lambda ctx, level, fields, args: {})
    assert isinstance(ctx.field_source, ContextualFields)


def test_with_fields_rejects_wrong_arity_at_construction() -> None:
    with pytest.raises(TypeError):
        LogContext().with_fields(lambda a, b: {})


def test_with_level_accepts_plain_integers() -> None:
    assert LogContext().with_level(4).level is Level.INFO


def test_contexts_compare_by_identity() -> None:
    assert LogContext() != LogContext()
    assert BACKGROUND == BACKGROUND
