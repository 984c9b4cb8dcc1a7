"""Classification of field sources at construction time."""

from __future__ import annotations

import functools

import pytest

from lib_context_log.domain.fields import ContextualFields, LazyFields, StaticFields, as_field_source


def test_mapping_becomes_static_copy() -> None:
    original = {"a": 1}
    source = as_field_source(original)
    original["a"] = 2

    assert isinstance(source, StaticFields)
    assert source.fields == {"a": 1}


def test_variants_pass_through() -> None:
    source = LazyFields(dict)
    assert as_field_source(source) is source


def test_zero_argument_callable_is_lazy() -> None:
    calls = []

    def produce():
        calls.append(1)
        return {"n": len(calls)}

    source = as_field_source(produce)
    assert isinstance(source, LazyFields)
    assert source.resolve(None, None, {}, ()) == {"n": 1}
    assert source.resolve(None, None, {}, ()) == {"n": 2}


def test_four_argument_callable_is_contextual() -> None:
    def produce(ctx, level, fields, args):
        return {"args": args}

    source = as_field_source(produce)
    assert isinstance(source, ContextualFields)
    assert source.resolve(None, None, {}, ("x",)) == {"args": ("x",)}


def test_partial_is_classified_by_remaining_signature() -> None:
    def produce(prefix, ctx, level, fields, args):
        return {"prefix": prefix}

    assert isinstance(as_field_source(functools.partial(produce, "p")), ContextualFields)


@pytest.mark.parametrize("bad", [lambda a: {}, lambda a, b, c: {}, 42, "fields"])
def test_unsupported_sources_raise_type_error(bad) -> None:
    with pytest.raises(TypeError):
        as_field_source(bad)
