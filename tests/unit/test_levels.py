"""Level ordering, naming and parsing."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_context_log import InvalidLevel, Level, parse_level


def test_levels_ordered_from_most_to_least_severe() -> None:
    assert list(Level) == [Level.PANIC, Level.FATAL, Level.ERROR, Level.WARN, Level.INFO, Level.DEBUG]
    assert Level.PANIC < Level.FATAL < Level.ERROR < Level.WARN < Level.INFO < Level.DEBUG


@pytest.mark.parametrize("level", list(Level))
def test_parse_round_trips_string_form(level: Level) -> None:
    assert parse_level(str(level)) is level


def test_string_and_format_use_names() -> None:
    assert str(Level.WARN) == "WARN"
    assert f"[{Level.ERROR}]" == "[ERROR]"
    assert f"{Level.INFO:>6}" == "  INFO"


@pytest.mark.parametrize("text", ["warn", "WARNING", "Warning", "wArN"])
def test_parse_accepts_warning_synonyms_in_any_case(text: str) -> None:
    assert parse_level(text) is Level.WARN


@pytest.mark.parametrize("text", ["", "verbose", " info", "trace", "5"])
def test_parse_rejects_unknown_text(text: str) -> None:
    with pytest.raises(InvalidLevel):
        parse_level(text)


@given(st.text(max_size=8).filter(lambda s: s.lower() not in {"panic", "fatal", "error", "warn", "warning", "info", "debug"}))
def test_parse_rejects_everything_else(text: str) -> None:
    with pytest.raises(InvalidLevel):
        parse_level(text)


def test_logging_mapping() -> None:
    assert Level.PANIC.to_logging() == logging.CRITICAL
    assert Level.FATAL.to_logging() == logging.CRITICAL
    assert Level.ERROR.to_logging() == logging.ERROR
    assert Level.WARN.to_logging() == logging.WARNING
    assert Level.INFO.to_logging() == logging.INFO
    assert Level.DEBUG.to_logging() == logging.DEBUG
