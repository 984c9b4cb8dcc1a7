"""Message formatting: template substitution versus print-style joining."""

from __future__ import annotations

import pytest

from lib_context_log.application.formatting import format_message, render


class Planet:
    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return f"planet {self.name}"


class Opaque:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<opaque>"


class LoudError(Exception):
    def __str__(self) -> str:
        return "loud failure"


def test_no_arguments_yield_empty_message() -> None:
    assert format_message([]) == ""


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["Hello %s", "Bob"], "Hello Bob"),
        (["Hello %s %s", "Mary", "Kay"], "Hello Mary Kay"),
        (["Goodbye %d", 3], "Goodbye 3"),
        (["%.1f%%", 99.5], "99.5%"),
    ],
)
def test_string_first_argument_is_a_template(args, expected) -> None:
    assert format_message(args) == expected


def test_single_template_is_left_untouched() -> None:
    assert format_message(["100% done"]) == "100% done"


def test_println_style_joins_with_spaces() -> None:
    assert format_message(["Hello", "Bob"], templated=False) == "Hello Bob"
    assert format_message(["Hello %s", "Bob"], templated=False) == "Hello %s Bob"


def test_mismatched_template_falls_back_to_joining() -> None:
    assert format_message(["Hello", "Bob"]) == "Hello Bob"
    assert format_message(["%d items", "many"]) == "%d items many"


def test_error_first_argument_uses_its_message() -> None:
    assert format_message([LoudError()]) == "loud failure"
    assert format_message([ValueError("bad"), "input"]) == "bad input"


def test_display_capability_before_fallback() -> None:
    assert format_message([Planet("Venus")]) == "planet Venus"
    assert format_message([Opaque()]) == "<opaque>"
    assert format_message([Planet("Mars"), Opaque(), 7]) == "planet Mars <opaque> 7"


def test_error_checked_before_display() -> None:
    assert render(LoudError()) == "loud failure"


def test_non_string_first_argument_never_templates() -> None:
    assert format_message([Planet("%s"), "x"]) == "planet %s x"
