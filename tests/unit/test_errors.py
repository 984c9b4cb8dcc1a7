from __future__ import annotations

from lib_context_log.domain.errors import InvalidLevel, LogError, MissingAppender, PanicError


def test_error_hierarchy() -> None:
    assert issubclass(InvalidLevel, LogError)
    assert issubclass(InvalidLevel, ValueError)
    assert issubclass(MissingAppender, LogError)
    assert issubclass(PanicError, LogError)
    for exception in (InvalidLevel("x"), MissingAppender(), PanicError("boom")):
        assert isinstance(exception, LogError)


def test_panic_error_carries_message() -> None:
    err = PanicError("Hello Bob")
    assert err.message == "Hello Bob"
    assert err.args == ("Hello Bob",)


def test_invalid_level_keeps_offending_text() -> None:
    err = InvalidLevel("loud")
    assert err.text == "loud"
    assert str(err) == "invalid level: loud"
