"""Environment loader adapter tests covering prefix filtering and coercion."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lib_context_log.adapters.env.default import ENV_PREFIX, DefaultEnvLoader, default_env_prefix


def test_default_env_prefix() -> None:
    assert default_env_prefix("lib-context-log") == ENV_PREFIX


def test_env_loader_filters_and_coerces() -> None:
    environ = {
        "LIB_CONTEXT_LOG_LEVEL": "debug",
        "LIB_CONTEXT_LOG_DEBUG": "false",
        "LIB_CONTEXT_LOG_": "empty suffix is skipped",
        "OTHER": "ignored",
    }
    data = DefaultEnvLoader(environ=environ).load()
    assert data == {"level": "debug", "debug": False}


def test_env_loader_accepts_prefix_with_separator() -> None:
    data = DefaultEnvLoader(environ={"DEMO_LEVEL": "3"}).load("DEMO_")
    assert data == {"level": 3}


def test_env_loader_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("LIB_CONTEXT_LOG_LEVEL", "warn")
    assert DefaultEnvLoader().load()["level"] == "warn"


SCALAR_VALUES = st.sampled_from(["0", "1", "true", "false", "3.5", "none", "debug"])
KEYS = st.sampled_from(["LEVEL", "DEBUG", "EXTRA"])


@given(st.dictionaries(KEYS, SCALAR_VALUES, max_size=3))
def test_env_loader_keys_are_lowercased_suffixes(entries) -> None:
    environ = {f"DEMO_{key}": value for key, value in entries.items()}
    environ["IGNORED"] = "1"
    data = DefaultEnvLoader(environ=environ).load("DEMO")
    assert set(data) == {key.lower() for key in entries}
