"""Tests for the CLI in main.py."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog
from typer.testing import CliRunner

from idioms.snippets import Snippet, _REGISTRY
from main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("IDIOMS_STYLE", "IDIOMS_VERBOSE", "IDIOMS_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """The CLI callback reconfigures logging; undo it after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    idioms_level = logging.getLogger("idioms").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("idioms").setLevel(idioms_level)
    structlog.reset_defaults()


def _log_events(output: str) -> list[dict]:
    events = []
    for line in output.splitlines():
        try:
            parsed = json.loads(line)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict) and "event" in parsed:
            events.append(parsed)
    return events


def test_list_shows_snippets() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "flatten" in result.output


def test_run_json_output() -> None:
    result = runner.invoke(app, ["run", "flatten", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"flat_array": [1, 1.1, 1.11, 2, 3, 4, 5]}


def test_run_old_style() -> None:
    result = runner.invoke(app, ["run", "obj-from-tuples", "--style", "old", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"obj": {"foo": 1, "bar": 2}}


def test_run_pretty_output() -> None:
    result = runner.invoke(app, ["run", "cond-add-arr-item"])
    assert result.exit_code == 0
    assert "--headless" in result.output


def test_run_unknown_snippet() -> None:
    result = runner.invoke(app, ["run", "nope"])
    assert result.exit_code == 2
    assert "No snippet named 'nope'" in result.output
    assert "Available:" in result.output


def test_run_unknown_style() -> None:
    result = runner.invoke(app, ["run", "flatten", "--style", "ancient"])
    assert result.exit_code == 2
    assert "got 'ancient'" in result.output


def test_run_explicit_style_overrides_bad_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDIOMS_STYLE", "bogus")
    result = runner.invoke(app, ["run", "flatten", "--style", "new", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"flat_array": [1, 1.1, 1.11, 2, 3, 4, 5]}


def test_run_rejects_bad_environment_style_when_used(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDIOMS_STYLE", "bogus")
    result = runner.invoke(app, ["run", "flatten"])
    assert result.exit_code == 2
    assert "got 'bogus'" in result.output


def test_run_uses_environment_style(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDIOMS_STYLE", "old")
    monkeypatch.setenv("IDIOMS_VERBOSE", "1")
    monkeypatch.setenv("IDIOMS_LOG_JSON", "1")
    result = runner.invoke(app, ["run", "trim", "--json"])
    assert result.exit_code == 0
    events = _log_events(result.output)
    assert any(e["event"] == "snippet.run" and e["style"] == "old" for e in events)


def test_verbose_json_logging_emits_run_event() -> None:
    result = runner.invoke(app, ["--verbose", "--log-json", "run", "flatten", "--json"])
    assert result.exit_code == 0
    events = _log_events(result.output)
    assert len(events) == 1
    assert events[0]["event"] == "snippet.run"
    assert events[0]["level"] == "debug"
    assert events[0]["snippet"] == "flatten"


def test_default_logging_hides_debug_events() -> None:
    result = runner.invoke(app, ["--log-json", "run", "flatten", "--json"])
    assert result.exit_code == 0
    assert _log_events(result.output) == []


def test_compare_all_agree() -> None:
    result = runner.invoke(app, ["compare"])
    assert result.exit_code == 0
    assert "5 snippet(s) agree" in result.output


def test_compare_mismatch_exits_one(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(
        _REGISTRY, ("trim", "new"), Snippet("trim", "new", "broken", lambda: {"leading_trimmed_str": ""})
    )
    result = runner.invoke(app, ["compare", "trim"])
    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "1 snippet(s) differ" in result.output


def test_compare_unknown_snippet() -> None:
    result = runner.invoke(app, ["compare", "nope"])
    assert result.exit_code == 2
    assert "No snippet named 'nope'" in result.output
