"""Tests for the ``python -m tictactoe`` entry point."""

import logging

from tictactoe import __main__ as entry


def test_logging_level_names():
    assert entry._logging_level("info") == logging.INFO
    assert entry._logging_level("warning") == logging.WARNING
    assert entry._logging_level("trace") == logging.DEBUG
    assert entry._logging_level("nonsense") == logging.DEBUG


def test_main_passes_trace_to_uvicorn(monkeypatch):
    calls = {}
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "TRACE")
    monkeypatch.setenv("TICTACTOE_PORT", "9001")
    monkeypatch.setattr(entry.logging, "basicConfig", lambda **kw: calls.update(logging=kw))
    monkeypatch.setattr(entry.uvicorn, "run", lambda app, **kw: calls.update(app=app, run=kw))

    entry.main()

    assert calls["logging"]["level"] == logging.DEBUG
    assert calls["app"] == "tictactoe.ui:app"
    assert calls["run"]["log_level"] == "trace"
    assert calls["run"]["port"] == 9001
