"""Tests for the hookstack command line entry point."""

import json
import logging

import pytest

from hookstack.app import describe_callback, main


@pytest.fixture(autouse=True)
def logger_calls(monkeypatch):
    """Record configure_logger calls instead of replacing the root handlers."""
    calls = []
    monkeypatch.setattr(
        "hookstack.app.configure_logger", lambda **kwargs: calls.append(kwargs)
    )
    return calls


@pytest.fixture
def config_path(sample_hooks, write_hook_config):
    return write_hook_config(
        """
        [startup]
        one = sample_hooks:first
        two = sample_hooks:second
        count = sample_hooks:total

        [broken]
        boom = sample_hooks:explode
        """
    )


def test_main_runs_event_and_prints_payload(config_path, capsys):
    """Test that the event runs with the JSON payload and the result is printed."""
    exit_code = main(["startup", "-c", config_path, "-d", '{"user": "alice"}'])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {"user": "alice", "calls": ["first", "second"], "total": 2}


def test_main_lists_events(config_path, capsys):
    """Test that --list prints each event with its callbacks."""
    assert main(["--list", "-c", config_path]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "startup",
        "    sample_hooks:first",
        "    sample_hooks:second",
        "    sample_hooks:total",
        "broken",
        "    sample_hooks:explode",
    ]


def test_main_unknown_event(config_path, caplog):
    """Test that running an event without hooks fails with exit code 1."""
    assert main(["missing", "-c", config_path]) == 1
    assert "No hooks registered for event: missing" in caplog.text


def test_main_callback_errors_propagate(config_path):
    """Test that exceptions raised by hooks are not swallowed."""
    with pytest.raises(RuntimeError, match="hook failed"):
        main(["broken", "-c", config_path])


def test_describe_callback_falls_back_to_repr():
    """Test that objects without a qualified name are described by repr."""

    class Handler:
        def __call__(self, payload):
            pass

        def __repr__(self):
            return "<Handler>"

    handler = Handler()
    assert describe_callback(handler) == f"{__name__}:<Handler>"


def test_main_configures_logger(config_path, logger_calls, tmp_path):
    """Test that the log level and directory flags reach configure_logger."""
    main(["startup", "-c", config_path, "-l", str(logging.DEBUG), "--log-dir", str(tmp_path)])

    assert logger_calls == [{"log_level": logging.DEBUG, "log_dir": tmp_path}]
