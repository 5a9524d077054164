"""Pytest fixtures for hookstack tests."""

import sys
import textwrap

import pytest

from hookstack.lib.events import EventRegistry

SAMPLE_HOOKS = textwrap.dedent(
    """
    def first(payload):
        payload.setdefault("calls", []).append("first")


    def second(payload):
        payload.setdefault("calls", []).append("second")


    def third(payload):
        payload.setdefault("calls", []).append("third")


    def total(payload):
        payload["total"] = len(payload.get("calls", []))


    def explode(payload):
        raise RuntimeError("hook failed")


    NOT_CALLABLE = 42


    class Namespace:
        @staticmethod
        def nested(payload):
            payload.setdefault("calls", []).append("nested")
    """
)


@pytest.fixture
def registry():
    """Create an empty EventRegistry."""
    return EventRegistry()


@pytest.fixture
def sample_hooks(tmp_path, monkeypatch):
    """Make an importable `sample_hooks` module with a few callbacks."""
    (tmp_path / "sample_hooks.py").write_text(SAMPLE_HOOKS, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, "sample_hooks", raising=False)
    import sample_hooks

    yield sample_hooks
    sys.modules.pop("sample_hooks", None)


@pytest.fixture
def write_hook_config(tmp_path):
    """Return a helper writing an INI hook config and returning its path."""

    def _write(content: str) -> str:
        path = tmp_path / "hooks.ini"
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return str(path)

    return _write
