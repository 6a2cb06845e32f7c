"""Shared test fixtures."""
import os

import pytest

from thumbswap.config import set_config


class FakeExecutor:
    """Executor double returning scripted outputs in the order given."""

    def __init__(self, outputs=None):
        self.outputs = list(outputs or [])
        self.calls = []
        self.timeouts = []

    def execute(self, args, timeout=None):
        self.calls.append(list(args))
        self.timeouts.append(timeout)
        if self.outputs:
            return self.outputs.pop(0)
        return ""

    @property
    def last_executed(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture
def fake_executor():
    """Factory for executors seeded with canned outputs."""
    return FakeExecutor


@pytest.fixture
def reset_global_config():
    """Reset the global config after each test."""
    from thumbswap import config as config_module

    original = config_module._config
    yield
    set_config(original)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every THUMBSWAP_* variable from the environment."""
    for name in list(os.environ):
        if name.startswith("THUMBSWAP_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", "/nonexistent/thumbswap-test")
