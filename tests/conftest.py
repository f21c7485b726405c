"""Shared test fixtures for isologger test suite."""

import io

import pytest

from isologger import registry as _registry_mod
from isologger.handlers import MemorySink


@pytest.fixture(autouse=True)
def _reset_registry():
    """Give each test a fresh module-level registry, restored afterwards."""
    old = _registry_mod._registry
    _registry_mod._registry = None
    yield
    _registry_mod._registry = old


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def sink():
    """A MemorySink recording (channel, text) pairs."""
    return MemorySink()


@pytest.fixture
def calls():
    """A recording handler; returns (handler, list of recorded calls)."""
    recorded = []

    def handler(messages, level_name, context):
        recorded.append((list(messages), level_name, context))

    return handler, recorded
