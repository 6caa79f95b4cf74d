"""Shared test fixtures for the registry test suite.

Provides fake host surfaces, event buses, and plugin factories so the
registry can be exercised without a real model-context host.
"""

from __future__ import annotations

from collections import defaultdict
from unittest.mock import MagicMock

import pytest

from webmcp.core.registry import ToolRegistry


# ---------------------------------------------------------------------------
# Host surfaces
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_host():
    """Host surface with only the required register/unregister entry points."""
    return MagicMock(spec=["register_tool", "unregister_tool"])


@pytest.fixture
def mock_context_host():
    """Host surface that also offers bulk provide_context/clear_context."""
    return MagicMock(
        spec=["register_tool", "unregister_tool", "provide_context", "clear_context"]
    )


@pytest.fixture
def registry():
    """Registry with no host surface."""
    return ToolRegistry()


@pytest.fixture
def hosted_registry(mock_host):
    """Registry mirroring into ``mock_host``."""
    return ToolRegistry(host=mock_host)


# ---------------------------------------------------------------------------
# Plugins and event bus
# ---------------------------------------------------------------------------


class FakeEventBus:
    """Minimal ``on``/``emit`` event bus."""

    def __init__(self):
        self.handlers = defaultdict(list)

    def on(self, event, handler):
        self.handlers[event].append(handler)

    def emit(self, event, *args):
        for handler in self.handlers[event]:
            handler(*args)


@pytest.fixture
def event_bus():
    return FakeEventBus()


class FakePlugin:
    def __init__(self, manifest, handlers=None):
        self.manifest = manifest
        self.handlers = handlers

    def get_manifest(self):
        return self.manifest

    def get_webmcp_handlers(self):
        return self.handlers


@pytest.fixture
def make_plugin():
    """Factory for plugins declaring ``webmcpTools`` with optional handlers.

    ``tools`` may be names (legacy declarations are generated) or full
    declaration dicts.
    """

    def _make(tools=None, handlers=None, with_handlers=True) -> FakePlugin:
        declarations = None
        if tools is not None:
            declarations = [
                t if isinstance(t, dict) else {"name": t, "description": f"{t} tool"}
                for t in tools
            ]
        plugin = FakePlugin({"name": "test-plugin", "webmcpTools": declarations}, handlers or {})
        if not with_handlers:
            plugin.get_webmcp_handlers = None
        return plugin

    return _make
