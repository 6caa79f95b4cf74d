"""Conversation module - plugin wiring for the manifest binder."""

from __future__ import annotations

from typing import Any, Callable

import httpx

from webmcp.core.registry import ToolRegistry
from webmcp.modules.conversation.client import DaemonClient
from webmcp.modules.conversation.manifest import MANIFEST
from webmcp.modules.conversation.tools import ConversationTools
from webmcp.shared.schemas.tools import PluginManifest


class ConversationPlugin:
    """Exposes the conversation tools through the plugin manifest contract."""

    def __init__(self, tools: ConversationTools):
        self.tools = tools

    def get_manifest(self) -> PluginManifest:
        return MANIFEST

    def get_webmcp_handlers(self) -> dict[str, Callable[..., Any]]:
        return self.tools.handlers()


def register_conversation_tools(
    registry: ToolRegistry,
    api_base: str | None = None,
    *,
    daemon_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ConversationPlugin:
    """Register the five conversation/session tools on ``registry``.

    Returns the plugin so callers can later ``registry.unregister_plugin`` it.
    """
    client = DaemonClient(daemon_url=daemon_url, api_base=api_base, transport=transport)
    plugin = ConversationPlugin(ConversationTools(client))
    registry.register_plugin(plugin)
    return plugin
