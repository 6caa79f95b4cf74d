"""Plugin lifecycle binding - keep the registry in step with plugin load/unload."""

from __future__ import annotations

from typing import Any

import structlog

from webmcp.core.registry import ToolRegistry

logger = structlog.get_logger()

PLUGIN_LOADED = "plugin:loaded"
PLUGIN_UNLOADED = "plugin:unloaded"


def bind_plugin_lifecycle(registry: ToolRegistry, event_bus: Any) -> None:
    """Subscribe ``registry`` to plugin load/unload events on ``event_bus``.

    ``event_bus`` needs only ``on(event_name, handler)``; each handler is
    called with the plugin object as its sole argument.
    """

    def on_loaded(plugin: Any) -> None:
        registry.register_plugin(plugin)

    def on_unloaded(plugin: Any) -> None:
        registry.unregister_plugin(plugin)

    event_bus.on(PLUGIN_LOADED, on_loaded)
    event_bus.on(PLUGIN_UNLOADED, on_unloaded)
    logger.debug("plugin_lifecycle_bound", events=[PLUGIN_LOADED, PLUGIN_UNLOADED])
