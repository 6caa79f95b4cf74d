"""Tool registry core: registry, host bridge, manifest and lifecycle binding."""

from webmcp.core.lifecycle import PLUGIN_LOADED, PLUGIN_UNLOADED, bind_plugin_lifecycle
from webmcp.core.registry import ToolNotFoundError, ToolRegistry

__all__ = [
    "PLUGIN_LOADED",
    "PLUGIN_UNLOADED",
    "ToolNotFoundError",
    "ToolRegistry",
    "bind_plugin_lifecycle",
]
