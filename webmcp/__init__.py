"""WebMCP tool registry for WOPR plugins."""

from webmcp.core import (
    PLUGIN_LOADED,
    PLUGIN_UNLOADED,
    ToolNotFoundError,
    ToolRegistry,
    bind_plugin_lifecycle,
)
from webmcp.shared.schemas.tools import (
    CallerContext,
    LegacyTool,
    ParameterSchema,
    PluginManifest,
    SchemaTool,
    ToolAnnotations,
    ToolDeclaration,
)

__version__ = "0.2.0"

__all__ = [
    "PLUGIN_LOADED",
    "PLUGIN_UNLOADED",
    "CallerContext",
    "LegacyTool",
    "ParameterSchema",
    "PluginManifest",
    "SchemaTool",
    "ToolAnnotations",
    "ToolDeclaration",
    "ToolNotFoundError",
    "ToolRegistry",
    "bind_plugin_lifecycle",
]
