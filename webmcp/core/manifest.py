"""Manifest binding - resolve a plugin's declared tools against its handlers."""

from __future__ import annotations

from typing import Any, Callable

import structlog

from webmcp.shared.schemas.tools import (
    LegacyTool,
    PluginManifest,
    SchemaTool,
    ToolDeclaration,
)

logger = structlog.get_logger()


def read_declarations(plugin: Any) -> list[ToolDeclaration]:
    """Return the tools declared in ``plugin.get_manifest()`` (possibly empty)."""
    manifest = plugin.get_manifest()
    if not isinstance(manifest, PluginManifest):
        manifest = PluginManifest.model_validate(manifest or {})
    return list(manifest.webmcp_tools or [])


def read_handlers(plugin: Any) -> dict[str, Callable[..., Any]]:
    """Return the plugin's name -> callable map, or {} if it exposes none."""
    getter = getattr(plugin, "get_webmcp_handlers", None)
    if not callable(getter):
        return {}
    return dict(getter() or {})


def resolve_plugin_tools(plugin: Any) -> list[tuple[ToolDeclaration, Callable[..., Any]]]:
    """Pair each declaration with its implementation.

    Declarations without a callable are dropped; manifests may advertise
    tools whose implementation is conditional.
    """
    declarations = read_declarations(plugin)
    if not declarations:
        return []

    handlers = read_handlers(plugin)
    resolved = []
    for declaration in declarations:
        fn = handlers.get(declaration.name)
        if not callable(fn):
            logger.debug("webmcp_tool_unimplemented", tool=declaration.name)
            continue
        resolved.append((declaration, fn))
    return resolved


def build_tool(declaration: ToolDeclaration, fn: Callable[..., Any]) -> LegacyTool | SchemaTool:
    """Combine manifest metadata and a callable into a tool definition."""
    if declaration.is_schema_aligned:
        return SchemaTool(
            name=declaration.name,
            description=declaration.description,
            input_schema=declaration.input_schema,
            annotations=declaration.annotations,
            execute=fn,
        )
    return LegacyTool(
        name=declaration.name,
        description=declaration.description,
        parameters=declaration.parameters or {},
        handler=fn,
    )
