"""Host capability surface - probing and tool translation.

A host surface is any object exposing ``register_tool(definition)`` and
``unregister_tool(name)``; it may also offer ``provide_context(options)`` and
``clear_context()``. Whether ``register_tool`` is callable is the only
presence test: anything else counts as no surface at all.
"""

from __future__ import annotations

from typing import Any, Callable

import structlog

from webmcp.shared.schemas.tools import LegacyTool, SchemaTool

logger = structlog.get_logger()

HostProvider = Callable[[], Any]


def is_host_surface(candidate: Any) -> bool:
    """Return True if ``candidate`` looks like a usable host surface."""
    return candidate is not None and callable(getattr(candidate, "register_tool", None))


def resolve_host(host: Any = None, provider: HostProvider | None = None) -> Any | None:
    """Probe for a host surface without raising.

    ``provider`` (when given) is called on every probe so a surface that
    appears or disappears at runtime is picked up; otherwise ``host`` is used
    as-is.
    """
    candidate = host
    if provider is not None:
        try:
            candidate = provider()
        except Exception as e:
            logger.warning("host_probe_failed", error=str(e))
            return None
    return candidate if is_host_surface(candidate) else None


def host_capability(host: Any, name: str) -> Callable[..., Any] | None:
    """Return an optional surface method such as ``provide_context`` if callable."""
    method = getattr(host, name, None)
    return method if callable(method) else None


def host_definition(tool: LegacyTool | SchemaTool, invoke: Callable[..., Any]) -> dict[str, Any]:
    """Translate a tool into the dict shape handed to ``register_tool``."""
    if isinstance(tool, LegacyTool):
        return {
            "name": tool.name,
            "description": tool.description,
            "parameters": {
                name: param.model_dump(exclude_none=True)
                for name, param in tool.parameters.items()
            },
            "handler": invoke,
        }

    definition: dict[str, Any] = {
        "name": tool.name,
        "description": tool.description,
        "inputSchema": tool.json_schema(),
        "execute": invoke,
    }
    if tool.annotations is not None:
        definition["annotations"] = tool.annotations.model_dump(by_alias=True, exclude_none=True)
    return definition
