"""Tool registry - owns registered tools, the caller context, and host mirroring."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

import structlog

from webmcp.core.host import (
    HostProvider,
    host_capability,
    host_definition,
    resolve_host,
)
from webmcp.core.manifest import build_tool, read_declarations, resolve_plugin_tools
from webmcp.shared.schemas.tools import (
    CallerContext,
    LegacyTool,
    SchemaTool,
    parse_tool,
)

logger = structlog.get_logger()

Tool = LegacyTool | SchemaTool


class ToolNotFoundError(KeyError):
    """Raised when invoking a tool name that is not registered."""


async def _run(tool: Tool, params: dict[str, Any], context: CallerContext) -> Any:
    if isinstance(tool, SchemaTool):
        result = tool.execute(params, context)
    else:
        result = tool.handler(params, context)
    if inspect.isawaitable(result):
        result = await result
    return result


class ToolRegistry:
    """Registers tools locally and mirrors them into an optional host surface.

    The host is probed on every operation, either from the fixed ``host``
    object or by calling ``host_provider``. Local registration and invocation
    work whether or not a host is present.
    """

    def __init__(
        self,
        host: Any = None,
        host_provider: HostProvider | None = None,
    ):
        self._tools: dict[str, Tool] = {}
        self._auth_context = CallerContext()
        self._host = host
        self._host_provider = host_provider

    # -- Host bridge ----------------------------------------------------------

    def _resolve_host(self) -> Any | None:
        return resolve_host(self._host, self._host_provider)

    def is_supported(self) -> bool:
        """Whether a host surface is currently reachable."""
        return self._resolve_host() is not None

    def _bind(self, tool: Tool) -> Callable[..., Any]:
        """Build the callable handed to the host for ``tool``.

        The context is read when the callable is invoked, before the returned
        coroutine is awaited. The live definition is preferred over the one
        captured here so re-registration under the same name takes effect.
        """
        name = tool.name

        def invoke(params: Mapping[str, Any] | None = None, *_: Any) -> Any:
            context = self.get_auth_context()
            current = self._tools.get(name, tool)
            return _run(current, dict(params or {}), context)

        invoke.__name__ = f"invoke_{name}"
        return invoke

    def _mirror(self, host: Any, tool: Tool) -> None:
        try:
            host.register_tool(host_definition(tool, self._bind(tool)))
        except Exception as e:
            logger.warning("host_register_failed", tool=tool.name, error=str(e))

    def _withdraw(self, host: Any, name: str) -> None:
        unregister = host_capability(host, "unregister_tool")
        if unregister is None:
            logger.warning("host_unregister_unavailable", tool=name)
            return
        try:
            unregister(name)
        except Exception as e:
            logger.warning("host_unregister_failed", tool=name, error=str(e))

    # -- Caller context -------------------------------------------------------

    def set_auth_context(self, context: CallerContext | Mapping[str, Any] | None) -> None:
        """Replace the caller context passed to all subsequent invocations."""
        if isinstance(context, CallerContext):
            self._auth_context = context.model_copy(deep=True)
        else:
            self._auth_context = CallerContext.model_validate(dict(context or {}))

    def get_auth_context(self) -> CallerContext:
        """Return a copy of the current caller context."""
        return self._auth_context.model_copy(deep=True)

    # -- Registration ---------------------------------------------------------

    def register(self, tool: Tool | Mapping[str, Any]) -> None:
        """Register ``tool``, replacing any existing tool with the same name."""
        tool = parse_tool(tool)
        replaced = tool.name in self._tools
        self._tools[tool.name] = tool
        logger.info("tool_registered", tool=tool.name, shape=tool.kind, replaced=replaced)

        host = self._resolve_host()
        if host is not None:
            self._mirror(host, tool)

    def unregister(self, name: str) -> None:
        """Remove ``name``; unknown names are ignored."""
        if self._tools.pop(name, None) is None:
            return
        logger.info("tool_unregistered", tool=name)

        host = self._resolve_host()
        if host is not None:
            self._withdraw(host, name)

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def list(self) -> list[str]:
        """Names of all registered tools."""
        return list(self._tools)

    @property
    def size(self) -> int:
        return len(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def clear(self) -> None:
        """Unregister every tool."""
        for name in self.list():
            self.unregister(name)

    # -- Invocation / description ---------------------------------------------

    async def invoke(self, name: str, params: Mapping[str, Any] | None = None) -> Any:
        """Invoke a registered tool locally with the current caller context."""
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return await self._bind(tool)(params)

    def describe(self) -> list[dict[str, Any]]:
        """JSON-Schema descriptors for every registered tool, in either shape."""
        return [tool.describe() for tool in self._tools.values()]

    # -- Host synchronisation -------------------------------------------------

    def sync_host(self) -> bool:
        """Publish every registered tool to the host surface.

        Used when a surface becomes available after tools were registered.
        Prefers the surface's bulk ``provide_context`` and falls back to one
        ``register_tool`` per tool. Returns False if no surface is present.
        """
        host = self._resolve_host()
        if host is None:
            return False

        provide = host_capability(host, "provide_context")
        if provide is None:
            for tool in self._tools.values():
                self._mirror(host, tool)
            return True

        definitions = [host_definition(tool, self._bind(tool)) for tool in self._tools.values()]
        try:
            provide({"tools": definitions})
        except Exception as e:
            logger.warning("host_provide_context_failed", tools=len(definitions), error=str(e))
        return True

    def detach_host(self) -> bool:
        """Withdraw every tool from the host surface, keeping local state.

        Returns False if no surface is present.
        """
        host = self._resolve_host()
        if host is None:
            return False

        clear = host_capability(host, "clear_context")
        if clear is None:
            for name in self.list():
                self._withdraw(host, name)
            return True

        try:
            clear()
        except Exception as e:
            logger.warning("host_clear_context_failed", error=str(e))
        return True

    # -- Manifest binding -----------------------------------------------------

    def register_plugin(self, plugin: Any) -> None:
        """Register every declared tool of ``plugin`` that has an implementation."""
        resolved = resolve_plugin_tools(plugin)
        for declaration, fn in resolved:
            self.register(build_tool(declaration, fn))
        if resolved:
            logger.info("plugin_tools_registered", tools=[d.name for d, _ in resolved])

    def unregister_plugin(self, plugin: Any) -> None:
        """Unregister every tool name in ``plugin``'s current manifest.

        Names are removed regardless of who registered them last.
        """
        names = [declaration.name for declaration in read_declarations(plugin)]
        for name in names:
            self.unregister(name)
        if names:
            logger.info("plugin_tools_unregistered", tools=names)
