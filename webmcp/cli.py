"""Command-line access to the WebMCP conversation tools."""

from __future__ import annotations

import asyncio
import json

import click

from webmcp.core.registry import ToolRegistry
from webmcp.modules.conversation.client import DaemonRequestError
from webmcp.modules.conversation.plugin import register_conversation_tools
from webmcp.modules.conversation.tools import ToolInputError
from webmcp.shared.config import get_settings
from webmcp.shared.logging_config import configure_logging
from webmcp.shared.schemas.tools import CallerContext


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


def parse_params(pairs: tuple[str, ...]) -> dict:
    """Turn ``key=value`` pairs into a dict, decoding JSON values where possible."""
    params = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--param")
        try:
            params[key] = json.loads(raw)
        except ValueError:
            params[key] = raw
    return params


def _build_registry(daemon_url: str | None, api_base: str | None) -> ToolRegistry:
    registry = ToolRegistry()
    register_conversation_tools(registry, api_base, daemon_url=daemon_url)
    return registry


@click.group()
@click.option("--daemon-url", default=None, help="WOPR daemon origin (default from DAEMON_URL)")
@click.option("--api-base", default=None, help="REST path prefix (default from API_BASE)")
@click.pass_context
def cli(ctx, daemon_url, api_base):
    """WebMCP tool registry CLI."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    ctx.obj = {"daemon_url": daemon_url, "api_base": api_base}


@cli.command()
@click.pass_context
def tools(ctx):
    """Print the registered tools as JSON-Schema descriptors."""
    registry = _build_registry(ctx.obj["daemon_url"], ctx.obj["api_base"])
    click.echo(json.dumps(registry.describe(), indent=2))


@cli.command()
@click.argument("tool_name")
@click.option("--param", "-p", "pairs", multiple=True, help="Tool input as key=value (repeatable)")
@click.option("--token", envvar="WOPR_TOKEN", default=None, help="Bearer token for the daemon")
@click.option("--user-id", default=None, help="Caller user ID")
@click.option("--session-id", default=None, help="Caller session ID")
@click.pass_context
def call(ctx, tool_name, pairs, token, user_id, session_id):
    """Invoke a tool against the daemon and print its result."""
    registry = _build_registry(ctx.obj["daemon_url"], ctx.obj["api_base"])
    if tool_name not in registry:
        raise click.ClickException(
            f"Unknown tool: {tool_name}. Available: {', '.join(registry.list())}"
        )

    registry.set_auth_context(
        CallerContext(user_id=user_id, session_id=session_id, token=token)
    )
    try:
        result = run_async(registry.invoke(tool_name, parse_params(pairs)))
    except (ToolInputError, DaemonRequestError) as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(result, indent=2))


if __name__ == "__main__":
    cli()
