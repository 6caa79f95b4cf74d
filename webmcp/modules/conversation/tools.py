"""Conversation and session tool implementations."""

from __future__ import annotations

import time
import uuid
from typing import Any, Callable

import structlog

from webmcp.modules.conversation.client import DaemonClient, path_segment
from webmcp.shared.config import get_settings
from webmcp.shared.schemas.tools import CallerContext

logger = structlog.get_logger()


class ToolInputError(ValueError):
    """A required tool input is missing."""


def _require(params: dict[str, Any], key: str) -> Any:
    value = params.get(key)
    if not value:
        raise ToolInputError(f"Parameter '{key}' is required")
    return value


class ConversationTools:
    """Tools for chatting with the WOPR bot and managing its sessions.

    Each method takes ``(params, caller)`` and validates its inputs before
    any request leaves the process.
    """

    def __init__(self, client: DaemonClient, default_session: str | None = None):
        self.client = client
        self.default_session = default_session or get_settings().default_session

    async def send_message(self, params: dict[str, Any], caller: CallerContext) -> Any:
        """Send a message and return the bot's full response."""
        text = _require(params, "text")
        session = params.get("sessionId") or self.default_session
        return await self.client.request(
            f"/sessions/{path_segment(session)}/inject",
            caller,
            method="POST",
            json={"message": text},
        )

    async def get_conversation(self, params: dict[str, Any], caller: CallerContext) -> Any:
        session_id = _require(params, "sessionId")
        limit = params.get("limit")
        return await self.client.request(
            f"/sessions/{path_segment(session_id)}/history",
            caller,
            params={"limit": str(limit)} if limit else None,
        )

    async def list_sessions(self, params: dict[str, Any], caller: CallerContext) -> Any:
        return await self.client.request("/sessions", caller)

    async def new_session(self, params: dict[str, Any], caller: CallerContext) -> Any:
        """Create a session with a generated name and optional model override."""
        body: dict[str, Any] = {"name": f"session-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"}
        model = params.get("model")
        if model:
            body["context"] = f"Use model: {model}"
        logger.info("session_create_requested", session=body["name"], model=model)
        return await self.client.request("/sessions", caller, method="POST", json=body)

    async def get_status(self, params: dict[str, Any], caller: CallerContext) -> Any:
        return await self.client.request("/status", caller)

    def handlers(self) -> dict[str, Callable[..., Any]]:
        """Map manifest tool names to their implementations."""
        return {
            "sendMessage": self.send_message,
            "getConversation": self.get_conversation,
            "listSessions": self.list_sessions,
            "newSession": self.new_session,
            "getStatus": self.get_status,
        }
