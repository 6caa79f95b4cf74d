"""Conversation and session tools backed by the WOPR daemon REST API."""

from webmcp.modules.conversation.client import DaemonClient, DaemonRequestError
from webmcp.modules.conversation.plugin import ConversationPlugin, register_conversation_tools
from webmcp.modules.conversation.tools import ConversationTools, ToolInputError

__all__ = [
    "ConversationPlugin",
    "ConversationTools",
    "DaemonClient",
    "DaemonRequestError",
    "ToolInputError",
    "register_conversation_tools",
]
