"""Conversation module manifest - tool declarations."""

from webmcp.shared.schemas.tools import PluginManifest, ToolAnnotations, ToolDeclaration

MANIFEST = PluginManifest(
    name="conversation",
    version="0.2.0",
    description="Chat with the WOPR bot and manage its sessions.",
    webmcp_tools=[
        ToolDeclaration(
            name="sendMessage",
            description="Send a message to the WOPR bot and return the full response.",
            input_schema={
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": "The message text to send",
                    },
                    "sessionId": {
                        "type": "string",
                        "description": (
                            "Session name to send the message in. "
                            "If omitted, uses the default session."
                        ),
                    },
                },
                "required": ["text"],
            },
            annotations=ToolAnnotations(read_only_hint=False),
        ),
        ToolDeclaration(
            name="getConversation",
            description="Get the conversation history for a session.",
            input_schema={
                "type": "object",
                "properties": {
                    "sessionId": {
                        "type": "string",
                        "description": "Session name to retrieve history for",
                    },
                    "limit": {
                        "type": "number",
                        "description": "Maximum number of messages to return. Omit for all.",
                    },
                },
                "required": ["sessionId"],
            },
            annotations=ToolAnnotations(read_only_hint=True),
        ),
        ToolDeclaration(
            name="listSessions",
            description="List all chat sessions.",
            input_schema={"type": "object", "properties": {}, "required": []},
            annotations=ToolAnnotations(read_only_hint=True),
        ),
        ToolDeclaration(
            name="newSession",
            description="Start a new chat session with an optional model override.",
            input_schema={
                "type": "object",
                "properties": {
                    "model": {
                        "type": "string",
                        "description": (
                            "Model identifier to use for this session "
                            "(e.g. 'claude-sonnet-4-5-20250929'). Omit for default."
                        ),
                    },
                },
                "required": [],
            },
            annotations=ToolAnnotations(read_only_hint=False),
        ),
        ToolDeclaration(
            name="getStatus",
            description="Get instance health, loaded plugins, connected channels, and uptime.",
            input_schema={"type": "object", "properties": {}, "required": []},
            annotations=ToolAnnotations(read_only_hint=True),
        ),
    ],
)
