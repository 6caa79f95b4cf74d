"""Canned WOPR daemon responses for conversation module tests."""

INJECT_RESPONSE = {
    "session": "my-session",
    "sessionId": "c0ffee",
    "response": "Hello! How can I help?",
    "cost": 0.0012,
}

HISTORY_RESPONSE = {
    "session": "my-session",
    "messages": [
        {"role": "user", "content": "Hello"},
        {"role": "assistant", "content": "Hello! How can I help?"},
    ],
}

SESSIONS_RESPONSE = {
    "sessions": [
        {"name": "default", "id": "s-1"},
        {"name": "my-session", "id": "s-2", "context": "Use model: opus"},
    ]
}

STATUS_RESPONSE = {
    "status": "ok",
    "uptime": 3600,
    "plugins": ["wopr-plugin-webui"],
    "channels": ["discord"],
}
