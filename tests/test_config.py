"""Tests for Settings loading and normalisation."""

from __future__ import annotations

from webmcp.modules.conversation.client import DaemonClient
from webmcp.shared.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.daemon_url == "http://localhost:3000"
    assert settings.api_base == "/api"
    assert settings.default_session == "default"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DAEMON_URL", "http://wopr.local:7437/")
    monkeypatch.setenv("API_BASE", "v1/")
    monkeypatch.setenv("DAEMON_TIMEOUT", "5")

    settings = Settings(_env_file=None)

    assert settings.daemon_url == "http://wopr.local:7437"
    assert settings.api_base == "/v1"
    assert settings.daemon_timeout == 5.0


def test_client_falls_back_to_settings(monkeypatch):
    monkeypatch.setenv("DAEMON_URL", "http://wopr.local:7437")
    get_settings.cache_clear()
    try:
        client = DaemonClient()
    finally:
        get_settings.cache_clear()

    assert client.url("/status") == "http://wopr.local:7437/api/status"
