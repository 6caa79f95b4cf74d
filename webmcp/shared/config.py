"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # WOPR daemon
    daemon_url: str = "http://localhost:3000"
    # Path prefix of the daemon REST API, joined onto daemon_url
    api_base: str = "/api"
    # Seconds before an outbound daemon request is abandoned by httpx
    daemon_timeout: float = 30.0
    # Session used by sendMessage when the caller omits sessionId
    default_session: str = "default"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def model_post_init(self, __context: object) -> None:
        """Normalise URL joins so ``daemon_url + api_base + path`` is well formed."""
        self.daemon_url = self.daemon_url.rstrip("/")
        if self.api_base and not self.api_base.startswith("/"):
            self.api_base = f"/{self.api_base}"
        self.api_base = self.api_base.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
