"""Client configuration via environment variables."""

from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://www.googleapis.com/youtube/v3/videos"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ClientConfig(BaseModel):
    """Runtime configuration resolved from environment."""

    youtube_api_key: str = Field(default="")
    api_url: str = Field(default=DEFAULT_API_URL)
    http_timeout: float | None = Field(default=None)
    log_level: str = Field(default="WARNING")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        url = value.strip() or DEFAULT_API_URL
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(f"Invalid API URL '{value}': expected an http(s) URL")
        return url

    @field_validator("http_timeout")
    @classmethod
    def validate_http_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("http_timeout must be > 0")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            allowed = ", ".join(sorted(VALID_LOG_LEVELS))
            raise ValueError(f"Invalid log level '{value}'. Allowed: {allowed}")
        return level

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build config from environment variables."""
        return cls(
            youtube_api_key=os.getenv("YOUTUBE_API_KEY", "").strip(),
            api_url=os.getenv("YOUTUBE_API_URL", DEFAULT_API_URL),
            http_timeout=os.getenv("YOUTUBE_HTTP_TIMEOUT", "").strip() or None,
            log_level=os.getenv("YOUTUBE_LOG_LEVEL", "WARNING"),
        )


_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Return the global config singleton, creating it on first access.

    Raises:
        pydantic.ValidationError: If an environment value is invalid.
    """
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config
