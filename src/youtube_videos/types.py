"""Shared type aliases for request parameters."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

# ── Literal enums ────────────────────────────────────────────────────────────

Part = Literal[
    "snippet", "contentDetails", "statistics", "status",
    "player", "topicDetails", "recordingDetails", "localizations",
]

# ── Annotated aliases ────────────────────────────────────────────────────────

ApiKey = Annotated[str, Field(description="YouTube Data API v3 key, sent as the `key` query parameter")]
VideoId = Annotated[str, Field(description="YouTube video ID (e.g. 'DnJgoWDxG2A')")]
