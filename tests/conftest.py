"""Shared test fixtures for youtube-videos."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Ensure tests never pick up a real key or endpoint override."""
    for name in ("YOUTUBE_API_KEY", "YOUTUBE_API_URL", "YOUTUBE_HTTP_TIMEOUT", "YOUTUBE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def clean_config():
    """Reset the config singleton between tests."""
    import youtube_videos.config as cfg_mod

    cfg_mod._config = None
    yield
    cfg_mod._config = None


def videos_payload(**overrides) -> dict:
    """Build a realistic videos.list response with one item."""
    payload = {
        "kind": "youtube#videoListResponse",
        "etag": "list-etag",
        "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
        "items": [
            {
                "kind": "youtube#video",
                "etag": "video-etag",
                "id": "DnJgoWDxG2A",
                "snippet": {
                    "publishedAt": "2019-07-11T16:00:07Z",
                    "channelId": "UCaYhcUwRBNscFNUKTjgPFiA",
                    "title": "Rust",
                    "description": "A language empowering everyone.",
                    "thumbnails": {
                        "default": {"url": "http://example/x.jpg", "width": 120, "height": 90},
                        "high": {"url": "http://example/hq.jpg", "width": 480, "height": 360},
                    },
                    "channelTitle": "Rust Videos",
                    "categoryId": "28",
                    "liveBroadcastContent": "none",
                    "localized": {"title": "Rust", "description": "ignored"},
                },
                "contentDetails": {
                    "duration": "PT4M13S",
                    "dimension": "2d",
                    "definition": "hd",
                    "caption": "false",
                },
            }
        ],
    }
    payload.update(overrides)
    return payload


class RecordingTransport:
    """httpx.MockTransport wrapper that records every request it serves."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture()
def json_transport() -> Callable[..., RecordingTransport]:
    """Factory for a transport that answers every GET with a JSON body."""

    def _make(payload: dict | None = None, status_code: int = 200) -> RecordingTransport:
        body = json.dumps(videos_payload() if payload is None else payload)
        return RecordingTransport(
            lambda request: httpx.Response(
                status_code, text=body, headers={"content-type": "application/json"},
            )
        )

    return _make
