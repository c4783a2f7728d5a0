"""Deferred videos.list request — build now, fetch on first await.

``Videos`` collects its parameters eagerly through builder calls and
performs no I/O until it is awaited. The first ``advance()`` (or
``await``) schedules exactly one HTTP GET on the running event loop;
every later call hands back the same task, so the request is never
re-issued.

Usage::

    response = await Videos(key).id("DnJgoWDxG2A")
    print(response.items[0].snippet.title)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Generator
from enum import Enum
from typing import Any

import httpx
from pydantic import ValidationError

from .config import DEFAULT_API_URL, get_config
from .errors import ConnectionError, DeserializationError
from .models.videos import Response
from .request import VideosQuery
from .types import ApiKey, VideoId

logger = logging.getLogger(__name__)


class RequestState(str, Enum):
    UNSTARTED = "unstarted"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"
    FAILED = "failed"


class Videos:
    """Single-shot request against the videos.list endpoint.

    Args:
        key: YouTube Data API key.
        client: Optional shared ``httpx.AsyncClient``. It is borrowed, not
            closed. Without one a client is opened for the single call.
        base_url: Endpoint URL, defaults to :data:`URL`.
        timeout: Transport timeout in seconds for the owned client.
            ``None`` waits indefinitely.
    """

    URL = DEFAULT_API_URL

    def __init__(
        self,
        key: ApiKey,
        *,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self._query: VideosQuery | None = VideosQuery.new(key)
        self._task: asyncio.Future[Response] | None = None
        self._client = client
        self._base_url = base_url or self.URL
        self._timeout = timeout

    @classmethod
    def from_config(cls, *, client: httpx.AsyncClient | None = None) -> Videos:
        """Create a request using the key, URL and timeout from :func:`get_config`."""
        cfg = get_config()
        return cls(
            cfg.youtube_api_key,
            client=client,
            base_url=cfg.api_url,
            timeout=cfg.http_timeout,
        )

    def id(self, video_id: VideoId) -> Videos:
        """Set the video ID to look up.

        Raises:
            RuntimeError: If the request has already been started.
        """
        if self._query is None:
            raise RuntimeError("Videos request already started; parameters can no longer change")
        self._query = self._query.with_id(video_id)
        return self

    @property
    def query(self) -> VideosQuery | None:
        """Pending parameters, or None once the request has started."""
        return self._query

    @property
    def state(self) -> RequestState:
        task = self._task
        if task is None:
            return RequestState.UNSTARTED
        if not task.done():
            return RequestState.IN_FLIGHT
        if task.cancelled() or task.exception() is not None:
            return RequestState.FAILED
        return RequestState.COMPLETED

    def advance(self) -> asyncio.Future[Response]:
        """Start the request if needed and return its task.

        Must be called from inside a running event loop.
        """
        if self._task is None:
            loop = asyncio.get_running_loop()
            query, self._query = self._query, None
            self._task = loop.create_task(self._execute(query))
        return self._task

    def __await__(self) -> Generator[Any, None, Response]:
        return self.advance().__await__()

    async def _execute(self, query: VideosQuery) -> Response:
        url = f"{self._base_url}?{query.encode()}"
        logger.debug("getting %s?%s", self._base_url, query.redacted().encode())

        body = await self._fetch(url)
        try:
            return Response.model_validate_json(body)
        except ValidationError as exc:
            logger.warning(
                "videos response for id=%s failed validation (%d error(s))",
                query.id,
                exc.error_count(),
            )
            raise DeserializationError(body, exc) from exc

    async def _fetch(self, url: str) -> str:
        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("request to %s failed: %s", self._base_url, exc)
            raise ConnectionError(str(exc), source=exc) from exc

        logger.debug("received HTTP %d (%d bytes)", response.status_code, len(response.content))
        return response.text
