"""Query parameters for a single videos.list lookup."""

from __future__ import annotations

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

from .errors import SerializationError
from .types import ApiKey, Part, VideoId

DEFAULT_PARTS: tuple[Part, ...] = ("snippet", "contentDetails")


class VideosQuery(BaseModel):
    """Immutable parameters of one videos.list request.

    Updates return a new value; nothing here touches the network or
    validates IDs against the API.
    """

    model_config = ConfigDict(frozen=True)

    key: ApiKey
    part: tuple[Part, ...] = DEFAULT_PARTS
    id: VideoId | None = None

    @classmethod
    def new(cls, key: ApiKey) -> VideosQuery:
        return cls(key=key)

    def with_id(self, video_id: VideoId) -> VideosQuery:
        return self.model_copy(update={"id": video_id})

    def redacted(self) -> VideosQuery:
        """Copy safe to log: the API key is masked."""
        return self.model_copy(update={"key": "REDACTED"})

    def encode(self) -> str:
        """Form-encode as ``key=...&part=...[&id=...]``.

        ``id`` is left out entirely when unset.

        Raises:
            SerializationError: If a parameter cannot be encoded.
        """
        try:
            params = [("key", self.key), ("part", ",".join(self.part))]
            if self.id is not None:
                params.append(("id", self.id))
            return urlencode(params)
        except (TypeError, ValueError) as exc:
            raise SerializationError(exc) from exc
