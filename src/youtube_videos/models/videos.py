"""YouTube Data API models — videos.list response schema.

Mirrors the JSON document returned by ``GET /youtube/v3/videos`` with
``part=snippet,contentDetails``. Wire names are camelCase; attributes are
snake_case through the shared alias generator.

Only ``kind``, ``etag`` and ``id`` (plus the structural ``pageInfo``,
``items``, ``snippet`` and ``contentDetails`` blocks) are required. Every
leaf inside a snippet or content-details block may be missing from a
partial response and is then ``None``.
"""

from __future__ import annotations

from pydantic import AwareDatetime, BaseModel, ConfigDict, NonNegativeInt
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Frozen base for API payloads with camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Thumbnail(ApiModel):
    """A single thumbnail image."""

    url: str
    width: NonNegativeInt | None = None
    height: NonNegativeInt | None = None


class Thumbnails(ApiModel):
    """Thumbnail set keyed by resolution name."""

    default: Thumbnail | None = None
    medium: Thumbnail | None = None
    high: Thumbnail | None = None
    standard: Thumbnail | None = None
    maxres: Thumbnail | None = None


class Snippet(ApiModel):
    """Human-readable metadata of a video."""

    published_at: AwareDatetime | None = None
    channel_id: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnails: Thumbnails | None = None
    channel_title: str | None = None
    category_id: str | None = None
    live_broadcast_content: str | None = None


class ContentDetails(ApiModel):
    """Technical metadata of a video.

    ``duration`` is kept as the raw ISO 8601 string (e.g. ``PT4M13S``).
    """

    duration: str | None = None
    dimension: str | None = None
    definition: str | None = None


class VideoResult(ApiModel):
    """One entry of ``items``."""

    kind: str
    etag: str
    id: str
    snippet: Snippet
    content_details: ContentDetails


class PageInfo(ApiModel):
    total_results: int
    results_per_page: int


class Response(ApiModel):
    """Top-level videos.list response.

    ``items`` keeps the order the server returned. Page tokens are exposed
    verbatim and never followed.
    """

    kind: str
    etag: str
    next_page_token: str | None = None
    prev_page_token: str | None = None
    page_info: PageInfo
    items: list[VideoResult]
