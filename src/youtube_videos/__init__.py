"""Typed async client for the YouTube Data API v3 videos endpoint.

Public API:
    Videos — deferred request; ``await Videos(key).id(video_id)`` returns a
    :class:`~youtube_videos.models.Response`.
"""

from .errors import (
    ConnectionError,
    DeserializationError,
    ErrorKind,
    SerializationError,
    VideosError,
)
from .models import ContentDetails, PageInfo, Response, Snippet, Thumbnail, Thumbnails, VideoResult
from .request import VideosQuery
from .videos import RequestState, Videos

__version__ = "0.1.0"

__all__ = [
    "ConnectionError",
    "ContentDetails",
    "DeserializationError",
    "ErrorKind",
    "PageInfo",
    "RequestState",
    "Response",
    "SerializationError",
    "Snippet",
    "Thumbnail",
    "Thumbnails",
    "VideoResult",
    "Videos",
    "VideosError",
    "VideosQuery",
]
