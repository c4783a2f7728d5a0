"""Response schema and filter vocabulary for the videos endpoint."""

from .filters import (
    ChannelType,
    EventType,
    ItemType,
    Order,
    SafeSearch,
    VideoCaption,
    VideoDefinition,
    VideoDimension,
    VideoDuration,
    VideoLicense,
    VideoLocation,
    VideoType,
)
from .videos import (
    ContentDetails,
    PageInfo,
    Response,
    Snippet,
    Thumbnail,
    Thumbnails,
    VideoResult,
)

__all__ = [
    "ChannelType",
    "ContentDetails",
    "EventType",
    "ItemType",
    "Order",
    "PageInfo",
    "Response",
    "SafeSearch",
    "Snippet",
    "Thumbnail",
    "Thumbnails",
    "VideoCaption",
    "VideoDefinition",
    "VideoDimension",
    "VideoDuration",
    "VideoLicense",
    "VideoLocation",
    "VideoResult",
    "VideoType",
]
