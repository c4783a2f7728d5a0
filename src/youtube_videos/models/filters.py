"""Filter vocabulary for YouTube Data API list queries.

Values are the exact wire strings the API expects. None of these are sent
by ``Videos`` today; they are building blocks for further query parameters
(``order``, ``safeSearch``, ``videoDuration``, ...).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_serializer


class ChannelType(str, Enum):
    ANY = "any"
    SHOW = "show"


class EventType(str, Enum):
    COMPLETED = "completed"
    LIVE = "live"
    UPCOMING = "upcoming"


class Order(str, Enum):
    DATE = "date"
    RATING = "rating"
    RELEVANCE = "relevance"
    TITLE = "title"
    VIDEO_COUNT = "videoCount"
    VIEW_COUNT = "viewCount"


class SafeSearch(str, Enum):
    MODERATE = "moderate"
    STRICT = "strict"


class ItemType(str, Enum):
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    VIDEO = "video"


class VideoCaption(str, Enum):
    CLOSED_CAPTION = "closedCaption"
    NONE = "none"


class VideoDefinition(str, Enum):
    HIGH = "high"
    STANDARD = "standard"


class VideoDimension(str, Enum):
    THREE_D = "3d"
    TWO_D = "2d"


class VideoDuration(str, Enum):
    LONG = "long"
    MEDIUM = "medium"
    SHORT = "short"


class VideoLicense(str, Enum):
    CREATIVE_COMMON = "creativeCommon"
    YOUTUBE = "youtube"


class VideoType(str, Enum):
    EPISODE = "episode"
    MOVIE = "movie"


class VideoLocation(BaseModel):
    """Geographic point for the ``location`` parameter.

    Serializes to the ``"longitude,latitude"`` text form, e.g.
    ``VideoLocation(longitude=1.5, latitude=2.5)`` → ``"1.5,2.5"``.
    """

    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float

    @model_serializer
    def serialize_location(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.longitude},{self.latitude}"
