"""Turn command-line input (a video ID or a YouTube link) into a video ID."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

WATCH_URL = "https://youtube.com/watch?v={video_id}"

_PATH_PATTERNS = {
    "youtu.be": re.compile(r"^/(?P<id>[^/]+)"),
    "youtube.com": re.compile(r"^/(?:shorts|embed|live)/(?P<id>[^/]+)"),
}


def _strip_noise(video_id: str) -> str:
    """Drop trailing ``?t=..`` / ``&list=..`` that copy-pasted IDs often carry."""
    return re.split(r"[?&#]", video_id, maxsplit=1)[0]


def extract_video_id(value: str) -> str:
    """Return the video ID for a bare ID or a YouTube link.

    Anything without a ``/`` is taken as an ID; whether it exists is for
    the API to decide.

    Raises:
        ValueError: If *value* is empty or a link with no video ID in it.
    """
    value = value.strip().replace("\\", "")
    if "/" not in value:
        video_id = _strip_noise(value)
        if not video_id:
            raise ValueError("Empty video ID")
        return video_id

    parts = urlsplit(value if "://" in value else f"https://{value}")
    host = (parts.hostname or "").removeprefix("www.").removeprefix("m.")

    if host == "youtube.com" and parts.path == "/watch":
        video_id = parse_qs(parts.query).get("v", [""])[0]
    else:
        pattern = _PATH_PATTERNS.get(host)
        match = pattern.match(parts.path) if pattern else None
        video_id = match.group("id") if match else None

    if not video_id:
        raise ValueError(f"Not a YouTube video URL: {value}")
    return _strip_noise(video_id)


def watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)
