"""Command-line lookup of a single video.

Prints the title, watch URL and default thumbnail of the first result,
or the full response as JSON with ``--json``. The API key comes from
``YOUTUBE_API_KEY`` in the process environment.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from .config import VALID_LOG_LEVELS, get_config
from .errors import VideosError, describe_error
from .models.videos import Response
from .urls import extract_video_id, watch_url
from .videos import Videos

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="youtube-videos",
        description="Look up a YouTube video through the Data API v3 videos endpoint.",
    )
    parser.add_argument("video", help="video ID or YouTube URL")
    parser.add_argument("--json", action="store_true", help="print the full response as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help="override YOUTUBE_LOG_LEVEL",
    )
    return parser


def format_summary(response: Response) -> str:
    """Render the first result the way the lookup prints it."""
    item = response.items[0]
    lines = []
    if item.snippet.title is not None:
        lines.append(f'Title: "{item.snippet.title}"')
    lines.append(watch_url(item.id))
    thumbnails = item.snippet.thumbnails
    if thumbnails is not None and thumbnails.default is not None:
        lines.append(f"Default thumbnail: {thumbnails.default.url}")
    return "\n".join(lines)


async def lookup(video_id: str) -> Response:
    return await Videos.from_config().id(video_id)


def main(argv: list[str] | None = None) -> int:
    """Entry-point for the ``youtube-videos`` console script."""
    args = build_parser().parse_args(argv)
    try:
        cfg = get_config()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logging.basicConfig(
        level=args.log_level or cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not cfg.youtube_api_key:
        print("YOUTUBE_API_KEY is not set", file=sys.stderr)
        return EXIT_ERROR

    try:
        video_id = extract_video_id(args.video)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_ERROR

    try:
        response = asyncio.run(lookup(video_id))
    except VideosError as exc:
        logger.debug("lookup of %s failed", video_id, exc_info=exc)
        print(json.dumps(describe_error(exc), indent=2), file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(response.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        return EXIT_OK

    if not response.items:
        print(f"No video found for ID {video_id}", file=sys.stderr)
        return EXIT_NOT_FOUND

    print(format_summary(response))
    return EXIT_OK
