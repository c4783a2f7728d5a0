"""Structured error handling — error kinds, exception types, and error reports."""

from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel, Field, ValidationError


class ErrorKind(str, Enum):
    """What part of the request lifecycle failed."""

    SERIALIZATION = "SERIALIZATION"
    CONNECTION = "CONNECTION"
    DESERIALIZATION = "DESERIALIZATION"


class VideosError(Exception):
    """Base class for every failure surfaced by a videos request."""

    kind: ErrorKind

    def __init__(self, message: str, *, source: BaseException | None = None):
        super().__init__(message)
        self.source = source


class SerializationError(VideosError):
    """The query parameters could not be encoded."""

    kind = ErrorKind.SERIALIZATION

    def __init__(self, source: BaseException):
        super().__init__(f"failed to serialize: {source}", source=source)


class ConnectionError(VideosError):
    """The HTTP transport failed before a body was received.

    ``message`` is the transport's own description of the failure.

    Not ``builtins.ConnectionError``: ``except ConnectionError`` only catches
    this class where it was imported from ``youtube_videos.errors``.
    """

    kind = ErrorKind.CONNECTION

    def __init__(self, message: str, *, source: BaseException | None = None):
        super().__init__(f"failed to connect to the api: {message}", source=source)
        self.message = message


class DeserializationError(VideosError):
    """The response body did not match the videos.list schema.

    ``body`` is the raw text exactly as received.
    """

    kind = ErrorKind.DESERIALIZATION

    def __init__(self, body: str, source: ValidationError):
        super().__init__(
            f"failed to deserialize: {source.error_count()} validation error(s)",
            source=source,
        )
        self.body = body

    def errors(self) -> list[dict]:
        """Validation errors as ``{"loc": "a.b.0", "msg": ...}`` dicts."""
        return [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in self.source.errors()
        ]


class ErrorReport(BaseModel):
    """JSON-safe description of a failed request."""

    error: str
    kind: str
    hint: str
    details: list[dict] = Field(default_factory=list)


_HINTS: dict[ErrorKind, str] = {
    ErrorKind.SERIALIZATION: "Request parameters could not be URL-encoded — check the API key and video ID",
    ErrorKind.CONNECTION: "Could not reach the YouTube API — check connectivity or the configured API URL",
    ErrorKind.DESERIALIZATION: "Response did not match the videos schema — the ID or API key may be invalid",
}


def _api_error_message(body: str) -> str | None:
    """Pull ``error.message`` out of a Google API error document, if present."""
    try:
        doc = json.loads(body)
    except ValueError:
        return None
    if not isinstance(doc, dict) or not isinstance(doc.get("error"), dict):
        return None
    message = doc["error"].get("message")
    return str(message) if message else None


def describe_error(error: VideosError) -> dict:
    """Create a serialisable ErrorReport dict from a VideosError."""
    hint = _HINTS[error.kind]
    details: list[dict] = []
    if isinstance(error, DeserializationError):
        api_message = _api_error_message(error.body)
        if api_message:
            hint = f"YouTube API returned an error: {api_message}"
        details = error.errors()
    return ErrorReport(
        error=str(error),
        kind=error.kind.value,
        hint=hint,
        details=details,
    ).model_dump(mode="json")
