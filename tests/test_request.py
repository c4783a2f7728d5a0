"""Tests for videos.list query construction and encoding."""

from __future__ import annotations

from urllib.parse import parse_qs

import pytest
from pydantic import ValidationError

from youtube_videos.errors import ErrorKind, SerializationError
from youtube_videos.request import DEFAULT_PARTS, VideosQuery


class TestBuilder:
    def test_new_uses_default_parts_and_no_id(self):
        q = VideosQuery.new("ABC")
        assert q.key == "ABC"
        assert q.part == ("snippet", "contentDetails")
        assert q.part == DEFAULT_PARTS
        assert q.id is None

    def test_with_id_returns_new_value(self):
        base = VideosQuery.new("ABC")
        q = base.with_id("DnJgoWDxG2A")
        assert q.id == "DnJgoWDxG2A"
        assert base.id is None

    def test_with_id_replaces_previous_id(self):
        q = VideosQuery.new("ABC").with_id("first").with_id("second")
        assert parse_qs(q.encode())["id"] == ["second"]

    def test_query_is_frozen(self):
        q = VideosQuery.new("ABC")
        with pytest.raises(ValidationError):
            q.id = "nope"

    def test_redacted_masks_key_only(self):
        q = VideosQuery.new("SECRET").with_id("vid").redacted()
        assert q.key == "REDACTED"
        assert q.id == "vid"


class TestEncode:
    def test_end_to_end_query_string(self):
        q = VideosQuery.new("ABC").with_id("DnJgoWDxG2A")
        assert q.encode() == "key=ABC&part=snippet%2CcontentDetails&id=DnJgoWDxG2A"

    def test_id_omitted_when_absent(self):
        encoded = VideosQuery.new("ABC").encode()
        assert encoded == "key=ABC&part=snippet%2CcontentDetails"
        assert "id" not in parse_qs(encoded)

    def test_reserved_characters_in_id_are_percent_encoded(self):
        encoded = VideosQuery.new("ABC").with_id("a b&c=d").encode()
        assert encoded.endswith("&id=a+b%26c%3Dd")
        assert parse_qs(encoded)["id"] == ["a b&c=d"]

    def test_part_is_always_snippet_and_content_details(self):
        encoded = VideosQuery.new("k").with_id("x").encode()
        assert parse_qs(encoded)["part"] == ["snippet,contentDetails"]

    def test_unencodable_key_raises_serialization_error(self):
        q = VideosQuery.model_construct(key="\ud800", part=DEFAULT_PARTS, id=None)
        with pytest.raises(SerializationError) as exc_info:
            q.encode()
        assert exc_info.value.kind is ErrorKind.SERIALIZATION
        assert isinstance(exc_info.value.source, UnicodeEncodeError)

    def test_malformed_parts_raise_serialization_error(self):
        q = VideosQuery.model_construct(key="ABC", part=("snippet", None), id=None)
        with pytest.raises(SerializationError) as exc_info:
            q.encode()
        assert isinstance(exc_info.value.source, TypeError)
        assert str(exc_info.value).startswith("failed to serialize:")
