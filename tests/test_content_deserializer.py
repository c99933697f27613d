"""Tests for discriminator-based content deserialization."""

import pytest

from portkey_client.exceptions import DeserializationError
from portkey_client.models import Message, content
from portkey_client.models.content import (
    FileContent,
    ImageUrlContent,
    TextContent,
    parse_content_part,
    parse_message_content,
)


class TestParseMessageContent:
    """Top-level content shapes."""

    def test_string_returned_unchanged(self):
        assert parse_message_content("Hello!") == "Hello!"

    def test_null_returned_as_none(self):
        assert parse_message_content(None) is None

    def test_empty_array(self):
        assert parse_message_content([]) == ()

    def test_array_resolves_each_variant_in_order(self):
        parts = parse_message_content(
            [
                {"type": "text", "text": "Describe this image"},
                {"type": "image_url", "image_url": {"url": "https://cdn.example.com/img.jpg", "detail": "low"}},
                {"type": "file", "file": {"mime_type": "text/csv", "file_data": "a,b\n1,2"}},
            ]
        )

        assert isinstance(parts, tuple)
        assert [type(p) for p in parts] == [TextContent, ImageUrlContent, FileContent]
        assert parts[0].text == "Describe this image"
        assert parts[1].url == "https://cdn.example.com/img.jpg"
        assert parts[1].detail == "low"
        assert parts[2].mime_type == "text/csv"

    @pytest.mark.parametrize("value", [{"type": "text", "text": "x"}, 42, 1.5, True])
    def test_other_top_level_shapes_rejected(self, value):
        with pytest.raises(DeserializationError):
            parse_message_content(value)


class TestParseContentPart:
    """Per-element discriminator dispatch."""

    @pytest.mark.parametrize("type_name", ["audio", "input_audio", "TEXT", "image", ""])
    def test_unknown_type_raises(self, type_name: str):
        with pytest.raises(DeserializationError) as exc_info:
            parse_content_part({"type": type_name, "text": "x"})

        assert exc_info.value.type_name == type_name
        assert f"'{type_name}'" in str(exc_info.value)

    def test_missing_type_raises(self):
        with pytest.raises(DeserializationError, match="missing required 'type'"):
            parse_content_part({"text": "no discriminator"})

    def test_non_string_type_raises(self):
        with pytest.raises(DeserializationError, match="missing required 'type'"):
            parse_content_part({"type": 1, "text": "x"})

    def test_non_object_element_raises(self):
        with pytest.raises(DeserializationError, match="JSON object"):
            parse_content_part("just text")

    @pytest.mark.parametrize(
        "element",
        [
            {"type": "text"},
            {"type": "text", "text": None},
            {"type": "image_url", "url": "https://x/y.png"},
            {"type": "image_url", "image_url": {"url": "https://x/y.png", "detail": "max"}},
            {"type": "file", "file": {"mime_type": "application/pdf"}},
        ],
    )
    def test_structurally_invalid_element_raises(self, element: dict):
        with pytest.raises(DeserializationError) as exc_info:
            parse_content_part(element)

        assert exc_info.value.type_name == element["type"]
        assert exc_info.value.__cause__ is not None

    def test_unknown_element_fails_whole_array(self):
        with pytest.raises(DeserializationError):
            parse_message_content(
                [
                    {"type": "text", "text": "ok"},
                    {"type": "video_url", "video_url": {"url": "https://x/y.mp4"}},
                ]
            )

    def test_existing_parts_pass_through(self):
        part = content.text("already typed")
        assert parse_content_part(part) is part


class TestMessageContentRoundTrip:
    """Serialize then parse reconstructs the same typed parts."""

    def test_mixed_parts_round_trip(self):
        original = Message.user(
            [
                content.text("Compare these"),
                content.image_url("https://example.com/a.png"),
                content.image_url("https://example.com/b.png", "high"),
                content.image_base64("image/png", "iVBORw0KGgo="),
                content.file("text/plain", "raw text body"),
                content.file_bytes("application/pdf", b"%PDF-1.4"),
            ]
        )

        restored = Message.model_validate_json(original.model_dump_json(exclude_none=True))

        assert restored == original
        assert [type(p) for p in restored.content_parts] == [
            TextContent,
            ImageUrlContent,
            ImageUrlContent,
            ImageUrlContent,
            FileContent,
            FileContent,
        ]

    @pytest.mark.parametrize(
        "part",
        [
            content.text("only text"),
            content.image_url("https://example.com/a.png", "auto"),
            content.image_base64("image/webp", "UklGRg==", "low"),
            content.pdf("JVBERi0xLjQ="),
        ],
    )
    def test_single_variant_round_trip(self, part):
        original = Message.user([part])
        restored = Message.model_validate(original.to_dict())
        assert restored.content_parts == (part,)

    def test_parsing_a_message_rejects_unknown_part(self):
        with pytest.raises(DeserializationError) as exc_info:
            Message.model_validate(
                {"role": "user", "content": [{"type": "hologram", "data": "..."}]}
            )
        assert exc_info.value.type_name == "hologram"

    def test_parsing_a_message_rejects_object_content(self):
        with pytest.raises(DeserializationError):
            Message.model_validate({"role": "user", "content": {"text": "wrapped"}})
