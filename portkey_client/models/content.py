"""Multimodal content parts for chat messages.

A message's ``content`` is a plain string, ``None``, or a sequence of
content parts. Each part is one of a closed set of variants identified by
its ``type`` discriminator:

    {"type": "text", "text": "..."}
    {"type": "image_url", "image_url": {"url": "...", "detail": "high"}}
    {"type": "file", "file": {"mime_type": "...", "file_data": "..."}}

Parts are built through the factory functions below and parsed back from
JSON by ``parse_message_content``, which reads the discriminator before
validating the payload against the matching variant.
"""

import base64
from collections.abc import Mapping
from typing import Any, Dict, Literal, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import DeserializationError

ImageDetail = Literal["auto", "low", "high"]


# =============================================================================
# Text
# =============================================================================


class TextContent(BaseModel):
    """Text content block."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


# =============================================================================
# Image
# =============================================================================


class ImageUrl(BaseModel):
    """Image URL specification."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)  # https://... or data:image/png;base64,...
    detail: Optional[ImageDetail] = None


class ImageUrlContent(BaseModel):
    """Image URL content block."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl

    @property
    def url(self) -> str:
        return self.image_url.url

    @property
    def detail(self) -> Optional[str]:
        return self.image_url.detail


# =============================================================================
# File
# =============================================================================


class FileData(BaseModel):
    """Inline file payload.

    ``file_data`` is base64 for binary MIME types and plain text for
    ``text/*`` types. Which one is sent is up to the caller.
    """

    model_config = ConfigDict(frozen=True)

    mime_type: str
    file_data: str


class FileContent(BaseModel):
    """File content block (PDF, plain text, CSV, ...)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    file: FileData

    @property
    def mime_type(self) -> str:
        return self.file.mime_type

    @property
    def data(self) -> str:
        return self.file.file_data


ContentPart = Union[TextContent, ImageUrlContent, FileContent]

MessageContent = Union[str, Tuple[ContentPart, ...], None]

CONTENT_PART_TYPES: Dict[str, Type[BaseModel]] = {
    "text": TextContent,
    "image_url": ImageUrlContent,
    "file": FileContent,
}


# =============================================================================
# Factories
# =============================================================================


def _require(name: str, value: Any) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


def text(value: str) -> TextContent:
    """Create a text content part."""
    _require("text", value)
    return TextContent(text=value)


def image_url(url: str, detail: Optional[ImageDetail] = None) -> ImageUrlContent:
    """Create an image content part from a URL (used verbatim)."""
    _require("url", url)
    return ImageUrlContent(image_url=ImageUrl(url=url, detail=detail))


def image_base64(
    media_type: str, base64_data: str, detail: Optional[ImageDetail] = None
) -> ImageUrlContent:
    """
    Create an image content part from base64-encoded data.

    The data is wrapped in a data URI without validation:

        >>> image_base64("image/png", "iVBORw0...").url
        'data:image/png;base64,iVBORw0...'

    Args:
        media_type: MIME type such as "image/png", "image/jpeg", "image/webp".
        base64_data: Base64-encoded image bytes.
        detail: Optional resolution hint (auto, low, high).
    """
    _require("media_type", media_type)
    _require("base64_data", base64_data)
    return image_url(f"data:{media_type};base64,{base64_data}", detail)


def file(mime_type: str, data: str) -> FileContent:
    """
    Create a file content part.

    Args:
        mime_type: MIME type such as "application/pdf", "text/plain", "text/csv".
        data: Base64-encoded bytes, or plain text for text/* types.
    """
    _require("mime_type", mime_type)
    _require("data", data)
    return FileContent(file=FileData(mime_type=mime_type, file_data=data))


def pdf(base64_data: str) -> FileContent:
    """Create a PDF file content part from base64-encoded data."""
    return file("application/pdf", base64_data)


def file_bytes(mime_type: str, data: bytes) -> FileContent:
    """Create a file content part from raw bytes (base64-encoded here)."""
    _require("data", data)
    return file(mime_type, base64.b64encode(data).decode("ascii"))


# =============================================================================
# Deserialization
# =============================================================================


def parse_content_part(element: Any) -> ContentPart:
    """
    Resolve one content array element to its concrete variant.

    The ``type`` discriminator is read first and the element is then
    validated against the matching model. Unknown or missing discriminators
    raise instead of falling back to a default variant.

    Raises:
        DeserializationError: Discriminator missing or unknown, or the
            element does not match its variant's structure.
    """
    if isinstance(element, (TextContent, ImageUrlContent, FileContent)):
        return element

    if not isinstance(element, Mapping):
        raise DeserializationError(
            f"ContentPart must be a JSON object, got {type(element).__name__}"
        )

    type_name = element.get("type")
    if not isinstance(type_name, str):
        raise DeserializationError("ContentPart missing required 'type' discriminator field")

    part_cls = CONTENT_PART_TYPES.get(type_name)
    if part_cls is None:
        raise DeserializationError(f"Unknown ContentPart type: '{type_name}'", type_name=type_name)

    try:
        return part_cls.model_validate(dict(element))
    except ValidationError as e:
        raise DeserializationError(
            f"Invalid '{type_name}' content part: {e}", type_name=type_name
        ) from e


def parse_message_content(value: Any) -> MessageContent:
    """
    Reconstruct a message ``content`` value.

    Returns the string unchanged, ``None`` for null, or a tuple of typed
    parts for an array. Any other shape raises ``DeserializationError``.
    """
    if value is None or isinstance(value, str):
        return value

    if isinstance(value, (list, tuple)):
        return tuple(parse_content_part(item) for item in value)

    raise DeserializationError(
        f"Message content must be a string, null or an array, got {type(value).__name__}"
    )
