"""
Image conversion for multimodal messages.

Accepts any raster format Pillow can identify (JPEG, PNG, BMP, GIF, TIFF,
WebP, ...), optionally shrinks it, and re-encodes it as PNG:

    part = to_content_part(jpeg_bytes)                    # PNG data URI
    part = to_content_part(jpeg_bytes, 800, detail="low") # longest side 800px
    png = resize(jpeg_bytes, 800)                         # raw PNG bytes

Images wider or taller than ``MAX_DIMENSION`` are rejected from the header
alone, before any pixel data is decoded.
"""

import base64
import io
import logging
import math
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from ..config import settings
from ..exceptions import ImageDecodeError, ImageDimensionError
from ..models.content import ImageDetail, ImageUrlContent, image_base64

logger = logging.getLogger(__name__)

MAX_DIMENSION: int = settings.MAX_IMAGE_DIMENSION
"""Largest width or height accepted, in pixels."""

PNG_MEDIA_TYPE = "image/png"

# Modes Pillow writes to PNG as-is
_PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}

# Modes with no direct RGBA conversion
_VIA_RGB_MODES = {"CMYK", "YCbCr", "LAB", "HSV", "F", "I;16"}


def _require_data(data: Optional[bytes]) -> None:
    if not data:
        raise ValueError("image data must not be None or empty")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def fit_within(width: int, height: int, max_dimension: int) -> Tuple[int, int]:
    """
    Compute the proportional size whose longer side is ``max_dimension``.

    Sizes already within bounds are returned unchanged. Each side is at
    least 1 pixel.

        >>> fit_within(4000, 3000, 800)
        (800, 600)
        >>> fit_within(600, 400, 800)
        (600, 400)
    """
    if width <= max_dimension and height <= max_dimension:
        return width, height

    scale = max_dimension / max(width, height)
    return (
        max(1, _round_half_up(width * scale)),
        max(1, _round_half_up(height * scale)),
    )


def _open_checked(data: bytes) -> Image.Image:
    """Open lazily and reject oversized images from the header alone."""
    try:
        image = Image.open(io.BytesIO(data))
    except Image.DecompressionBombError as e:
        raise ImageDimensionError(str(e)) from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError("Unsupported or corrupt image format") from e

    # Only the header has been read at this point
    width, height = image.size
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        image.close()
        raise ImageDimensionError(
            f"Image dimensions {width}x{height} exceed maximum "
            f"{MAX_DIMENSION}x{MAX_DIMENSION}",
            width=width,
            height=height,
        )
    return image


def _decode(data: bytes) -> Image.Image:
    image = _open_checked(data)
    try:
        image.load()
    except (OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Unsupported or corrupt image format: {e}") from e
    return image


def _to_rgba(image: Image.Image) -> Image.Image:
    if image.mode == "RGBA":
        return image
    if image.mode in _VIA_RGB_MODES:
        image = image.convert("RGB")
    return image.convert("RGBA")


def _encode_png(image: Image.Image) -> bytes:
    if image.mode not in _PNG_MODES:
        image = _to_rgba(image)
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


def resize(data: bytes, max_dimension: int) -> bytes:
    """
    Shrink an image so neither side exceeds ``max_dimension``.

    The aspect ratio is always preserved. Images already within bounds are
    re-encoded as PNG at their original size.

    Args:
        data: Raw image bytes in any supported format.
        max_dimension: Maximum pixels for the longer side.

    Returns:
        PNG-encoded bytes.

    Raises:
        ValueError: ``data`` is empty or ``max_dimension`` is not positive.
        ImageDimensionError: Image exceeds ``MAX_DIMENSION``.
        ImageDecodeError: Bytes are not a readable image.
    """
    _require_data(data)
    if max_dimension <= 0:
        raise ValueError(f"max_dimension must be positive, got: {max_dimension}")

    image = _decode(data)
    size = fit_within(image.width, image.height, max_dimension)
    if size != image.size:
        logger.debug(f"Resizing image {image.width}x{image.height} -> {size[0]}x{size[1]}")
        image = _to_rgba(image).resize(size, Image.Resampling.BILINEAR)

    return _encode_png(image)


def to_png_base64(data: bytes, max_dimension: Optional[int] = None) -> str:
    """Convert image bytes to a base64 PNG string, resizing if requested."""
    if max_dimension is None:
        _require_data(data)
        png = _encode_png(_decode(data))
    else:
        png = resize(data, max_dimension)
    return base64.b64encode(png).decode("ascii")


def to_content_part(
    data: bytes,
    max_dimension: Optional[int] = None,
    detail: Optional[ImageDetail] = None,
) -> ImageUrlContent:
    """Convert image bytes to an image content part with a PNG data URI."""
    return image_base64(PNG_MEDIA_TYPE, to_png_base64(data, max_dimension), detail)
