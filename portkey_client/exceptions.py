"""Exception types raised by the Portkey client."""

import json
from typing import Any, Optional

TRANSPORT_ERROR_STATUS = -1
"""Status code reported when no HTTP response was received."""


class PortkeyError(Exception):
    """Base exception for all Portkey client errors."""


class DeserializationError(PortkeyError):
    """Response JSON does not match the expected shape.

    Attributes:
        type_name: Offending content-part discriminator, when one was read.
    """

    def __init__(self, message: str, type_name: Optional[str] = None):
        super().__init__(message)
        self.type_name = type_name


class ImageDecodeError(PortkeyError):
    """Image bytes cannot be read as a supported raster format."""


class ImageDimensionError(ValueError):
    """Image header reports dimensions above the configured maximum."""

    def __init__(
        self,
        message: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ):
        super().__init__(message)
        self.width = width
        self.height = height


def _parse_error_envelope(body: Optional[str]) -> tuple:
    """Extract (message, type, code) from a gateway error envelope."""
    if not body or not body.strip():
        return None, None, None

    try:
        data = json.loads(body)
    except ValueError:
        return None, None, None

    error = data.get("error") if isinstance(data, dict) else None
    if not isinstance(error, dict):
        return None, None, None

    def _text(value: Any) -> Optional[str]:
        return None if value is None else str(value)

    return _text(error.get("message")), _text(error.get("type")), _text(error.get("code"))


class PortkeyAPIError(PortkeyError):
    """
    Non-2xx response from the gateway.

    The raw body is always kept. When it parses as the standard
    ``{"error": {"message", "type", "code"}}`` envelope the three fields
    are extracted; otherwise they stay ``None``.

    Attributes:
        status_code: HTTP status, or ``TRANSPORT_ERROR_STATUS``.
        response_body: Raw response body text.
        error_message: ``error.message`` from the envelope.
        error_type: ``error.type`` from the envelope.
        error_code: ``error.code`` from the envelope.
    """

    def __init__(
        self,
        status_code: int,
        response_body: Optional[str],
        message: Optional[str] = None,
    ):
        super().__init__(message or f"Portkey API error {status_code}: {response_body}")
        self.status_code = status_code
        self.response_body = response_body
        self.error_message, self.error_type, self.error_code = _parse_error_envelope(
            response_body
        )


class PortkeyConnectionError(PortkeyAPIError):
    """Transport failure before any HTTP response was received."""

    def __init__(self, message: str):
        super().__init__(TRANSPORT_ERROR_STATUS, None, message=message)
