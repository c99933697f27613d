"""Typed Python client for the Portkey AI gateway chat completions API."""

from .client import AsyncPortkeyClient, PortkeyClient
from .exceptions import (
    TRANSPORT_ERROR_STATUS,
    DeserializationError,
    ImageDecodeError,
    ImageDimensionError,
    PortkeyAPIError,
    PortkeyConnectionError,
    PortkeyError,
)
from .models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    ContentPart,
    FileContent,
    FunctionCall,
    ImageUrlContent,
    Message,
    TextContent,
    ToolCall,
    Usage,
    content,
)
from .utils import images

__version__ = "1.0.0"

__all__ = [
    # Clients
    "AsyncPortkeyClient",
    "PortkeyClient",
    # Models
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "ContentPart",
    "FileContent",
    "FunctionCall",
    "ImageUrlContent",
    "Message",
    "TextContent",
    "ToolCall",
    "Usage",
    "content",
    "images",
    # Errors
    "TRANSPORT_ERROR_STATUS",
    "DeserializationError",
    "ImageDecodeError",
    "ImageDimensionError",
    "PortkeyAPIError",
    "PortkeyConnectionError",
    "PortkeyError",
]
