"""Data models for the chat completions API."""

from . import content
from .content import (
    ContentPart,
    FileContent,
    FileData,
    ImageDetail,
    ImageUrl,
    ImageUrlContent,
    MessageContent,
    TextContent,
    parse_content_part,
    parse_message_content,
)
from .request import (
    ChatCompletionRequest,
    FunctionCall,
    Message,
    ToolCall,
)
from .response import (
    ChatCompletionResponse,
    Choice,
    CompletionTokensDetails,
    PromptTokensDetails,
    Usage,
)

__all__ = [
    # Content
    "content",
    "ContentPart",
    "FileContent",
    "FileData",
    "ImageDetail",
    "ImageUrl",
    "ImageUrlContent",
    "MessageContent",
    "TextContent",
    "parse_content_part",
    "parse_message_content",
    # Request
    "ChatCompletionRequest",
    "FunctionCall",
    "Message",
    "ToolCall",
    # Response
    "ChatCompletionResponse",
    "Choice",
    "CompletionTokensDetails",
    "PromptTokensDetails",
    "Usage",
]
