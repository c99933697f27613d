"""Chat completion request models."""

from typing import Any, Dict, Literal, Optional, Sequence, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from .content import ContentPart, MessageContent, parse_message_content

Role = Literal["system", "developer", "user", "assistant", "tool"]


class FunctionCall(BaseModel):
    """Function name and JSON-encoded arguments requested by the model."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: str


class ToolCall(BaseModel):
    """Tool call attached to an assistant message."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "function"
    function: FunctionCall


class Message(BaseModel):
    """
    Chat message.

    ``content`` is a plain string, a tuple of content parts, or ``None``
    for an assistant turn that only carries tool calls. Messages are
    frozen; ``with_name`` returns a copy.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: MessageContent = None
    name: Optional[str] = None
    tool_calls: Optional[Tuple[ToolCall, ...]] = None
    tool_call_id: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def parse_content(cls, v: Any) -> MessageContent:
        """Resolve string / null / typed content-part array."""
        return parse_message_content(v)

    @model_validator(mode="after")
    def check_null_content(self) -> "Message":
        if self.content is None and not self.tool_calls:
            raise ValueError("content may only be null on messages with tool_calls")
        return self

    @model_serializer(mode="wrap")
    def serialize(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        # null content is the wire form of a tool-call-only assistant turn
        data.setdefault("content", None)
        return data

    # -- factories --

    @classmethod
    def system(cls, content: Union[str, Sequence[ContentPart]]) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def developer(cls, content: Union[str, Sequence[ContentPart]]) -> "Message":
        return cls(role="developer", content=content)

    @classmethod
    def user(cls, content: Union[str, Sequence[ContentPart]]) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(
        cls,
        content: Union[str, Sequence[ContentPart], None],
        tool_calls: Optional[Sequence[ToolCall]] = None,
    ) -> "Message":
        return cls(role="assistant", content=content, tool_calls=tool_calls)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "Message":
        """Tool result linked to the originating call by ``tool_call_id``."""
        return cls(role="tool", content=content, tool_call_id=tool_call_id)

    # -- accessors --

    def with_name(self, name: str) -> "Message":
        """Return a copy with the participant name set."""
        return self.model_copy(update={"name": name})

    @property
    def content_text(self) -> Optional[str]:
        """Content if it is a plain string, else None."""
        return self.content if isinstance(self.content, str) else None

    @property
    def content_parts(self) -> Optional[Tuple[ContentPart, ...]]:
        """Content parts if the message is multimodal, else None."""
        if isinstance(self.content, tuple) and self.content:
            return self.content
        return None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ChatCompletionRequest(BaseModel):
    """
    Request body for POST /v1/chat/completions.

    Validation runs at construction: ``model`` must be non-empty and at
    least one message is required. Message and tool lists are copied into
    tuples, so the request cannot change after it is built.

    Streaming is not supported, so there is no ``stream`` field.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(min_length=1)
    messages: Tuple[Message, ...] = Field(min_length=1)
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)
    n: Optional[int] = Field(default=None, ge=1)
    stop: Optional[Union[str, Tuple[str, ...]]] = None
    max_tokens: Optional[int] = Field(default=None, ge=1)
    presence_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None
    response_format: Optional[Dict[str, Any]] = None
    seed: Optional[int] = None
    tools: Optional[Tuple[Dict[str, Any], ...]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None

    # Provider extension: extended reasoning budget,
    # e.g. {"type": "enabled", "budget_tokens": 2048}
    thinking: Optional[Dict[str, Any]] = None

    def with_message(self, message: Message) -> "ChatCompletionRequest":
        """Return a copy with ``message`` appended."""
        return self.model_copy(update={"messages": self.messages + (message,)})

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready payload; unset optional fields are omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
