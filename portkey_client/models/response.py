"""Chat completion response models."""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .request import Message


class PromptTokensDetails(BaseModel):
    """Details about prompt tokens."""

    model_config = ConfigDict(frozen=True)

    cached_tokens: int = 0
    audio_tokens: int = 0


class CompletionTokensDetails(BaseModel):
    """Details about completion tokens."""

    model_config = ConfigDict(frozen=True)

    reasoning_tokens: int = 0
    audio_tokens: int = 0
    accepted_prediction_tokens: int = 0
    rejected_prediction_tokens: int = 0


class Usage(BaseModel):
    """Token usage statistics."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_tokens_details: Optional[PromptTokensDetails] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None


class Choice(BaseModel):
    """
    Completion choice.

    ``finish_reason`` is passed through as sent by the provider
    ("stop", "tool_calls", "length", or anything provider-specific).
    """

    model_config = ConfigDict(frozen=True)

    index: int = 0
    finish_reason: Optional[str] = None
    message: Message
    logprobs: Optional[Any] = None


class ChatCompletionResponse(BaseModel):
    """Response from POST /v1/chat/completions."""

    model_config = ConfigDict(frozen=True)

    id: str
    object: str = "chat.completion"
    created: int = 0
    model: str
    system_fingerprint: Optional[str] = None
    choices: Tuple[Choice, ...] = ()
    usage: Optional[Usage] = None

    @property
    def content(self) -> Optional[str]:
        """Text content of the first choice, if any."""
        if self.choices:
            return self.choices[0].message.content_text
        return None
