"""Pytest configuration and fixtures for client tests."""

import io
import os
import sys
from typing import Callable, List, Union

import httpx
import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portkey_client import AsyncPortkeyClient, PortkeyClient
from portkey_client.config import settings


API_KEY = "pk-test-key"
BASE_URL = "http://gateway.test/v1"

# Small 1x1 PNG image for testing
RED_PIXEL_PNG = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="

Responder = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep routing defaults from the environment out of tests."""
    for name in (
        "PORTKEY_API_KEY",
        "PORTKEY_VIRTUAL_KEY",
        "PORTKEY_PROVIDER",
        "PORTKEY_PROVIDER_AUTH_TOKEN",
        "PORTKEY_CONFIG",
        "PORTKEY_CUSTOM_HOST",
    ):
        monkeypatch.setattr(settings, name, None)
    monkeypatch.setattr(settings, "DEBUG_LOG_PAYLOADS", False)


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Build an in-memory image of the given size and format."""

    def _make(width: int, height: int, fmt: str = "PNG", mode: str = "RGB") -> bytes:
        image = Image.new(mode, (width, height), "white")
        out = io.BytesIO()
        image.save(out, format=fmt)
        return out.getvalue()

    return _make


@pytest.fixture
def completion_payload() -> dict:
    """Minimal successful chat completion response."""
    return {
        "id": "chatcmpl-abc123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "Hello! How can I help?"},
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 6, "total_tokens": 15},
    }


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests captured by the mock transport."""
    return []


def _mock_transport(responder: Responder, sent: List[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        if callable(responder):
            return responder(request)
        return responder

    return httpx.MockTransport(handler)


@pytest.fixture
def make_client(sent_requests) -> Callable[..., PortkeyClient]:
    """Build a sync client wired to a mock transport."""

    def _make(responder: Responder, **options) -> PortkeyClient:
        options.setdefault("api_key", API_KEY)
        options.setdefault("base_url", BASE_URL)
        http_client = httpx.Client(transport=_mock_transport(responder, sent_requests))
        return PortkeyClient(http_client=http_client, **options)

    return _make


@pytest.fixture
def make_async_client(sent_requests) -> Callable[..., AsyncPortkeyClient]:
    """Build an async client wired to a mock transport."""

    def _make(responder: Responder, **options) -> AsyncPortkeyClient:
        options.setdefault("api_key", API_KEY)
        options.setdefault("base_url", BASE_URL)
        http_client = httpx.AsyncClient(transport=_mock_transport(responder, sent_requests))
        return AsyncPortkeyClient(http_client=http_client, **options)

    return _make
