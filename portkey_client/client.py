"""HTTP clients for the Portkey AI gateway.

    client = PortkeyClient(api_key="pk-...", virtual_key="my-openai-key")

    response = client.chat_completions.create(
        ChatCompletionRequest(model="gpt-4o", messages=[Message.user("Hello!")])
    )
    print(response.content)

Errors are raised, never retried: ``PortkeyAPIError`` for non-2xx responses,
``PortkeyConnectionError`` when no response arrives, and
``DeserializationError`` when the body does not match the response model.
"""

import logging
from typing import Dict, Mapping, Optional, Tuple

import httpx
from pydantic import ValidationError

from .config import settings
from .exceptions import DeserializationError, PortkeyAPIError, PortkeyConnectionError
from .headers import Metadata, build_gateway_headers, build_trace_headers
from .models.request import ChatCompletionRequest
from .models.response import ChatCompletionResponse
from .utils.debug_logger import log_incoming_response, log_outgoing_request

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/chat/completions"


class _BaseClient:
    """Header, URL and payload handling shared by the sync and async clients."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        virtual_key: Optional[str] = None,
        provider: Optional[str] = None,
        provider_auth_token: Optional[str] = None,
        config: Optional[str] = None,
        custom_host: Optional[str] = None,
        trace_id: Optional[str] = None,
        metadata: Optional[Metadata] = None,
        cache_namespace: Optional[str] = None,
        cache_force_refresh: Optional[bool] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        """
        Args:
            api_key: Portkey API key (falls back to PORTKEY_API_KEY).
            virtual_key: Virtual key for provider routing.
            provider: Provider name for direct auth.
            provider_auth_token: Provider token, sent as a Bearer header.
            config: Portkey config ID.
            custom_host: Custom provider host override.
            trace_id: Default trace ID for every request.
            metadata: Default metadata (dict or JSON string).
            cache_namespace: Cache namespace.
            cache_force_refresh: Force a cache refresh on every request.
            base_url: Gateway base URL (default https://api.portkey.ai/v1).
            timeout: Connect and read timeout in seconds.
            headers: Extra headers, applied last.
        """
        api_key = api_key or settings.PORTKEY_API_KEY
        if not api_key:
            raise ValueError("api_key is required (pass api_key or set PORTKEY_API_KEY)")

        self.base_url = (base_url or settings.PORTKEY_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PORTKEY_TIMEOUT

        self.headers: Dict[str, str] = build_gateway_headers(
            api_key,
            virtual_key=virtual_key or settings.PORTKEY_VIRTUAL_KEY,
            provider=provider or settings.PORTKEY_PROVIDER,
            provider_auth_token=provider_auth_token or settings.PORTKEY_PROVIDER_AUTH_TOKEN,
            config=config or settings.PORTKEY_CONFIG,
            custom_host=custom_host or settings.PORTKEY_CUSTOM_HOST,
        )
        self.headers.update(
            build_trace_headers(
                trace_id=trace_id,
                metadata=metadata,
                cache_namespace=cache_namespace,
                cache_force_refresh=cache_force_refresh,
            )
        )
        if headers:
            self.headers.update(headers)

    def _prepare(
        self, request: ChatCompletionRequest, call_headers: Mapping[str, str]
    ) -> Tuple[str, Dict[str, str], str]:
        url = f"{self.base_url}{CHAT_COMPLETIONS_PATH}"
        headers = {"Content-Type": "application/json", **self.headers, **call_headers}
        body = request.to_json()

        logger.debug(f"POST {url} model={request.model} messages={len(request.messages)}")
        log_outgoing_request(url, headers, body)
        return url, headers, body

    @staticmethod
    def _transport_error(e: httpx.TransportError) -> PortkeyConnectionError:
        return PortkeyConnectionError(f"Request failed: {e}")

    @staticmethod
    def _handle_response(response: httpx.Response) -> ChatCompletionResponse:
        log_incoming_response(response.status_code, response.text)

        if not response.is_success:
            raise PortkeyAPIError(response.status_code, response.text)

        try:
            return ChatCompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(f"Invalid chat completion response: {e}") from e


# =============================================================================
# Sync
# =============================================================================


class ChatCompletions:
    """Chat completions resource (sync)."""

    def __init__(self, client: "PortkeyClient"):
        self._client = client

    def create(
        self,
        request: ChatCompletionRequest,
        *,
        trace_id: Optional[str] = None,
        span_id: Optional[str] = None,
        metadata: Optional[Metadata] = None,
        cache_force_refresh: Optional[bool] = None,
    ) -> ChatCompletionResponse:
        """
        Create a chat completion.

        Per-call trace and cache options override the client defaults.

        Raises:
            PortkeyAPIError: Non-2xx response.
            PortkeyConnectionError: Connection failure or timeout.
            DeserializationError: Response body does not match the model.
        """
        call_headers = build_trace_headers(
            trace_id=trace_id,
            span_id=span_id,
            metadata=metadata,
            cache_force_refresh=cache_force_refresh,
        )
        return self._client._post(request, call_headers)


class PortkeyClient(_BaseClient):
    """Synchronous Portkey gateway client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        **options,
    ):
        super().__init__(api_key, **options)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(timeout=self.timeout)
        self.chat_completions = ChatCompletions(self)

    def _post(
        self, request: ChatCompletionRequest, call_headers: Mapping[str, str]
    ) -> ChatCompletionResponse:
        url, headers, body = self._prepare(request, call_headers)
        try:
            response = self._http_client.post(
                url, content=body, headers=headers, timeout=self.timeout
            )
        except httpx.TransportError as e:
            raise self._transport_error(e) from e
        return self._handle_response(response)

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "PortkeyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# =============================================================================
# Async
# =============================================================================


class AsyncChatCompletions:
    """Chat completions resource (async)."""

    def __init__(self, client: "AsyncPortkeyClient"):
        self._client = client

    async def create(
        self,
        request: ChatCompletionRequest,
        *,
        trace_id: Optional[str] = None,
        span_id: Optional[str] = None,
        metadata: Optional[Metadata] = None,
        cache_force_refresh: Optional[bool] = None,
    ) -> ChatCompletionResponse:
        """Create a chat completion. See ``ChatCompletions.create``."""
        call_headers = build_trace_headers(
            trace_id=trace_id,
            span_id=span_id,
            metadata=metadata,
            cache_force_refresh=cache_force_refresh,
        )
        return await self._client._post(request, call_headers)


class AsyncPortkeyClient(_BaseClient):
    """Asyncio Portkey gateway client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        **options,
    ):
        super().__init__(api_key, **options)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=self.timeout)
        self.chat_completions = AsyncChatCompletions(self)

    async def _post(
        self, request: ChatCompletionRequest, call_headers: Mapping[str, str]
    ) -> ChatCompletionResponse:
        url, headers, body = self._prepare(request, call_headers)
        try:
            response = await self._http_client.post(
                url, content=body, headers=headers, timeout=self.timeout
            )
        except httpx.TransportError as e:
            raise self._transport_error(e) from e
        return self._handle_response(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "AsyncPortkeyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
