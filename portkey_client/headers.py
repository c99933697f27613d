"""Portkey gateway header construction."""

import json
from typing import Any, Dict, Mapping, Optional, Union

API_KEY_HEADER = "x-portkey-api-key"
VIRTUAL_KEY_HEADER = "x-portkey-virtual-key"
PROVIDER_HEADER = "x-portkey-provider"
CONFIG_HEADER = "x-portkey-config"
CUSTOM_HOST_HEADER = "x-portkey-custom-host"
AUTHORIZATION_HEADER = "Authorization"

TRACE_ID_HEADER = "x-portkey-trace-id"
SPAN_ID_HEADER = "x-portkey-span-id"
PARENT_SPAN_ID_HEADER = "x-portkey-parent-span-id"
SPAN_NAME_HEADER = "x-portkey-span-name"
METADATA_HEADER = "x-portkey-metadata"
CACHE_NAMESPACE_HEADER = "x-portkey-cache-namespace"
CACHE_FORCE_REFRESH_HEADER = "x-portkey-cache-force-refresh"

Metadata = Union[str, Mapping[str, Any]]


def encode_metadata(metadata: Metadata) -> str:
    """Render metadata as the JSON string the gateway expects."""
    if isinstance(metadata, str):
        return metadata
    return json.dumps(dict(metadata), separators=(",", ":"))


def _set(headers: Dict[str, str], name: str, value: Optional[str]) -> None:
    if value is not None:
        headers[name] = value


def build_gateway_headers(
    api_key: str,
    virtual_key: Optional[str] = None,
    provider: Optional[str] = None,
    provider_auth_token: Optional[str] = None,
    config: Optional[str] = None,
    custom_host: Optional[str] = None,
    extra: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Build routing headers sent with every request.

    Unset options are left out. ``extra`` headers are applied last and
    override anything computed here.
    """
    headers = {API_KEY_HEADER: api_key}
    _set(headers, VIRTUAL_KEY_HEADER, virtual_key)
    _set(headers, PROVIDER_HEADER, provider)
    if provider_auth_token is not None:
        headers[AUTHORIZATION_HEADER] = f"Bearer {provider_auth_token}"
    _set(headers, CONFIG_HEADER, config)
    _set(headers, CUSTOM_HOST_HEADER, custom_host)
    if extra:
        headers.update(extra)
    return headers


def build_trace_headers(
    trace_id: Optional[str] = None,
    span_id: Optional[str] = None,
    parent_span_id: Optional[str] = None,
    span_name: Optional[str] = None,
    metadata: Optional[Metadata] = None,
    cache_namespace: Optional[str] = None,
    cache_force_refresh: Optional[bool] = None,
) -> Dict[str, str]:
    """Build observability and cache-control headers."""
    headers: Dict[str, str] = {}
    _set(headers, TRACE_ID_HEADER, trace_id)
    _set(headers, SPAN_ID_HEADER, span_id)
    _set(headers, PARENT_SPAN_ID_HEADER, parent_span_id)
    _set(headers, SPAN_NAME_HEADER, span_name)
    if metadata is not None:
        headers[METADATA_HEADER] = encode_metadata(metadata)
    _set(headers, CACHE_NAMESPACE_HEADER, cache_namespace)
    if cache_force_refresh is not None:
        headers[CACHE_FORCE_REFRESH_HEADER] = "true" if cache_force_refresh else "false"
    return headers
