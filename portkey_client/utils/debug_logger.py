"""Debug logging for request/response payload inspection."""

import json
import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..config import settings

logger = logging.getLogger("portkey_client.payloads")

SENSITIVE_HEADERS = {"authorization", "x-portkey-api-key", "x-portkey-virtual-key"}


def _truncate(text: str, max_length: int = 0) -> str:
    """Truncate text if max_length is set."""
    if max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length] + f"... [truncated, total {len(text)} chars]"


def _safe_json(obj: Any, indent: int = 2) -> str:
    """Safely serialize object to JSON string."""
    try:
        return json.dumps(obj, ensure_ascii=False, indent=indent, default=str)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"


def mask_headers(headers: Mapping[str, str]) -> dict:
    """Replace credential header values with ***."""
    return {k: ("***" if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}


def log_outgoing_request(
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
) -> None:
    """Log a request about to be sent to the gateway."""
    if not settings.DEBUG_LOG_PAYLOADS:
        return

    timestamp = datetime.now().isoformat()
    max_len = settings.DEBUG_LOG_MAX_LENGTH

    log_parts = [
        f"\n{'>'*60}",
        f"[{timestamp}] OUTGOING REQUEST",
        f"{'>'*60}",
        f"POST {url}",
    ]

    if headers:
        log_parts.append(f"Headers: {_safe_json(mask_headers(headers))}")

    if body is not None:
        log_parts.append(f"Body:\n{_truncate(body, max_len)}")

    log_parts.append(">" * 60)
    logger.info("\n".join(log_parts))


def log_incoming_response(
    status_code: int,
    body: Optional[str] = None,
) -> None:
    """Log a response received from the gateway."""
    if not settings.DEBUG_LOG_PAYLOADS:
        return

    timestamp = datetime.now().isoformat()
    max_len = settings.DEBUG_LOG_MAX_LENGTH

    log_parts = [
        f"\n{'<'*60}",
        f"[{timestamp}] INCOMING RESPONSE",
        f"{'<'*60}",
        f"Status: {status_code}",
    ]

    if body is not None:
        log_parts.append(f"Body:\n{_truncate(body, max_len)}")

    log_parts.append("<" * 60)
    logger.info("\n".join(log_parts))
