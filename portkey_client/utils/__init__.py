"""Utility modules."""

from . import images
from .debug_logger import log_incoming_response, log_outgoing_request, mask_headers
from .logging_setup import setup_logging

__all__ = [
    "images",
    "log_incoming_response",
    "log_outgoing_request",
    "mask_headers",
    "setup_logging",
]
