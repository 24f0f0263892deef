"""Webhook GitHub: portão de entrada, assinatura e parsing seguro."""

from .gate import (
    DELIVERY_HEADER,
    EVENT_HEADER,
    SIGNATURE_HEADER,
    SUPPORTED_EVENT,
    extract_webhook_headers,
    is_supported_event,
    read_limited_body,
)
from .receive import parse_webhook_request

__all__ = [
    "DELIVERY_HEADER",
    "EVENT_HEADER",
    "SIGNATURE_HEADER",
    "SUPPORTED_EVENT",
    "extract_webhook_headers",
    "is_supported_event",
    "parse_webhook_request",
    "read_limited_body",
]
