"""Portão de entrada do webhook: headers obrigatórios e teto de bytes.

Roda antes de qualquer trabalho criptográfico. Nada aqui lê o corpo
além do necessário.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.models import Rejection, RejectionKind, WebhookHeaders

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Mapping

DELIVERY_HEADER = "x-github-delivery"
EVENT_HEADER = "x-github-event"
SIGNATURE_HEADER = "x-hub-signature-256"

SUPPORTED_EVENT = "dependabot_alert"


def extract_webhook_headers(headers: Mapping[str, str]) -> WebhookHeaders | Rejection:
    """Extrai delivery id, evento e assinatura dos headers.

    Args:
        headers: Headers recebidos (qualquer capitalização)

    Returns:
        WebhookHeaders ou Rejection(MISSING_HEADERS) se algum faltar/vazio
    """
    lowered = {key.lower(): value for key, value in headers.items()}
    delivery_id = (lowered.get(DELIVERY_HEADER) or "").strip()
    event_name = (lowered.get(EVENT_HEADER) or "").strip()
    signature = (lowered.get(SIGNATURE_HEADER) or "").strip()

    if not delivery_id or not event_name or not signature:
        missing = [
            name
            for name, value in (
                (DELIVERY_HEADER, delivery_id),
                (EVENT_HEADER, event_name),
                (SIGNATURE_HEADER, signature),
            )
            if not value
        ]
        return Rejection(RejectionKind.MISSING_HEADERS, detail=",".join(missing))

    return WebhookHeaders(
        delivery_id=delivery_id,
        event_name=event_name,
        signature=signature,
    )


def is_supported_event(event_name: str) -> bool:
    """Retorna True se o evento é processado pelo bridge."""
    return event_name == SUPPORTED_EVENT


def _declared_length(content_length: str | None) -> int | None:
    if content_length is None:
        return None
    try:
        return int(content_length)
    except ValueError:
        return None


async def read_limited_body(
    chunks: AsyncIterator[bytes],
    max_bytes: int,
    content_length: str | None = None,
) -> bytes | Rejection:
    """Lê o corpo incrementalmente, abortando ao passar do teto.

    Args:
        chunks: Stream de bytes do request
        max_bytes: Teto em bytes (inclusive)
        content_length: Header Content-Length, se declarado

    Returns:
        Corpo bruto ou Rejection(PAYLOAD_TOO_LARGE)
    """
    declared = _declared_length(content_length)
    if declared is not None and declared > max_bytes:
        return Rejection(RejectionKind.PAYLOAD_TOO_LARGE, detail=f"declared={declared}")

    buffer = bytearray()
    async for chunk in chunks:
        if not chunk:
            continue
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            return Rejection(RejectionKind.PAYLOAD_TOO_LARGE, detail=f"read>{max_bytes}")

    return bytes(buffer)
