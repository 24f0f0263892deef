"""Verificação de assinatura e parse seguro do corpo do webhook."""

from __future__ import annotations

import json
from typing import Any

from app.infra.crypto.signature import validate_webhook_signature
from app.protocols.models import Rejection, RejectionKind


def parse_webhook_request(
    raw_body: bytes,
    signature: str,
    secret: str,
) -> dict[str, Any] | Rejection:
    """Valida assinatura e só então decodifica o JSON.

    Args:
        raw_body: Corpo bruto do request, exatamente como recebido
        signature: Header X-Hub-Signature-256
        secret: Secret do webhook

    Returns:
        Payload decodificado ou Rejection:
        INVALID_SIGNATURE (corpo nunca é parseado), INVALID_JSON ou
        INVALID_BODY (JSON válido que não é objeto)
    """
    if not validate_webhook_signature(raw_body, signature, secret):
        return Rejection(RejectionKind.INVALID_SIGNATURE, detail="signature_mismatch")

    try:
        payload = json.loads(raw_body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return Rejection(RejectionKind.INVALID_JSON, detail="invalid_json")

    if not isinstance(payload, dict):
        return Rejection(RejectionKind.INVALID_BODY, detail="payload_not_object")

    return payload
