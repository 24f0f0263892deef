"""Validação de assinatura HMAC-SHA256 para webhooks do GitHub."""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_PREFIX = "sha256="


def compute_webhook_signature(payload: bytes, secret: str) -> str:
    """Calcula o valor esperado do header X-Hub-Signature-256.

    Args:
        payload: Corpo bruto da requisição (nunca re-serializado)
        secret: Secret do webhook

    Returns:
        Assinatura no formato "sha256=<hex>"
    """
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def validate_webhook_signature(payload: bytes, signature: str, secret: str) -> bool:
    """Valida assinatura HMAC-SHA256 do GitHub em tempo constante.

    Args:
        payload: Corpo bruto da requisição
        signature: Header X-Hub-Signature-256
        secret: Secret do webhook

    Returns:
        True se assinatura válida
    """
    if not secret or not signature.startswith(SIGNATURE_PREFIX):
        return False

    expected = compute_webhook_signature(payload, secret)
    # compare_digest exige ASCII em str; assinatura com outros caracteres é inválida
    if not signature.isascii():
        return False
    return hmac.compare_digest(expected, signature)
