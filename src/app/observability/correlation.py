"""Contexto de entrega (X-GitHub-Delivery) para rastreamento nos logs.

Usa ContextVar para ser async-safe: cada requisição em voo enxerga
apenas o próprio delivery_id.

Uso:
    token = set_delivery_id(headers.delivery_id)
    try:
        # processar request
    finally:
        reset_delivery_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_delivery_id: ContextVar[str] = ContextVar("delivery_id", default="")


def get_delivery_id() -> str:
    """Retorna o delivery_id do contexto atual (vazio se não definido)."""
    return _delivery_id.get()


def set_delivery_id(delivery_id: str | None = None) -> Token[str]:
    """Define o delivery_id no contexto atual.

    Args:
        delivery_id: ID a definir. Se None, gera um UUID local para
            correlacionar logs de requests sem o header.

    Returns:
        Token para reset posterior via reset_delivery_id().
    """
    value = delivery_id or f"local-{uuid.uuid4()}"
    return _delivery_id.set(value)


def reset_delivery_id(token: Token[str]) -> None:
    """Restaura o delivery_id ao valor anterior."""
    _delivery_id.reset(token)
