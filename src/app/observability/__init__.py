"""Observabilidade: contexto de entrega e métricas via logs.

Uso:
    from app.observability import get_delivery_id, set_delivery_id
    from app.observability import record_latency, record_outcome
"""

from app.observability.correlation import (
    get_delivery_id,
    reset_delivery_id,
    set_delivery_id,
)
from app.observability.metrics import elapsed_ms, record_latency, record_outcome

__all__ = [
    "elapsed_ms",
    "get_delivery_id",
    "record_latency",
    "record_outcome",
    "reset_delivery_id",
    "set_delivery_id",
]
