"""Registro de métricas via structured logging.

As métricas saem como linhas de log JSON e podem ser agregadas
pelo backend de logs (Cloud Logging, Loki, etc.).

Uso:
    start = time.perf_counter()
    # ... chamada outbound ...
    record_latency("github_api", "create_installation_token", elapsed_ms(start))
"""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


def elapsed_ms(started_at: float) -> float:
    """Milissegundos decorridos desde um time.perf_counter()."""
    return (time.perf_counter() - started_at) * 1000


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    *,
    success: bool = True,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "github_api")
        operation: Nome da operação (ex: "create_repository_dispatch")
        latency_ms: Latência em milissegundos
        success: Se a operação terminou com sucesso
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "success": success,
        },
    )


def record_outcome(kind: str, status_code: int) -> None:
    """Registra o desfecho de uma entrega de webhook (counter)."""
    logger.info(
        "metric_webhook_outcome",
        extra={
            "metric_type": "counter",
            "component": "webhook",
            "outcome": kind,
            "status_code": status_code,
        },
    )
