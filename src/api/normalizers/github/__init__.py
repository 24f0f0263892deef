"""Normalizer GitHub: dependabot_alert para o payload de dispatch.

Responsabilidades:
- Validar o formato do payload (schema pydantic)
- Coletar e normalizar nomes de dependências
- Produzir o contrato fixo enviado no repository_dispatch
"""

from .extractor import collect_dependency_names, extract_alert_event
from .normalizer import (
    RELAYED_ACTIONS,
    is_relayed_action,
    normalize_alert_event,
    normalize_dependency_names,
)

__all__ = [
    "RELAYED_ACTIONS",
    "collect_dependency_names",
    "extract_alert_event",
    "is_relayed_action",
    "normalize_alert_event",
    "normalize_dependency_names",
]
