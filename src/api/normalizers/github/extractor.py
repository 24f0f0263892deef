"""Extrator do payload dependabot_alert.

Apenas extração estrutural (schema pydantic); regras de presença
ficam no normalizer.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from api.connectors.github.models import DependabotAlertEvent
from app.protocols.models import Rejection, RejectionKind

logger = logging.getLogger(__name__)


def extract_alert_event(payload: dict[str, Any]) -> DependabotAlertEvent | Rejection:
    """Valida o formato do payload contra o schema do evento.

    Tipos JSON incompatíveis (ex.: alert.number como objeto) são corpo
    malformado, não falha semântica.

    Returns:
        DependabotAlertEvent ou Rejection(INVALID_BODY)
    """
    try:
        return DependabotAlertEvent.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        logger.warning("alert_schema_invalid", extra={"fields": fields})
        return Rejection(RejectionKind.INVALID_BODY, detail=f"schema:{','.join(fields)}")


def collect_dependency_names(event: DependabotAlertEvent) -> list[object]:
    """Coleta nomes brutos: pacote direto + pacotes do advisory."""
    names: list[object] = []
    alert = event.alert
    if alert is None:
        return names

    direct = alert.dependency.package if alert.dependency else None
    if direct is not None:
        names.append(direct.name)

    advisory = alert.security_advisory
    for vulnerability in (advisory.vulnerabilities if advisory else None) or []:
        if vulnerability is not None and vulnerability.package is not None:
            names.append(vulnerability.package.name)
    return names
