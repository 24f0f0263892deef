"""Normalizer dependabot_alert → DispatchPayload.

Regras (nesta ordem, cada uma aborta o pipeline):
1. alert.dependency.package deve existir
2. o pacote direto deve ter ecosystem não vazio (sem default)
3. nomes de dependências: trim, descarta vazios, dedupe, ordena; lista não vazia
4. installation.id deve existir
5. repository.owner.login e repository.name devem existir
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from app.protocols.models import (
    AlertDispatch,
    DispatchPayload,
    Rejection,
    RejectionKind,
)

from .extractor import collect_dependency_names

if TYPE_CHECKING:
    from collections.abc import Iterable

    from api.connectors.github.models import DependabotAlertEvent

RELAYED_ACTIONS = frozenset({"created", "reopened", "reintroduced", "auto_reopened"})


def is_relayed_action(action: str | None) -> bool:
    """Retorna True para ações que (re)abrem um alerta.

    Payload sem ``action`` segue o pipeline; só ações conhecidas e fora
    do conjunto são ignoradas.
    """
    return action is None or action in RELAYED_ACTIONS


def _collation_key(name: str) -> tuple[str, str]:
    """Chave de ordenação sensível a locale, determinística.

    Remove acentos (NFKD sem marcas combinantes) e ignora caixa;
    empate resolvido pelo texto original.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), name


def normalize_dependency_names(names: Iterable[object]) -> list[str]:
    """Trim, descarta vazios e não-strings, dedupe e ordena.

    Idempotente: aplicar sobre a própria saída retorna a mesma lista.
    """
    unique = {name.strip() for name in names if isinstance(name, str) and name.strip()}
    return sorted(unique, key=_collation_key)


def _invalid(detail: str) -> Rejection:
    return Rejection(RejectionKind.INVALID_ALERT, detail=detail)


def normalize_alert_event(event: DependabotAlertEvent) -> AlertDispatch | Rejection:
    """Produz o AlertDispatch a partir do evento validado.

    Returns:
        AlertDispatch ou Rejection(INVALID_ALERT) com o motivo em detail
    """
    alert = event.alert
    direct = alert.dependency.package if alert and alert.dependency else None
    if direct is None:
        return _invalid("missing_dependency_package")

    ecosystem = (direct.ecosystem or "").strip()
    if not ecosystem:
        return _invalid("missing_ecosystem")

    dependencies = normalize_dependency_names(collect_dependency_names(event))
    if not dependencies:
        return _invalid("no_dependency_names")

    installation_id = event.installation.id if event.installation else None
    if not installation_id:
        return _invalid("missing_installation_id")

    repository = event.repository
    owner = repository.owner.login if repository and repository.owner else None
    repo = repository.name if repository else None
    if not owner or not repo:
        return _invalid("missing_repository")

    advisory = alert.security_advisory
    vulnerability = alert.security_vulnerability
    payload = DispatchPayload(
        ecosystem=ecosystem.lower(),
        dependencies=tuple(dependencies),
        alert_number=alert.number,
        ghsa_id=advisory.ghsa_id if advisory else None,
        severity=vulnerability.severity if vulnerability else None,
    )
    return AlertDispatch(
        owner=owner,
        repo=repo,
        installation_id=installation_id,
        payload=payload,
    )
