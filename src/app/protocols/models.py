"""Contratos canônicos do pipeline webhook → repository_dispatch.

Cada estágio retorna um valor estreitado ou uma ``Rejection``; o
chamador testa ``isinstance(result, Rejection)`` antes de seguir.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

DISPATCH_EVENT_TYPE = "dependabot-alert-opened"


class RejectionKind(StrEnum):
    """Conjunto fechado de falhas do pipeline."""

    MISSING_URL = "missing_url"
    MISSING_HEADERS = "missing_headers"
    NOT_FOUND = "not_found"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_JSON = "invalid_json"
    INVALID_BODY = "invalid_body"
    INVALID_ALERT = "invalid_alert"
    DOWNSTREAM_FAILURE = "downstream_failure"


_STATUS_BY_KIND: dict[RejectionKind, int] = {
    RejectionKind.MISSING_URL: 400,
    RejectionKind.MISSING_HEADERS: 400,
    RejectionKind.NOT_FOUND: 404,
    RejectionKind.PAYLOAD_TOO_LARGE: 413,
    RejectionKind.INVALID_SIGNATURE: 401,
    RejectionKind.INVALID_JSON: 400,
    RejectionKind.INVALID_BODY: 400,
    RejectionKind.INVALID_ALERT: 500,
    RejectionKind.DOWNSTREAM_FAILURE: 500,
}

# Falhas 500 expõem apenas um código genérico; o detalhe vai para o log
_INTERNAL_KINDS = frozenset({RejectionKind.INVALID_ALERT, RejectionKind.DOWNSTREAM_FAILURE})


@dataclass(frozen=True, slots=True)
class Rejection:
    """Falha tipada de um estágio do pipeline."""

    kind: RejectionKind
    detail: str | None = None

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self.kind]

    @property
    def error_code(self) -> str:
        if self.kind in _INTERNAL_KINDS:
            return "internal_error"
        return self.kind.value

    def as_body(self) -> dict[str, Any]:
        return {"error": self.error_code}


@dataclass(frozen=True, slots=True)
class WebhookHeaders:
    """Headers de protocolo obrigatórios de uma entrega."""

    delivery_id: str
    event_name: str
    signature: str


@dataclass(frozen=True, slots=True)
class InboundWebhookEvent:
    """Entrega recebida, antes da verificação de assinatura.

    ``raw_body`` é mantido byte a byte; re-serializar invalida o HMAC.
    """

    delivery_id: str
    event_name: str
    signature: str
    raw_body: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class DispatchPayload:
    """Payload normalizado enviado como client_payload."""

    ecosystem: str
    dependencies: tuple[str, ...]
    alert_number: int | None = None
    ghsa_id: str | None = None
    severity: str | None = None

    def as_client_payload(self) -> dict[str, Any]:
        """Serializa na ordem do contrato, omitindo campos ausentes."""
        payload: dict[str, Any] = {
            "alert_number": self.alert_number,
            "ghsa_id": self.ghsa_id,
            "severity": self.severity,
            "ecosystem": self.ecosystem,
            "dependencies": list(self.dependencies),
        }
        return {key: value for key, value in payload.items() if value is not None}


@dataclass(frozen=True, slots=True)
class AlertDispatch:
    """Alerta validado, pronto para troca de credencial e dispatch."""

    owner: str
    repo: str
    installation_id: int
    payload: DispatchPayload

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class InstallationToken:
    """Credencial delegada de curta duração (uma única chamada)."""

    token: str = field(repr=False)
    expires_at: str | None = None


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    """Resposta HTTP final de uma entrega."""

    status_code: int
    body: dict[str, Any]
    kind: str

    @classmethod
    def accepted(cls, delivery_id: str) -> RelayOutcome:
        return cls(
            status_code=202,
            body={"accepted": True, "delivery_id": delivery_id},
            kind="accepted",
        )

    @classmethod
    def skipped(cls, reason: str, **context: str | None) -> RelayOutcome:
        body: dict[str, Any] = {"skipped": reason}
        body.update(context)
        return cls(status_code=202, body=body, kind=reason)

    @classmethod
    def from_rejection(cls, rejection: Rejection) -> RelayOutcome:
        return cls(
            status_code=rejection.status_code,
            body=rejection.as_body(),
            kind=rejection.kind.value,
        )


__all__ = [
    "DISPATCH_EVENT_TYPE",
    "AlertDispatch",
    "DispatchPayload",
    "InboundWebhookEvent",
    "InstallationToken",
    "Rejection",
    "RejectionKind",
    "RelayOutcome",
    "WebhookHeaders",
]
