"""Use case: relay de dependabot_alert para repository_dispatch.

Fluxo (cada estágio é um gate; a primeira Rejection encerra):
1. Verifica HMAC sobre o corpo bruto e decodifica o JSON
2. Valida o schema e filtra ações que não (re)abrem alerta
3. Normaliza o alerta no payload de dispatch
4. Troca o JWT do App por um token de instalação
5. Emite exatamente um repository_dispatch

Sem estado entre requests, sem retry e sem cache de credencial.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.github.webhook import parse_webhook_request
from api.normalizers.github import (
    extract_alert_event,
    is_relayed_action,
    normalize_alert_event,
)
from api.payload_builders.github import build_dispatch_request
from app.protocols.models import Rejection, RejectionKind, RelayOutcome
from utils.errors import CredentialExchangeError, DispatchError

if TYPE_CHECKING:
    from app.protocols.github_client import GitHubAppClientProtocol
    from app.protocols.models import AlertDispatch, InboundWebhookEvent

logger = logging.getLogger(__name__)


class RelayDependabotAlertUseCase:
    """Orquestra verificação, normalização, credencial e dispatch."""

    def __init__(self, webhook_secret: str, github_client: GitHubAppClientProtocol) -> None:
        self._webhook_secret = webhook_secret
        self._github_client = github_client

    async def execute(self, event: InboundWebhookEvent) -> RelayOutcome:
        """Processa uma entrega já aprovada pelo portão de entrada.

        Nunca levanta exceção para falhas esperadas: todo desfecho vira
        um RelayOutcome com status HTTP e corpo.
        """
        payload = parse_webhook_request(event.raw_body, event.signature, self._webhook_secret)
        if isinstance(payload, Rejection):
            return self._reject(event, payload)

        alert_event = extract_alert_event(payload)
        if isinstance(alert_event, Rejection):
            return self._reject(event, alert_event)

        if not is_relayed_action(alert_event.action):
            logger.info(
                "webhook_skipped_unsupported_action",
                extra={"event": event.event_name, "action": alert_event.action},
            )
            return RelayOutcome.skipped("unsupported_action", action=alert_event.action)

        dispatch = normalize_alert_event(alert_event)
        if isinstance(dispatch, Rejection):
            return self._reject(event, dispatch)

        sent = await self._dispatch(dispatch)
        if isinstance(sent, Rejection):
            return self._reject(event, sent)

        logger.info(
            "dispatch_sent",
            extra={
                "repository": dispatch.full_name,
                "alert_number": dispatch.payload.alert_number,
                "dependency_count": len(dispatch.payload.dependencies),
            },
        )
        return RelayOutcome.accepted(event.delivery_id)

    async def _dispatch(self, dispatch: AlertDispatch) -> None | Rejection:
        """Troca credencial e emite o dispatch (estágios 4 e 5)."""
        try:
            token = await self._github_client.create_installation_token(
                dispatch.installation_id
            )
        except CredentialExchangeError as exc:
            logger.error(
                "credential_exchange_failed",
                extra={
                    "installation_id": dispatch.installation_id,
                    "status_code": exc.status_code,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            return Rejection(RejectionKind.DOWNSTREAM_FAILURE, detail="credential_exchange")

        try:
            await self._github_client.create_repository_dispatch(
                dispatch.owner,
                dispatch.repo,
                token,
                build_dispatch_request(dispatch.payload),
            )
        except DispatchError as exc:
            logger.error(
                "dispatch_failed",
                extra={
                    "repository": dispatch.full_name,
                    "status_code": exc.status_code,
                    "github_message": exc.github_message,
                    "error": str(exc),
                },
            )
            return Rejection(RejectionKind.DOWNSTREAM_FAILURE, detail="dispatch")
        return None

    @staticmethod
    def _reject(event: InboundWebhookEvent, rejection: Rejection) -> RelayOutcome:
        """Loga a rejeição no nível da sua classe e monta a resposta."""
        extra = {"event": event.event_name, "reason": rejection.detail}
        if rejection.kind is RejectionKind.INVALID_SIGNATURE:
            logger.warning("webhook_signature_invalid", extra=extra)
        elif rejection.kind is RejectionKind.INVALID_ALERT:
            logger.error("alert_validation_failed", extra=extra)
        elif rejection.kind is RejectionKind.DOWNSTREAM_FAILURE:
            logger.error("webhook_relay_failed", extra=extra)
        elif rejection.kind is RejectionKind.INVALID_JSON:
            logger.warning("webhook_json_invalid", extra=extra)
        else:
            logger.warning("webhook_body_invalid", extra={**extra, "kind": rejection.kind.value})
        return RelayOutcome.from_rejection(rejection)
