"""Endpoint de webhook do GitHub.

Endpoints:
- POST /webhook (também aceito em /): eventos do GitHub App

Fluxo:
1. Headers obrigatórios (delivery, evento, assinatura) → 400 missing_headers
2. Evento diferente de dependabot_alert → 202 skipped, corpo não lido
3. Corpo lido em stream com teto de bytes → 413 payload_too_large
4. Demais estágios no RelayDependabotAlertUseCase

Cada request é isolado: nada é compartilhado além das settings imutáveis.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.github.webhook import (
    DELIVERY_HEADER,
    extract_webhook_headers,
    is_supported_event,
    read_limited_body,
)
from app.observability import record_outcome, reset_delivery_id, set_delivery_id
from app.protocols.models import (
    InboundWebhookEvent,
    Rejection,
    RejectionKind,
    RelayOutcome,
)

if TYPE_CHECKING:
    from app.use_cases.github import RelayDependabotAlertUseCase
    from config.settings import GitHubAppSettings

logger = logging.getLogger(__name__)

router = APIRouter()


def _respond(outcome: RelayOutcome, headers: dict[str, str] | None = None) -> JSONResponse:
    record_outcome(outcome.kind, outcome.status_code)
    return JSONResponse(content=outcome.body, status_code=outcome.status_code, headers=headers)


@router.post("/webhook", response_model=None)
@router.post("/", response_model=None)
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebimento de eventos do GitHub App.

    Returns:
        202 accepted/skipped, ou a rejeição tipada do estágio que falhou.
    """
    token = set_delivery_id(request.headers.get(DELIVERY_HEADER))
    try:
        return await _handle_webhook(request)
    except Exception:
        logger.exception("webhook_unexpected_error")
        return _respond(
            RelayOutcome(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                body={"error": "internal_error"},
                kind="internal_error",
            )
        )
    finally:
        reset_delivery_id(token)


async def _handle_webhook(request: Request) -> JSONResponse:
    settings: GitHubAppSettings = request.app.state.github_settings
    use_case: RelayDependabotAlertUseCase = request.app.state.relay_use_case

    if not request.url.path:
        return _respond(RelayOutcome.from_rejection(Rejection(RejectionKind.MISSING_URL)))

    headers = extract_webhook_headers(request.headers)
    if isinstance(headers, Rejection):
        logger.warning("webhook_headers_missing", extra={"missing": headers.detail})
        return _respond(RelayOutcome.from_rejection(headers))

    if not is_supported_event(headers.event_name):
        logger.info(
            "webhook_skipped_unsupported_event",
            extra={"event": headers.event_name},
        )
        return _respond(RelayOutcome.skipped("unsupported_event", event=headers.event_name))

    raw_body = await read_limited_body(
        request.stream(),
        settings.max_body_bytes,
        request.headers.get("content-length"),
    )
    if isinstance(raw_body, Rejection):
        logger.warning(
            "webhook_payload_too_large",
            extra={"max_bytes": settings.max_body_bytes, "reason": raw_body.detail},
        )
        # Encerra a conexão: o restante do corpo não será lido
        return _respond(RelayOutcome.from_rejection(raw_body), headers={"Connection": "close"})

    logger.info(
        "webhook_received",
        extra={"event": headers.event_name, "payload_size": len(raw_body)},
    )
    outcome = await use_case.execute(
        InboundWebhookEvent(
            delivery_id=headers.delivery_id,
            event_name=headers.event_name,
            signature=headers.signature,
            raw_body=raw_body,
        )
    )
    return _respond(outcome)
