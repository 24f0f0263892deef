"""Builder do corpo de repository_dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.protocols.models import DISPATCH_EVENT_TYPE

if TYPE_CHECKING:
    from app.protocols.models import DispatchPayload


def build_dispatch_request(payload: DispatchPayload) -> dict[str, Any]:
    """Constrói o corpo do POST /repos/{owner}/{repo}/dispatches.

    Args:
        payload: Payload normalizado do alerta

    Returns:
        Corpo com event_type fixo e versionado e o client_payload
    """
    return {
        "event_type": DISPATCH_EVENT_TYPE,
        "client_payload": payload.as_client_payload(),
    }
