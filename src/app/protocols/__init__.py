"""Protocolos e contratos do core da aplicação."""

from .github_client import (
    GitHubAppClientProtocol,
    InstallationTokenProviderProtocol,
    RepositoryDispatchSenderProtocol,
)
from .models import (
    DISPATCH_EVENT_TYPE,
    AlertDispatch,
    DispatchPayload,
    InboundWebhookEvent,
    InstallationToken,
    Rejection,
    RejectionKind,
    RelayOutcome,
    WebhookHeaders,
)

__all__ = [
    "DISPATCH_EVENT_TYPE",
    "AlertDispatch",
    "DispatchPayload",
    "GitHubAppClientProtocol",
    "InboundWebhookEvent",
    "InstallationToken",
    "InstallationTokenProviderProtocol",
    "Rejection",
    "RejectionKind",
    "RelayOutcome",
    "RepositoryDispatchSenderProtocol",
    "WebhookHeaders",
]
