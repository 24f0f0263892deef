"""Factories do pipeline de relay.

As settings chegam por parâmetro; nada aqui lê o ambiente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.github import GitHubHttpClient
from app.use_cases.github import RelayDependabotAlertUseCase

if TYPE_CHECKING:
    import httpx

    from app.protocols.github_client import GitHubAppClientProtocol
    from config.settings import GitHubAppSettings


def create_github_client(
    settings: GitHubAppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GitHubHttpClient:
    """Cria o cliente da REST API do GitHub App.

    Args:
        settings: Settings do processo
        transport: Transporte httpx alternativo (testes)
    """
    return GitHubHttpClient.from_settings(settings, transport=transport)


def create_relay_use_case(
    settings: GitHubAppSettings,
    github_client: GitHubAppClientProtocol | None = None,
) -> RelayDependabotAlertUseCase:
    """Monta o use case com secret e cliente GitHub."""
    return RelayDependabotAlertUseCase(
        webhook_secret=settings.webhook_secret,
        github_client=github_client or create_github_client(settings),
    )
