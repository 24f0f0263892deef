"""Protocolos do cliente GitHub usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import InstallationToken


class InstallationTokenProviderProtocol(Protocol):
    """Troca a identidade do App por um token de instalação."""

    async def create_installation_token(self, installation_id: int) -> InstallationToken: ...


class RepositoryDispatchSenderProtocol(Protocol):
    """Dispara um evento repository_dispatch."""

    async def create_repository_dispatch(
        self,
        owner: str,
        repo: str,
        token: InstallationToken,
        body: dict[str, Any],
    ) -> None: ...


class GitHubAppClientProtocol(
    InstallationTokenProviderProtocol,
    RepositoryDispatchSenderProtocol,
    Protocol,
):
    """Cliente completo usado pelo caso de uso."""
