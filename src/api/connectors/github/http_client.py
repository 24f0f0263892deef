"""Cliente HTTP do GitHub App (httpx).

Duas chamadas, ambas sem retry e sem cache:
- POST /app/installations/{id}/access_tokens (troca JWT → token de instalação)
- POST /repos/{owner}/{repo}/dispatches (repository_dispatch)

Tokens e JWT nunca são logados.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.infra.crypto import create_app_jwt, load_private_key
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.observability import elapsed_ms, record_latency
from app.protocols.models import InstallationToken
from config.settings import GITHUB_API_VERSION, GITHUB_USER_AGENT
from utils.errors import CredentialExchangeError, DispatchError

if TYPE_CHECKING:
    import httpx
    from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

    from config.settings import GitHubAppSettings

logger = logging.getLogger(__name__)

COMPONENT = "github_api"


def github_default_headers() -> dict[str, str]:
    """Headers comuns a toda chamada à REST API."""
    return {
        "Accept": "application/vnd.github+json",
        "User-Agent": GITHUB_USER_AGENT,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


def extract_github_message(body: dict[str, Any] | None) -> str | None:
    """Extrai o campo 'message' de um erro da REST API."""
    if not body:
        return None
    message = body.get("message")
    return message if isinstance(message, str) else None


class GitHubHttpClient(HttpClient):
    """Cliente especializado para o GitHub App."""

    def __init__(
        self,
        app_id: str,
        private_key: RSAPrivateKey,
        api_base_url: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa cliente GitHub.

        Args:
            app_id: ID do GitHub App
            private_key: Chave RSA já carregada (validada no startup)
            api_base_url: URL base da REST API
            config: Configuração HTTP base
        """
        base_config = config or HttpClientConfig()
        base_config.default_headers = {
            **github_default_headers(),
            **base_config.default_headers,
        }
        super().__init__(base_config)
        self._app_id = app_id
        self._private_key = private_key
        self._api_base_url = api_base_url.rstrip("/")

    @classmethod
    def from_settings(
        cls,
        settings: GitHubAppSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> GitHubHttpClient:
        """Constrói o cliente a partir das settings do processo.

        Raises:
            AppCredentialError: Se a chave privada não carregar
        """
        return cls(
            app_id=settings.app_id,
            private_key=load_private_key(settings.private_key),
            api_base_url=settings.api_base_url,
            config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                transport=transport,
            ),
        )

    async def create_installation_token(self, installation_id: int) -> InstallationToken:
        """Troca o JWT do App por um token de instalação.

        Args:
            installation_id: ID da instalação (escopo da credencial)

        Returns:
            InstallationToken de curta duração

        Raises:
            CredentialExchangeError: Falha de assinatura, HTTP ou resposta sem token
        """
        app_jwt = create_app_jwt(self._app_id, self._private_key)
        url = f"{self._api_base_url}/app/installations/{installation_id}/access_tokens"

        started_at = time.perf_counter()
        try:
            response = await self.post(url, headers={"Authorization": f"Bearer {app_jwt}"})
        except HttpError as exc:
            record_latency(
                COMPONENT, "create_installation_token", elapsed_ms(started_at), success=False
            )
            github_message = extract_github_message(exc.response_body)
            raise CredentialExchangeError(
                f"installation token request failed: {exc} ({github_message or 'no message'})",
                status_code=exc.status_code,
                installation_id=installation_id,
            ) from exc
        record_latency(COMPONENT, "create_installation_token", elapsed_ms(started_at))

        try:
            data = response.json()
        except ValueError as exc:
            raise CredentialExchangeError(
                "installation token response is not JSON",
                status_code=response.status_code,
                installation_id=installation_id,
            ) from exc

        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise CredentialExchangeError(
                "installation token response without token",
                status_code=response.status_code,
                installation_id=installation_id,
            )

        expires_at = data.get("expires_at")
        return InstallationToken(
            token=token,
            expires_at=expires_at if isinstance(expires_at, str) else None,
        )

    async def create_repository_dispatch(
        self,
        owner: str,
        repo: str,
        token: InstallationToken,
        body: dict[str, Any],
    ) -> None:
        """Dispara repository_dispatch no repositório alvo.

        Sucesso = resposta 2xx (o GitHub responde 204). Não acompanha
        se algum workflow roda depois.

        Raises:
            DispatchError: Status >= 400, timeout ou erro de transporte
        """
        url = f"{self._api_base_url}/repos/{owner}/{repo}/dispatches"

        started_at = time.perf_counter()
        try:
            await self.post(url, json=body, headers={"Authorization": f"token {token.token}"})
        except HttpError as exc:
            record_latency(
                COMPONENT, "create_repository_dispatch", elapsed_ms(started_at), success=False
            )
            raise DispatchError(
                f"repository dispatch failed: {exc}",
                status_code=exc.status_code,
                github_message=extract_github_message(exc.response_body),
            ) from exc
        record_latency(COMPONENT, "create_repository_dispatch", elapsed_ms(started_at))
