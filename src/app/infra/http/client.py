"""Cliente HTTP base para chamadas outbound.

Sem retry: uma falha é reportada ao chamador e a recuperação fica a
cargo da re-entrega do webhook pelo remetente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    # Injeção de transporte (httpx.MockTransport em testes)
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class HttpClient:
    """Cliente HTTP simples (httpx) com timeout explícito."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa um POST JSON e retorna a resposta 2xx.

        Raises:
            HttpError: Status >= 400, timeout ou erro de transporte
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                response = await client.post(url, json=json, headers=merged_headers)
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc

        if response.status_code >= 400:
            raise HttpError(
                "http_error_status",
                status_code=response.status_code,
                response_body=_safe_json(response),
            )
        return response


def _safe_json(response: httpx.Response) -> dict[str, Any] | None:
    """Decodifica o corpo JSON do erro, se houver."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
