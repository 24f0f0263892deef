"""Settings do GitHub App e do endpoint de webhook.

Carregadas uma única vez no startup e repassadas explicitamente
para a aplicação (create_app). Nenhum handler lê o ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

# Constantes da REST API do GitHub
GITHUB_API_BASE_URL: str = "https://api.github.com"
GITHUB_API_VERSION: str = "2022-11-28"
GITHUB_USER_AGENT: str = "dependabot-alert-bridge"

DEFAULT_PORT: int = 3000
DEFAULT_MAX_BODY_BYTES: int = 1024 * 1024  # 1 MiB

_Number = TypeVar("_Number", int, float)


@dataclass(frozen=True)
class GitHubAppSettings:
    """Configurações do GitHub App.

    Attributes:
        port: Porta HTTP do listener
        webhook_secret: Secret compartilhado para HMAC do webhook
        app_id: ID do GitHub App (claim iss do JWT)
        private_key: Chave privada PEM do GitHub App
        api_base_url: URL base da REST API
        request_timeout_seconds: Timeout das chamadas outbound
        max_body_bytes: Teto de bytes do corpo do webhook
        load_errors: Erros de parse do ambiente (preenchidos pelo loader)
    """

    port: int = DEFAULT_PORT
    webhook_secret: str = ""
    app_id: str = ""
    private_key: str = ""

    api_base_url: str = GITHUB_API_BASE_URL
    request_timeout_seconds: float = 10.0
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    load_errors: tuple[str, ...] = ()

    def validate(self) -> list[str]:
        """Valida configurações mínimas do GitHub App.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        errors.extend(self.load_errors)

        if self.port <= 0:
            errors.append("PORT deve ser um inteiro positivo")

        if not self.webhook_secret:
            errors.append("GITHUB_WEBHOOK_SECRET não configurado")

        if not self.app_id:
            errors.append("GITHUB_APP_ID não configurado")

        if not self.private_key:
            errors.append("GITHUB_APP_PRIVATE_KEY não configurado")

        if not self.request_timeout_seconds > 0:
            errors.append("GITHUB_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_body_bytes <= 0:
            errors.append("WEBHOOK_MAX_BODY_BYTES deve ser > 0")

        return errors


def _parse_number(
    name: str,
    default: _Number,
    cast: Callable[[str], _Number],
) -> tuple[_Number, str | None]:
    """Lê uma variável numérica, retornando (valor, erro).

    Texto não numérico volta ao default e gera erro; limites (ex.: > 0)
    ficam para validate().
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default, None
    try:
        return cast(raw.strip()), None
    except ValueError:
        return default, f"{name} deve ser numérico (recebido: {raw.strip()!r})"


def normalize_private_key(raw: str) -> str:
    """Expande sequências literais '\\n' de chaves PEM vindas de env."""
    key = raw.strip()
    if "\\n" in key and "\n" not in key:
        key = key.replace("\\n", "\n")
    return key


def _load_from_env() -> GitHubAppSettings:
    """Carrega GitHubAppSettings a partir de variáveis de ambiente."""
    port, port_error = _parse_number("PORT", DEFAULT_PORT, int)
    timeout, timeout_error = _parse_number("GITHUB_REQUEST_TIMEOUT_SECONDS", 10.0, float)
    max_body, max_body_error = _parse_number(
        "WEBHOOK_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES, int
    )
    return GitHubAppSettings(
        port=port,
        webhook_secret=os.getenv("GITHUB_WEBHOOK_SECRET", ""),
        app_id=os.getenv("GITHUB_APP_ID", "").strip(),
        private_key=normalize_private_key(os.getenv("GITHUB_APP_PRIVATE_KEY", "")),
        api_base_url=os.getenv("GITHUB_API_BASE_URL", GITHUB_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=timeout,
        max_body_bytes=max_body,
        load_errors=tuple(
            error for error in (port_error, timeout_error, max_body_error) if error
        ),
    )


@lru_cache(maxsize=1)
def get_github_app_settings() -> GitHubAppSettings:
    """Retorna instância cacheada de GitHubAppSettings.

    A cache garante que o ambiente seja lido uma única vez.
    """
    return _load_from_env()
