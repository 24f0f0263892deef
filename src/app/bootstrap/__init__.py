"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida as
settings do processo e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app(base_settings)
    validate_runtime_settings(github_settings, base_settings)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.crypto import AppCredentialError, load_private_key
from app.observability import get_delivery_id
from config.logging import configure_logging
from utils.errors import ConfigurationError

from .dependencies import create_github_client, create_relay_use_case

if TYPE_CHECKING:
    from config.settings import BaseSettings, GitHubAppSettings

logger = logging.getLogger(__name__)


def initialize_app(base_settings: BaseSettings) -> None:
    """Configura logging JSON estruturado com delivery_id.

    Deve ser chamada uma vez no início do processo.
    """
    configure_logging(
        level=base_settings.log_level,
        service_name=base_settings.service_name,
        delivery_id_getter=get_delivery_id,
    )


def validate_runtime_settings(
    github_settings: GitHubAppSettings,
    base_settings: BaseSettings,
) -> None:
    """Valida settings obrigatórias antes do listener subir.

    Falha rápido em qualquer ambiente: sem secret, App ID ou chave
    válida o bridge não tem como operar.

    Raises:
        ConfigurationError: Com a lista completa de problemas
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"github: {error}" for error in github_settings.validate())

    if github_settings.private_key:
        try:
            load_private_key(github_settings.private_key)
        except AppCredentialError as exc:
            errors.append(f"github: GITHUB_APP_PRIVATE_KEY inválida ({exc})")

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base_settings.environment,
            },
        )
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base_settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    raise ConfigurationError(errors)


__all__ = [
    "create_github_client",
    "create_relay_use_case",
    "initialize_app",
    "validate_runtime_settings",
]
