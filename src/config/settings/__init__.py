"""Agregador de settings do dependabot-alert-bridge.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.github import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_PORT,
    GITHUB_API_BASE_URL,
    GITHUB_API_VERSION,
    GITHUB_USER_AGENT,
    GitHubAppSettings,
    get_github_app_settings,
    normalize_private_key,
)

__all__ = [
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_PORT",
    "GITHUB_API_BASE_URL",
    "GITHUB_API_VERSION",
    "GITHUB_USER_AGENT",
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "GitHubAppSettings",
    "get_base_settings",
    "get_github_app_settings",
    "normalize_private_key",
]
