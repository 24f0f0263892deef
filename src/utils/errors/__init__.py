"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    CredentialExchangeError,
    DispatchError,
    InfrastructureError,
)

__all__ = [
    "ConfigurationError",
    "CredentialExchangeError",
    "DispatchError",
    "InfrastructureError",
]
