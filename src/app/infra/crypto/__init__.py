"""Criptografia do bridge: HMAC do webhook e credenciais do GitHub App.

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
- api/connectors usa estas primitivas para verificar e autenticar
"""

from .app_jwt import JWT_TTL_SECONDS, create_app_jwt
from .errors import AppCredentialError
from .keys import load_private_key
from .signature import (
    SIGNATURE_PREFIX,
    compute_webhook_signature,
    validate_webhook_signature,
)

__all__ = [
    "JWT_TTL_SECONDS",
    "SIGNATURE_PREFIX",
    "AppCredentialError",
    "compute_webhook_signature",
    "create_app_jwt",
    "load_private_key",
    "validate_webhook_signature",
]
