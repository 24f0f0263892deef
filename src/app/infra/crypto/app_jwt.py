"""Assinatura do JWT de autenticação do GitHub App (RS256).

O JWT identifica o App perante a API e só serve para trocar por um
token de instalação. Validade máxima aceita pelo GitHub: 10 minutos.
"""

from __future__ import annotations

import time

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from .errors import AppCredentialError
from .keys import load_private_key

# Recuo do iat para tolerar clock drift entre este host e o GitHub
JWT_CLOCK_SKEW_SECONDS = 60
JWT_TTL_SECONDS = 540
JWT_ALGORITHM = "RS256"


def create_app_jwt(
    app_id: str,
    private_key: RSAPrivateKey | str,
    now: int | None = None,
) -> str:
    """Cria o JWT assinado que autentica o GitHub App.

    Args:
        app_id: ID do GitHub App (claim iss)
        private_key: Chave RSA já carregada ou PEM
        now: Epoch em segundos (injeção para testes)

    Returns:
        JWT compactado

    Raises:
        AppCredentialError: Se a chave for inválida ou a assinatura falhar
    """
    if not app_id:
        raise AppCredentialError("app_id é obrigatório para assinar o JWT")

    key = load_private_key(private_key) if isinstance(private_key, str) else private_key
    issued_at = int(time.time()) if now is None else now

    claims = {
        "iat": issued_at - JWT_CLOCK_SKEW_SECONDS,
        "exp": issued_at + JWT_TTL_SECONDS,
        "iss": app_id,
    }
    try:
        return jwt.encode(claims, key, algorithm=JWT_ALGORITHM)
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise AppCredentialError(f"JWT signing failed: {exc}") from exc
