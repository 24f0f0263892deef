"""Carregamento da chave privada RSA do GitHub App."""

from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from .errors import AppCredentialError


def load_private_key(private_key_pem: str) -> RSAPrivateKey:
    """Carrega chave privada RSA em formato PEM.

    Args:
        private_key_pem: Chave privada em formato PEM (PKCS#1 ou PKCS#8)

    Returns:
        Objeto de chave privada RSA

    Raises:
        AppCredentialError: Se a chave for inválida ou não for RSA
    """
    try:
        key = serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"),
            password=None,
        )
    except (ValueError, TypeError) as exc:
        raise AppCredentialError(f"Invalid private key: {exc}") from exc

    if not isinstance(key, RSAPrivateKey):
        raise AppCredentialError("Invalid private key: GitHub Apps require an RSA key")
    return key
