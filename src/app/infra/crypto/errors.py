"""Erros de criptografia do GitHub App (chave privada e JWT)."""

from utils.errors import CredentialExchangeError


class AppCredentialError(CredentialExchangeError):
    """Chave privada inválida ou falha ao assinar o JWT do App."""
