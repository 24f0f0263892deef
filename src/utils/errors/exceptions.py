"""Exceções de infraestrutura compartilhadas entre as camadas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (config, rede, APIs externas)."""


class ConfigurationError(InfrastructureError):
    """Configuração de processo ausente ou inválida (fatal no startup)."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        details = "\n".join(f"- {error}" for error in self.errors)
        super().__init__(f"Configuração inválida:\n{details}")


class CredentialExchangeError(InfrastructureError):
    """Falha ao obter token de instalação do GitHub App."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        installation_id: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.installation_id = installation_id


class DispatchError(InfrastructureError):
    """Falha na chamada de repository_dispatch."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        github_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.github_message = github_message
