"""Modelos pydantic do payload do evento dependabot_alert.

Apenas o subconjunto usado pelo bridge; campos extras são ignorados.
Todos os campos são opcionais aqui: presença é regra de negócio e é
verificada pelo normalizer, não pelo schema.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AlertPackage(_Model):
    """Pacote afetado (direto ou de uma vulnerabilidade do advisory).

    ``name`` aceita qualquer valor JSON: nomes que não são string são
    descartados pelo normalizer, não rejeitam o alerta inteiro.
    """

    name: Any = None
    ecosystem: str | None = None


class AlertDependency(_Model):
    package: AlertPackage | None = None
    manifest_path: str | None = None
    scope: str | None = None


class AdvisoryVulnerability(_Model):
    package: AlertPackage | None = None
    severity: str | None = None
    vulnerable_version_range: str | None = None


class SecurityAdvisory(_Model):
    ghsa_id: str | None = None
    cve_id: str | None = None
    summary: str | None = None
    vulnerabilities: list[AdvisoryVulnerability | None] | None = None


class SecurityVulnerability(_Model):
    severity: str | None = None
    package: AlertPackage | None = None


class DependabotAlert(_Model):
    number: int | None = None
    state: str | None = None
    dependency: AlertDependency | None = None
    security_advisory: SecurityAdvisory | None = None
    security_vulnerability: SecurityVulnerability | None = None


class Installation(_Model):
    id: int | None = None


class RepositoryOwner(_Model):
    login: str | None = None


class Repository(_Model):
    name: str | None = None
    full_name: str | None = None
    owner: RepositoryOwner | None = None


class DependabotAlertEvent(_Model):
    """Payload do webhook dependabot_alert."""

    action: str | None = Field(default=None, description="created, reopened, fixed, ...")
    alert: DependabotAlert | None = None
    installation: Installation | None = None
    repository: Repository | None = None


__all__ = [
    "AdvisoryVulnerability",
    "AlertDependency",
    "AlertPackage",
    "DependabotAlert",
    "DependabotAlertEvent",
    "Installation",
    "Repository",
    "RepositoryOwner",
    "SecurityAdvisory",
    "SecurityVulnerability",
]
