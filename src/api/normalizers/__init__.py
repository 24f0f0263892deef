"""Normalizers por origem: conversão de payloads externos para contratos internos.

Estrutura:
- github/: evento dependabot_alert → DispatchPayload
"""

from .github import normalize_alert_event, normalize_dependency_names

__all__ = [
    "normalize_alert_event",
    "normalize_dependency_names",
]
