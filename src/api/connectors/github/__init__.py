"""Connector GitHub: webhook de entrada e REST API do GitHub App."""

from .http_client import GitHubHttpClient, github_default_headers
from .models import DependabotAlertEvent

__all__ = [
    "DependabotAlertEvent",
    "GitHubHttpClient",
    "github_default_headers",
]
