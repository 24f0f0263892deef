"""Infra HTTP: cliente base para APIs externas."""

from .client import HttpClient, HttpClientConfig, HttpError

__all__ = ["HttpClient", "HttpClientConfig", "HttpError"]
