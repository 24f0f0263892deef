"""Connectors: adapters de borda para APIs externas.

Estrutura:
- github/: webhook do GitHub App e REST API (token de instalação, dispatch)
"""

__all__: list[str] = []
