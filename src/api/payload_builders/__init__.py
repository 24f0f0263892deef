"""Payload builders: construção de corpos para APIs externas.

Estrutura:
- github/: repository_dispatch
"""

__all__: list[str] = []
