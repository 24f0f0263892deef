"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, health)
- Validação inicial de request (headers, tamanho do corpo)
- Delegação para o use case
- Respostas HTTP estruturadas

Agregação:
- router.py: registra todos os routers no app principal
- errors.py: handlers de erro (404 e 500 padronizados)
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
