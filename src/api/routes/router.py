"""Agregador de rotas: registra health e webhook.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.github.router import router as github_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check na raiz
    api_router.include_router(health_router, tags=["health"])

    # Webhook do GitHub em /webhook e /
    api_router.include_router(github_router, tags=["github"])

    return api_router
