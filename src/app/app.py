"""Entrypoint do dependabot-alert-bridge.

Recebe webhooks dependabot_alert do GitHub e os repassa como
repository_dispatch para o repositório de origem.

Uso (produção):
    dependabot-alert-bridge

Uso (desenvolvimento):
    uvicorn app.app:create_app --factory --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.errors import handle_http_exception, handle_unexpected_error
from app.bootstrap import create_relay_use_case, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_github_app_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.github_client import GitHubAppClientProtocol
    from config.settings import GitHubAppSettings

logger = get_logger(__name__)

SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Loga início e fim do processo (sem conexões persistentes)."""
    logger.info(
        "app_starting",
        extra={"port": app.state.github_settings.port, "version": SERVICE_VERSION},
    )
    yield
    logger.info("app_shutting_down")


def create_app(
    settings: GitHubAppSettings | None = None,
    github_client: GitHubAppClientProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: Settings imutáveis do processo. Se None, lê do ambiente.
        github_client: Cliente GitHub alternativo (testes)

    Returns:
        Aplicação FastAPI configurada.
    """
    github_settings = settings or get_github_app_settings()

    fastapi_app = FastAPI(
        title="dependabot-alert-bridge",
        description="Relay de dependabot_alert para repository_dispatch",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.state.github_settings = github_settings
    fastapi_app.state.relay_use_case = create_relay_use_case(github_settings, github_client)

    fastapi_app.include_router(create_api_router())
    fastapi_app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    fastapi_app.add_exception_handler(Exception, handle_unexpected_error)

    return fastapi_app


def main() -> None:
    """Entrypoint de produção: valida config e sobe o listener."""
    import uvicorn

    base_settings = get_base_settings()
    initialize_app(base_settings)
    github_settings = get_github_app_settings()

    try:
        validate_runtime_settings(github_settings, base_settings)
    except ConfigurationError as exc:
        logger.critical("startup_aborted", extra={"errors": exc.errors})
        raise SystemExit(1) from exc

    uvicorn.run(
        create_app(github_settings),
        host="0.0.0.0",
        port=github_settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
