"""Handlers de erro HTTP da aplicação.

Toda resposta de erro segue o formato {"error": "<codigo>"}.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse

from app.protocols.models import Rejection, RejectionKind

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Método errado em rota conhecida também é tratado como rota inexistente
_NOT_FOUND_STATUSES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


async def handle_http_exception(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Mapeia HTTPException do roteador para o corpo padrão."""
    if exc.status_code in _NOT_FOUND_STATUSES:
        logger.info(
            "route_not_found",
            extra={"method": request.method, "path": request.url.path},
        )
        rejection = Rejection(RejectionKind.NOT_FOUND, detail=request.url.path)
        return JSONResponse(content=rejection.as_body(), status_code=rejection.status_code)
    return JSONResponse(
        content={"error": str(exc.detail).lower().replace(" ", "_")},
        status_code=exc.status_code,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Última linha de defesa: 500 genérico com log completo."""
    logger.error(
        "unhandled_exception",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        content={"error": "internal_error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
