"""Endpoint de liveness."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe, sem auth e sem leitura de corpo."""
    return {"status": "ok"}
