"""Liveness probe."""

from __future__ import annotations

from fastapi import APIRouter

from nationality_guesser import __version__
from nationality_guesser.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    settings = get_settings()
    return {"status": "ok", "version": __version__, "env": settings.env}
