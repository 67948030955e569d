"""FastAPI application factory for the skill webhook."""

from __future__ import annotations

from fastapi import FastAPI

from nationality_guesser import __version__
from nationality_guesser.settings import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
    )

    # ── mount routers ──
    from nationality_guesser.api.routes import health, skill

    app.include_router(health.router)
    app.include_router(skill.router, tags=["skill"])

    return app
