"""FastAPI application entrypoint for the greeting service."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.greetings import router as greetings_router
from app.core.config import AppSettings
from app.core.config import get_app_settings
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the greeting application from runtime settings."""
    settings = settings or get_app_settings()
    configure_logging(settings.log_level)
    logger.info("Starting greeting service with settings=%s", settings.safe_for_logging())

    app = FastAPI(title="Greeter", debug=settings.is_development)
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if os.path.isdir(settings.web_root):
        app.mount("/static", StaticFiles(directory=settings.web_root), name="static")
    else:
        logger.debug("Web root %s not found; static files disabled", settings.web_root)

    app.include_router(greetings_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check stub endpoint for service readiness."""
        return {"status": "ok"}

    return app


app = create_app()
