"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from clinic_ai.api.middleware.error_handler import register_error_handlers
from clinic_ai.api.routes import health, summaries
from clinic_ai.core.config import APIConfig, AppSettings
from clinic_ai.core.logging_config import setup_logging
from clinic_ai.factory import build_font_cache, build_parser


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("clinic-ai")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the application; *settings* defaults to env-driven ``AppSettings``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application startup/shutdown lifecycle."""
        resolved = settings or AppSettings()
        setup_logging(resolved.observability)

        app.state.settings = resolved
        app.state.parser = build_parser(resolved)
        app.state.font_cache = build_font_cache(resolved)
        yield

    api_config = settings.api if settings else APIConfig()
    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(summaries.router, prefix="/api")
    return app


app = create_app()
