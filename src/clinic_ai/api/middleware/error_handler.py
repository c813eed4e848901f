"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from clinic_ai.exceptions import ClinicAIError, FontLoadError, FormatterError

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(FontLoadError)
    async def handle_font_error(request: Request, exc: FontLoadError) -> JSONResponse:
        log.error(f"Font load failed for {exc.url}: {exc}")
        return JSONResponse(status_code=502, content={"error": str(exc), "type": "font_load_error"})

    @app.exception_handler(FormatterError)
    async def handle_formatter_error(request: Request, exc: FormatterError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "formatter_error"})

    @app.exception_handler(ClinicAIError)
    async def handle_generic_error(request: Request, exc: ClinicAIError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "clinic_ai_error"})
