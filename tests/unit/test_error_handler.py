"""Tests for domain exception to HTTP response mapping."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from clinic_ai.api.middleware.error_handler import register_error_handlers
from clinic_ai.exceptions import ClinicAIError, FontLoadError, FormatterError


def _build_app(exc: Exception) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom() -> None:
        raise exc

    return app


@pytest.mark.parametrize(
    "exc,status,kind",
    [
        (FontLoadError("font host down", url="https://fonts.example.test/a.ttf"), 502, "font_load_error"),
        (FormatterError("table too wide"), 500, "formatter_error"),
        (ClinicAIError("unexpected"), 500, "clinic_ai_error"),
    ],
)
def test_domain_errors_map_to_json(exc, status, kind) -> None:
    resp = TestClient(_build_app(exc)).get("/boom")
    assert resp.status_code == status
    assert resp.json() == {"error": str(exc), "type": kind}
