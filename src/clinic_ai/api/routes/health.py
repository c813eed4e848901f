"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness: 200 whenever the process is up."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request) -> dict[str, str]:
    """Readiness: the parser is built; also reports embedded-font state."""
    if getattr(request.app.state, "parser", None) is None:
        raise HTTPException(status_code=503, detail="Parser not initialised")

    cache = getattr(request.app.state, "font_cache", None)
    if cache is None:
        font = "disabled"
    else:
        font = "loaded" if cache.loaded else "pending"
    return {"status": "ready", "font": font}
