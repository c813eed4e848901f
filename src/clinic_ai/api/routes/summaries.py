"""Treatment-summary parse and export endpoints."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Literal

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from clinic_ai.domains.treatment_summary.parser import StructuredTextParser
from clinic_ai.formatters.json_formatter import summary_to_dict

log = logging.getLogger(__name__)

router = APIRouter(prefix="/summaries", tags=["summaries"])


class ParseRequest(BaseModel):
    """Raw AI-generated treatment summary text."""

    text: str
    render: bool = True


class SectionResponse(BaseModel):
    """One classified section, with render blocks when requested."""

    title: str
    content: str
    category: str
    heading_found: bool = True
    icon: str
    blocks: list[dict[str, Any]] | None = None


class ParseResponse(BaseModel):
    """Parsed treatment summary."""

    mode: str
    intro: str = ""
    intro_blocks: list[dict[str, Any]] | None = None
    sections: list[SectionResponse]


class ExportRequest(BaseModel):
    """Request to export a treatment summary as a file."""

    text: str
    output_format: Literal["pdf", "json"] = "pdf"
    title: str | None = None
    patient: str | None = None


def _parser(req: Request) -> StructuredTextParser:
    return req.app.state.parser


@router.post("/parse", response_model=ParseResponse, response_model_exclude_none=True)
async def parse_summary(request: ParseRequest, req: Request) -> ParseResponse:
    """Split a treatment summary into intro and categorised sections."""
    summary = _parser(req).parse(request.text)
    return ParseResponse(**summary_to_dict(summary, render=request.render))


@router.post("/export")
async def export_summary(request: ExportRequest, req: Request) -> StreamingResponse:
    """Export a treatment summary as PDF or JSON."""
    summary = _parser(req).parse(request.text)

    if request.output_format == "pdf":
        try:
            from clinic_ai.formatters.pdf_formatter import PDFFormatter
        except ImportError as exc:
            raise HTTPException(
                status_code=501,
                detail="PDF export requires the 'pdf' extra: pip install clinic-ai[pdf]",
            ) from exc
        settings = req.app.state.settings
        formatter = PDFFormatter(
            settings.pdf,
            font_cache=req.app.state.font_cache,
            font_name=settings.font.family_name,
        )
    else:
        from clinic_ai.formatters.json_formatter import JSONFormatter

        formatter = JSONFormatter()

    output_bytes = formatter.format(summary, title=request.title, patient=request.patient)
    log.info(f"Exported treatment summary: format={request.output_format} sections={len(summary.sections)}")

    return StreamingResponse(
        BytesIO(output_bytes),
        media_type=formatter.content_type,
        headers={"Content-Disposition": f'attachment; filename="treatment_summary.{request.output_format}"'},
    )
