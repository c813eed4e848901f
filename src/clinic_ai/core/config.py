"""Nested pydantic-settings configuration for the application.

Each group reads its own ``CLINIC_<GROUP>_*`` env vars, e.g.::

    export CLINIC_PARSER_PLACEHOLDER_TITLE=विवरण
    export CLINIC_FONT_ENABLED=true
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from clinic_ai.domains.treatment_summary.parser import (
    DEFAULT_INTRO_MARKER,
    DEFAULT_PLACEHOLDER_TITLE,
    DEFAULT_SECTION_BREAK,
)

NOTO_DEVANAGARI_URL = (
    "https://fonts.gstatic.com/s/notosansdevanagari/v26/"
    "TuGOUUFzXI5FBtUq5a8bjKYTZjtRU6Sgv3NaV_SNmI0b8QQCQmHn6B2OHjbL_08.ttf"
)


class ParserConfig(BaseSettings):
    """Treatment-summary grammar tokens.

    Env vars use ``CLINIC_PARSER_`` prefix.
    """

    model_config = {"env_prefix": "CLINIC_PARSER_"}

    section_break: str = Field(default=DEFAULT_SECTION_BREAK, min_length=1)
    intro_marker: str = DEFAULT_INTRO_MARKER
    placeholder_title: str = Field(default=DEFAULT_PLACEHOLDER_TITLE, min_length=1)


class FontConfig(BaseSettings):
    """Devanagari font used by the PDF formatter.

    Env vars use ``CLINIC_FONT_`` prefix.
    """

    model_config = {"env_prefix": "CLINIC_FONT_"}

    enabled: bool = False
    url: str = NOTO_DEVANAGARI_URL
    family_name: str = "NotoSansDevanagari"
    timeout: float = Field(default=10.0, gt=0.0)


class PDFFormattingConfig(BaseSettings):
    """PDF output formatting configuration.

    Env vars use ``CLINIC_PDF_`` prefix::

        export CLINIC_PDF_PAGE_SIZE=letter
        export CLINIC_PDF_BODY_FONT_SIZE=11
    """

    model_config = {"env_prefix": "CLINIC_PDF_"}

    page_size: Literal["letter", "a4"] = "a4"
    margin_inches: float = Field(default=0.75, gt=0.0, le=3.0)
    font_family: str = "Helvetica"
    body_font_size: int = Field(default=10, ge=6, le=72)
    heading_font_size: int = Field(default=13, ge=6, le=72)
    document_title: str = "उपचार सारांश"
    footer_text: str = (
        "यह सारांश इलेक्ट्रो-होम्योपैथी Rule Engine द्वारा स्वचालित रूप से तैयार किया गया है"
    )


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``CLINIC_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "CLINIC_OBSERVABILITY_"}

    log_level: str = "INFO"
    # Third-party loggers held at WARNING or above
    quiet_loggers: list[str] = ["reportlab", "PIL", "multipart", "httpx"]


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``CLINIC_API_`` prefix.
    """

    model_config = {"env_prefix": "CLINIC_API_"}

    title: str = "clinic-ai"
    description: str = "Treatment-summary parsing and export for the clinic app"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    parser: ParserConfig = ParserConfig()
    font: FontConfig = FontConfig()
    pdf: PDFFormattingConfig = PDFFormattingConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
