"""Settings and logging setup shared by the API and the CLI."""

from __future__ import annotations

from clinic_ai.core.config import (
    APIConfig,
    AppSettings,
    FontConfig,
    ObservabilityConfig,
    ParserConfig,
    PDFFormattingConfig,
)
from clinic_ai.core.logging_config import setup_logging

__all__ = [
    "APIConfig",
    "AppSettings",
    "FontConfig",
    "ObservabilityConfig",
    "ParserConfig",
    "PDFFormattingConfig",
    "setup_logging",
]
