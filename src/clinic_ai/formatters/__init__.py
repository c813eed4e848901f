"""Output formatters for rendering a ParsedSummary to various formats.

Usage::

    from clinic_ai.formatters import PDFFormatter, JSONFormatter

    pdf = PDFFormatter()
    pdf_bytes = pdf.format(summary, title="उपचार सारांश")

    js = JSONFormatter()
    json_bytes = js.format(summary)
"""

from __future__ import annotations

from typing import Any

from clinic_ai.formatters.fonts import FontCache, register_reportlab_font
from clinic_ai.formatters.json_formatter import JSONFormatter, summary_to_dict
from clinic_ai.formatters.protocols import IOutputFormatter

__all__ = [
    "FontCache",
    "IOutputFormatter",
    "JSONFormatter",
    "PDFFormatter",
    "register_reportlab_font",
    "summary_to_dict",
]


def __getattr__(name: str) -> Any:
    """Lazy-load PDFFormatter so reportlab is only imported when needed."""
    if name == "PDFFormatter":
        from clinic_ai.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
