"""clinic-ai: parsing and export of AI-generated treatment summaries.

Usage::

    from clinic_ai import StructuredTextParser, render_content

    summary = StructuredTextParser().parse(raw_text)
    for section in summary.sections:
        blocks = render_content(section.content)
"""

from __future__ import annotations

from clinic_ai.core.config import AppSettings
from clinic_ai.domains.treatment_summary import (
    CATEGORY_KEYWORDS,
    CATEGORY_STYLES,
    BulletListBlock,
    InlineSpan,
    ParagraphsBlock,
    ParsedSummary,
    ParseMode,
    Section,
    SectionCategory,
    SectionClassifier,
    StructuredTextParser,
    TableBlock,
    parse_summary,
    reconstruct,
    render_content,
    split_inline,
)
from clinic_ai.exceptions import ClinicAIError, FontLoadError, FormatterError
from clinic_ai.formatters import FontCache, JSONFormatter

__all__ = [
    "AppSettings",
    "BulletListBlock",
    "CATEGORY_KEYWORDS",
    "CATEGORY_STYLES",
    "ClinicAIError",
    "FontCache",
    "FontLoadError",
    "FormatterError",
    "InlineSpan",
    "JSONFormatter",
    "ParagraphsBlock",
    "ParsedSummary",
    "ParseMode",
    "Section",
    "SectionCategory",
    "SectionClassifier",
    "StructuredTextParser",
    "TableBlock",
    "parse_summary",
    "reconstruct",
    "render_content",
    "split_inline",
]
