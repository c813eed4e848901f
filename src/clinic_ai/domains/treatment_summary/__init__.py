"""Treatment-summary domain: parsing, classification and rendering.

This is the canonical home for the treatment-summary text engine:
- Models: ``ParsedSummary``, ``Section``, ``SectionCategory``, render blocks
- Classification: ``SectionClassifier`` over ``CATEGORY_KEYWORDS``
- Parsing: ``StructuredTextParser`` (SECTION_BREAK + legacy grammars)
- Rendering: ``render_content``, ``split_inline``
- Presentation: ``CATEGORY_STYLES``
"""

from __future__ import annotations

from clinic_ai.domains.treatment_summary.classifier import SectionClassifier
from clinic_ai.domains.treatment_summary.legacy_parser import parse_legacy
from clinic_ai.domains.treatment_summary.models import (
    BulletListBlock,
    InlineSpan,
    ParagraphsBlock,
    ParsedSummary,
    ParseMode,
    RenderBlock,
    Section,
    SectionCategory,
    TableBlock,
)
from clinic_ai.domains.treatment_summary.parser import (
    StructuredTextParser,
    parse_summary,
    reconstruct,
)
from clinic_ai.domains.treatment_summary.renderer import render_content, split_inline, strip_inline
from clinic_ai.domains.treatment_summary.section_patterns import CATEGORY_KEYWORDS
from clinic_ai.domains.treatment_summary.segmenter import normalize, split_segments
from clinic_ai.domains.treatment_summary.styles import CATEGORY_STYLES, CategoryStyle, style_for

__all__ = [
    # Models
    "BulletListBlock",
    "InlineSpan",
    "ParagraphsBlock",
    "ParsedSummary",
    "ParseMode",
    "RenderBlock",
    "Section",
    "SectionCategory",
    "TableBlock",
    # Engine
    "CATEGORY_KEYWORDS",
    "SectionClassifier",
    "StructuredTextParser",
    "normalize",
    "parse_legacy",
    "parse_summary",
    "reconstruct",
    "render_content",
    "split_inline",
    "split_segments",
    "strip_inline",
    # Presentation
    "CATEGORY_STYLES",
    "CategoryStyle",
    "style_for",
]
