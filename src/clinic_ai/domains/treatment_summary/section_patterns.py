"""Keyword table and heading patterns for treatment-summary sections.

``CATEGORY_KEYWORDS`` is evaluated top to bottom by ``SectionClassifier``;
the first category with a keyword contained in the lower-cased title wins.
Keywords are lower-case (Devanagari has no case, so it is stored as-is).
"""

from __future__ import annotations

import re
from typing import Pattern

from clinic_ai.domains.treatment_summary.models import SectionCategory

CATEGORY_KEYWORDS: tuple[tuple[SectionCategory, tuple[str, ...]], ...] = (
    (
        SectionCategory.CLASSIFICATION,
        ("अवस्था", "classification", "positive", "negative"),
    ),
    (
        SectionCategory.SUMMARY,
        ("सारांश", "उपचार", "treatment"),
    ),
    (
        SectionCategory.DOSAGE_TABLE,
        ("मिश्रण", "खुराक", "dosage", "तालिका"),
    ),
    (
        SectionCategory.INSTRUCTIONS,
        ("निर्देश", "सलाह", "instruction"),
    ),
)

# Heading at the start of a SECTION_BREAK segment: "1. **Title**:" + body.
# The bold span never crosses a line break.
SEGMENT_HEADING: Pattern[str] = re.compile(r"^(?:\d+\.\s*)?\*\*([^\n]+?)\*\*:?")

# A whole line that is only a heading, used by the legacy grammar.
LEGACY_HEADING_LINE: Pattern[str] = re.compile(r"^(?:\d+\.\s*)?\*\*((?:(?!\*\*).)+)\*\*:?\s*$")
