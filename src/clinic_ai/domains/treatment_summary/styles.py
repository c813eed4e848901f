"""Category presentation lookup: icon key, display name and colours.

Colours are plain hex strings so each formatter can convert them to
whatever colour object its rendering library needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from clinic_ai.domains.treatment_summary.models import SectionCategory


@dataclass(frozen=True)
class CategoryStyle:
    icon: str
    display_name: str
    text_color: str
    background_color: str


CATEGORY_STYLES: dict[SectionCategory, CategoryStyle] = {
    SectionCategory.CLASSIFICATION: CategoryStyle("shield", "Classification", "#2563EB", "#DBEAFE"),
    SectionCategory.SUMMARY: CategoryStyle("beaker", "Treatment Summary", "#059669", "#D1FAE5"),
    SectionCategory.DOSAGE_TABLE: CategoryStyle("pill", "Dosage Table", "#9333EA", "#F3E8FF"),
    SectionCategory.INSTRUCTIONS: CategoryStyle("heart", "Patient Instructions", "#E11D48", "#FFE4E6"),
    SectionCategory.DEFAULT: CategoryStyle("clipboard", "Details", "#D97706", "#FEF3C7"),
}

# ── Table colours ────────────────────────────────────────────────────

TABLE_HEADER_BG_COLOR = "#F1F5F9"
TABLE_GRID_COLOR = "#CBD5E1"
INTRO_TEXT_COLOR = "#1E293B"
FOOTER_TEXT_COLOR = "#64748B"


def style_for(category: SectionCategory) -> CategoryStyle:
    return CATEGORY_STYLES[category]
