"""Section heading extraction and keyword-based category assignment."""

from __future__ import annotations

from clinic_ai.domains.treatment_summary.models import Section, SectionCategory
from clinic_ai.domains.treatment_summary.section_patterns import (
    CATEGORY_KEYWORDS,
    SEGMENT_HEADING,
)

DEFAULT_PLACEHOLDER_TITLE = "Details"


class SectionClassifier:
    """Turns raw segments into ``Section`` objects.

    Category assignment depends on the title alone, so the same title always
    lands in the same category.
    """

    def __init__(
        self,
        placeholder_title: str = DEFAULT_PLACEHOLDER_TITLE,
        keywords: tuple[tuple[SectionCategory, tuple[str, ...]], ...] = CATEGORY_KEYWORDS,
    ) -> None:
        self._placeholder_title = placeholder_title
        self._keywords = keywords

    @property
    def placeholder_title(self) -> str:
        return self._placeholder_title

    def classify_by_title(self, title: str) -> SectionCategory:
        """First category whose keyword occurs in the lower-cased title."""
        lower = title.lower()
        for category, keywords in self._keywords:
            for keyword in keywords:
                if keyword in lower:
                    return category
        return SectionCategory.DEFAULT

    def split_heading(self, segment: str) -> Section:
        """Split ``**Heading**`` off the start of *segment* and classify it.

        Without a leading heading the placeholder title is used and the
        whole segment becomes the content.
        """
        segment = segment.strip()
        match = SEGMENT_HEADING.match(segment)
        if match is None:
            return Section(
                title=self._placeholder_title,
                content=segment,
                category=self.classify_by_title(self._placeholder_title),
                heading_found=False,
            )

        title = match.group(1).strip()
        return Section(
            title=title,
            content=segment[match.end():].strip(),
            category=self.classify_by_title(title),
        )

    def make_section(self, title: str, lines: list[str]) -> Section:
        """Build a section from a title and its accumulated body lines."""
        title = title.strip()
        return Section(
            title=title,
            content="\n".join(lines).strip(),
            category=self.classify_by_title(title),
        )
