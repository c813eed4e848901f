"""Line-oriented grammar for summaries generated before SECTION_BREAK existed.

A line consisting only of ``**Heading**`` (optionally numbered, optionally
followed by a colon) opens a section; every following line belongs to it
until the next heading line.  Lines before the first heading form the intro.
A text with no heading lines at all is returned entirely as intro with no
sections.
"""

from __future__ import annotations

from clinic_ai.domains.treatment_summary.classifier import SectionClassifier
from clinic_ai.domains.treatment_summary.models import ParsedSummary, ParseMode, Section
from clinic_ai.domains.treatment_summary.section_patterns import LEGACY_HEADING_LINE


def parse_legacy(text: str, classifier: SectionClassifier) -> ParsedSummary:
    intro_lines: list[str] = []
    sections: list[Section] = []
    current_title: str | None = None
    current_lines: list[str] = []

    for line in text.split("\n"):
        match = LEGACY_HEADING_LINE.match(line)
        if match:
            if current_title is not None:
                sections.append(classifier.make_section(current_title, current_lines))
            current_title = match.group(1)
            current_lines = []
        elif current_title is not None:
            current_lines.append(line)
        else:
            intro_lines.append(line)

    if current_title is not None:
        sections.append(classifier.make_section(current_title, current_lines))

    return ParsedSummary(
        intro="\n".join(intro_lines).strip(),
        sections=sections,
        mode=ParseMode.LEGACY,
    )
