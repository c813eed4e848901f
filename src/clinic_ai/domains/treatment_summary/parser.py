"""Structured-text parser for AI-generated treatment summaries.

Two grammars are supported:

- **SECTION_BREAK**: ``INTRO_SECTION:`` intro, then ``---SECTION_BREAK---``
  separated segments each starting with a ``**Heading**``.
- **Legacy**: bold heading lines, for summaries generated before the
  delimiter format existed.

The grammar is chosen from the input alone; the parser keeps no state
between calls and is safe to share.
"""

from __future__ import annotations

import logging

from clinic_ai.domains.treatment_summary.classifier import (
    DEFAULT_PLACEHOLDER_TITLE,
    SectionClassifier,
)
from clinic_ai.domains.treatment_summary.legacy_parser import parse_legacy
from clinic_ai.domains.treatment_summary.models import ParsedSummary, ParseMode
from clinic_ai.domains.treatment_summary.segmenter import (
    DEFAULT_INTRO_MARKER,
    DEFAULT_SECTION_BREAK,
    has_section_breaks,
    normalize,
    split_segments,
)

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_INTRO_MARKER",
    "DEFAULT_PLACEHOLDER_TITLE",
    "DEFAULT_SECTION_BREAK",
    "StructuredTextParser",
    "parse_summary",
    "reconstruct",
]


class StructuredTextParser:
    """Chooses between the SECTION_BREAK and legacy grammars."""

    def __init__(
        self,
        section_break: str = DEFAULT_SECTION_BREAK,
        intro_marker: str = DEFAULT_INTRO_MARKER,
        placeholder_title: str = DEFAULT_PLACEHOLDER_TITLE,
        classifier: SectionClassifier | None = None,
    ) -> None:
        self.section_break = section_break
        self.intro_marker = intro_marker
        self.classifier = classifier or SectionClassifier(placeholder_title)

    def parse(self, text: str) -> ParsedSummary:
        if not text or not text.strip():
            return ParsedSummary(mode=ParseMode.LEGACY)

        if not has_section_breaks(text, self.section_break):
            summary = self._parse_legacy(text)
        else:
            summary = self._parse_section_breaks(text)
            if not summary.sections:
                # Delimiter present but nothing after the intro
                summary = self._parse_legacy(text.replace(self.section_break, ""))

        log.debug(
            f"Parsed treatment summary: mode={summary.mode.value} "
            f"sections={len(summary.sections)} intro_chars={len(summary.intro)}"
        )
        return summary

    def _parse_legacy(self, text: str) -> ParsedSummary:
        # Headings are found on the raw lines; only the intro loses the marker
        summary = parse_legacy(text, self.classifier)
        summary.intro = normalize(summary.intro, self.intro_marker)
        return summary

    def _parse_section_breaks(self, text: str) -> ParsedSummary:
        intro, *segments = split_segments(normalize(text, self.intro_marker), self.section_break)
        return ParsedSummary(
            intro=intro,
            sections=[self.classifier.split_heading(seg) for seg in segments],
            mode=ParseMode.SECTION_BREAK,
        )

    def reconstruct(self, summary: ParsedSummary) -> str:
        return reconstruct(summary, self.section_break)


def reconstruct(summary: ParsedSummary, section_break: str = DEFAULT_SECTION_BREAK) -> str:
    """Rebuild SECTION_BREAK text that re-parses to an equivalent summary."""
    if not summary.sections:
        return summary.intro

    parts = [summary.intro]
    for section in summary.sections:
        if section.heading_found:
            parts.append(f"**{section.title}**\n{section.content}".strip())
        else:
            parts.append(section.content)
    return f"\n{section_break}\n".join(parts)


_default_parser = StructuredTextParser()


def parse_summary(text: str) -> ParsedSummary:
    """Parse *text* with the default tokens."""
    return _default_parser.parse(text)
