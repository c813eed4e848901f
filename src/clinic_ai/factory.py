"""Builds parser and font cache instances from ``AppSettings``."""

from __future__ import annotations

from clinic_ai.core.config import AppSettings
from clinic_ai.domains.treatment_summary.parser import StructuredTextParser
from clinic_ai.formatters.fonts import FontCache


def build_parser(settings: AppSettings) -> StructuredTextParser:
    return StructuredTextParser(
        section_break=settings.parser.section_break,
        intro_marker=settings.parser.intro_marker,
        placeholder_title=settings.parser.placeholder_title,
    )


def build_font_cache(settings: AppSettings) -> FontCache | None:
    """A shared font cache, or None when embedded fonts are disabled."""
    if not settings.font.enabled:
        return None
    return FontCache(settings.font.url, timeout=settings.font.timeout)
