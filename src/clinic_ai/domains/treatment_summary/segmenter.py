"""Normalization and SECTION_BREAK segmentation of raw summary text."""

from __future__ import annotations

import re

DEFAULT_SECTION_BREAK = "---SECTION_BREAK---"
DEFAULT_INTRO_MARKER = "INTRO_SECTION:"


def normalize(text: str, marker: str = DEFAULT_INTRO_MARKER) -> str:
    """Drop a leading *marker* (case-insensitive) and trim whitespace."""
    text = text.strip()
    if marker:
        text = re.sub(rf"^{re.escape(marker)}", "", text, flags=re.IGNORECASE)
    return text.strip()


def has_section_breaks(text: str, delimiter: str = DEFAULT_SECTION_BREAK) -> bool:
    return delimiter in text


def split_segments(text: str, delimiter: str = DEFAULT_SECTION_BREAK) -> list[str]:
    """Split *text* on *delimiter* into trimmed parts.

    The first part is the intro and is always returned, even when empty.
    Later parts that are blank are dropped.  Without any delimiter the
    result is ``[text.strip()]``.
    """
    first, *rest = text.split(delimiter)
    return [first.strip()] + [part.strip() for part in rest if part.strip()]
