"""Treatment-summary domain models: enums, sections and render blocks.

``ParsedSummary`` is what the parser hands to the presentation layer.  Render
blocks are derived per section at display time and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# ── Enums ────────────────────────────────────────────────────────────


class SectionCategory(str, Enum):
    """Closed set of section categories driving icon and colour."""

    CLASSIFICATION = "classification"
    SUMMARY = "summary"
    DOSAGE_TABLE = "dosage_table"
    INSTRUCTIONS = "instructions"
    DEFAULT = "default"


class ParseMode(str, Enum):
    """Which grammar produced a ``ParsedSummary``."""

    SECTION_BREAK = "section_break"
    LEGACY = "legacy"


# ── Parsed summary ───────────────────────────────────────────────────


@dataclass
class Section:
    """One classified unit of a treatment summary."""

    title: str
    content: str
    category: SectionCategory = SectionCategory.DEFAULT
    # False when no ``**Heading**`` was found and the placeholder title is used
    heading_found: bool = True


@dataclass
class ParsedSummary:
    """Parser output: unstructured intro plus ordered sections."""

    intro: str = ""
    sections: list[Section] = field(default_factory=list)
    mode: ParseMode = ParseMode.SECTION_BREAK

    @property
    def is_empty(self) -> bool:
        return not self.intro and not self.sections

    def titles(self) -> list[str]:
        return [s.title for s in self.sections]


# ── Render blocks ────────────────────────────────────────────────────


@dataclass(frozen=True)
class InlineSpan:
    """A run of text that is either plain or emphasised."""

    text: str
    bold: bool = False


@dataclass
class TableBlock:
    """Pipe-delimited rows: first row is the header."""

    header: list[str]
    rows: list[list[str]] = field(default_factory=list)

    kind = "table"


@dataclass
class BulletListBlock:
    """Consecutive bullet lines with their markers stripped."""

    items: list[str] = field(default_factory=list)

    kind = "bullets"


@dataclass
class ParagraphsBlock:
    """Consecutive plain lines, one paragraph each."""

    lines: list[str] = field(default_factory=list)

    kind = "paragraphs"


RenderBlock = Union[TableBlock, BulletListBlock, ParagraphsBlock]
