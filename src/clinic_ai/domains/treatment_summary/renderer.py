"""Section body rendering: pipe tables, bullet lists, paragraphs, bold spans.

Rendering never fails.  A table that does not survive cell filtering falls
back to bullets/paragraphs, and unmatched ``**`` markers stay verbatim.
"""

from __future__ import annotations

import re

from clinic_ai.domains.treatment_summary.models import (
    BulletListBlock,
    InlineSpan,
    ParagraphsBlock,
    RenderBlock,
    TableBlock,
)

_BOLD_SPLIT = re.compile(r"(\*\*.*?\*\*)")
_BULLET = re.compile(r"^[-•*]\s+")
_DASH_RUN = re.compile(r"^-+$")


# ── Inline spans ─────────────────────────────────────────────────────


def split_inline(text: str) -> list[InlineSpan]:
    """Split ``**bold**`` runs out of *text*; empty runs are dropped."""
    spans: list[InlineSpan] = []
    for part in _BOLD_SPLIT.split(text):
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            inner = part[2:-2]
            if inner:
                spans.append(InlineSpan(inner, bold=True))
        elif part:
            spans.append(InlineSpan(part))
    return spans


def strip_inline(text: str) -> str:
    """Plain text with bold markers removed."""
    return "".join(span.text for span in split_inline(text))


# ── Block rendering ──────────────────────────────────────────────────


def content_lines(content: str) -> list[str]:
    return [line.strip() for line in content.split("\n") if line.strip()]


def is_table_line(line: str) -> bool:
    return "|" in line and len(line.split("|")) >= 3


def parse_table_rows(lines: list[str]) -> list[list[str]]:
    """Cells of every pipe line, minus empty cells and ``---`` separators."""
    rows: list[list[str]] = []
    for line in lines:
        if "|" not in line:
            continue
        cells = [cell.strip() for cell in line.split("|")]
        row = [cell for cell in cells if cell and not _DASH_RUN.match(cell)]
        if row:
            rows.append(row)
    return rows


def render_lines(lines: list[str]) -> list[RenderBlock]:
    """Group lines into runs of bullet items and paragraph lines."""
    blocks: list[RenderBlock] = []
    for line in lines:
        bullet = _BULLET.match(line)
        if bullet:
            item = line[bullet.end():]
            if blocks and isinstance(blocks[-1], BulletListBlock):
                blocks[-1].items.append(item)
            else:
                blocks.append(BulletListBlock(items=[item]))
        elif blocks and isinstance(blocks[-1], ParagraphsBlock):
            blocks[-1].lines.append(line)
        else:
            blocks.append(ParagraphsBlock(lines=[line]))
    return blocks


def render_content(content: str) -> list[RenderBlock]:
    """Render a section body into presentation blocks.

    When any line looks like a table row, all pipe lines form one table.
    Non-pipe lines before the first pipe line render ahead of the table and
    the rest render after it.
    """
    lines = content_lines(content)
    if not lines:
        return []

    if any(is_table_line(line) for line in lines):
        rows = parse_table_rows(lines)
        if len(rows) >= 2:
            first_pipe = next(i for i, line in enumerate(lines) if "|" in line)
            before = lines[:first_pipe]
            after = [line for line in lines[first_pipe:] if "|" not in line]
            table = TableBlock(header=rows[0], rows=rows[1:])
            return [*render_lines(before), table, *render_lines(after)]

    return render_lines(lines)
