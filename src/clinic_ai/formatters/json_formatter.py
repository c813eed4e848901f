"""JSON output formatter, used for API responses and the CLI ``--json`` flag."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from clinic_ai.domains.treatment_summary.models import (
    BulletListBlock,
    ParagraphsBlock,
    ParsedSummary,
    RenderBlock,
    TableBlock,
)
from clinic_ai.domains.treatment_summary.renderer import render_content
from clinic_ai.domains.treatment_summary.styles import style_for


def block_to_dict(block: RenderBlock) -> dict[str, Any]:
    if isinstance(block, TableBlock):
        return {"kind": block.kind, "header": list(block.header), "rows": [list(r) for r in block.rows]}
    if isinstance(block, BulletListBlock):
        return {"kind": block.kind, "items": list(block.items)}
    if isinstance(block, ParagraphsBlock):
        return {"kind": block.kind, "lines": list(block.lines)}
    raise TypeError(f"Unknown render block: {type(block).__name__}")


def summary_to_dict(summary: ParsedSummary, *, render: bool = True) -> dict[str, Any]:
    """Plain-dict form of *summary*; ``render`` adds per-section blocks."""
    data: dict[str, Any] = {
        "mode": summary.mode.value,
        "intro": summary.intro,
        "sections": [],
    }
    if render:
        data["intro_blocks"] = [block_to_dict(b) for b in render_content(summary.intro)]

    for section in summary.sections:
        entry: dict[str, Any] = {
            "title": section.title,
            "content": section.content,
            "category": section.category.value,
            "heading_found": section.heading_found,
            "icon": style_for(section.category).icon,
        }
        if render:
            entry["blocks"] = [block_to_dict(b) for b in render_content(section.content)]
        data["sections"].append(entry)
    return data


class JSONFormatter:
    """Renders a ParsedSummary as indented JSON bytes."""

    def format(self, summary: ParsedSummary, **kwargs: Any) -> bytes:
        """Serialize *summary* to pretty-printed UTF-8 JSON."""
        data = summary_to_dict(summary, render=kwargs.get("render", True))
        return json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")

    def format_to_file(self, summary: ParsedSummary, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(summary, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
