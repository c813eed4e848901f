"""PDF output formatter using reportlab.

Renders a ``ParsedSummary`` as a printable treatment summary: title, intro,
then one coloured heading per section followed by its tables, bullets and
paragraphs.  Requires the ``pdf`` optional dependency::

    pip install clinic-ai[pdf]

Hindi text needs a Devanagari face; pass a ``FontCache`` and the font is
registered with reportlab and used for every style.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from clinic_ai.core.config import PDFFormattingConfig
from clinic_ai.domains.treatment_summary.models import (
    BulletListBlock,
    ParagraphsBlock,
    ParsedSummary,
    RenderBlock,
    SectionCategory,
    TableBlock,
)
from clinic_ai.domains.treatment_summary.renderer import render_content, split_inline
from clinic_ai.domains.treatment_summary.styles import (
    CATEGORY_STYLES,
    FOOTER_TEXT_COLOR,
    INTRO_TEXT_COLOR,
    TABLE_GRID_COLOR,
    TABLE_HEADER_BG_COLOR,
)
from clinic_ai.exceptions import FontLoadError, FormatterError
from clinic_ai.formatters.fonts import FontCache, register_reportlab_font

try:
    from reportlab.lib.colors import HexColor
    from reportlab.lib.enums import TA_CENTER
    from reportlab.lib.fonts import tt2ps
    from reportlab.lib.pagesizes import A4, LETTER
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import inch
    from reportlab.platypus import (
        Flowable,
        SimpleDocTemplate,
        Spacer,
        Table,
        TableStyle,
    )
    from reportlab.platypus import (
        Paragraph as _RawParagraph,
    )
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install clinic-ai[pdf]"
    ) from _exc

log = logging.getLogger(__name__)


# ── Unicode sanitization ────────────────────────────────────────────
# Helvetica lacks glyphs for typographic punctuation that LLMs emit.
# Only applied when no embedded TTF is in use.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    "\u2011": "-",       # non-breaking hyphen
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    "\u2026": "...",     # ellipsis
    "\u2192": "->",      # rightwards arrow
}


def _sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def inline_markup(text: str) -> str:
    """reportlab paragraph markup for *text* with ``**bold**`` spans."""
    parts = []
    for span in split_inline(text):
        chunk = escape(span.text)
        parts.append(f"<b>{chunk}</b>" if span.bold else chunk)
    return "".join(parts)


_PAGE_SIZES = {"letter": LETTER, "a4": A4}


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


class PDFFormatter:
    """Renders ``ParsedSummary`` as a treatment-summary PDF."""

    def __init__(
        self,
        config: PDFFormattingConfig | None = None,
        font_cache: FontCache | None = None,
        font_name: str = "NotoSansDevanagari",
    ) -> None:
        self._config = config or PDFFormattingConfig()
        self._font_cache = font_cache
        self._font_name = font_name
        self._page_size: tuple[float, float] = _PAGE_SIZES.get(self._config.page_size, A4)
        self._margin: float = self._config.margin_inches * inch
        self._embedded = False

    # ── Public API ───────────────────────────────────────────────────

    def format(self, summary: ParsedSummary, **kwargs: Any) -> bytes:
        """Render *summary* to PDF bytes.

        Keyword args: ``title`` overrides the configured document title,
        ``patient`` adds a patient line under it.
        """
        regular, bold = self._resolve_fonts()
        styles = self._build_styles(regular, bold)

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self._page_size,
            leftMargin=self._margin,
            rightMargin=self._margin,
            topMargin=self._margin,
            bottomMargin=self._margin + 0.3 * inch,
            title=kwargs.get("title") or self._config.document_title,
        )
        story = self._build_story(summary, styles, **kwargs)

        def footer(canvas: Any, doc: Any) -> None:
            canvas.saveState()
            canvas.setFont(regular, self._config.body_font_size - 2)
            canvas.setFillColor(_hex(FOOTER_TEXT_COLOR))
            width = float(self._page_size[0])
            canvas.drawCentredString(width / 2, self._margin, self._text(self._config.footer_text))
            canvas.drawRightString(width - self._margin, self._margin - 12, f"{doc.page}")
            canvas.restoreState()

        try:
            doc.build(story, onFirstPage=footer, onLaterPages=footer)
        except Exception as exc:
            raise FormatterError(f"PDF rendering failed: {exc}") from exc
        return buffer.getvalue()

    def format_to_file(self, summary: ParsedSummary, path: Path, **kwargs: Any) -> Path:
        """Write PDF to *path* and return it."""
        path.write_bytes(self.format(summary, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"

    # ── Fonts & styles ───────────────────────────────────────────────

    def _resolve_fonts(self) -> tuple[str, str]:
        """Regular and bold face names; the embedded TTF when it loads."""
        self._embedded = False
        if self._font_cache is not None:
            try:
                name = register_reportlab_font(self._font_cache, self._font_name)
            except FontLoadError as exc:
                log.warning(f"Embedded font unavailable, falling back to {self._config.font_family}: {exc}")
            else:
                self._embedded = True
                return name, name
        family = self._config.font_family
        return family, _bold_face(family)

    def _text(self, text: str) -> str:
        return text if self._embedded else _sanitize_text(text)

    def _build_styles(self, regular: str, bold: str) -> dict[str, ParagraphStyle]:
        base = getSampleStyleSheet()
        body_sz = self._config.body_font_size
        heading_sz = self._config.heading_font_size

        styles = {
            "title": ParagraphStyle(
                "title",
                parent=base["Title"],
                fontName=bold,
                fontSize=heading_sz + 5,
                leading=(heading_sz + 5) * 1.3,
                alignment=TA_CENTER,
                spaceAfter=4,
            ),
            "subtitle": ParagraphStyle(
                "subtitle",
                parent=base["BodyText"],
                fontName=regular,
                fontSize=body_sz + 1,
                alignment=TA_CENTER,
                textColor=_hex(FOOTER_TEXT_COLOR),
                spaceAfter=10,
            ),
            "body": ParagraphStyle(
                "body",
                parent=base["BodyText"],
                fontName=regular,
                fontSize=body_sz,
                leading=body_sz * 1.5,
                textColor=_hex(INTRO_TEXT_COLOR),
                spaceAfter=4,
            ),
            "bullet": ParagraphStyle(
                "bullet",
                parent=base["BodyText"],
                fontName=regular,
                fontSize=body_sz,
                leading=body_sz * 1.5,
                leftIndent=16,
                bulletIndent=4,
                spaceAfter=2,
            ),
            "table_header": ParagraphStyle(
                "table_header",
                parent=base["BodyText"],
                fontName=bold,
                fontSize=body_sz - 1,
                leading=(body_sz - 1) * 1.4,
            ),
            "table_cell": ParagraphStyle(
                "table_cell",
                parent=base["BodyText"],
                fontName=regular,
                fontSize=body_sz - 1,
                leading=(body_sz - 1) * 1.4,
            ),
        }
        for category, cat_style in CATEGORY_STYLES.items():
            styles[f"heading_{category.value}"] = ParagraphStyle(
                f"heading_{category.value}",
                parent=base["Heading3"],
                fontName=bold,
                fontSize=heading_sz,
                leading=heading_sz * 1.4,
                textColor=_hex(cat_style.text_color),
                backColor=_hex(cat_style.background_color),
                borderPadding=(4, 6, 4, 6),
                spaceBefore=14,
                spaceAfter=8,
            )
        return styles

    # ── Story construction ───────────────────────────────────────────

    def _para(self, text: str, style: ParagraphStyle, **kwargs: Any) -> _RawParagraph:
        return _RawParagraph(inline_markup(self._text(text)), style, **kwargs)

    def _build_story(
        self, summary: ParsedSummary, styles: dict[str, ParagraphStyle], **kwargs: Any
    ) -> list[Flowable]:
        story: list[Flowable] = [
            _RawParagraph(escape(self._text(kwargs.get("title") or self._config.document_title)), styles["title"]),
        ]
        if kwargs.get("patient"):
            story.append(_RawParagraph(escape(self._text(kwargs["patient"])), styles["subtitle"]))
        story.append(Spacer(1, 0.15 * inch))

        story.extend(self._build_blocks(render_content(summary.intro), styles))

        for section in summary.sections:
            story.append(self._build_heading(section.title, section.category, styles))
            story.extend(self._build_blocks(render_content(section.content), styles))
        return story

    def _build_heading(
        self, title: str, category: SectionCategory, styles: dict[str, ParagraphStyle]
    ) -> _RawParagraph:
        return self._para(title, styles[f"heading_{category.value}"])

    def _build_blocks(
        self, blocks: list[RenderBlock], styles: dict[str, ParagraphStyle]
    ) -> list[Flowable]:
        story: list[Flowable] = []
        for block in blocks:
            if isinstance(block, TableBlock):
                story.append(self._build_table(block, styles))
                story.append(Spacer(1, 6))
            elif isinstance(block, BulletListBlock):
                for item in block.items:
                    story.append(self._para(item, styles["bullet"], bulletText="•"))
            elif isinstance(block, ParagraphsBlock):
                for line in block.lines:
                    story.append(self._para(line, styles["body"]))
        return story

    def _build_table(self, block: TableBlock, styles: dict[str, ParagraphStyle]) -> Table:
        ncols = max(len(row) for row in [block.header, *block.rows])
        data = [[self._para(cell, styles["table_header"]) for cell in _pad(block.header, ncols)]]
        for row in block.rows:
            data.append([self._para(cell, styles["table_cell"]) for cell in _pad(row, ncols)])

        width = float(self._page_size[0]) - 2 * self._margin
        table = Table(data, colWidths=[width / ncols] * ncols, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), _hex(TABLE_HEADER_BG_COLOR)),
                    ("GRID", (0, 0), (-1, -1), 0.5, _hex(TABLE_GRID_COLOR)),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        return table


def _bold_face(family: str) -> str:
    """Bold face for *family*, e.g. ``Times-Roman`` -> ``Times-Bold``."""
    try:
        return tt2ps(family, 1, 0)
    except ValueError:
        return family


def _pad(row: list[str], ncols: int) -> list[str]:
    return row + [""] * (ncols - len(row))
