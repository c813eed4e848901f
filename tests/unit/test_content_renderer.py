"""Unit tests for section body rendering and inline bold spans."""

from __future__ import annotations

from clinic_ai.domains.treatment_summary.models import (
    BulletListBlock,
    InlineSpan,
    ParagraphsBlock,
    TableBlock,
)
from clinic_ai.domains.treatment_summary.renderer import (
    parse_table_rows,
    render_content,
    split_inline,
    strip_inline,
)


class TestTables:
    def test_markdown_table_drops_separator_row(self) -> None:
        blocks = render_content("A | B | C\n---|---|---\n1 | 2 | 3")
        assert blocks == [TableBlock(header=["A", "B", "C"], rows=[["1", "2", "3"]])]

    def test_outer_pipes_and_empty_cells_dropped(self) -> None:
        blocks = render_content("| A | | C |\n|---|---|---|\n| 1 | 2 | 3 |")
        assert len(blocks) == 1
        table = blocks[0]
        assert isinstance(table, TableBlock)
        assert table.header == ["A", "C"]
        assert table.rows == [["1", "2", "3"]]

    def test_single_row_falls_back_to_paragraphs(self) -> None:
        blocks = render_content("A | B | C\nplain line")
        assert blocks == [ParagraphsBlock(lines=["A | B | C", "plain line"])]

    def test_two_field_lines_are_not_a_table(self) -> None:
        blocks = render_content("left | right\nup | down")
        assert blocks == [ParagraphsBlock(lines=["left | right", "up | down"])]

    def test_prose_around_table_is_kept(self) -> None:
        content = "मिश्रण A: S1, C5\nPotency: D6\n| समय | दवा | लाभ |\n|---|---|---|\n| सुबह | S1 | राहत |\nभोजन के बाद लें"
        blocks = render_content(content)
        assert blocks[0] == ParagraphsBlock(lines=["मिश्रण A: S1, C5", "Potency: D6"])
        assert blocks[1] == TableBlock(header=["समय", "दवा", "लाभ"], rows=[["सुबह", "S1", "राहत"]])
        assert blocks[2] == ParagraphsBlock(lines=["भोजन के बाद लें"])

    def test_parse_table_rows_skips_lines_without_pipes(self) -> None:
        rows = parse_table_rows(["x | y | z", "no pipes", "|---|---|"])
        assert rows == [["x", "y", "z"]]


class TestListsAndParagraphs:
    def test_dash_bullets(self) -> None:
        assert render_content("- first\n- second") == [BulletListBlock(items=["first", "second"])]

    def test_all_bullet_markers(self) -> None:
        blocks = render_content("• one\n* two\n- three")
        assert blocks == [BulletListBlock(items=["one", "two", "three"])]

    def test_bold_line_is_not_a_bullet(self) -> None:
        assert render_content("**Note** rest well") == [ParagraphsBlock(lines=["**Note** rest well"])]

    def test_marker_without_space_is_paragraph(self) -> None:
        assert render_content("-5 degrees") == [ParagraphsBlock(lines=["-5 degrees"])]

    def test_mixed_lines_group_in_order(self) -> None:
        blocks = render_content("Intro line\n- a\n- b\nClosing line\nSecond closing")
        assert blocks == [
            ParagraphsBlock(lines=["Intro line"]),
            BulletListBlock(items=["a", "b"]),
            ParagraphsBlock(lines=["Closing line", "Second closing"]),
        ]

    def test_blank_lines_and_indent_removed(self) -> None:
        assert render_content("\n   first   \n\n\n  second\n") == [ParagraphsBlock(lines=["first", "second"])]

    def test_empty_content(self) -> None:
        assert render_content("") == []
        assert render_content("   \n  ") == []


class TestInlineSpans:
    def test_bold_span_spliced(self) -> None:
        assert split_inline("Take **S1** daily") == [
            InlineSpan("Take "),
            InlineSpan("S1", bold=True),
            InlineSpan(" daily"),
        ]

    def test_plain_text(self) -> None:
        assert split_inline("no emphasis") == [InlineSpan("no emphasis")]

    def test_multiple_spans(self) -> None:
        spans = split_inline("**A** and **B**")
        assert [s.text for s in spans] == ["A", " and ", "B"]
        assert [s.bold for s in spans] == [True, False, True]

    def test_unclosed_marker_stays_verbatim(self) -> None:
        assert split_inline("**unclosed text") == [InlineSpan("**unclosed text")]

    def test_empty_bold_dropped(self) -> None:
        assert split_inline("****") == []
        assert split_inline("") == []

    def test_strip_inline(self) -> None:
        assert strip_inline("| **अच्छी नींद** |") == "| अच्छी नींद |"
