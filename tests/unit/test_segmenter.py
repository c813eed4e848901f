"""Tests for intro-marker normalization and SECTION_BREAK splitting."""

from __future__ import annotations

from clinic_ai.domains.treatment_summary.segmenter import (
    DEFAULT_SECTION_BREAK,
    has_section_breaks,
    normalize,
    split_segments,
)


class TestNormalize:
    def test_marker_removed(self) -> None:
        assert normalize("INTRO_SECTION: Patient is stable.") == "Patient is stable."

    def test_marker_case_insensitive(self) -> None:
        assert normalize("intro_section:Patient") == "Patient"
        assert normalize("Intro_Section: Patient") == "Patient"

    def test_leading_whitespace_before_marker(self) -> None:
        assert normalize("\n   INTRO_SECTION:\nText\n") == "Text"

    def test_marker_elsewhere_is_kept(self) -> None:
        assert normalize("Text INTRO_SECTION: more") == "Text INTRO_SECTION: more"

    def test_only_first_marker_removed(self) -> None:
        assert normalize("INTRO_SECTION: INTRO_SECTION: x") == "INTRO_SECTION: x"

    def test_empty(self) -> None:
        assert normalize("") == ""
        assert normalize("  INTRO_SECTION:  ") == ""

    def test_custom_marker(self) -> None:
        assert normalize("PREFACE>> hello", marker="PREFACE>>") == "hello"

    def test_marker_with_regex_characters(self) -> None:
        assert normalize("[intro](x) body", marker="[INTRO](x)") == "body"


class TestSplitSegments:
    def test_no_delimiter_single_segment(self) -> None:
        assert split_segments("  just text  ") == ["just text"]

    def test_segments_trimmed_and_ordered(self) -> None:
        text = f"intro\n{DEFAULT_SECTION_BREAK}\n one \n{DEFAULT_SECTION_BREAK}\ntwo\n"
        assert split_segments(text) == ["intro", "one", "two"]

    def test_blank_segments_dropped(self) -> None:
        text = f"intro{DEFAULT_SECTION_BREAK}   {DEFAULT_SECTION_BREAK}a{DEFAULT_SECTION_BREAK}"
        assert split_segments(text) == ["intro", "a"]

    def test_empty_intro_is_kept(self) -> None:
        assert split_segments(f"{DEFAULT_SECTION_BREAK}\nbody") == ["", "body"]

    def test_custom_delimiter(self) -> None:
        assert split_segments("a ### b ### c", delimiter="###") == ["a", "b", "c"]

    def test_has_section_breaks(self) -> None:
        assert has_section_breaks(f"a{DEFAULT_SECTION_BREAK}b")
        assert not has_section_breaks("a --- b")
