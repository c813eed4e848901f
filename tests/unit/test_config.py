"""Tests for settings defaults, env overrides and the component factory."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from clinic_ai.core.config import (
    AppSettings,
    FontConfig,
    ParserConfig,
    PDFFormattingConfig,
)
from clinic_ai.factory import build_font_cache, build_parser
from clinic_ai.formatters.fonts import FontCache


class TestParserConfig:
    def test_defaults(self) -> None:
        cfg = ParserConfig()
        assert cfg.section_break == "---SECTION_BREAK---"
        assert cfg.intro_marker == "INTRO_SECTION:"
        assert cfg.placeholder_title == "Details"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLINIC_PARSER_PLACEHOLDER_TITLE", "विवरण")
        monkeypatch.setenv("CLINIC_PARSER_SECTION_BREAK", "@@@")
        cfg = ParserConfig()
        assert cfg.placeholder_title == "विवरण"
        assert cfg.section_break == "@@@"

    def test_empty_section_break_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ParserConfig(section_break="")


class TestFontConfig:
    def test_disabled_by_default(self) -> None:
        assert FontConfig().enabled is False

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FontConfig(timeout=0)


class TestPDFFormattingConfig:
    def test_defaults(self) -> None:
        cfg = PDFFormattingConfig()
        assert cfg.page_size == "a4"
        assert cfg.font_family == "Helvetica"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLINIC_PDF_PAGE_SIZE", "letter")
        monkeypatch.setenv("CLINIC_PDF_BODY_FONT_SIZE", "12")
        cfg = PDFFormattingConfig()
        assert cfg.page_size == "letter"
        assert cfg.body_font_size == 12

    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValidationError):
            PDFFormattingConfig(page_size="a3")


class TestFactory:
    def test_build_parser_uses_tokens(self) -> None:
        settings = AppSettings(parser=ParserConfig(section_break="@@", placeholder_title="More"))
        parser = build_parser(settings)
        summary = parser.parse("intro @@ loose")
        assert summary.titles() == ["More"]

    def test_font_cache_disabled(self) -> None:
        assert build_font_cache(AppSettings()) is None

    def test_font_cache_enabled(self) -> None:
        settings = AppSettings(font=FontConfig(enabled=True, url="https://fonts.example.test/a.ttf"))
        cache = build_font_cache(settings)
        assert isinstance(cache, FontCache)
        assert cache.url == "https://fonts.example.test/a.ttf"
        assert not cache.loaded
