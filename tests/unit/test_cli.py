"""Tests for the clinic-ai command line."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from clinic_ai.cli.main import app
from clinic_ai.exceptions import FormatterError
from clinic_ai.formatters.json_formatter import JSONFormatter

runner = CliRunner()


@pytest.fixture
def summary_file(tmp_path, section_break_text):
    path = tmp_path / "summary.txt"
    path.write_text(section_break_text, encoding="utf-8")
    return path


class TestParseCommand:
    def test_json_output(self, summary_file) -> None:
        result = runner.invoke(app, ["parse", str(summary_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["mode"] == "section_break"
        assert [s["category"] for s in data["sections"]] == ["summary", "dosage_table", "instructions"]

    def test_text_output(self, summary_file) -> None:
        result = runner.invoke(app, ["parse", str(summary_file)])
        assert result.exit_code == 0
        assert "उपचार का सारांश" in result.stdout
        assert "mode=section_break sections=3" in result.stdout

    def test_missing_file(self, tmp_path) -> None:
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2


class TestExportCommand:
    def test_export_json(self, summary_file, tmp_path) -> None:
        out = tmp_path / "summary.json"
        result = runner.invoke(app, ["export", str(summary_file), "-o", str(out), "-f", "json"])
        assert result.exit_code == 0
        assert len(json.loads(out.read_text(encoding="utf-8"))["sections"]) == 3

    def test_export_pdf(self, summary_file, tmp_path) -> None:
        pytest.importorskip("reportlab")
        out = tmp_path / "summary.pdf"
        result = runner.invoke(
            app, ["export", str(summary_file), "--output", str(out), "--patient", "Ramesh, 45"]
        )
        assert result.exit_code == 0
        assert out.read_bytes().startswith(b"%PDF")

    def test_unsupported_format(self, summary_file, tmp_path) -> None:
        result = runner.invoke(app, ["export", str(summary_file), "-o", str(tmp_path / "x.docx"), "-f", "docx"])
        assert result.exit_code == 2

    def test_export_failure_message_printed_verbatim(self, summary_file, tmp_path, monkeypatch) -> None:
        def fail(self, summary, path, **kwargs):
            raise FormatterError("cell [bold]overflow[/bold] in row 3")

        monkeypatch.setattr(JSONFormatter, "format_to_file", fail)
        result = runner.invoke(app, ["export", str(summary_file), "-o", str(tmp_path / "x.json"), "-f", "json"])
        assert result.exit_code == 1
        assert "cell [bold]overflow[/bold] in row 3" in result.stdout
