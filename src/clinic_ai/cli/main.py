"""CLI for clinic-ai: parse / export commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from clinic_ai.core.config import AppSettings
from clinic_ai.core.logging_config import setup_logging
from clinic_ai.domains.treatment_summary.models import (
    BulletListBlock,
    ParagraphsBlock,
    ParsedSummary,
    RenderBlock,
    TableBlock,
)
from clinic_ai.domains.treatment_summary.renderer import render_content, split_inline
from clinic_ai.domains.treatment_summary.styles import style_for
from clinic_ai.exceptions import ClinicAIError
from clinic_ai.factory import build_font_cache, build_parser
from clinic_ai.formatters.json_formatter import JSONFormatter

app = typer.Typer(name="clinic-ai", help="Parse and export AI-generated treatment summaries")
console = Console()


def _setup(verbose: bool) -> AppSettings:
    settings = AppSettings()
    level = "DEBUG" if verbose else settings.observability.log_level
    setup_logging(settings.observability.model_copy(update={"log_level": level}))
    return settings


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc


def _styled(text: str, base_style: str = "") -> Text:
    """Rich text with ``**bold**`` spans emphasised."""
    out = Text(style=base_style)
    for span in split_inline(text):
        out.append(span.text, style="bold" if span.bold else None)
    return out


def _print_blocks(blocks: list[RenderBlock]) -> None:
    for block in blocks:
        if isinstance(block, TableBlock):
            table = Table(show_lines=False)
            for cell in block.header:
                table.add_column(_styled(cell, "bold"))
            for row in block.rows:
                table.add_row(*[_styled(cell) for cell in row])
            console.print(table)
        elif isinstance(block, BulletListBlock):
            for item in block.items:
                console.print(Text("  • ") + _styled(item))
        elif isinstance(block, ParagraphsBlock):
            for line in block.lines:
                console.print(_styled(line))


def _print_summary(summary: ParsedSummary) -> None:
    if summary.intro:
        _print_blocks(render_content(summary.intro))
    for section in summary.sections:
        style = style_for(section.category)
        console.print()
        console.print(
            Text(f"[{style.icon}] ", style=style.text_color)
            + Text(section.title, style=f"bold {style.text_color}")
        )
        _print_blocks(render_content(section.content))
    console.print(f"\n[dim]mode={summary.mode.value} sections={len(summary.sections)}[/dim]")


@app.command()
def parse(
    summary_file: Path = typer.Argument(..., help="Text file with the AI-generated summary"),
    as_json: bool = typer.Option(False, "--json", help="Print the parsed summary as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Parse a treatment summary and print its sections."""
    settings = _setup(verbose)
    summary = build_parser(settings).parse(_read_text(summary_file))

    if as_json:
        typer.echo(JSONFormatter().format(summary).decode("utf-8"))
        return
    _print_summary(summary)


@app.command()
def export(
    summary_file: Path = typer.Argument(..., help="Text file with the AI-generated summary"),
    output: Path = typer.Option(..., "--output", "-o", help="Output file path"),
    output_format: str = typer.Option("pdf", "--format", "-f", help="pdf or json"),
    title: Optional[str] = typer.Option(None, help="Document title"),
    patient: Optional[str] = typer.Option(None, help="Patient line under the title"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Export a treatment summary to PDF or JSON."""
    settings = _setup(verbose)
    summary = build_parser(settings).parse(_read_text(summary_file))

    if output_format == "json":
        formatter = JSONFormatter()
    elif output_format == "pdf":
        try:
            from clinic_ai.formatters.pdf_formatter import PDFFormatter
        except ImportError as exc:
            console.print(str(exc), style="red", markup=False)
            raise typer.Exit(code=1) from exc

        formatter = PDFFormatter(
            settings.pdf, font_cache=build_font_cache(settings), font_name=settings.font.family_name
        )
    else:
        raise typer.BadParameter(f"Unsupported format: {output_format}", param_hint="--format")

    try:
        formatter.format_to_file(summary, output, title=title, patient=patient)
    except ClinicAIError as exc:
        console.print(f"[red]Export failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    console.print(f"[green]Summary saved to {escape(str(output))}[/green] ({len(summary.sections)} sections)")


if __name__ == "__main__":
    app()
