"""Output formatter protocol implemented by every formatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from clinic_ai.domains.treatment_summary.models import ParsedSummary


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters (PDF, JSON, etc.)."""

    def format(self, summary: ParsedSummary, **kwargs: Any) -> bytes:
        """Render the summary into output bytes."""
        ...

    def format_to_file(self, summary: ParsedSummary, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...


__all__ = ["IOutputFormatter"]
