"""Exception hierarchy for clinic-ai."""


class ClinicAIError(Exception):
    """Base exception for all clinic-ai errors."""


class FontLoadError(ClinicAIError):
    """Raised when a font cannot be fetched or registered."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class FormatterError(ClinicAIError):
    """Raised when an output formatter cannot render a summary."""
