"""Errors raised by the analysis service and mapped to HTTP responses by the API."""


class AnalysisError(Exception):
    """Base error for the resume analysis service."""

    status_code = 400

    def __init__(self, message: str, suggestions: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []


class InvalidAnalysisRequest(AnalysisError):
    """Raised before any extraction when the request inputs are unusable."""


class ExtractionFailedError(AnalysisError):
    """Raised when no usable text could be extracted from the resume document."""

    def __init__(
        self,
        message: str,
        suggestions: list[str] | None = None,
        extracted_preview: str = "",
        recovered_file_path: str | None = None,
    ) -> None:
        super().__init__(message, suggestions)
        self.extracted_preview = extracted_preview
        self.recovered_file_path = recovered_file_path
